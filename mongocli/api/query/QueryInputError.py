from ..MongoCliError import MongoCliError


class QueryInputError(MongoCliError):
    """User supplied JSON or a typed value that cannot be used."""

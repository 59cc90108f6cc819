from ..MongoCliError import MongoCliError


class DatabaseConnectionError(MongoCliError):
    """The configured store could not be reached."""

from .MongoCliError import MongoCliError


class OperationCancelled(MongoCliError):
    """The operator declined, typed the wrong confirmation text, or input ended."""

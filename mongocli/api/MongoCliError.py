class MongoCliError(Exception):
    """Base class for errors reported at the command boundary."""

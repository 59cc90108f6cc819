"""Settings for the in-memory backend."""

from pydantic import BaseModel, ConfigDict


class _Data(BaseModel):
    """Takes no settings: every gateway in the process shares one in-memory store.

    ``data`` must still be present in ``config.json`` (as ``{}``).
    """

    model_config = ConfigDict(extra="forbid")

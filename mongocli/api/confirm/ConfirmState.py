from enum import Enum


class ConfirmState(str, Enum):
    """Linear states of the confirmation protocol."""

    RESOLVED = "resolved"
    PREVIEW = "preview"
    PRIMARY_CONFIRM = "primary_confirm"
    ESCALATED_CONFIRM = "escalated_confirm"
    EXECUTE = "execute"

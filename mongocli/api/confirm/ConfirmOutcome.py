from enum import Enum


class ConfirmOutcome(str, Enum):
    """Terminal outcomes of the confirmation protocol."""

    NOTHING_TO_DO = "nothing_to_do"
    CANCELLED = "cancelled"
    DRY_RUN = "dry_run"
    EXECUTED = "executed"

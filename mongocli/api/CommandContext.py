"""Everything one command invocation needs."""

from dataclasses import dataclass
from typing import ClassVar

from ..display.CLIDisplay import CLIDisplay
from ..display.Display import Display
from .config.CliConfig import CliConfig
from .database.Gateway import Gateway
from .prompt.Prompter import Prompter
from .prompt.TyperPrompter import TyperPrompter
from .stats.StatsStore import StatsStore


@dataclass
class CommandContext:
    """Configuration, statistics, gateway and operator I/O for a single command.

    The most recently created context is kept in ``active`` so that signal
    handlers and the top-level error handler can release its connection.
    """

    config: CliConfig
    stats: StatsStore
    gateway: Gateway
    prompter: Prompter
    display: Display

    active: ClassVar["CommandContext | None"] = None

    def __post_init__(self) -> None:
        CommandContext.active = self

    @classmethod
    def create(cls, prompter: Prompter | None = None, display: Display | None = None) -> "CommandContext":
        """Load config and statistics from the home directory and wire the terminal prompter/display."""
        config = CliConfig.load()
        stats = StatsStore.open_default()
        return cls(
            config=config,
            stats=stats,
            gateway=Gateway(config.database, stats),
            prompter=prompter or TyperPrompter(),
            display=display or CLIDisplay(),
        )

    def resolve_collection(self, name: str | None) -> str:
        return name or self.config.database.default_collection

    def close(self) -> None:
        self.gateway.disconnect()

    @classmethod
    def release_active(cls) -> None:
        """Disconnect the active context, if any. Safe to call repeatedly."""
        context = cls.active
        if context is not None:
            context.close()

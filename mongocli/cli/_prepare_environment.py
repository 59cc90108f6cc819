"""Load ``.env`` files and configure logging before any command runs."""

import json

from ..api.config.CliConfig import CliConfig
from ..api.config.load_env import load_env
from ..api.config.LogConfig import LogConfig
from ..utils.configure_logging import configure_logging
from ..utils.get_logger import get_logger


def _read_log_config() -> LogConfig:
    # Commands report config problems themselves; logging falls back to defaults
    path = CliConfig.get_config_path()
    try:
        with path.open() as fh:
            return LogConfig(**json.load(fh).get("log", {}))
    except (OSError, ValueError, AttributeError):
        return LogConfig()


def _prepare_environment(verbose: bool = False) -> None:
    home = CliConfig.get_home_dir()
    loaded = load_env(home)
    log_config = _read_log_config()
    configure_logging(
        home=home,
        level=log_config.level,
        verbose=verbose,
        max_bytes=log_config.max_bytes,
        backup_count=log_config.backup_count,
    )
    for path in loaded:
        get_logger("cli").debug("Loaded environment from %s", path)

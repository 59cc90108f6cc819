"""Initialize the mongocli home directory."""

from collections.abc import Iterator

from ...utils.get_logger import get_logger
from .._output_schemas.config import ConfigInitOutput
from ..stats.StatsStore import StatsStore
from ..StageResult import StageResult
from ._constants import COLLECTION_ENV, DEFAULT_URI, URI_ENV
from .CliConfig import CliConfig

logger = get_logger("config")

ENV_TEMPLATE = f"""# mongocli environment
# Uncomment and edit to override config.json
# {URI_ENV}={DEFAULT_URI}
# {COLLECTION_ENV}=users
"""


def cmd_init() -> StageResult:
    """Create the home directory with default config, statistics and ``.env`` files.

    Existing files are left untouched.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        home = CliConfig.get_home_dir()
        created: list[str] = []
        existing: list[str] = []
        errors: list[str] = []

        try:
            yield (0.2, f"Preparing {home}...")
            home.mkdir(parents=True, exist_ok=True)

            yield (0.4, "Writing connection configuration...")
            config_path = CliConfig.get_config_path()
            if config_path.exists():
                existing.append(str(config_path))
            else:
                CliConfig.from_dict(CliConfig.default_dict()).save()
                created.append(str(config_path))

            yield (0.6, "Writing statistics file...")
            stats_path = StatsStore.default_path()
            if stats_path.exists():
                existing.append(str(stats_path))
            else:
                StatsStore(stats_path)
                created.append(str(stats_path))

            yield (0.8, "Writing environment template...")
            env_path = home / ".env"
            if env_path.exists():
                existing.append(str(env_path))
            else:
                env_path.write_text(ENV_TEMPLATE, encoding="utf-8")
                created.append(str(env_path))
            logger.info("Initialized %s (created: %s)", home, created)
        except (OSError, RuntimeError, ValueError) as e:
            logger.error("Initialization failed: %s", e)
            errors.append(str(e))

        yield (1.0, "Complete")
        if errors:
            result_obj.result = f"Initialization failed: {errors[0]}"
            result_obj.success = False
        else:
            result_obj.result = f"Setup complete: created {len(created)} file(s) in {home}"
            result_obj.success = True
        result_obj.output = ConfigInitOutput(
            errors=errors,
            warnings=[],
            home=str(home),
            created=created,
            existing=existing,
        ).model_dump(mode="python")

    return StageResult(
        announce="Initializing mongocli home directory...",
        progress_callback=do_work,
    )

from pathlib import Path

from dotenv import load_dotenv


def load_env(home: Path) -> list[Path]:
    """Load ``.env`` files from the working directory, then the home directory.

    Variables already present in the environment win.

    Returns:
        The files that were found and loaded.
    """
    loaded = []
    for candidate in (Path.cwd() / ".env", home / ".env"):
        if candidate.is_file():
            load_dotenv(candidate, override=False)
            loaded.append(candidate)
    return loaded

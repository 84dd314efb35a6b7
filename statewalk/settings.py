"""Project settings loaded from pyproject.toml [tool.statewalk] section.

Recognised keys::

    [tool.statewalk]
    solutions-dir = "solutions"   # where `statewalk new` writes day modules
    inputs-dir = "inputs"         # where `statewalk run` looks for input
    log-level = "WARNING"         # console log level for the CLI
    rich = true                   # force rich output on/off

All settings support environment variable overrides (STATEWALK_* prefix).
The pyproject.toml is searched upwards from the current directory, so
settings follow the puzzle workspace rather than the installed package.
"""

import logging
import os
from functools import cache
from pathlib import Path

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found,no-redef]

logger = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def _find_pyproject(start: Path) -> Path | None:
    current = start.resolve()
    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


@cache
def _load_pyproject_settings() -> dict:
    """Load settings from the nearest pyproject.toml [tool.statewalk] section.

    Returns:
        Dictionary of settings, empty dict if no file or section is found.
    """
    pyproject_path = _find_pyproject(Path.cwd())
    if pyproject_path is None:
        return {}
    try:
        data = tomllib.loads(pyproject_path.read_text())
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring unreadable %s: %s", pyproject_path, e)
        return {}
    return data.get("tool", {}).get("statewalk", {})


def _parse_bool(value: str | bool) -> bool:
    """Interpret a config or env value as a boolean."""
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def get_solutions_dir() -> Path:
    """Directory for generated solution modules.

    Priority: STATEWALK_SOLUTIONS_DIR env → [tool.statewalk].solutions-dir → solutions.
    """
    if env := os.getenv("STATEWALK_SOLUTIONS_DIR"):
        return Path(env)
    return Path(_load_pyproject_settings().get("solutions-dir", "solutions"))


def get_inputs_dir() -> Path:
    """Directory holding puzzle inputs.

    Priority: STATEWALK_INPUTS_DIR env → [tool.statewalk].inputs-dir → inputs.
    """
    if env := os.getenv("STATEWALK_INPUTS_DIR"):
        return Path(env)
    return Path(_load_pyproject_settings().get("inputs-dir", "inputs"))


def get_log_level() -> str:
    """Console log level name.

    Priority: STATEWALK_LOG_LEVEL env → [tool.statewalk].log-level → WARNING.

    Raises:
        ValueError: If the configured level is not a standard level name.
    """
    level = os.getenv("STATEWALK_LOG_LEVEL") or _load_pyproject_settings().get(
        "log-level", "WARNING"
    )
    level = str(level).upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"Unknown log level '{level}'. Valid levels: {', '.join(sorted(_LOG_LEVELS))}"
        )
    return level


def get_rich_override() -> bool | None:
    """Explicit rich output setting, or None to auto-detect.

    Priority: STATEWALK_RICH env → [tool.statewalk].rich → None.
    """
    if env := os.getenv("STATEWALK_RICH"):
        return _parse_bool(env)
    val = _load_pyproject_settings().get("rich")
    if val is not None:
        return _parse_bool(val)
    return None

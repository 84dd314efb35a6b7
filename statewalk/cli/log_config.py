"""CLI logging configuration with file output.

Sets up a rotating DEBUG log file per CLI command under
``~/.local/share/statewalk/logs/`` plus a rich console handler.

Usage from any CLI command::

    from statewalk.cli.log_config import configure_cli_logging

    configure_cli_logging("run", verbose=verbose)

Follow a long search live with::

    tail -f ~/.local/share/statewalk/logs/run.log
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

from statewalk.cli.utils import console

# Standard log directory follows XDG convention
LOG_DIR = Path.home() / ".local" / "share" / "statewalk" / "logs"


def get_log_dir() -> Path:
    """Return the CLI log directory, creating it if needed.

    ``STATEWALK_LOG_DIR`` overrides the default location.
    """
    log_dir = Path(os.getenv("STATEWALK_LOG_DIR") or LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def get_log_file(command: str) -> Path:
    """Return the log file path for a given CLI command."""
    return get_log_dir() / f"{command}.log"


def configure_cli_logging(
    command: str,
    *,
    verbose: bool = False,
    console_level: int | None = None,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 3,
) -> Path:
    """Configure logging for a CLI command with file output.

    Sets up:
    - File handler: DEBUG-level rotating log at
      ``~/.local/share/statewalk/logs/<command>.log``
    - Console handler: WARNING (INFO if verbose) through rich

    Args:
        command: CLI command name (e.g., "run", "new")
        verbose: If True, set console to INFO level
        console_level: Override console level (takes precedence over verbose)
        file_level: File log level (default: DEBUG)
        max_bytes: Max size per log file before rotation
        backup_count: Number of rotated backups to keep

    Returns:
        Path to the log file
    """
    log_file = get_log_file(command)

    root_logger = logging.getLogger("statewalk")

    # Remove existing handlers to avoid duplicates on repeated calls
    for handler in root_logger.handlers[:]:
        if isinstance(handler, (RotatingFileHandler, RichHandler)):
            root_logger.removeHandler(handler)
            handler.close()

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(file_handler)

    if console_level is None:
        console_level = logging.INFO if verbose else logging.WARNING
    console_handler = RichHandler(console=console, show_path=False)
    console_handler.setLevel(console_level)
    root_logger.addHandler(console_handler)

    # NOTSET would defer to the root logger's WARNING default
    lowest = min(file_level, console_level)
    if root_logger.level == logging.NOTSET or root_logger.level > lowest:
        root_logger.setLevel(lowest)

    return log_file

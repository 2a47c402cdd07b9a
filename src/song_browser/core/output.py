"""
Unified output system using Loguru.
Routes user-facing messages to the console and everything to the log file.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LoggingConfig, get_data_dir


def get_log_file_path() -> Path:
    """Get the default path to the log file."""
    return get_data_dir() / "song-browser.log"


def setup_loguru(
    log_file: Optional[Path] = None,
    level: str = "INFO",
    console_output: bool = False,
) -> None:
    """
    Configure loguru with a rotating file sink and an optional stderr sink.

    Args:
        log_file: Path to log file (default: ~/.local/share/song-browser/song-browser.log)
        level: Minimum level for logging (DEBUG, INFO, WARNING, ERROR)
        console_output: Whether to also write log records to stderr
    """
    log_file = log_file if log_file else get_log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,  # Keep 5 backup files
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    if console_output:
        logger.add(sys.stderr, level=level, format="{level}: {message}")

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def setup_from_config(logging_config: LoggingConfig) -> None:
    """Configure loguru from the [logging] config section."""
    log_file = Path(logging_config.log_file) if logging_config.log_file else None
    setup_loguru(
        log_file=log_file,
        level=logging_config.level,
        console_output=logging_config.console_output,
    )


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to the log file AND prints for the user.

    Use this instead of print() for user-facing messages that should also be logged.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    from .console import safe_print

    style = {"warning": "yellow", "error": "bold red"}.get(level)
    safe_print(message, style=style)

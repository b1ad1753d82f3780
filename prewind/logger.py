"""Logging configuration using loguru.

Logs are stored in the logs/ folder and kept for 1 week.
Output goes to file only (to avoid interfering with the TUI and the CSS printed to stdout).
"""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

# Remove default handler
logger.remove()

# Define log directory (default ~/.local/share/prewind/logs, overridable via PREWIND_LOG_DIR)
_default_log_dir = Path.home() / ".local" / "share" / "prewind" / "logs"
LOG_DIR = Path(os.environ.get("PREWIND_LOG_DIR", str(_default_log_dir))).expanduser().resolve()
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

# Configure file handler with rotation and retention
logger.add(
    LOG_DIR / "prewind_{time:YYYY-MM-DD}.log",
    level="DEBUG",
    format=LOG_FORMAT,
    rotation="00:00",  # New file at midnight
    retention="1 week",  # Keep logs for 1 week
    compression="gz",  # Compress old logs
    backtrace=True,
    diagnose=False,
)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)

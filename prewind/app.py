"""Command-line dispatch for prewind."""

import sys
from collections.abc import Sequence

from rich.console import Console

from prewind.commands import run_scale, run_theme
from prewind.logger import get_logger
from prewind.scales import SCALES

logger = get_logger(__name__)

console = Console()

THEME_COMMAND = "theme"
USAGE_HINT = "Did you mean to run prewind text, prewind space, or prewind theme?"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the prewind command named by the first argument.

    Scale commands are looked up in ``SCALES``; ``theme`` downloads the theme.

    Args:
        argv: Command-line arguments without the program name.
            Defaults to ``sys.argv[1:]``.

    Returns:
        Process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    command = argv[0] if argv else None
    if command != THEME_COMMAND and command not in SCALES:
        logger.debug(f"Unknown command: {command!r}")
        console.print(USAGE_HINT, highlight=False)
        return 0

    logger.info(f"Starting prewind {command}")
    exit_code = run_theme() if command == THEME_COMMAND else run_scale(SCALES[command])
    logger.info(f"prewind {command} exited with code {exit_code}")
    return exit_code

"""System clipboard integration.

One ``Clipboard`` implementation per platform copy tool; the implementation is
picked once with ``get_clipboard()``.
"""

import shutil
import subprocess
import sys
from typing import ClassVar

from prewind.logger import get_logger

logger = get_logger(__name__)

# Seconds to wait for the copy tool before giving up
COPY_TIMEOUT = 10


class Clipboard:
    """Copies text by piping it to a platform copy command."""

    name: ClassVar[str] = "clipboard"
    command: ClassVar[tuple[str, ...]] = ()

    def copy(self, text: str) -> tuple[bool, str]:
        """Copy text to the clipboard.

        Args:
            text: Text to copy.

        Returns:
            Tuple of (success, message).
        """
        executable = self.command[0]
        if not shutil.which(executable):
            error_msg = f"{executable} not found. Install it to enable clipboard support."
            logger.warning(error_msg)
            return False, error_msg

        try:
            logger.debug(f"Running command: {' '.join(self.command)}")
            # xclip forks a child that keeps serving the selection; it must not inherit pipes we wait on
            result = subprocess.run(  # noqa: S603
                list(self.command),
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=COPY_TIMEOUT,
                check=False,
            )
            if result.returncode != 0:
                error_msg = f"{executable} exited with code {result.returncode}"
                logger.warning(error_msg)
                return False, error_msg
        except FileNotFoundError as exc:
            error_msg = f"{executable} not found: {exc}"
            logger.exception(error_msg)
            return False, error_msg
        except subprocess.TimeoutExpired:
            error_msg = f"{executable} timed out after {COPY_TIMEOUT}s"
            logger.error(error_msg)
            return False, error_msg
        except subprocess.SubprocessError as exc:
            error_msg = f"Error running {executable}: {exc}"
            logger.exception(error_msg)
            return False, error_msg
        except OSError as exc:
            error_msg = f"OS error running {executable}: {exc}"
            logger.exception(error_msg)
            return False, error_msg
        else:
            logger.info(f"Copied {len(text)} characters with {executable}")
            return True, f"Copied to clipboard with {executable}"


class PbcopyClipboard(Clipboard):
    """macOS clipboard."""

    name = "pbcopy"
    command = ("pbcopy",)


class ClipClipboard(Clipboard):
    """Windows clipboard."""

    name = "clip"
    command = ("clip",)


class XclipClipboard(Clipboard):
    """X11 clipboard, used on Linux and other platforms."""

    name = "xclip"
    command = ("xclip", "-selection", "clipboard")


def get_clipboard(platform: str | None = None) -> Clipboard:
    """Select the clipboard implementation for a platform.

    Args:
        platform: A ``sys.platform`` value. Defaults to the running platform.

    Returns:
        The clipboard implementation to use.
    """
    platform = sys.platform if platform is None else platform
    if platform == "darwin":
        clipboard: Clipboard = PbcopyClipboard()
    elif platform == "win32":
        clipboard = ClipClipboard()
    else:
        clipboard = XclipClipboard()
    logger.debug(f"Using {clipboard.name} clipboard for platform {platform}")
    return clipboard

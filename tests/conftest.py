"""Shared test fixtures for prewind."""

import os
import tempfile
from pathlib import Path

import pytest

# Keep test logs out of the user's log directory; must run before prewind is imported
os.environ.setdefault("PREWIND_LOG_DIR", str(Path(tempfile.gettempdir()) / "prewind-test-logs"))

from prewind.clamp import ScaleConfig  # noqa: E402
from prewind.clipboard import Clipboard  # noqa: E402


class RecordingClipboard(Clipboard):
    """Clipboard that records copied text instead of running a command."""

    name = "recording"
    command = ("recording",)

    def __init__(self, success: bool = True, message: str = "copied") -> None:
        self.success = success
        self.message = message
        self.copied: list[str] = []

    def copy(self, text: str) -> tuple[bool, str]:
        self.copied.append(text)
        return self.success, self.message


@pytest.fixture
def text_config() -> ScaleConfig:
    """Default text scale configuration."""
    return ScaleConfig(
        min_viewport=320,
        max_viewport=1600,
        min_base=14,
        max_base=18,
        min_ratio=1.25,
        max_ratio=1.414,
    )


@pytest.fixture
def recording_clipboard() -> RecordingClipboard:
    """Clipboard that always succeeds."""
    return RecordingClipboard()


@pytest.fixture
def failing_clipboard() -> RecordingClipboard:
    """Clipboard that always fails."""
    return RecordingClipboard(success=False, message="xclip not found")

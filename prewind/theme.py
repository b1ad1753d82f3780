"""Download of the default theme stylesheet.

The stylesheet is fetched with a single GET and used as-is: there is no retry,
caching or checksum, so its contents are only as trustworthy as the host.
"""

import os

import requests

from prewind.logger import get_logger

logger = get_logger(__name__)

THEME_URL = "https://raw.githubusercontent.com/codepilotsf/prewind/refs/heads/main/theme.css"

# Seconds to wait for the theme host
DEFAULT_TIMEOUT = 30


class ThemeFetchError(Exception):
    """Raised when the theme stylesheet cannot be downloaded."""


def get_theme_url() -> str:
    """Get the URL of the theme stylesheet.

    Returns:
        The PREWIND_THEME_URL override if set, otherwise THEME_URL.
    """
    return os.environ.get("PREWIND_THEME_URL") or THEME_URL


def fetch_theme(url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetch the theme stylesheet.

    Args:
        url: URL to fetch. Defaults to ``get_theme_url()``.
        timeout: Request timeout in seconds.

    Returns:
        The CSS document as text.

    Raises:
        ThemeFetchError: If the request fails or returns a non-success status.
    """
    url = url or get_theme_url()
    logger.info(f"Fetching theme from {url}")
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.error(f"Theme request failed: {exc}")
        raise ThemeFetchError(str(exc)) from exc

    if not response.ok:
        logger.error(f"Theme request returned HTTP {response.status_code}")
        raise ThemeFetchError(f"Failed to fetch theme: {response.status_code}")

    logger.debug(f"Fetched {len(response.text)} characters of theme CSS")
    return response.text

"""Tests for the theme download."""

from unittest.mock import MagicMock, patch

import pytest
import requests
from prewind.theme import DEFAULT_TIMEOUT, THEME_URL, ThemeFetchError, fetch_theme, get_theme_url

THEME_CSS = ":root {\n  --color-primary: #0055ff;\n}\n"


class TestGetThemeUrl:
    """Tests for get_theme_url."""

    def test_default_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PREWIND_THEME_URL", raising=False)
        assert get_theme_url() == THEME_URL

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PREWIND_THEME_URL", "https://example.com/theme.css")
        assert get_theme_url() == "https://example.com/theme.css"

    def test_empty_override_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PREWIND_THEME_URL", "")
        assert get_theme_url() == THEME_URL


class TestFetchTheme:
    """Tests for fetch_theme."""

    def test_returns_css_text(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PREWIND_THEME_URL", raising=False)
        with patch("prewind.theme.requests.get") as mock_get:
            mock_get.return_value = MagicMock(ok=True, status_code=200, text=THEME_CSS)
            css = fetch_theme()

        assert css == THEME_CSS
        mock_get.assert_called_once_with(THEME_URL, timeout=DEFAULT_TIMEOUT)

    def test_uses_explicit_url(self) -> None:
        with patch("prewind.theme.requests.get") as mock_get:
            mock_get.return_value = MagicMock(ok=True, status_code=200, text=THEME_CSS)
            fetch_theme("https://example.com/other.css", timeout=5)

        mock_get.assert_called_once_with("https://example.com/other.css", timeout=5)

    def test_non_success_status_raises(self) -> None:
        with patch("prewind.theme.requests.get") as mock_get:
            mock_get.return_value = MagicMock(ok=False, status_code=404, text="Not Found")
            with pytest.raises(ThemeFetchError, match="Failed to fetch theme: 404"):
                fetch_theme()

    def test_network_error_raises(self) -> None:
        with (
            patch("prewind.theme.requests.get", side_effect=requests.ConnectionError("connection refused")),
            pytest.raises(ThemeFetchError, match="connection refused"),
        ):
            fetch_theme()

    def test_no_retry_on_failure(self) -> None:
        with patch("prewind.theme.requests.get", side_effect=requests.Timeout("timed out")) as mock_get:
            with pytest.raises(ThemeFetchError):
                fetch_theme()
        assert mock_get.call_count == 1

"""Tests for the prewind subcommands."""

from unittest.mock import patch

import pytest
from prewind.commands import _copy_and_confirm, run_scale, run_theme
from prewind.output import render_scale_css
from prewind.scales import SPACE_SCALE, TEXT_SCALE
from prewind.theme import ThemeFetchError

THEME_CSS = ":root { --color-primary: #0055ff; }"


class TestRunScale:
    """Tests for run_scale."""

    def test_cancel_prints_cancelled(self, recording_clipboard, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("prewind.commands.ScaleEditor") as mock_editor:
            mock_editor.return_value.run.return_value = None
            exit_code = run_scale(TEXT_SCALE, clipboard=recording_clipboard)

        assert exit_code == 0
        assert "Cancelled." in capsys.readouterr().out
        assert recording_clipboard.copied == []

    def test_generate_prints_and_copies(self, recording_clipboard, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("prewind.commands.ScaleEditor") as mock_editor:
            mock_editor.return_value.run.return_value = TEXT_SCALE.defaults
            exit_code = run_scale(TEXT_SCALE, clipboard=recording_clipboard)

        out = capsys.readouterr().out
        expected = render_scale_css(TEXT_SCALE, TEXT_SCALE.defaults)
        assert exit_code == 0
        assert expected in out
        assert "--text-base: clamp(0.875rem, 0.8125rem + 0.3125vw, 1.125rem);" in out
        assert "✓ Copied to clipboard!" in out
        assert recording_clipboard.copied == [expected]
        mock_editor.assert_called_once_with(TEXT_SCALE)

    def test_uses_edited_config(self, recording_clipboard, capsys: pytest.CaptureFixture[str]) -> None:
        edited = SPACE_SCALE.defaults.with_value("min_base", 10)
        with patch("prewind.commands.ScaleEditor") as mock_editor:
            mock_editor.return_value.run.return_value = edited
            run_scale(SPACE_SCALE, clipboard=recording_clipboard)

        assert recording_clipboard.copied == [render_scale_css(SPACE_SCALE, edited)]
        assert "Min sm size: 10px" in capsys.readouterr().out

    def test_clipboard_failure_is_not_fatal(self, failing_clipboard, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("prewind.commands.ScaleEditor") as mock_editor:
            mock_editor.return_value.run.return_value = TEXT_SCALE.defaults
            exit_code = run_scale(TEXT_SCALE, clipboard=failing_clipboard)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "--text-base:" in out
        assert "Copied to clipboard!" not in out
        assert "Could not copy to clipboard: xclip not found" in out


class TestRunTheme:
    """Tests for run_theme."""

    def test_prints_and_copies_theme(self, recording_clipboard, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("prewind.commands.fetch_theme", return_value=THEME_CSS):
            exit_code = run_theme(clipboard=recording_clipboard)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert THEME_CSS in out
        assert "Copied to clipboard!" in out
        assert recording_clipboard.copied == [THEME_CSS]

    def test_prints_theme_unchanged(self, recording_clipboard, capsys: pytest.CaptureFixture[str]) -> None:
        theme_css = ":root {\n\t--color: red;\n}"
        with patch("prewind.commands.fetch_theme", return_value=theme_css):
            run_theme(clipboard=recording_clipboard)

        out = capsys.readouterr().out
        assert out.startswith(f"{theme_css}\n\n")
        assert recording_clipboard.copied == [theme_css]

    def test_fetch_failure_exits_non_zero(self, recording_clipboard, capsys: pytest.CaptureFixture[str]) -> None:
        with patch(
            "prewind.commands.fetch_theme",
            side_effect=ThemeFetchError("Failed to fetch theme: 500"),
        ):
            exit_code = run_theme(clipboard=recording_clipboard)

        captured = capsys.readouterr()
        assert exit_code == 1
        assert "Error fetching theme: Failed to fetch theme: 500" in captured.err
        assert captured.out == ""
        assert recording_clipboard.copied == []

    def test_clipboard_failure_still_succeeds(self, failing_clipboard, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("prewind.commands.fetch_theme", return_value=THEME_CSS):
            exit_code = run_theme(clipboard=failing_clipboard)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert THEME_CSS in out
        assert "Copied to clipboard!" not in out


class TestCopyAndConfirm:
    """Tests for the clipboard confirmation helper."""

    def test_reports_success(self, recording_clipboard, capsys: pytest.CaptureFixture[str]) -> None:
        assert _copy_and_confirm("a { }", recording_clipboard) is None
        assert "✓ Copied to clipboard!" in capsys.readouterr().out
        assert recording_clipboard.copied == ["a { }"]

    def test_escapes_failure_message(self, failing_clipboard, capsys: pytest.CaptureFixture[str]) -> None:
        failing_clipboard.message = "xclip exited with code 1 [bold]"
        _copy_and_confirm("a { }", failing_clipboard)
        assert "Could not copy to clipboard: xclip exited with code 1 [bold]" in capsys.readouterr().out

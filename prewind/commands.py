"""The prewind subcommands: scale generation and theme download."""

from rich.console import Console
from rich.markup import escape

from prewind.clipboard import Clipboard, get_clipboard
from prewind.editor import ScaleEditor
from prewind.logger import get_logger
from prewind.output import render_scale_css
from prewind.scales import ScaleDefinition
from prewind.theme import ThemeFetchError, fetch_theme

logger = get_logger(__name__)

console = Console()
error_console = Console(stderr=True)


def _print_css(css: str) -> None:
    """Write CSS unchanged followed by a blank line."""
    # Bypass rich rendering, which expands tabs
    console.file.write(f"{css}\n\n")
    console.file.flush()


def _copy_and_confirm(text: str, clipboard: Clipboard | None) -> None:
    """Copy text to the clipboard and tell the user how it went.

    Args:
        text: Text to copy.
        clipboard: Clipboard to use. Defaults to the platform clipboard.
    """
    clipboard = clipboard if clipboard is not None else get_clipboard()
    success, message = clipboard.copy(text)
    if success:
        console.print("[green]✓ Copied to clipboard![/green]")
    else:
        console.print(f"[yellow]Could not copy to clipboard: {escape(message)}[/yellow]", highlight=False)


def run_scale(definition: ScaleDefinition, clipboard: Clipboard | None = None) -> int:
    """Edit a scale interactively, then print and copy the generated CSS.

    Args:
        definition: The scale to generate.
        clipboard: Clipboard to use. Defaults to the platform clipboard.

    Returns:
        Process exit code.
    """
    config = ScaleEditor(definition).run()
    if config is None:
        console.print("\nCancelled.")
        return 0

    css = render_scale_css(definition, config)
    logger.info(f"Generated {len(definition.steps)} {definition.command} variables")
    _print_css(css)
    _copy_and_confirm(css, clipboard)
    return 0


def run_theme(clipboard: Clipboard | None = None) -> int:
    """Fetch the default theme, then print and copy it.

    Args:
        clipboard: Clipboard to use. Defaults to the platform clipboard.

    Returns:
        Process exit code: 1 if the theme could not be fetched.
    """
    try:
        css = fetch_theme()
    except ThemeFetchError as exc:
        error_console.print(f"Error fetching theme: {exc}", markup=False, highlight=False)
        return 1

    _print_css(css)
    _copy_and_confirm(css, clipboard)
    return 0

"""Screens for editing a single scale setting."""

import math
from typing import ClassVar

from textual.app import ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Button, Input, OptionList, Static
from textual.widgets.option_list import Option

from prewind.logger import get_logger
from prewind.scales import RATIOS, display_number, find_ratio_index

logger = get_logger(__name__)


class NumberInputScreen(Screen[float | None]):
    """Modal screen to enter a positive number."""

    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (("escape", "cancel", "Cancel"),)

    def __init__(self, label: str, value: float) -> None:
        """Initialize the number input screen.

        Args:
            label: Prompt shown above the input, e.g. "Min viewport (px)".
            value: Current value used to prefill the input.
        """
        super().__init__()
        self.label = label
        self.value = value

    def compose(self) -> ComposeResult:
        """Create the input dialog layout.

        Yields:
            The widgets that make up the input dialog.
        """
        with Vertical(id="number-dialog"):
            yield Static(f"[bold]{self.label}[/bold]", id="number-title")
            yield Static("Enter to accept, Esc to go back", id="number-hint")
            yield Input(display_number(self.value), type="number", id="number-input")
            with Container(id="button-row"):
                yield Button("✓ Apply", variant="primary", id="apply-btn")
                yield Button("✕ Cancel", variant="default", id="cancel-btn")

    def on_mount(self) -> None:
        """Focus the input field on mount."""
        self.query_one("#number-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in input field.

        Args:
            event: The input submission event.
        """
        self._submit(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press.

        Args:
            event: The button press event.
        """
        if event.button.id == "apply-btn":
            self._submit(self.query_one("#number-input", Input).value)
        elif event.button.id == "cancel-btn":
            self.dismiss(None)

    def _submit(self, raw_value: str) -> None:
        """Validate the entered value and dismiss with it if valid."""
        raw_value = raw_value.strip()
        try:
            value = float(raw_value)
        except ValueError:
            self.app.notify(f"{self.label} must be a number", severity="warning")
            return
        if not math.isfinite(value):
            self.app.notify(f"{self.label} must be a finite number", severity="warning")
            return
        if value <= 0:
            self.app.notify(f"{self.label} must be greater than 0", severity="warning")
            return
        logger.debug(f"Accepted {value} for {self.label}")
        self.dismiss(value)

    def action_cancel(self) -> None:
        """Cancel and close the modal."""
        self.dismiss(None)


class RatioSelectScreen(Screen[float | None]):
    """Modal screen to pick a ratio from the musical interval table."""

    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("escape", "cancel", "Cancel"),
        ("q", "cancel", "Cancel"),
    )

    def __init__(self, label: str, value: float) -> None:
        """Initialize the ratio selection screen.

        Args:
            label: Title of the dialog, e.g. "Min ratio".
            value: Current ratio, highlighted initially.
        """
        super().__init__()
        self.label = label
        self.value = value

    def compose(self) -> ComposeResult:
        """Create the ratio list layout.

        Yields:
            The widgets that make up the ratio dialog.
        """
        with Vertical(id="ratio-dialog"):
            yield Static(f"[bold]{self.label}[/bold]", id="ratio-title")
            yield OptionList(
                *(Option(ratio.label, id=str(index)) for index, ratio in enumerate(RATIOS)),
                id="ratio-options",
            )

    def on_mount(self) -> None:
        """Highlight the current ratio and focus the list."""
        options = self.query_one("#ratio-options", OptionList)
        index = find_ratio_index(self.value)
        options.highlighted = 0 if index is None else index
        options.focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Dismiss with the selected ratio.

        Args:
            event: The option selection event.
        """
        event.stop()
        if event.option.id is None:
            return
        ratio = RATIOS[int(event.option.id)]
        logger.debug(f"Selected ratio {ratio.label} for {self.label}")
        self.dismiss(ratio.value)

    def action_cancel(self) -> None:
        """Cancel and close the modal."""
        self.dismiss(None)

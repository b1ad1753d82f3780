"""Interactive scale configuration editor (Textual TUI)."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Footer, Header, OptionList, Static
from textual.widgets.option_list import Option

from prewind.clamp import ScaleConfig
from prewind.logger import get_logger
from prewind.scales import FieldSpec, ScaleDefinition, field_display_value
from prewind.widgets.screens import NumberInputScreen, RatioSelectScreen

logger = get_logger(__name__)

# Path to styles directory
STYLES_DIR = Path(__file__).parent / "styles"

GENERATE_OPTION_ID = "generate"
CANCEL_OPTION_ID = "cancel"

# Actions only available from the main menu, not while a setting is being edited
MENU_ACTIONS = frozenset({"generate", "cancel"})


class ScaleEditor(App[ScaleConfig | None]):
    """Edit a scale configuration and return it when the user asks to generate.

    The app exits with the edited ScaleConfig, or with None if the user cancels.
    """

    ENABLE_COMMAND_PALETTE = False
    CSS_PATH: ClassVar[list[Path]] = [
        STYLES_DIR / "app.tcss",
        STYLES_DIR / "modals.tcss",
    ]
    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("escape", "cancel", "Cancel"),
        ("g", "generate", "Generate CSS"),
    )

    def __init__(self, definition: ScaleDefinition, config: ScaleConfig | None = None) -> None:
        """Initialize the editor.

        Args:
            definition: The scale being configured.
            config: Starting configuration. Defaults to the scale defaults.
        """
        super().__init__()
        self.definition = definition
        self.config = config if config is not None else definition.defaults
        self.title = f"{definition.title} Configuration"
        logger.info(f"Initializing editor for {definition.command} scale")

    def compose(self) -> ComposeResult:
        """Create the UI layout.

        Yields:
            The widgets that make up the application UI.
        """
        yield Header()
        with Vertical(id="editor-panel"):
            yield Static(f"[bold]{self.definition.title} Configuration[/bold]", id="editor-title")
            yield Static("Select a setting to edit", id="editor-hint")
            yield OptionList(*self._build_options(), id="scale-options")
        yield Footer()

    def on_mount(self) -> None:
        """Highlight the first setting and focus the menu."""
        options = self.query_one("#scale-options", OptionList)
        options.highlighted = 0
        options.focus()

    def _build_options(self) -> list[Option | None]:
        """Build menu entries: settings with their values, a separator, then actions.

        Returns:
            Options for the menu; None marks the separator.
        """
        options: list[Option | None] = [
            Option(f"{field.label}: {field_display_value(field, self.config)}", id=field.key)
            for field in self.definition.fields
        ]
        options.append(None)
        options.append(Option("Generate CSS", id=GENERATE_OPTION_ID))
        options.append(Option("Cancel", id=CANCEL_OPTION_ID))
        return options

    def _refresh_options(self) -> None:
        """Rebuild the menu after a value changed, keeping the highlight."""
        options = self.query_one("#scale-options", OptionList)
        highlighted = options.highlighted
        options.clear_options()
        options.add_options(self._build_options())
        options.highlighted = highlighted

    def _get_field(self, key: str) -> FieldSpec | None:
        for field in self.definition.fields:
            if field.key == key:
                return field
        return None

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Handle selection of a menu entry.

        Args:
            event: The option selection event.
        """
        option_id = event.option.id
        if option_id == GENERATE_OPTION_ID:
            self.action_generate()
            return
        if option_id == CANCEL_OPTION_ID:
            self.action_cancel()
            return

        field = self._get_field(option_id) if option_id is not None else None
        if field is None:
            logger.error(f"Unknown menu option: {option_id}")
            return
        self.edit_field(field)

    def edit_field(self, field: FieldSpec) -> None:
        """Open the editing screen for a setting.

        Args:
            field: The setting to edit.
        """
        current = getattr(self.config, field.key)

        def handle_value(value: float | None) -> None:
            if value is None:
                logger.debug(f"Editing {field.key} cancelled")
                return
            self.config = self.config.with_value(field.key, value)
            logger.info(f"Set {field.key} to {value}")
            self._refresh_options()

        if field.kind == "ratio":
            self.push_screen(RatioSelectScreen(field.label, current), handle_value)
        else:
            label = f"{field.label} ({field.suffix})" if field.suffix else field.label
            self.push_screen(NumberInputScreen(label, current), handle_value)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Disable menu actions while an editing screen is open.

        Args:
            action: Name of the action.
            parameters: Action parameters.

        Returns:
            False if the action is not available on the current screen.
        """
        if action in MENU_ACTIONS and len(self.screen_stack) > 1:
            return False
        return True

    def action_generate(self) -> None:
        """Exit with the current configuration."""
        if self.config.min_viewport == self.config.max_viewport:
            logger.warning(f"Refusing to generate with equal viewports ({self.config.min_viewport})")
            self.notify("Min viewport and max viewport must be different", severity="warning")
            return
        logger.info(f"Generating {self.definition.command} scale with {self.config}")
        self.exit(self.config)

    def action_cancel(self) -> None:
        """Exit without generating."""
        logger.info("Editor cancelled")
        self.exit(None)

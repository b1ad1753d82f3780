"""Predefined fluid scales and the musical-interval ratio table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from prewind.clamp import ScaleConfig

FieldKind = Literal["number", "ratio"]


@dataclass(frozen=True)
class Ratio:
    """A modular-scale ratio named after a musical interval."""

    value: float
    name: str

    @property
    def label(self) -> str:
        """Label shown in menus and in the generated CSS comment."""
        return f"{display_number(self.value)} - {self.name}"


RATIOS: tuple[Ratio, ...] = (
    Ratio(1.067, "Minor Second"),
    Ratio(1.125, "Major Second"),
    Ratio(1.2, "Minor Third"),
    Ratio(1.25, "Major Third"),
    Ratio(1.333, "Perfect Fourth"),
    Ratio(1.414, "Augmented Fourth"),
    Ratio(1.5, "Perfect Fifth"),
    Ratio(1.618, "Golden Ratio"),
    Ratio(1.667, "Major Sixth"),
    Ratio(1.778, "Minor Seventh"),
    Ratio(1.875, "Major Seventh"),
    Ratio(2.0, "Octave"),
)


@dataclass(frozen=True)
class FieldSpec:
    """An editable scale setting."""

    key: str
    label: str
    suffix: str = ""
    kind: FieldKind = "number"


@dataclass(frozen=True)
class ScaleDefinition:
    """Everything a scale command needs to edit and render one scale."""

    title: str
    command: str
    defaults: ScaleConfig
    # Ordered (name, step) pairs; order is display order only
    steps: tuple[tuple[str, int], ...]
    var_prefix: str
    fields: tuple[FieldSpec, ...]


def display_number(value: float) -> str:
    """Render a setting value the way it was typed (no trailing ``.0``).

    Args:
        value: The number to render.

    Returns:
        String representation of the number.
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def find_ratio_index(value: float) -> int | None:
    """Find the position of a value in the ratio table.

    Args:
        value: Ratio value to look up.

    Returns:
        Index into RATIOS, or None if the value is not a known interval.
    """
    for index, ratio in enumerate(RATIOS):
        if ratio.value == value:
            return index
    return None


def ratio_label(value: float) -> str:
    """Get the musical interval label for a ratio value.

    Args:
        value: Ratio value.

    Returns:
        ``"<value> - <interval>"`` for known intervals, otherwise the plain value.
    """
    index = find_ratio_index(value)
    if index is None:
        return display_number(value)
    return RATIOS[index].label


def field_display_value(field: FieldSpec, config: ScaleConfig) -> str:
    """Format the current value of a field for display.

    Args:
        field: The field to display.
        config: Config holding the current value.

    Returns:
        Display string, including the field suffix or the interval name.
    """
    value = getattr(config, field.key)
    if field.kind == "ratio":
        return ratio_label(value)
    return f"{display_number(value)}{field.suffix}"


def _scale_fields(base_label: str) -> tuple[FieldSpec, ...]:
    return (
        FieldSpec("min_viewport", "Min viewport", "px"),
        FieldSpec("max_viewport", "Max viewport", "px"),
        FieldSpec("min_base", f"Min {base_label} size", "px"),
        FieldSpec("max_base", f"Max {base_label} size", "px"),
        FieldSpec("min_ratio", "Min ratio", kind="ratio"),
        FieldSpec("max_ratio", "Max ratio", kind="ratio"),
    )


TEXT_SCALE = ScaleDefinition(
    title="Text Scale",
    command="text",
    defaults=ScaleConfig(
        min_viewport=320,
        max_viewport=1600,
        min_base=14,
        max_base=18,
        min_ratio=1.25,
        max_ratio=1.414,
    ),
    # base = 0
    steps=(
        ("sm", -1),
        ("base", 0),
        ("lg", 1),
        ("xl", 2),
        ("2xl", 3),
        ("3xl", 4),
        ("4xl", 5),
    ),
    var_prefix="--text",
    fields=_scale_fields("base"),
)

SPACE_SCALE = ScaleDefinition(
    title="Space Scale",
    command="space",
    defaults=ScaleConfig(
        min_viewport=320,
        max_viewport=1600,
        min_base=12,
        max_base=18,
        min_ratio=1.5,
        max_ratio=1.667,
    ),
    # sm = 0
    steps=(
        ("3xs", -3),
        ("2xs", -2),
        ("xs", -1),
        ("sm", 0),
        ("md", 1),
        ("lg", 2),
        ("xl", 3),
        ("2xl", 4),
        ("3xl", 5),
        ("4xl", 6),
    ),
    var_prefix="--space",
    fields=_scale_fields("sm"),
)

SCALES: dict[str, ScaleDefinition] = {
    TEXT_SCALE.command: TEXT_SCALE,
    SPACE_SCALE.command: SPACE_SCALE,
}

"""Fluid clamp() calculation using the Utopia formula over a modular scale."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple

# Root font size assumed when converting px to rem
ROOT_FONT_SIZE = 16
SIGNIFICANT_DIGITS = 4


@dataclass(frozen=True)
class ScaleConfig:
    """Viewport range, base sizes and ratios for one fluid scale.

    All lengths are in pixels. ``min_viewport`` must be smaller than
    ``max_viewport``; the calculation does not check it.
    """

    min_viewport: float
    max_viewport: float
    min_base: float
    max_base: float
    min_ratio: float
    max_ratio: float

    def with_value(self, key: str, value: float) -> ScaleConfig:
        """Return a copy of the config with one field replaced.

        Args:
            key: Name of the field to replace.
            value: New value for the field.

        Returns:
            A new ScaleConfig.

        Raises:
            KeyError: If ``key`` is not a ScaleConfig field.
        """
        if key not in {f.name for f in fields(self)}:
            raise KeyError(f"Unknown scale setting: {key!r}")
        return replace(self, **{key: value})


class FluidValue(NamedTuple):
    """CSS quantities of a single clamp() value, before formatting."""

    min_rem: float
    max_rem: float
    intercept_rem: float
    slope_vw: float


def compute_sizes(config: ScaleConfig, step: int) -> tuple[float, float]:
    """Compute the pixel size of a scale step at both viewport extremes.

    Args:
        config: Scale configuration.
        step: Position in the modular scale (0 = base).

    Returns:
        Tuple of (size at min viewport, size at max viewport).
    """
    min_size = config.min_base * config.min_ratio**step
    max_size = config.max_base * config.max_ratio**step
    return min_size, max_size


def compute_fluid_value(config: ScaleConfig, step: int) -> FluidValue:
    """Compute the linear size function for a scale step in CSS units.

    The two (viewport, size) points define a line; its intercept is expressed
    in rem and its slope in vw.

    Args:
        config: Scale configuration.
        step: Position in the modular scale (0 = base).

    Returns:
        The FluidValue for the step.
    """
    min_size, max_size = compute_sizes(config, step)

    slope = (max_size - min_size) / (config.max_viewport - config.min_viewport)
    intercept = min_size - slope * config.min_viewport

    return FluidValue(
        min_rem=min_size / ROOT_FONT_SIZE,
        max_rem=max_size / ROOT_FONT_SIZE,
        intercept_rem=intercept / ROOT_FONT_SIZE,
        slope_vw=slope * 100,
    )


def format_number(value: float) -> str:
    """Format a number to 4 significant digits without trailing zeros.

    Exact ties round away from zero, so ``1.0625`` becomes ``"1.063"``.

    Args:
        value: Number to format.

    Returns:
        The shortest decimal string for the rounded value.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    exact = Decimal(value)
    quantum = Decimal(1).scaleb(exact.adjusted() - SIGNIFICANT_DIGITS + 1)
    rounded = exact.quantize(quantum, rounding=ROUND_HALF_UP)
    return format(rounded.normalize(), "f")


def compute_clamp(config: ScaleConfig, step: int) -> str:
    """Calculate a CSS clamp() value for a step in the modular scale.

    The min-viewport size is always the first argument and the max-viewport
    size the last, even when the scale shrinks towards the max viewport.

    Args:
        config: Scale configuration.
        step: Position in the modular scale (0 = base).

    Returns:
        CSS clamp() expression, e.g. ``clamp(0.875rem, 0.8125rem + 0.3125vw, 1.125rem)``.
    """
    value = compute_fluid_value(config, step)

    min_str = f"{format_number(value.min_rem)}rem"
    max_str = f"{format_number(value.max_rem)}rem"
    if value.intercept_rem >= 0:
        preferred = f"{format_number(value.intercept_rem)}rem + {format_number(value.slope_vw)}vw"
    else:
        preferred = f"{format_number(abs(value.intercept_rem))}rem - {format_number(abs(value.slope_vw))}vw"

    return f"clamp({min_str}, {preferred}, {max_str})"

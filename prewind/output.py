"""Rendering of generated CSS custom properties."""

from prewind.clamp import ScaleConfig, compute_clamp
from prewind.scales import ScaleDefinition, field_display_value

CLI_NAME = "prewind"


def render_settings_comment(definition: ScaleDefinition, config: ScaleConfig) -> list[str]:
    """Build the comment header recording the settings used.

    Args:
        definition: The scale being rendered.
        config: Settings used for the calculation.

    Returns:
        Comment lines, opening and closing delimiters included.
    """
    lines = [f"/* Fluid {definition.title} – Generated with: `{CLI_NAME} {definition.command}`"]
    lines.extend(f"   {field.label}: {field_display_value(field, config)}" for field in definition.fields)
    lines.append("*/")
    return lines


def render_scale_css(definition: ScaleDefinition, config: ScaleConfig) -> str:
    """Render a settings comment followed by one custom property per scale step.

    Args:
        definition: The scale being rendered.
        config: Settings used for the calculation.

    Returns:
        The CSS block as a single string.
    """
    lines = render_settings_comment(definition, config)
    for name, step in definition.steps:
        lines.append(f"{definition.var_prefix}-{name}: {compute_clamp(config, step)};")
    return "\n".join(lines)

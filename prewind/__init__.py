"""Fluid CSS clamp() scales for typography and spacing."""

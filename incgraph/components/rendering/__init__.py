"""DOT rendering and color assignment."""

from .color_assigner_comp import (
    GOLDEN_ANGLE,
    EdgeColorGenerator,
    count_references,
    format_hex_color,
    hsv_to_rgb,
    node_color,
)
from .dot_renderer_comp import render_dot

__all__ = [
    "GOLDEN_ANGLE",
    "EdgeColorGenerator",
    "count_references",
    "format_hex_color",
    "hsv_to_rgb",
    "node_color",
    "render_dot",
]

"""
Edge and node colors for the rendered graph.

Edge colors come from a golden-angle hue rotation: each request advances the
hue by ~137.5 degrees, so consecutive edges get well separated hues however
many edges there are. Node colors bucket nodes by how often they are
referenced, using an ascending threshold table.
"""

from __future__ import annotations

import colorsys
from collections.abc import Callable

from incgraph.helpers.dto.config_dto import (
    DEFAULT_NODE_COLOR,
    DEFAULT_SATURATION,
    DEFAULT_VALUE,
    NodeColorMap,
)
from incgraph.helpers.dto.graph_dto import DependencyGraph

GOLDEN_ANGLE = 137.50309


def hsv_to_rgb(hue: float, saturation: int, value: int) -> tuple[int, int, int]:
    """
    Convert HSV to 8-bit RGB.

    Args:
        hue: Degrees, any value (taken modulo 360)
        saturation: 0-255
        value: 0-255
    """
    r, g, b = colorsys.hsv_to_rgb((hue % 360.0) / 360.0, saturation / 255.0, value / 255.0)
    return round(r * 255), round(g * 255), round(b * 255)


def format_hex_color(red: int, green: int, blue: int) -> str:
    """Format channels as ``#rrggbb``, each channel zero-padded to two digits."""
    return f"#{red:02x}{green:02x}{blue:02x}"


class EdgeColorGenerator:
    """
    Sequence of distinct edge colors.

    One generator is created per render pass and shared by every edge
    statement of that pass, so the hue keeps advancing across the whole
    graph instead of restarting per source.
    """

    def __init__(self, saturation: int = DEFAULT_SATURATION, value: int = DEFAULT_VALUE) -> None:
        for name, channel in (("saturation", saturation), ("value", value)):
            if not 0 <= channel <= 255:
                raise ValueError(f"{name} must be between 0 and 255, got {channel}")
        self.saturation = saturation
        self.value = value
        self.hue = 0.0

    def next_color(self) -> str:
        """Advance the hue one golden-angle step and return its color."""
        self.hue = (self.hue + GOLDEN_ANGLE) % 360.0
        return format_hex_color(*hsv_to_rgb(self.hue, self.saturation, self.value))


def node_color(colors: NodeColorMap, count: int) -> str:
    """
    Look up the color for a node referenced ``count`` times.

    Returns the color of the greatest threshold not above ``count``, or
    ``white`` when the count is below every threshold or the table is empty.
    """
    result = DEFAULT_NODE_COLOR
    for threshold, color in colors.entries:
        if threshold > count:
            break
        result = color
    return result


def count_references(graph: DependencyGraph, name_fn: Callable[[str], str]) -> dict[str, int]:
    """
    Count references per display name.

    A node counts once for every edge naming it as an endpoint: a source
    once per target it includes, a target once per occurrence.
    Identifiers that render to the same name share one counter. The returned
    dict keeps first-seen order.
    """
    counts: dict[str, int] = {}
    for source, targets in graph.edges.items():
        name = name_fn(source)
        counts[name] = counts.get(name, 0) + len(targets)
        for target in targets:
            name = name_fn(target)
            counts[name] = counts.get(name, 0) + 1
    return counts

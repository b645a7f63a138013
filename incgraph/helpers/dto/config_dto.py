"""
Config domain DTOs.

Data transfer objects for the run configuration consumed by the graph
workflows. Built by the config service or the CLI, read-only afterwards.

Rules:
- Import only stdlib and typing (no incgraph.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

CollapseMode = Literal["file", "module", "directory"]
QuoteFilter = Literal["both", "angle", "quote"]

COLLAPSE_MODES: tuple[str, ...] = ("file", "module", "directory")
QUOTE_FILTERS: tuple[str, ...] = ("both", "angle", "quote")

DEFAULT_SATURATION = 192
DEFAULT_VALUE = 240
DEFAULT_NODE_COLOR = "white"
DEFAULT_NODE_COLORS: tuple[tuple[int, str], ...] = (
    (0, "white"),
    (1, "#00FF00"),
    (3, "yellow"),
    (5, "#FF0000"),
)


@dataclass(frozen=True)
class NodeColorMap:
    """
    Ordered threshold -> color table for node importance coloring.

    Thresholds are strictly increasing; use :meth:`from_pairs` to build one
    from unsorted input.
    """

    entries: tuple[tuple[int, str], ...] = ()

    def __post_init__(self) -> None:
        thresholds = [threshold for threshold, _color in self.entries]
        if any(t < 0 for t in thresholds):
            raise ValueError("Node color thresholds must be non-negative")
        if any(b <= a for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("Node color thresholds must be strictly increasing")

    @classmethod
    def from_pairs(cls, pairs: list[tuple[int, str]] | tuple[tuple[int, str], ...]) -> NodeColorMap:
        """Sort pairs by threshold; duplicate thresholds are rejected."""
        return cls(entries=tuple(sorted((int(t), str(c)) for t, c in pairs)))


@dataclass
class GraphConfig:
    """Complete configuration for one scan-and-render run."""

    src_path: str = "."
    include_paths: list[str] = field(default_factory=list)
    collapse_mode: CollapseMode = "file"
    quote_filter: QuoteFilter = "both"
    exclude_files: str | None = None  # regex matched against absolute file paths
    exclude_includes: str | None = None  # regex matched against raw include literals
    ignore_missing: bool = False
    groups: bool = False
    keep_paths: bool = False
    colorize_edges: bool = False
    saturation: int = DEFAULT_SATURATION
    value: int = DEFAULT_VALUE
    colorize_nodes: bool = False
    node_colors: list[tuple[int, str]] = field(default_factory=lambda: list(DEFAULT_NODE_COLORS))
    debug: bool = False


@dataclass
class RenderOptions:
    """Options for turning a dependency graph into DOT text."""

    base_dir: str = ""
    groups: bool = False
    keep_paths: bool = False
    colorize_nodes: bool = False
    colorize_edges: bool = False
    saturation: int = DEFAULT_SATURATION
    value: int = DEFAULT_VALUE
    node_colors: NodeColorMap = field(default_factory=NodeColorMap)

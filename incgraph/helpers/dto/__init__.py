"""Data transfer objects shared across layers."""

from .config_dto import (
    COLLAPSE_MODES,
    DEFAULT_NODE_COLOR,
    DEFAULT_NODE_COLORS,
    DEFAULT_SATURATION,
    DEFAULT_VALUE,
    QUOTE_FILTERS,
    CollapseMode,
    GraphConfig,
    NodeColorMap,
    QuoteFilter,
    RenderOptions,
)
from .graph_dto import BuildResult, DependencyGraph, IncludeDirective, QuoteKind

__all__ = [
    "COLLAPSE_MODES",
    "DEFAULT_NODE_COLOR",
    "DEFAULT_NODE_COLORS",
    "DEFAULT_SATURATION",
    "DEFAULT_VALUE",
    "QUOTE_FILTERS",
    "BuildResult",
    "CollapseMode",
    "DependencyGraph",
    "GraphConfig",
    "IncludeDirective",
    "NodeColorMap",
    "QuoteFilter",
    "QuoteKind",
    "RenderOptions",
]

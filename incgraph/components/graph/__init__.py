"""Graph granularity transforms."""

from .graph_collapser_comp import collapse_graph

__all__ = ["collapse_graph"]

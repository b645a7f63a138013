"""Collapsing a file-level dependency graph to module or directory granularity."""

from __future__ import annotations

import logging
from collections.abc import Callable

from incgraph.helpers.dto.graph_dto import DependencyGraph
from incgraph.helpers.paths_helper import directory_key, module_key

logger = logging.getLogger(__name__)

_KEY_FUNCTIONS: dict[str, Callable[[str], str]] = {
    "module": module_key,
    "directory": directory_key,
}


def collapse_graph(graph: DependencyGraph, mode: str) -> DependencyGraph:
    """
    Re-key every edge at the requested granularity.

    ``file`` mode returns an equal copy, duplicate edges included. The other
    modes drop self-edges created by collapsing (``x.c -> x.h`` in module
    mode, siblings in directory mode) and keep only the first occurrence of
    each edge. The input graph is never mutated.

    Raises:
        ValueError: If ``mode`` is not file, module or directory
    """
    if mode == "file":
        return DependencyGraph(edges={source: list(targets) for source, targets in graph.edges.items()})

    key_fn = _KEY_FUNCTIONS.get(mode)
    if key_fn is None:
        raise ValueError(f"Unknown collapse mode: {mode!r}")

    collapsed = DependencyGraph()
    for source, target in graph.iter_edges():
        source_key = key_fn(source)
        target_key = key_fn(target)
        if source_key == target_key or collapsed.has_edge(source_key, target_key):
            continue
        collapsed.add_edge(source_key, target_key)

    logger.debug(
        "Collapsed %d edge(s) to %d in %s mode",
        graph.edge_count(),
        collapsed.edge_count(),
        mode,
    )
    return collapsed

"""Rendering of a dependency graph as graphviz DOT text."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from incgraph.components.rendering.color_assigner_comp import (
    EdgeColorGenerator,
    count_references,
    node_color,
)
from incgraph.helpers.dto.config_dto import RenderOptions
from incgraph.helpers.dto.graph_dto import DependencyGraph
from incgraph.helpers.paths_helper import display_directory, display_name

logger = logging.getLogger(__name__)

GRAPH_NAME = "source tree"
GRAPH_ATTRIBUTES: tuple[tuple[str, str], ...] = (
    ("overlap", "scale"),
    ("size", '"8,10"'),
    ("ratio", '"fill"'),
    ("fontsize", '"16"'),
    ("fontname", '"Helvetica"'),
    ("clusterrank", '"local"'),
)
INDENT = "    "


def quote(name: str) -> str:
    """Double-quote a DOT identifier, escaping backslashes and quotes."""
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'


def render_dot(
    graph: DependencyGraph,
    options: RenderOptions,
    edge_colors: EdgeColorGenerator | None = None,
) -> str:
    """
    Render ``graph`` as a DOT digraph.

    Output order: header attributes, styled node declarations (node
    coloring), one cluster per node (grouping), one edge statement per
    source, footer.

    Args:
        graph: Raw or collapsed dependency graph
        options: Display and coloring options
        edge_colors: Generator for edge colors; a fresh one is created when
            edge colorization is on and none is given

    Returns:
        DOT text ending with a newline
    """
    name_of = partial(
        display_name,
        base_dir=options.base_dir,
        groups=options.groups,
        keep_paths=options.keep_paths,
    )

    lines = [f"digraph {quote(GRAPH_NAME)} {{"]
    lines.extend(f"{INDENT}{key}={value};" for key, value in GRAPH_ATTRIBUTES)

    if options.colorize_nodes:
        for name, count in count_references(graph, name_of).items():
            color = node_color(options.node_colors, count)
            lines.append(f"{INDENT}{quote(name)} [style=filled, fillcolor={quote(color)}];")

    if options.groups:
        lines.extend(_render_clusters(graph, options, name_of))

    if options.colorize_edges and edge_colors is None:
        edge_colors = EdgeColorGenerator(options.saturation, options.value)

    for source, targets in graph.edges.items():
        target_list = " ".join(quote(name_of(target)) for target in targets)
        statement = f"{INDENT}{quote(name_of(source))} -> {{ {target_list} }}"
        if options.colorize_edges and edge_colors is not None:
            statement += f" [color={quote(edge_colors.next_color())}]"
        lines.append(statement + ";")

    lines.append("}")
    logger.debug("Rendered %d node(s), %d edge statement(s)", len(graph.nodes()), len(graph.edges))
    return "\n".join(lines) + "\n"


def _render_clusters(graph: DependencyGraph, options: RenderOptions, name_of: Callable[[str], str]) -> list[str]:
    # One cluster statement per node; graphviz merges clusters sharing an id.
    lines = []
    for node in graph.nodes():
        directory = display_directory(node, options.base_dir)
        cluster_id = "cluster_" + directory.replace("/", "_")
        lines.append(f"{INDENT}subgraph {quote(cluster_id)} {{ label={quote(directory)}; {quote(name_of(node))}; }}")
    return lines

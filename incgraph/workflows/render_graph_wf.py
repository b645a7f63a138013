"""
Workflow for collapsing and rendering a dependency graph, and the full
scan -> collapse -> render pipeline.
"""

from __future__ import annotations

from incgraph.components.graph.graph_collapser_comp import collapse_graph
from incgraph.components.rendering.color_assigner_comp import EdgeColorGenerator
from incgraph.components.rendering.dot_renderer_comp import render_dot
from incgraph.helpers.dto.config_dto import GraphConfig, NodeColorMap, RenderOptions
from incgraph.helpers.dto.graph_dto import DependencyGraph
from incgraph.helpers.exceptions import ConfigValidationError
from incgraph.helpers.paths_helper import normalize_path
from incgraph.workflows.build_graph_wf import build_dependency_graph


def build_render_options(config: GraphConfig) -> RenderOptions:
    """Derive render options; the base directory is the normalized source root."""
    try:
        node_colors = NodeColorMap.from_pairs(config.node_colors)
    except ValueError as e:
        raise ConfigValidationError(str(e)) from e

    return RenderOptions(
        base_dir=normalize_path(config.src_path),
        groups=config.groups,
        keep_paths=config.keep_paths,
        colorize_nodes=config.colorize_nodes,
        colorize_edges=config.colorize_edges,
        saturation=config.saturation,
        value=config.value,
        node_colors=node_colors,
    )


def render_graph_workflow(
    graph: DependencyGraph,
    config: GraphConfig,
    edge_colors: EdgeColorGenerator | None = None,
) -> str:
    """Collapse ``graph`` per ``config.collapse_mode`` and render it as DOT text."""
    options = build_render_options(config)
    collapsed = collapse_graph(graph, config.collapse_mode)
    return render_dot(collapsed, options, edge_colors)


def run_graph_pipeline(config: GraphConfig) -> str:
    """Scan, collapse and render in one go. Returns the DOT text."""
    result = build_dependency_graph(config)
    return render_graph_workflow(result.graph, config)

"""
Workflows package.

Workflows orchestrate components for one run. They take the configuration
as a parameter and never touch the CLI or config-file layers.
"""

from .build_graph_wf import build_dependency_graph
from .render_graph_wf import build_render_options, render_graph_workflow, run_graph_pipeline

__all__ = [
    "build_dependency_graph",
    "build_render_options",
    "render_graph_workflow",
    "run_graph_pipeline",
]

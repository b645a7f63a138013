"""
Workflow for building the raw file-level dependency graph.

For every file under the source root, every include directive is:
1. Filtered by quote kind (``both`` / ``angle`` / ``quote``)
2. Filtered by the include-exclusion pattern
3. Resolved against the including file's directory, then the search path

Resolved includes become edges; unresolved ones are reported and dropped
(or kept verbatim with ``ignore_missing``). Nothing here is fatal: the
result is the best-effort graph of whatever could be read.

USAGE:
    from incgraph.workflows.build_graph_wf import build_dependency_graph

    result = build_dependency_graph(GraphConfig(src_path="/path/to/project"))
    result.graph.edges  # {"/path/to/project/main.c": ["/path/to/project/util.h"]}
"""

from __future__ import annotations

import logging
import os

from incgraph.components.scanning.include_extractor_comp import extract_includes
from incgraph.components.scanning.path_resolver_comp import build_search_path, resolve_include
from incgraph.components.scanning.tree_scanner_comp import scan_source_tree
from incgraph.helpers.dto.config_dto import GraphConfig
from incgraph.helpers.dto.graph_dto import BuildResult
from incgraph.helpers.paths_helper import normalize_path
from incgraph.helpers.regex_helper import compile_optional_pattern

logger = logging.getLogger(__name__)


def quote_kind_allowed(kind: str, quote_filter: str) -> bool:
    """Check a directive's quote kind against the configured filter."""
    return quote_filter == "both" or kind == quote_filter


def build_dependency_graph(config: GraphConfig) -> BuildResult:
    """
    Scan ``config.src_path`` and build the raw dependency graph.

    The search path is the source root followed by every configured include
    directory, in the order given.

    Returns:
        BuildResult with the graph and scan counters

    Raises:
        ConfigValidationError: If an exclusion pattern is not a valid regex
    """
    src_root = normalize_path(config.src_path)
    exclude_files = compile_optional_pattern(config.exclude_files, "exclude_files")
    exclude_includes = compile_optional_pattern(config.exclude_includes, "exclude_includes")
    search_path = build_search_path([src_root, *config.include_paths])

    result = BuildResult()
    graph = result.graph

    for file_path in scan_source_tree(src_root, exclude_files):
        result.files_scanned += 1
        current_dir = os.path.dirname(file_path)

        for directive in extract_includes(file_path):
            result.includes_seen += 1

            if not quote_kind_allowed(directive.kind, config.quote_filter):
                result.includes_skipped += 1
                continue

            if exclude_includes is not None and exclude_includes.search(directive.literal):
                logger.debug("Excluding include %s in %s", directive.literal, file_path)
                result.includes_skipped += 1
                continue

            target = resolve_include(directive.literal, current_dir, search_path, config.ignore_missing)
            if target is None:
                logger.warning("%s:%d: cannot find include %s", file_path, directive.lineno, directive.literal)
                result.unresolved += 1
                continue

            graph.add_edge(file_path, target)

    logger.debug(
        "Scanned %d file(s): %d include(s), %d skipped, %d unresolved, %d edge(s)",
        result.files_scanned,
        result.includes_seen,
        result.includes_skipped,
        result.unresolved,
        graph.edge_count(),
    )
    return result

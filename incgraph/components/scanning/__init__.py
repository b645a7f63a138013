"""Source tree scanning: file discovery, include extraction, include resolution."""

from .include_extractor_comp import extract_includes, parse_include_lines
from .path_resolver_comp import build_search_path, resolve_include
from .tree_scanner_comp import SOURCE_EXTENSIONS, is_source_file, scan_source_tree

__all__ = [
    "SOURCE_EXTENSIONS",
    "build_search_path",
    "extract_includes",
    "is_source_file",
    "parse_include_lines",
    "resolve_include",
    "scan_source_tree",
]

"""
Path handling utilities for graph node identifiers.

Rules:
- Only import from standard library
- Keep pure: no filesystem access, no config loading, no side effects

Node identifiers are plain strings (normalized absolute paths, or the raw
include literal for placeholders of missing headers). Display names are
derived from them only for rendering and never used for graph identity.
"""

from __future__ import annotations

import os


def normalize_path(path: str) -> str:
    """Return the normalized absolute form of ``path`` used as a node identifier."""
    return os.path.normpath(os.path.abspath(path))


def remove_base_dir(path: str, base_dir: str) -> str:
    """
    Strip the parent of ``base_dir`` from ``path`` so names start at the tree root.

    Paths outside ``base_dir`` (system headers, placeholders) are returned
    unchanged so they render with their full path.

    Examples:
        >>> remove_base_dir("/home/me/proj/src/a.c", "/home/me/proj")
        'proj/src/a.c'
        >>> remove_base_dir("/usr/include/stdio.h", "/home/me/proj")
        '/usr/include/stdio.h'
    """
    if not base_dir or not path.startswith(base_dir):
        return path
    parent = os.path.dirname(base_dir)
    stripped = path[len(parent) :]
    if stripped.startswith(os.sep):
        stripped = stripped[len(os.sep) :]
    return stripped


def display_name(path: str, base_dir: str, groups: bool = False, keep_paths: bool = False) -> str:
    """
    Derive the rendered name of a node.

    With grouping enabled and path-keeping off, only the final path segment
    is shown because the enclosing cluster already carries the directory.
    """
    name = remove_base_dir(path, base_dir)
    if groups and not keep_paths:
        return os.path.basename(name)
    return name


def display_directory(path: str, base_dir: str) -> str:
    """Base-dir-stripped containing directory of a node, used as cluster label."""
    return remove_base_dir(os.path.dirname(path), base_dir)


def module_key(path: str) -> str:
    """
    Collapse a file to its module: containing directory plus extensionless file name.

    ``src/x.c`` and ``src/x.h`` both map to ``src/x``.
    """
    directory, filename = os.path.split(path)
    stem = os.path.splitext(filename)[0]
    return os.path.join(directory, stem) if directory else stem


def directory_key(path: str) -> str:
    """Collapse a file to its containing directory (``.`` for bare names)."""
    return os.path.dirname(path) or "."

"""Include resolution against the including file's directory and the search path."""

from __future__ import annotations

import logging
import os

from incgraph.helpers.paths_helper import normalize_path

logger = logging.getLogger(__name__)


def build_search_path(directories: list[str]) -> list[str]:
    """
    Normalize search directories and drop the ones that do not exist.

    Each entry is checked once, up front; a missing directory is reported
    and scanning proceeds with the remaining entries. Order is preserved.
    """
    search_path: list[str] = []
    for directory in directories:
        normalized = normalize_path(directory)
        if not os.path.isdir(normalized):
            logger.warning("Include directory does not exist, skipping: %s", normalized)
            continue
        if normalized not in search_path:
            search_path.append(normalized)
    return search_path


def resolve_include(
    literal: str,
    current_dir: str,
    search_path: list[str],
    ignore_missing: bool = False,
) -> str | None:
    """
    Resolve an include literal to a node identifier.

    Lookup order:
    1. Relative to the including file's directory
    2. Each search path entry in order, first hit wins
    3. If still missing and ``ignore_missing`` is set, the literal itself
       (assumed to be a generated file)

    Args:
        literal: Text between ``<>`` or ``""`` in the directive
        current_dir: Directory of the including file
        search_path: Ordered, existing directories
        ignore_missing: Keep unresolved includes as placeholder nodes

    Returns:
        Normalized absolute path, the raw literal for an ignored missing
        include, or None if not found
    """
    for directory in (current_dir, *search_path):
        candidate = os.path.join(directory, literal)
        if os.path.isfile(candidate):
            return normalize_path(candidate)

    if ignore_missing:
        return literal
    return None

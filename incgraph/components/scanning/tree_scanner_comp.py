"""Recursive discovery of C/C++ source and header files.

``scan_source_tree`` is a generator: every call starts a fresh, lazy,
depth-first walk. Directory entries are visited in lexicographic order so
the resulting graph (and its edge colors) is reproducible.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterator

from incgraph.helpers.paths_helper import normalize_path

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = frozenset({".c", ".cc", ".cpp", ".cxx", ".h", ".hpp", ".hxx"})


def is_source_file(name: str) -> bool:
    """Check whether a file name carries one of the scanned extensions."""
    return os.path.splitext(name)[1] in SOURCE_EXTENSIONS


def scan_source_tree(root: str, exclude: re.Pattern[str] | None = None) -> Iterator[str]:
    """
    Yield the absolute path of every source/header file under ``root``.

    Args:
        root: Directory to walk (made absolute and normalized)
        exclude: Files whose absolute path matches are skipped entirely

    Unreadable or missing directories are logged and skipped; they never
    abort the walk. A symlink pointing back at one of its own ancestors is
    not followed; other symlinked directories are walked under their own path.
    """
    root = normalize_path(root)
    if not os.path.isdir(root):
        logger.warning("Source directory does not exist: %s", root)
        return
    yield from _walk(root, exclude, frozenset())


def _walk(directory: str, exclude: re.Pattern[str] | None, ancestors: frozenset[str]) -> Iterator[str]:
    # ancestors holds the real paths of the directories on the current descent only
    real = os.path.realpath(directory)
    if real in ancestors:
        logger.warning("Skipping symlink loop: %s", directory)
        return
    ancestors = ancestors | {real}

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        logger.warning("Cannot read directory %s: %s", directory, e)
        return

    for entry in entries:
        path = os.path.join(directory, entry.name)
        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as e:
            logger.warning("Cannot stat %s: %s", path, e)
            continue

        if is_dir:
            yield from _walk(path, exclude, ancestors)
        elif is_file and is_source_file(entry.name):
            if exclude is not None and exclude.search(path):
                logger.debug("Excluding file %s", path)
                continue
            yield path

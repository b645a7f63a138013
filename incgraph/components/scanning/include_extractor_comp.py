"""Extraction of literal ``#include`` directives from one file.

This is not a preprocessor: conditionals, macro includes and line
continuations are ignored, and only one directive per physical line is
recognized. Leading whitespace before ``#include`` is allowed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from incgraph.helpers.dto.graph_dto import IncludeDirective

logger = logging.getLogger(__name__)

_DIRECTIVE = "#include"


def parse_include_lines(lines: Iterable[str]) -> Iterator[IncludeDirective]:
    """Yield the include directives found in ``lines``, in line order."""
    for lineno, line in enumerate(lines, 1):
        directive = _parse_line(line, lineno)
        if directive is not None:
            yield directive


def _parse_line(line: str, lineno: int) -> IncludeDirective | None:
    text = line.lstrip()
    if not text.startswith(_DIRECTIVE):
        return None
    rest = text[len(_DIRECTIVE) :]
    # "#includefoo" and "#include_next" are not include directives
    if not rest or not rest[0].isspace():
        return None
    rest = rest.strip()
    if rest.startswith("<"):
        end = rest.find(">", 1)
        kind = "angle"
    elif rest.startswith('"'):
        end = rest.find('"', 1)
        kind = "quote"
    else:
        return None
    # Unterminated or empty literal: silently not an include
    if end <= 1:
        return None
    return IncludeDirective(literal=rest[1:end], kind=kind, lineno=lineno)


def extract_includes(file_path: str) -> list[IncludeDirective]:
    """
    Read ``file_path`` and return its include directives.

    The file is closed before this returns. A file that cannot be read
    yields an empty list and a warning.
    """
    try:
        with open(file_path, encoding="utf-8", errors="replace") as f:
            directives = list(parse_include_lines(f))
    except OSError as e:
        logger.warning("Cannot read %s: %s", file_path, e)
        return []
    logger.debug("%s: %d include(s)", file_path, len(directives))
    return directives

"""
Logging setup for the diagnostic stream.

Graph text is written to stdout; every diagnostic (missing directories,
unreadable files, unresolved includes, debug traces) goes through the
standard logging module to stderr so the two never mix.
"""

from __future__ import annotations

import logging
import sys

DIAGNOSTIC_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> None:
    """
    Configure root logging once for the whole process.

    Args:
        debug: Emit DEBUG traces (exclusions, per-file progress) when True,
            otherwise only warnings and errors.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=DIAGNOSTIC_FORMAT,
        stream=sys.stderr,
        force=True,
    )

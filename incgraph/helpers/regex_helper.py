"""Regular expression helpers for the exclusion patterns."""

from __future__ import annotations

import re

from incgraph.helpers.exceptions import ConfigValidationError


def compile_optional_pattern(pattern: str | None, option: str = "pattern") -> re.Pattern[str] | None:
    """
    Compile an exclusion pattern, or return None when no pattern is configured.

    Patterns are searched (not anchored), so ``test`` excludes any path
    containing ``test``.

    Raises:
        ConfigValidationError: If the pattern is not a valid regular expression
    """
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigValidationError(f"Invalid regular expression for {option}: {pattern!r} ({e})") from e

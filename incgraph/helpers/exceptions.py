"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.

Scanning and resolution problems are never raised: they are logged and the
offending file or include is skipped.
"""

from __future__ import annotations


class IncGraphError(Exception):
    """Base class for all incgraph errors."""


class ConfigError(IncGraphError):
    """Raised when the run configuration cannot be used."""


class ConfigFileError(ConfigError):
    """Raised when a configuration file is missing or cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when a configuration value is out of range or malformed."""

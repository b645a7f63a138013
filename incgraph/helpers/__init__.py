"""
Helpers package.
"""

from .exceptions import ConfigError, ConfigFileError, ConfigValidationError, IncGraphError
from .logging_helper import configure_logging
from .paths_helper import (
    directory_key,
    display_directory,
    display_name,
    module_key,
    normalize_path,
    remove_base_dir,
)
from .regex_helper import compile_optional_pattern

__all__ = [
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "IncGraphError",
    "compile_optional_pattern",
    "configure_logging",
    "directory_key",
    "display_directory",
    "display_name",
    "module_key",
    "normalize_path",
    "remove_base_dir",
]

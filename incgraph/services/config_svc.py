#!/usr/bin/env python3
# ======================================================================
#  Config Service - Run configuration composition
#  - Built-in defaults (platform include directories)
#  - Optional YAML config file
#  - Command-line overrides
#  - Validation and the human-readable debug dump
# ======================================================================

from __future__ import annotations

import logging
import os
import sys
from dataclasses import fields, replace
from pathlib import Path
from typing import Any

import yaml

from incgraph.helpers.dto.config_dto import (
    COLLAPSE_MODES,
    QUOTE_FILTERS,
    GraphConfig,
    NodeColorMap,
)
from incgraph.helpers.exceptions import ConfigFileError, ConfigValidationError
from incgraph.helpers.regex_helper import compile_optional_pattern

# System include directories searched after the source root and any
# user-supplied directories.
DEFAULT_INCLUDE_PATHS: tuple[str, ...] = ("/usr/include", "/usr/local/include") if sys.platform.startswith("linux") else ()

_BOOL_KEYS = {"ignore_missing", "groups", "keep_paths", "colorize_edges", "colorize_nodes", "debug"}
_INT_KEYS = {"saturation", "value"}
_STR_KEYS = {"src_path", "collapse_mode", "quote_filter"}
_OPTIONAL_STR_KEYS = {"exclude_files", "exclude_includes"}
_PATH_KEYS = {"src_path"}


class ConfigService:
    """
    Service for composing the run configuration.

    Sources, lowest priority first:
      1) Built-in defaults (current directory, platform include directories)
      2) YAML config file (keys are GraphConfig field names)
      3) Overrides dict (command-line flags)
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def default_config(self, use_system_includes: bool = True) -> GraphConfig:
        """Configuration used when nothing else is given."""
        return GraphConfig(
            src_path=os.getcwd(),
            include_paths=list(DEFAULT_INCLUDE_PATHS) if use_system_includes else [],
        )

    def compose(
        self,
        config_file: str | None = None,
        overrides: dict[str, Any] | None = None,
        extra_include_paths: list[str] | None = None,
        use_system_includes: bool = True,
    ) -> GraphConfig:
        """
        Build and validate the final configuration.

        Args:
            config_file: Optional YAML file to load over the defaults
            overrides: Field values that win over defaults and file
            extra_include_paths: Appended after the include paths from
                defaults and file (command-line ``--include``)
            use_system_includes: Start from the platform include directories

        Raises:
            ConfigFileError: If the config file is missing or malformed
            ConfigValidationError: If a value is out of range
        """
        config = self.default_config(use_system_includes)
        if config_file:
            config = self.load_file(config_file, config)
        if overrides:
            config = self.apply_overrides(config, overrides)
        if extra_include_paths:
            config = replace(config, include_paths=[*config.include_paths, *extra_include_paths])
        return self.validate(config)

    def load_file(self, path: str, base: GraphConfig | None = None) -> GraphConfig:
        """
        Load a YAML config file on top of ``base``.

        Relative ``src_path`` and ``include_paths`` entries are resolved
        against the directory holding the file. An ``include_paths`` key
        replaces the base list rather than extending it.

        Raises:
            ConfigFileError: If the file does not exist or is not a YAML mapping
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise ConfigFileError(f"Config file {path} does not exist")

        try:
            with file_path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigFileError(f"Cannot load config file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigFileError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

        self._logger.debug("Loaded config file %s", file_path)
        return self.apply_overrides(base or GraphConfig(), data, relative_to=file_path.resolve().parent)

    def apply_overrides(
        self,
        config: GraphConfig,
        values: dict[str, Any],
        relative_to: Path | None = None,
    ) -> GraphConfig:
        """
        Return a copy of ``config`` with ``values`` applied.

        Raises:
            ConfigFileError: On unknown keys or values of the wrong type
        """
        known = {f.name for f in fields(GraphConfig)}
        changes: dict[str, Any] = {}

        for key, raw in values.items():
            if key not in known:
                raise ConfigFileError(f"Unknown configuration key: {key}")
            if raw is None and key not in _OPTIONAL_STR_KEYS:
                continue
            changes[key] = self._coerce(key, raw, relative_to)

        return replace(config, **changes)

    def validate(self, config: GraphConfig) -> GraphConfig:
        """
        Check enum values, channel ranges, regexes and the node color table.

        Returns the same config for chaining.

        Raises:
            ConfigValidationError: On the first invalid value
        """
        if config.collapse_mode not in COLLAPSE_MODES:
            raise ConfigValidationError(
                f"Unknown merge mode {config.collapse_mode!r} (expected one of {', '.join(COLLAPSE_MODES)})"
            )
        if config.quote_filter not in QUOTE_FILTERS:
            raise ConfigValidationError(
                f"Unknown quote type {config.quote_filter!r} (expected one of {', '.join(QUOTE_FILTERS)})"
            )
        for name in ("saturation", "value"):
            channel = getattr(config, name)
            if not 0 <= channel <= 255:
                raise ConfigValidationError(f"{name} must be between 0 and 255, got {channel}")

        compile_optional_pattern(config.exclude_files, "exclude_files")
        compile_optional_pattern(config.exclude_includes, "exclude_includes")

        try:
            NodeColorMap.from_pairs(config.node_colors)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(f"Invalid node color table: {e}") from e

        return config

    def describe(self, config: GraphConfig) -> str:
        """Human-readable summary of the configuration, shown in debug mode."""
        yes_no = {True: "yes", False: "no"}
        lines = [
            f"Source code directory: {config.src_path}",
            f"Merge mode: {config.collapse_mode}",
            f"Quote types: {config.quote_filter}",
            f"Create groups: {yes_no[config.groups]}",
            f"Display relative paths: {yes_no[config.keep_paths]}",
            f"Ignore missing includes: {yes_no[config.ignore_missing]}",
        ]
        if config.exclude_files:
            lines.append(f"Exclude: {config.exclude_files}")
        if config.exclude_includes:
            lines.append(f"Exclude includes: {config.exclude_includes}")
        if config.include_paths:
            lines.append("Include directories: " + "\n\t".join(config.include_paths))
        if config.colorize_edges:
            lines.append(f"Colorize edges: yes (saturation {config.saturation}, value {config.value})")
        if config.colorize_nodes:
            table = ", ".join(f"{threshold}={color}" for threshold, color in config.node_colors)
            lines.append(f"Colorize nodes: yes ({table})")
        return "\n".join(lines)

    # ----------------------------------------------------------------------
    # Private coercion logic
    # ----------------------------------------------------------------------

    def _coerce(self, key: str, raw: Any, relative_to: Path | None) -> Any:
        if key in _BOOL_KEYS:
            if not isinstance(raw, bool):
                raise ConfigFileError(f"{key} must be true or false, got {raw!r}")
            return raw

        if key in _INT_KEYS:
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise ConfigFileError(f"{key} must be an integer, got {raw!r}")
            return raw

        if key in _STR_KEYS or key in _OPTIONAL_STR_KEYS:
            if raw is None:
                return None
            if not isinstance(raw, str):
                raise ConfigFileError(f"{key} must be a string, got {raw!r}")
            if key in _PATH_KEYS:
                return self._resolve(raw, relative_to)
            return raw

        if key == "include_paths":
            if isinstance(raw, str):
                raw = [part for part in raw.split(",") if part]
            if not isinstance(raw, list) or not all(isinstance(p, str) for p in raw):
                raise ConfigFileError(f"include_paths must be a list of directories, got {raw!r}")
            return [self._resolve(p, relative_to) for p in raw]

        if key == "node_colors":
            return self._coerce_node_colors(raw)

        raise ConfigFileError(f"Unsupported configuration key: {key}")

    def _coerce_node_colors(self, raw: Any) -> list[tuple[int, str]]:
        # Accepts {threshold: color} or [[threshold, color], ...]
        pairs = list(raw.items()) if isinstance(raw, dict) else raw
        if not isinstance(pairs, list | tuple):
            raise ConfigFileError(f"node_colors must be a mapping or a list of pairs, got {raw!r}")

        result: list[tuple[int, str]] = []
        for pair in pairs:
            if not isinstance(pair, list | tuple) or len(pair) != 2:
                raise ConfigFileError(f"node_colors entry must be a threshold/color pair, got {pair!r}")
            threshold, color = pair
            try:
                result.append((int(threshold), str(color)))
            except (TypeError, ValueError) as e:
                raise ConfigFileError(f"node_colors threshold must be an integer, got {threshold!r}") from e
        return result

    @staticmethod
    def _resolve(path: str, relative_to: Path | None) -> str:
        if relative_to is None or os.path.isabs(path):
            return path
        return str(relative_to / path)

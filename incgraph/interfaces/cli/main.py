#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and run dispatch.
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from incgraph.__version__ import __version__
from incgraph.helpers.dto.config_dto import (
    COLLAPSE_MODES,
    DEFAULT_SATURATION,
    DEFAULT_VALUE,
    QUOTE_FILTERS,
    GraphConfig,
)
from incgraph.helpers.exceptions import ConfigError
from incgraph.helpers.logging_helper import configure_logging
from incgraph.interfaces.cli.cli_ui import InfoPanel, print_error, print_success
from incgraph.services.config_svc import ConfigService
from incgraph.workflows.render_graph_wf import run_graph_pipeline

# argparse dest -> GraphConfig field, for flags that override the config
_OVERRIDE_FIELDS = {
    "src": "src_path",
    "merge": "collapse_mode",
    "quotetypes": "quote_filter",
    "exclude": "exclude_files",
    "exclude_include": "exclude_includes",
    "ignoremissing": "ignore_missing",
    "groups": "groups",
    "paths": "keep_paths",
    "colorize": "colorize_edges",
    "saturation": "saturation",
    "value": "value",
    "color_nodes": "colorize_nodes",
    "node_color": "node_colors",
    "debug": "debug",
}


def parse_node_color(text: str) -> tuple[int, str]:
    """Parse ``THRESHOLD:COLOR`` (e.g. ``3:yellow`` or ``5:#FF0000``)."""
    threshold, sep, color = text.partition(":")
    if not sep or not color:
        raise argparse.ArgumentTypeError(f"expected THRESHOLD:COLOR, got {text!r}")
    try:
        value = int(threshold)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"threshold must be an integer, got {threshold!r}") from e
    if value < 0:
        raise argparse.ArgumentTypeError(f"threshold must be non-negative, got {value}")
    return value, color


def parse_channel(text: str) -> int:
    """Parse a 0-255 color channel."""
    try:
        value = int(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from e
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"must be between 0 and 255, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    p = argparse.ArgumentParser(
        prog="incgraph",
        description="Graphs #include relationships between every C/C++ source and header file\n"
        "under a directory, as graphviz DOT text on stdout.",
        epilog="Examples:\n"
        "  incgraph --src src | dot -Tsvg -o deps.svg     # File-level graph\n"
        "  incgraph --merge module --groups               # Merge .c/.h pairs, cluster by directory\n"
        "  incgraph --include include,third_party/inc     # Extra include search paths\n"
        "  incgraph --quotetypes quote --colorize         # Only \"user\" headers, colored edges\n"
        "  incgraph --color-nodes --node-color 10:red     # Highlight heavily included files\n"
        "  incgraph --config incgraph.yaml --debug        # Load options from a YAML file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Source selection
    p.add_argument("--src", metavar="DIR", help="path to the source code (default: current directory)")
    p.add_argument(
        "--include",
        action="append",
        metavar="DIRS",
        help="comma separated list of include search paths (repeatable)",
    )
    p.add_argument(
        "--no-system-includes",
        action="store_true",
        help="do not search the platform include directories (/usr/include, /usr/local/include)",
    )
    p.add_argument("--exclude", metavar="REGEX", help="regular expression of file paths to ignore, e.g. test harnesses")
    p.add_argument("--exclude-include", metavar="REGEX", help="regular expression of #include names to ignore")
    p.add_argument(
        "--quotetypes",
        choices=QUOTE_FILTERS,
        help="parse headers included by: both (default), angle (<>) only, or quote (\"\") only",
    )
    p.add_argument(
        "--ignoremissing",
        action="store_true",
        default=None,
        help="treat missing headers as generated files and keep them, named as written in the #include",
    )

    # Layout
    p.add_argument(
        "--merge",
        choices=COLLAPSE_MODES,
        help="granularity: file (default), module (merge .c/.h pairs) or directory",
    )
    p.add_argument("--groups", action="store_true", default=None, help="cluster files or modules into directory groups")
    p.add_argument("--paths", action="store_true", default=None, help="keep relative paths in displayed filenames")

    # Colors
    p.add_argument("--colorize", action="store_true", default=None, help="give every edge group a distinct color")
    p.add_argument(
        "--saturation",
        type=parse_channel,
        metavar="0-255",
        help=f"edge color saturation (default: {DEFAULT_SATURATION})",
    )
    p.add_argument(
        "--value",
        type=parse_channel,
        metavar="0-255",
        help=f"edge color brightness (default: {DEFAULT_VALUE})",
    )
    p.add_argument(
        "--color-nodes",
        action="store_true",
        default=None,
        help="fill nodes by how often they are referenced",
    )
    p.add_argument(
        "--node-color",
        action="append",
        type=parse_node_color,
        metavar="N:COLOR",
        help="node color for N or more references (repeatable, replaces the default table)",
    )

    # Run
    p.add_argument("--config", metavar="FILE", help="YAML file with configuration defaults")
    p.add_argument("-o", "--output", metavar="FILE", help="write the graph to FILE instead of stdout")
    p.add_argument("--debug", action="store_true", default=None, help="display configuration and debug traces")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return p


def overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the GraphConfig fields explicitly set on the command line."""
    overrides: dict[str, Any] = {}
    for dest, field_name in _OVERRIDE_FIELDS.items():
        value = getattr(args, dest, None)
        if value is not None:
            overrides[field_name] = value
    return overrides


def include_paths_from_args(args: argparse.Namespace) -> list[str]:
    """Flatten repeated, comma separated ``--include`` values."""
    paths: list[str] = []
    for value in args.include or []:
        paths.extend(part for part in value.split(",") if part)
    return paths


def write_graph(dot: str, output: str | None) -> None:
    """Write the graph text to ``output`` or stdout."""
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(dot)
        print_success(f"Graph written to {output}")
    else:
        sys.stdout.write(dot)
        sys.stdout.flush()


def run(config: GraphConfig, output: str | None = None) -> int:
    """Scan, render and write one graph."""
    dot = run_graph_pipeline(config)
    write_graph(dot, output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(bool(args.debug))

    service = ConfigService()
    try:
        config = service.compose(
            config_file=args.config,
            overrides=overrides_from_args(args),
            extra_include_paths=include_paths_from_args(args),
            use_system_includes=not args.no_system_includes,
        )
    except ConfigError as e:
        print_error(str(e))
        return 1

    # Debug may come from the config file
    if config.debug:
        configure_logging(True)
        InfoPanel.show("Configuration", service.describe(config))

    try:
        return run(config, args.output)
    except ConfigError as e:
        print_error(str(e))
        return 1
    except OSError as e:
        print_error(f"Cannot write graph: {e}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

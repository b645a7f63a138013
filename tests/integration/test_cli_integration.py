"""
Integration tests for the command-line interface.

Runs ``main()`` in-process against real source trees; one test goes
through ``python -m incgraph`` to cover the module entry point.
"""

import subprocess
import sys
from pathlib import Path

import pytest

from incgraph.__version__ import __version__
from incgraph.interfaces.cli.main import build_parser, include_paths_from_args, main, overrides_from_args

pytestmark = [pytest.mark.integration]

PROJECT_ROOT = Path(__file__).parent.parent.parent


def run_cli(*args):
    """
    Run the CLI as a subprocess and return the result.

    Args:
        *args: Command arguments

    Returns:
        subprocess.CompletedProcess
    """
    cmd = [sys.executable, "-m", "incgraph", *args]
    return subprocess.run(cmd, capture_output=True, text=True, cwd=str(PROJECT_ROOT))


class TestCLIGraphOutput:
    """Graph on stdout, diagnostics on stderr."""

    def test_default_run(self, two_file_tree, capsys):
        code = main(["--src", str(two_file_tree), "--no-system-includes"])

        out, err = capsys.readouterr()
        assert code == 0
        assert out.startswith('digraph "source tree" {\n')
        assert '    "proj/main.cpp" -> { "proj/util.h" };\n' in out
        assert out.endswith("}\n")
        assert err == ""

    def test_unresolved_include_goes_to_stderr(self, make_tree, capsys):
        root = make_tree({"a.c": '#include "missing_header_abc.h"\n'})

        code = main(["--src", str(root), "--no-system-includes"])

        out, err = capsys.readouterr()
        assert code == 0
        assert "missing_header_abc.h" in err
        assert "missing_header_abc.h" not in out
        assert "->" not in out

    def test_ignoremissing(self, make_tree, capsys):
        root = make_tree({"a.c": '#include "missing_header_abc.h"\n'})

        main(["--src", str(root), "--no-system-includes", "--ignoremissing"])

        out, err = capsys.readouterr()
        assert '"proj/a.c" -> { "missing_header_abc.h" };' in out
        assert err == ""

    def test_merge_groups_and_colors(self, make_tree, capsys):
        root = make_tree(
            {
                "src/x.c": '#include "x.h"\n#include "../inc/y.h"\n',
                "src/x.h": "",
                "inc/y.h": "",
            }
        )

        code = main(
            [
                "--src",
                str(root),
                "--no-system-includes",
                "--merge",
                "module",
                "--groups",
                "--colorize",
                "--color-nodes",
                "--node-color",
                "1:green",
            ]
        )

        out, _err = capsys.readouterr()
        assert code == 0
        assert 'subgraph "cluster_proj_src" { label="proj/src"; "x"; }' in out
        assert 'subgraph "cluster_proj_inc" { label="proj/inc"; "y"; }' in out
        assert '"x" [style=filled, fillcolor="green"];' in out
        assert '"x" -> { "y" } [color="#' in out

    def test_include_option(self, make_tree, tmp_path, capsys):
        root = make_tree({"main.c": "#include <api.h>\n"})
        inc = tmp_path / "vendor"
        inc.mkdir()
        (inc / "api.h").write_text("")

        main(["--src", str(root), "--no-system-includes", "--include", f"{tmp_path / 'nothing'},{inc}"])

        out, err = capsys.readouterr()
        assert f'"proj/main.c" -> {{ "{inc / "api.h"}" }};' in out
        assert "Include directory does not exist" in err

    def test_output_file(self, two_file_tree, tmp_path, capsys):
        target = tmp_path / "deps.dot"

        code = main(["--src", str(two_file_tree), "--no-system-includes", "-o", str(target)])

        out, err = capsys.readouterr()
        assert code == 0
        assert out == ""
        assert '"proj/main.cpp" -> { "proj/util.h" };' in target.read_text(encoding="utf-8")
        assert "Graph written to" in err

    def test_debug_shows_configuration(self, two_file_tree, capsys):
        main(["--src", str(two_file_tree), "--no-system-includes", "--debug"])

        out, err = capsys.readouterr()
        assert "Source code directory" in err
        assert "Merge mode: file" in err
        assert "Source code directory" not in out


class TestCLIConfiguration:
    """Config file handling and argument errors."""

    def test_config_file(self, two_file_tree, tmp_path, capsys):
        config = tmp_path / "incgraph.yaml"
        config.write_text(f"src_path: {two_file_tree}\ninclude_paths: []\ngroups: true\n", encoding="utf-8")

        code = main(["--config", str(config)])

        out, _err = capsys.readouterr()
        assert code == 0
        assert '"main.cpp" -> { "util.h" };' in out

    def test_missing_config_file(self, tmp_path, capsys):
        code = main(["--config", str(tmp_path / "absent.yaml")])

        out, err = capsys.readouterr()
        assert code == 1
        assert "does not exist" in err
        assert out == ""

    def test_invalid_exclude_pattern(self, two_file_tree, capsys):
        code = main(["--src", str(two_file_tree), "--exclude", "(oops"])

        _out, err = capsys.readouterr()
        assert code == 1
        assert "Invalid regular expression" in err

    @pytest.mark.parametrize(
        "args",
        [
            ["--merge", "package"],
            ["--quotetypes", "single"],
            ["--saturation", "300"],
            ["--node-color", "red"],
            ["--node-color", "-1:red"],
        ],
    )
    def test_bad_arguments_exit_2(self, args, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(args)
        assert exc_info.value.code == 2

    def test_overrides_only_include_given_flags(self):
        args = build_parser().parse_args(["--merge", "directory", "--groups", "--node-color", "3:red"])

        assert overrides_from_args(args) == {
            "collapse_mode": "directory",
            "groups": True,
            "node_colors": [(3, "red")],
        }

    def test_include_flags_flattened(self):
        args = build_parser().parse_args(["--include", "a,b", "--include", "c,"])
        assert include_paths_from_args(args) == ["a", "b", "c"]


class TestModuleEntryPoint:
    """``python -m incgraph``."""

    def test_version(self):
        result = run_cli("--version")
        assert result.returncode == 0
        assert __version__ in result.stdout

    def test_help(self):
        result = run_cli("--help")
        assert result.returncode == 0
        assert "--merge" in result.stdout

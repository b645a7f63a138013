"""
Pytest fixtures and configuration for the test suite.

Source trees are built on disk under ``tmp_path``; nothing is mocked except
where a test needs an unreadable file.
"""

import logging
import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Add project root to path so tests can import incgraph without installing
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# === SOURCE TREE FIXTURES ===


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """
    Return a factory that writes ``{relative_path: content}`` under ``tmp_path/proj``.

    The factory returns the project root.
    """

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "proj"
        root.mkdir(exist_ok=True)
        for rel_path, content in files.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def two_file_tree(make_tree) -> Path:
    """``main.cpp`` including ``util.h`` from the same directory."""
    return make_tree(
        {
            "main.cpp": '#include "util.h"\n\nint main() { return 0; }\n',
            "util.h": "#pragma once\nint util();\n",
        }
    )


# === LOGGING ISOLATION ===


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """Undo ``logging.basicConfig(force=True)`` calls made by the CLI under test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast tests of a single helper, component or workflow")
    config.addinivalue_line("markers", "integration: end-to-end runs of the command-line interface")

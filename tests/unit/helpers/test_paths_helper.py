"""Unit tests for node identifier and display name helpers."""

import os

import pytest

from incgraph.helpers.paths_helper import (
    directory_key,
    display_directory,
    display_name,
    module_key,
    normalize_path,
    remove_base_dir,
)

BASE = "/home/dev/proj"


@pytest.mark.unit
class TestRemoveBaseDir:
    """Display names start at the tree root directory name."""

    def test_strips_parent_of_base_dir(self):
        assert remove_base_dir("/home/dev/proj/src/main.c", BASE) == "proj/src/main.c"

    def test_base_dir_itself(self):
        assert remove_base_dir("/home/dev/proj", BASE) == "proj"

    def test_path_outside_tree_unchanged(self):
        assert remove_base_dir("/usr/include/stdio.h", BASE) == "/usr/include/stdio.h"

    def test_placeholder_literal_unchanged(self):
        assert remove_base_dir("generated/config.h", BASE) == "generated/config.h"

    def test_empty_base_dir_is_noop(self):
        assert remove_base_dir("/a/b.c", "") == "/a/b.c"


@pytest.mark.unit
class TestDisplayName:
    """Grouping without path-keeping reduces names to the final segment."""

    def test_default_keeps_relative_path(self):
        assert display_name("/home/dev/proj/src/a.c", BASE) == "proj/src/a.c"

    def test_groups_reduce_to_basename(self):
        assert display_name("/home/dev/proj/src/a.c", BASE, groups=True) == "a.c"

    def test_groups_with_keep_paths(self):
        assert display_name("/home/dev/proj/src/a.c", BASE, groups=True, keep_paths=True) == "proj/src/a.c"

    def test_keep_paths_without_groups(self):
        assert display_name("/home/dev/proj/src/a.c", BASE, keep_paths=True) == "proj/src/a.c"

    def test_display_directory(self):
        assert display_directory("/home/dev/proj/src/a.c", BASE) == "proj/src"


@pytest.mark.unit
class TestCollapseKeys:
    """Module and directory keys used by the collapser."""

    def test_module_key_strips_extension(self):
        assert module_key("/p/d/x.cpp") == "/p/d/x"
        assert module_key("/p/d/x.h") == "/p/d/x"

    def test_module_key_only_strips_final_extension(self):
        assert module_key("/p/d.v2/x.tar.h") == "/p/d.v2/x.tar"

    def test_module_key_bare_literal(self):
        assert module_key("gen.h") == "gen"

    def test_directory_key(self):
        assert directory_key("/p/d/x.cpp") == "/p/d"

    def test_directory_key_bare_literal(self):
        assert directory_key("gen.h") == "."

    def test_normalize_path_is_absolute_and_clean(self):
        result = normalize_path("a/../b/./c.h")
        assert os.path.isabs(result)
        assert result.endswith(os.path.join("b", "c.h"))
        assert ".." not in result

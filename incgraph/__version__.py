"""Version information for incgraph."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to CLI flags or output grammar
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.0 - Node importance coloring and YAML config files
#         - --color-nodes with threshold table (--node-color N:COLOR)
#         - --config loads a YAML mapping of GraphConfig fields
#         - Edge colors are always zero-padded #rrggbb
#         - Symlink cycles in the source tree are detected and skipped
# 0.1.0 - Initial release
#         - Recursive scan, include resolution against search path
#         - file/module/directory merge modes, directory clusters
#         - Golden-angle edge colorization

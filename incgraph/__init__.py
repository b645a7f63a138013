"""
incgraph - graph #include relationships of a C/C++ source tree with graphviz.
"""

from incgraph.__version__ import __version__

__all__ = ["__version__"]

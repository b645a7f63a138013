"""
Graph domain DTOs.

Rules:
- Import only stdlib and typing (no incgraph.* imports)
- Pure data structures only (no I/O)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal

QuoteKind = Literal["angle", "quote"]


@dataclass(frozen=True)
class IncludeDirective:
    """One ``#include`` line: the literal between the delimiters and its quote kind."""

    literal: str
    kind: QuoteKind
    lineno: int = 0


@dataclass
class DependencyGraph:
    """
    Ordered multimap: source identifier -> targets it includes.

    Insertion order of sources and of targets under a source is preserved;
    it reflects scan order and drives the edge color sequence. No implicit
    deduplication: the same edge added twice is stored twice.
    """

    edges: dict[str, list[str]] = field(default_factory=dict)

    def add_edge(self, source: str, target: str) -> None:
        """Append ``source -> target``."""
        self.edges.setdefault(source, []).append(target)

    def has_edge(self, source: str, target: str) -> bool:
        return target in self.edges.get(source, ())

    def sources(self) -> list[str]:
        return list(self.edges)

    def targets(self, source: str) -> list[str]:
        return list(self.edges.get(source, ()))

    def iter_edges(self) -> Iterator[tuple[str, str]]:
        for source, targets in self.edges.items():
            for target in targets:
                yield source, target

    def nodes(self) -> list[str]:
        """Distinct identifiers appearing as source or target, in walk order."""
        seen: dict[str, None] = {}
        for source, targets in self.edges.items():
            seen.setdefault(source, None)
            for target in targets:
                seen.setdefault(target, None)
        return list(seen)

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self.edges.values())


@dataclass
class BuildResult:
    """Raw graph plus counters collected while scanning."""

    graph: DependencyGraph = field(default_factory=DependencyGraph)
    files_scanned: int = 0
    includes_seen: int = 0
    includes_skipped: int = 0
    unresolved: int = 0

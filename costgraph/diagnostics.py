"""Non-fatal topology diagnostics reported by the graph store.

Conflicts such as re-adding an existing node or linking to a node that does
not exist do not abort a mutation. The store records them in a
``DiagnosticSink`` instead, so callers can inspect them after a bulk load and
tests can assert on them. Every recorded diagnostic is also logged at WARNING.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Hashable, Iterator, List, Optional

from costgraph.logging import get_logger

logger = get_logger(__name__)


class DiagnosticKind(IntEnum):
    """Kinds of non-fatal conditions raised by graph mutations and queries."""

    #: ``add_node`` was called for a node that already exists.
    NODE_EXISTS = 1
    #: A node referenced by ``add_links`` or ``edges_of`` is not in the graph.
    NODE_NOT_FOUND = 2


@dataclass(frozen=True)
class Diagnostic:
    """A single recorded condition.

    Attributes:
        kind: What went wrong.
        node: The node the condition refers to.
        message: Human-readable description.
    """

    kind: DiagnosticKind
    node: Hashable
    message: str


class DiagnosticSink:
    """Ordered collection of diagnostics with logging on record."""

    def __init__(self, log: bool = True) -> None:
        self._items: List[Diagnostic] = []
        self._log = log

    def report(self, kind: DiagnosticKind, node: Hashable, message: str) -> Diagnostic:
        """Record a diagnostic and return it."""
        diagnostic = Diagnostic(kind=kind, node=node, message=message)
        self._items.append(diagnostic)
        if self._log:
            logger.warning(message)
        return diagnostic

    def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
        return [d for d in self._items if d.kind == kind]

    def last(self) -> Optional[Diagnostic]:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

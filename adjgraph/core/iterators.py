"""
Fail-fast iterators over a :class:`~adjgraph.core.graph.Graph`.

Each iterator takes a :class:`~adjgraph.core._state.Snapshot` of the graph
version when it is created and validates it on every ``has_next()`` and
``__next__()``. Any structural change in between (vertex add/remove, edge
add/replace/remove) makes the next step raise
:class:`~adjgraph.core.errors.ConcurrentModificationError`.

Iterators are read-only: removal goes through ``Graph.remove_edge`` /
``Graph.remove_vertex``, which in turn invalidates every live iterator.
"""
from __future__ import annotations

from .errors import NoSuchElementError


class _FailFastIterator:
    def __init__(self, graph):
        self._G = graph
        self.snapshot = graph._state.snapshot()

    def __iter__(self):
        return self

    def has_next(self) -> bool:
        self.snapshot.check()
        return self._has_next()

    def __next__(self):
        if not self.has_next():
            raise NoSuchElementError()
        return self._advance()

    # subclasses
    def _has_next(self) -> bool:
        raise NotImplementedError

    def _advance(self):
        raise NotImplementedError


class VertexIterator(_FailFastIterator):
    """Occupied slots in ascending order."""

    def __init__(self, graph):
        super().__init__(graph)
        self._pos = 0
        self._vertex = 0

    def _has_next(self):
        return self._pos < self._G._num_vertices

    def _advance(self):
        names = self._G._names
        while names[self._vertex] is None:
            self._vertex += 1
        self._pos += 1
        v = self._vertex
        self._vertex += 1
        return v


class EdgeIterator(_FailFastIterator):
    """All edges: ascending source slot, then list order."""

    def __init__(self, graph):
        super().__init__(graph)
        self._pos = 0
        self._vertex = 0
        self._idx = 0

    def _has_next(self):
        return self._pos < self._G._num_edges

    def _advance(self):
        adjacency = self._G._adjacency
        while self._idx >= len(adjacency[self._vertex]):
            self._vertex += 1
            self._idx = 0
        e = adjacency[self._vertex][self._idx]
        self._idx += 1
        self._pos += 1
        return e


class EdgesFromIterator(_FailFastIterator):
    """Outgoing edges of one vertex in list order.

    For an invalid vertex the iterator is empty, but it still fails fast.
    """

    def __init__(self, graph, vertex):
        super().__init__(graph)
        self.vertex = vertex
        self._edges = graph._adjacency[vertex] if graph.is_valid(vertex) else ()
        self._idx = 0

    def _has_next(self):
        return self._idx < len(self._edges)

    def _advance(self):
        e = self._edges[self._idx]
        self._idx += 1
        return e


__all__ = ["VertexIterator", "EdgeIterator", "EdgesFromIterator"]

"""Undirected index graph backed by sorted adjacency lists."""

from bisect import bisect_left, insort
from collections.abc import Iterable
from typing import TextIO

from .utils import InvalidVertexError, read_vert_and_edge_counts


def _find(items: list[int], x: int) -> int | None:
    i = bisect_left(items, x)
    if i < len(items) and items[i] == x:
        return i
    return None


class Graph:
    """Undirected graph over integer vertices ``0..vert_count-1``.

    Every edge is stored in both endpoints' adjacency lists and counts twice
    towards ``edge_count``.
    """

    def __init__(self, vert_count: int) -> None:
        if vert_count < 0:
            raise ValueError("vert_count must be non-negative")
        self._adj: list[list[int]] = [[] for _ in range(vert_count)]
        self._edge_count = 0

    def __repr__(self) -> str:
        return f"Graph(adj={self._adj!r}, edge_count={self._edge_count})"

    def vert_count(self) -> int:
        """Return the number of vertices."""
        return len(self._adj)

    def edge_count(self) -> int:
        """Return the number of stored edge entries."""
        return self._edge_count

    def adj(self, v: int) -> list[int]:
        """Return a copy of vertex ``v``'s sorted adjacency list."""
        self.validate_vertex(v)
        return list(self._adj[v])

    def degree(self, v: int) -> int:
        """Return the number of edges touching vertex ``v``."""
        self.validate_vertex(v)
        return len(self._adj[v])

    def add_vertex(self, v: int) -> int:
        """Grow the graph so that ``v`` is a valid vertex, and return ``v``."""
        if v < 0:
            raise InvalidVertexError(v, max(len(self._adj) - 1, 0))
        missing = v + 1 - len(self._adj)
        if missing > 0:
            self._adj.extend([] for _ in range(missing))
        return v

    def has_vertex(self, v: int) -> bool:
        """Return whether ``v`` is a vertex of the graph."""
        return 0 <= v < len(self._adj)

    def remove_vertex(self, v: int) -> "Graph":
        """Remove vertex ``v`` and its edges; higher vertices shift down by one."""
        self.validate_vertex(v)
        for w in list(self._adj[v]):
            if w != v or v in self._adj[v]:
                self.remove_edge(v, w)
        del self._adj[v]
        for i, neighbours in enumerate(self._adj):
            self._adj[i] = [x - 1 if x > v else x for x in neighbours]
        return self

    def add_edge(self, v: int, w: int) -> "Graph":
        """Add the undirected edge ``v - w``."""
        self.validate_vertex(v)
        self.validate_vertex(w)
        insort(self._adj[v], w)
        insort(self._adj[w], v)
        self._edge_count += 2
        return self

    def has_edge(self, v: int, w: int) -> bool:
        """Return whether the edge ``v -> w`` exists."""
        if not (self.has_vertex(v) and self.has_vertex(w)):
            return False
        return _find(self._adj[v], w) is not None

    def remove_edge(self, v: int, w: int) -> int:
        """Remove edge ``v - w``; return the position ``v`` held in ``w``'s list."""
        self.validate_vertex(v)
        self.validate_vertex(w)
        idx_w = _find(self._adj[v], w)
        if idx_w is None:
            raise ValueError(f"Edge {v} -> {w} is not in graph")
        del self._adj[v][idx_w]
        idx_v = _find(self._adj[w], v)
        if idx_v is None:
            raise ValueError(f"Edge {w} -> {v} is not in graph")
        del self._adj[w][idx_v]
        self._edge_count -= 2
        return idx_v

    def validate_vertex(self, v: int) -> int:
        """Return ``v`` if it is a valid vertex, else raise ``InvalidVertexError``."""
        size = len(self._adj)
        if v < 0 or v >= size:
            raise InvalidVertexError(v, max(size - 1, 0))
        return v

    def digest_lines(self, lines: Iterable[str]) -> "Graph":
        """Add one edge per line, each line holding ``v w``."""
        for line in lines:
            tokens = line.split()
            try:
                verts = [int(t) for t in tokens]
            except ValueError:
                raise ValueError(f"Malformed edge line: {line!r}") from None
            if len(verts) < 2:
                raise ValueError(f"Malformed edge line: {line!r}")
            self.add_edge(verts[0], verts[1])
        return self

    @classmethod
    def from_reader(cls, reader: TextIO) -> "Graph":
        """Build a graph from text: vertex count, edge count, then edge lines."""
        vert_count, _ = read_vert_and_edge_counts(reader)
        graph = cls(vert_count)
        graph.digest_lines(reader)
        return graph
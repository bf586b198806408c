"""Directed index graph backed by sorted adjacency lists."""

from bisect import insort
from collections.abc import Iterable
from typing import TextIO

from .utils import InvalidVertexError, read_vert_and_edge_counts


class Digraph:
    """Directed graph over integer vertices ``0..vert_count-1``."""

    def __init__(self, vert_count: int) -> None:
        if vert_count < 0:
            raise ValueError("vert_count must be non-negative")
        self._adj: list[list[int]] = [[] for _ in range(vert_count)]
        self._in_degree: list[int] = [0] * vert_count
        self._edge_count = 0

    def __repr__(self) -> str:
        return (
            f"Digraph(adj={self._adj!r}, in_degree={self._in_degree!r}, "
            f"edge_count={self._edge_count})"
        )

    def vert_count(self) -> int:
        """Return the number of vertices."""
        return len(self._adj)

    def edge_count(self) -> int:
        """Return the number of edges."""
        return self._edge_count

    def adj(self, v: int) -> list[int]:
        """Return a copy of vertex ``v``'s sorted adjacency list."""
        self.validate_vertex(v)
        return list(self._adj[v])

    def outdegree(self, v: int) -> int:
        """Return the number of edges leaving vertex ``v``."""
        self.validate_vertex(v)
        return len(self._adj[v])

    def indegree(self, v: int) -> int:
        """Return the number of edges pointing to vertex ``v``."""
        self.validate_vertex(v)
        return self._in_degree[v]

    def add_vertex(self, v: int) -> int:
        """Grow the graph so that ``v`` is a valid vertex, and return ``v``."""
        if v < 0:
            raise InvalidVertexError(v, max(len(self._adj) - 1, 0))
        missing = v + 1 - len(self._adj)
        if missing > 0:
            self._adj.extend([] for _ in range(missing))
            self._in_degree.extend([0] * missing)
        return v

    def add_edge(self, v: int, w: int) -> "Digraph":
        """Add the directed edge ``v -> w``."""
        self.validate_vertex(v)
        self.validate_vertex(w)
        insort(self._adj[v], w)
        self._edge_count += 1
        self._in_degree[w] += 1
        return self

    def validate_vertex(self, v: int) -> "Digraph":
        """Return the graph if ``v`` is a valid vertex, else raise ``InvalidVertexError``."""
        size = len(self._adj)
        if v < 0 or v >= size:
            raise InvalidVertexError(v, max(size - 1, 0))
        return self

    def reverse(self) -> "Digraph":
        """Return a new digraph with every edge pointing the other way."""
        out = Digraph(self.vert_count())
        for v, neighbours in enumerate(self._adj):
            for w in neighbours:
                out.add_edge(w, v)
        return out

    def digest_lines(self, lines: Iterable[str]) -> "Digraph":
        """Add one edge per line, each line holding ``v w``."""
        for line in lines:
            try:
                verts = [int(t) for t in line.split()]
            except ValueError:
                raise ValueError(f"Malformed edge line: {line!r}") from None
            if len(verts) < 2:
                raise ValueError(f"Malformed edge line: {line!r}")
            self.add_edge(verts[0], verts[1])
        return self

    @classmethod
    def from_reader(cls, reader: TextIO) -> "Digraph":
        """Build a digraph from text: vertex count, edge count, then edge lines."""
        vert_count, _ = read_vert_and_edge_counts(reader)
        graph = cls(vert_count)
        graph.digest_lines(reader)
        return graph
"""Directed graph whose vertices are named by strings."""

from collections.abc import Iterable
from typing import TextIO

from .digraph import Digraph


class DisymGraph:
    """Directed symbol graph backed by an index :class:`Digraph`."""

    def __init__(self) -> None:
        self._vertices: list[str] = []
        self._index: dict[str, int] = {}
        self._graph = Digraph(0)

    def __repr__(self) -> str:
        return f"DisymGraph(vertices={self._vertices!r}, graph={self._graph!r})"

    def vert_count(self) -> int:
        """Return the number of vertices."""
        return self._graph.vert_count()

    def edge_count(self) -> int:
        """Return the number of edges."""
        return self._graph.edge_count()

    def outdegree(self, n: int) -> int:
        """Return the number of edges leaving vertex index ``n``."""
        return self._graph.outdegree(n)

    def indegree(self, n: int) -> int:
        """Return the number of edges pointing to vertex index ``n``."""
        return self._graph.indegree(n)

    def adj(self, symbol_name: str) -> list[str] | None:
        """Return the symbols adjacent to ``symbol_name``, or ``None`` if absent."""
        indices = self.adj_indices(symbol_name)
        if indices is None:
            return None
        return [self._vertices[i] for i in indices]

    def adj_indices(self, symbol_name: str) -> list[int] | None:
        """Return the indices adjacent to ``symbol_name``, or ``None`` if absent."""
        i = self.index(symbol_name)
        if i is None:
            return None
        return self._graph.adj(i)

    def graph(self) -> Digraph:
        """Return the underlying index digraph."""
        return self._graph

    def contains(self, symbol_name: str) -> bool:
        """Return whether the graph holds ``symbol_name``."""
        return self.has_vertex(symbol_name)

    def __contains__(self, symbol_name: object) -> bool:
        return isinstance(symbol_name, str) and self.has_vertex(symbol_name)

    def index(self, symbol_name: str) -> int | None:
        """Return the index of ``symbol_name``, or ``None``."""
        return self._index.get(symbol_name)

    def indices(self, vs: Iterable[str]) -> list[int] | None:
        """Return indices of those of ``vs`` in the graph; ``None`` if either is empty."""
        vs = list(vs)
        if not vs or self.vert_count() == 0:
            return None
        return [i for i in map(self.index, vs) if i is not None]

    def name(self, symbol_idx: int) -> str | None:
        """Return the symbol at ``symbol_idx``, or ``None``."""
        if 0 <= symbol_idx < len(self._vertices):
            return self._vertices[symbol_idx]
        return None

    def names(self, indices: Iterable[int]) -> list[str] | None:
        """Return symbols for those of ``indices`` in the graph; ``None`` if either is empty."""
        indices = list(indices)
        if not indices or self.vert_count() == 0:
            return None
        return [n for n in map(self.name, indices) if n is not None]

    def add_vertex(self, v: str) -> int:
        """Add symbol ``v`` if new; return its index."""
        existing = self._index.get(v)
        if existing is not None:
            return existing
        i = len(self._vertices)
        self._vertices.append(v)
        self._index[v] = i
        self._graph.add_vertex(i)
        return i

    def has_vertex(self, value: str) -> bool:
        """Return whether the graph holds symbol ``value``."""
        return value in self._index

    def validate_vertex(self, v: str) -> "DisymGraph":
        """Check that a known symbol's index is valid in the index graph."""
        i = self.index(v)
        if i is not None:
            self._graph.validate_vertex(i)
        return self

    def add_edge(self, vertex: str, weights: Iterable[str]) -> "DisymGraph":
        """Add ``vertex`` and an edge from it to each symbol in ``weights``."""
        v1 = self.add_vertex(vertex)
        for w in weights:
            v2 = self.add_vertex(w)
            self._graph.add_edge(v1, v2)
        return self

    def reverse(self) -> "DisymGraph":
        """Return a copy with every edge pointing the other way."""
        out = DisymGraph()
        out._vertices = list(self._vertices)
        out._index = dict(self._index)
        out._graph = self._graph.reverse()
        return out

    def digest_lines(self, lines: Iterable[str]) -> "DisymGraph":
        """Add edges from lines of ``symbol adjacent adjacent ...``."""
        for line in lines:
            verts = line.split()
            if not verts:
                raise ValueError(f"Malformed symbol line: {line!r}")
            self.add_edge(verts[0], verts[1:])
        return self

    @classmethod
    def from_reader(cls, reader: TextIO) -> "DisymGraph":
        """Build a symbol digraph from the lines of ``reader``."""
        graph = cls()
        graph.digest_lines(reader)
        return graph
"""Depth-first search over a digraph that records paths back to the source."""

from .dfs import _search, vertex_marked
from .digraph import Digraph


class DigraphDipathsDFS:
    """Reachability from a source vertex, with a directed path to each reached vertex."""

    def __init__(self, graph: Digraph, source_vertex: int) -> None:
        self._source_vertex = source_vertex
        self._marked, self._count, self._edge_to = _search(graph, source_vertex)

    def __repr__(self) -> str:
        return (
            f"DigraphDipathsDFS(source_vertex={self._source_vertex}, "
            f"count={self._count})"
        )

    def marked(self, i: int) -> bool:
        """Return whether a path from the source to ``i`` exists."""
        return vertex_marked(self._marked, i)

    def has_path_to(self, i: int) -> bool:
        """Return whether a path from the source to ``i`` exists."""
        return self.marked(i)

    def path_to(self, v: int) -> list[int] | None:
        """Return the path from ``v`` back to the source, or ``None`` if unreachable.

        Raises ``IndexError`` if ``v`` is out of range.
        """
        if not self.has_path_to(v):
            return None
        source = self._source_vertex
        path = []
        x: int | None = v
        while x is not None and x != source:
            path.append(x)
            x = self._edge_to[x]
        path.append(source)
        return path

    def count(self) -> int:
        """Return the number of vertices reachable from the source."""
        return self._count
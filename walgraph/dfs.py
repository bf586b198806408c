"""Depth-first reachability over a directed :class:`Digraph`."""

from collections.abc import Sequence

from .digraph import Digraph


def vertex_marked(marked: Sequence[bool], i: int) -> bool:
    """Return ``marked[i]``, raising ``IndexError`` if ``i`` is out of range."""
    if not 0 <= i < len(marked):
        raise IndexError(f"{i} is out of range")
    return marked[i]


def _search(graph: Digraph, source: int) -> tuple[list[bool], int, list[int | None]]:
    """Run a depth-first search from ``source``.

    Return the marked flags, the number of reached vertices and, for each
    reached vertex, the vertex it was discovered from.
    """
    graph.validate_vertex(source)
    size = graph.vert_count()
    marked = [False] * size
    edge_to: list[int | None] = [None] * size
    marked[source] = True
    count = 1
    stack = [(source, iter(graph.adj(source)))]
    while stack:
        v, neighbours = stack[-1]
        for w in neighbours:
            if not marked[w]:
                marked[w] = True
                count += 1
                edge_to[w] = v
                stack.append((w, iter(graph.adj(w))))
                break
        else:
            stack.pop()
    return marked, count, edge_to


class DigraphDFS:
    """Vertices reachable from a source vertex in a digraph."""

    def __init__(self, graph: Digraph, source_vertex: int) -> None:
        self._marked, self._count, _ = _search(graph, source_vertex)

    def __repr__(self) -> str:
        return f"DigraphDFS(marked={self._marked!r}, count={self._count})"

    def count(self) -> int:
        """Return the number of vertices reachable from the source."""
        return self._count

    def marked(self, i: int) -> bool:
        """Return whether a path from the source to ``i`` exists."""
        return vertex_marked(self._marked, i)
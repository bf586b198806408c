"""Single-source depth-first search over an undirected :class:`Graph`."""

from .graph import Graph


class DFS:
    """Vertices reachable from a source vertex, with a path back to it."""

    def __init__(self, graph: Graph, source_vertex: int) -> None:
        graph.validate_vertex(source_vertex)
        size = graph.vert_count()
        self._graph = graph
        self._source_vertex = source_vertex
        self._marked = [False] * size
        self._edge_to: list[int | None] = [None] * size
        self._count = 0
        self._search(source_vertex)

    def __repr__(self) -> str:
        return f"DFS(source_vertex={self._source_vertex}, count={self._count})"

    def _search(self, source: int) -> None:
        self._marked[source] = True
        self._count += 1
        stack = [(source, iter(self._graph.adj(source)))]
        while stack:
            v, neighbours = stack[-1]
            for w in neighbours:
                if not self._marked[w]:
                    self._marked[w] = True
                    self._count += 1
                    self._edge_to[w] = v
                    stack.append((w, iter(self._graph.adj(w))))
                    break
            else:
                stack.pop()

    def count(self) -> int:
        """Return the number of vertices reachable from the source."""
        return self._count

    def marked(self, i: int) -> bool:
        """Return whether vertex ``i`` is reachable from the source."""
        if not 0 <= i < len(self._marked):
            raise IndexError(f"{i} is out of range")
        return self._marked[i]

    def graph(self) -> Graph:
        """Return the searched graph."""
        return self._graph

    def source_vertex(self) -> int:
        """Return the source vertex."""
        return self._source_vertex

    def has_path_to(self, i: int) -> bool:
        """Return whether a path from the source to ``i`` exists."""
        return self.marked(i)

    def path_to(self, v: int) -> list[int] | None:
        """Return the path from ``v`` back to the source, or ``None`` if unreachable."""
        if not self.has_path_to(v):
            return None
        path = []
        x: int | None = v
        while x is not None and x != self._source_vertex:
            path.append(x)
            x = self._edge_to[x]
        path.append(self._source_vertex)
        return path
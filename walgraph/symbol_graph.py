"""Undirected graph whose vertices are symbols identified by string ids."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TextIO, TypeVar

from .graph import Graph


class Symbol(ABC):
    """A graph vertex identified by a string id."""

    @abstractmethod
    def id(self) -> str:
        """Return the symbol's identifier."""


@dataclass(frozen=True)
class GenericSymbol(Symbol):
    """A symbol that is nothing more than its id."""

    value: str

    def id(self) -> str:
        return self.value


T = TypeVar("T", bound=Symbol)


class SymbolGraph(Generic[T]):
    """Undirected graph of symbols, backed by an index :class:`Graph`."""

    def __init__(self) -> None:
        self._vertices: list[T] = []
        self._index: dict[str, int] = {}
        self._graph = Graph(0)

    def __repr__(self) -> str:
        return f"SymbolGraph(vertices={self._vertices!r}, graph={self._graph!r})"

    def edge_count(self) -> int:
        """Return the number of stored edge entries."""
        return self._graph.edge_count()

    def vert_count(self) -> int:
        """Return the number of vertices."""
        return self._graph.vert_count()

    def _require_index(self, symbol_name: str) -> int:
        i = self.index(symbol_name)
        if i is None:
            raise KeyError(f'Symbol "{symbol_name}" doesn\'t exist in symbol graph')
        return i

    def adj_indices(self, symbol_name: str) -> list[int]:
        """Return the indices adjacent to ``symbol_name``."""
        return self._graph.adj(self._require_index(symbol_name))

    def adj(self, symbol_name: str) -> list[T]:
        """Return the symbols adjacent to ``symbol_name``."""
        return self.vertices(self.adj_indices(symbol_name))

    def graph(self) -> Graph:
        """Return the underlying index graph."""
        return self._graph

    def degree(self, v: str) -> int:
        """Return the number of edges touching symbol ``v``."""
        i = self.index(v)
        if i is None:
            raise KeyError(f"Vertex {v} is not in graph")
        return self._graph.degree(i)

    def contains(self, symbol_name: str) -> bool:
        """Return whether the graph holds a symbol with this id."""
        return self.has_vertex(symbol_name)

    def __contains__(self, symbol_name: object) -> bool:
        return isinstance(symbol_name, str) and self.has_vertex(symbol_name)

    def index(self, symbol_name: str) -> int | None:
        """Return the index of ``symbol_name``, or ``None``."""
        return self._index.get(symbol_name)

    def indices(self, vs: Iterable[str]) -> list[int]:
        """Return the indices of those of ``vs`` that are in the graph."""
        return [i for i in map(self.index, vs) if i is not None]

    def name(self, symbol_idx: int) -> str | None:
        """Return the id of the symbol at ``symbol_idx``, or ``None``."""
        if 0 <= symbol_idx < len(self._vertices):
            return self._vertices[symbol_idx].id()
        return None

    def names(self, indices: Iterable[int]) -> list[str]:
        """Return the ids for those of ``indices`` that are in the graph."""
        return [n for n in map(self.name, indices) if n is not None]

    def vertices(self, indices: Iterable[int]) -> list[T]:
        """Return the symbols for those of ``indices`` that are in the graph."""
        size = len(self._vertices)
        return [self._vertices[i] for i in indices if 0 <= i < size]

    def add_symbol(self, symbol: T) -> int:
        """Add ``symbol`` if its id is new; return its index."""
        key = symbol.id()
        existing = self._index.get(key)
        if existing is not None:
            return existing
        i = self.vert_count()
        self._vertices.append(symbol)
        self._index[key] = i
        self._graph.add_vertex(i)
        return i

    def add_vertex(self, v: T) -> int:
        """Alias of :meth:`add_symbol`."""
        return self.add_symbol(v)

    def has_vertex(self, value: str) -> bool:
        """Return whether the graph holds a symbol with id ``value``."""
        return value in self._index

    def add_edge(self, vertex: T, weights: Iterable[T] | None) -> "SymbolGraph[T]":
        """Add ``vertex`` and an edge from it to each symbol in ``weights``."""
        v1 = self.add_vertex(vertex)
        for w in weights or ():
            v2 = self.add_vertex(w)
            self._graph.add_edge(v1, v2)
        return self

    @classmethod
    def from_reader(
        cls,
        reader: TextIO,
        symbol_type: Callable[[str], T] = GenericSymbol,  # type: ignore[assignment]
    ) -> "SymbolGraph[T]":
        """Build a graph from lines of ``symbol adjacent adjacent ...``."""
        graph: SymbolGraph[T] = cls()
        for line_num, line in enumerate(reader):
            vs = line.split()
            if not vs:
                raise ValueError(
                    f"Malformed symbol graph buffer at buffer line {line_num}"
                    ' - Expected "non-empty" line.'
                )
            graph.add_vertex(symbol_type(vs[0]))
            if len(vs) >= 2:
                graph.add_vertex(symbol_type(vs[1]))
                graph.add_edge(symbol_type(vs[0]), [symbol_type(x) for x in vs[1:]])
        return graph
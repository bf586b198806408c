# walgraph

Small, dependency-free graph structures built on adjacency lists of vertex
indices.

| Module | Contents |
| --- | --- |
| `walgraph.graph` | `Graph`: an undirected index graph. |
| `walgraph.symbol_graph` | `Symbol`, `GenericSymbol` and `SymbolGraph`: an undirected graph of named symbols. |
| `walgraph.single_source_dfs` | `DFS`: depth-first search over a `Graph`. |
| `walgraph.digraph` | `Digraph`: a directed index graph that tracks in-degrees. |
| `walgraph.symbol_digraph` | `DisymGraph`: a directed graph of string symbols. |
| `walgraph.dfs` | `DigraphDFS` and `vertex_marked`: reachability in a `Digraph`. |
| `walgraph.dipaths_dfs` | `DigraphDipathsDFS`: reachability with directed paths. |
| `walgraph.utils` | `InvalidVertexError`, `invalid_vertex_msg`, `read_vert_and_edge_counts`, `triangular_num`. |

## Installation

```
pip install walgraph
```

## Index graphs

Vertices are the integers `0..vert_count-1`. Adjacency lists are kept sorted,
and `adj(v)` returns a copy of one.

```python
from walgraph.graph import Graph

g = Graph(3)
g.add_edge(0, 1).add_edge(1, 2)
g.adj(1)          # [0, 2]
g.degree(1)       # 2
g.edge_count()    # 4
g.has_edge(2, 1)  # True
g.remove_vertex(0)
g.vert_count()    # 2
```

`Graph` stores every undirected edge in both endpoints' lists, so each
`add_edge` adds 2 to `edge_count()` and each `remove_edge` takes 2 away.
`remove_vertex(v)` drops the vertex and its edges, and every higher vertex
index moves down by one. `add_vertex(v)` grows the graph until `v` is a valid
vertex.

`Digraph` has the same shape for directed edges, with `outdegree(v)`,
`indegree(v)` and `reverse()`, which returns a new digraph with every edge
turned round.

An out-of-range vertex raises `InvalidVertexError`, a subclass of
`IndexError`, with a message such as `Vertex 99 is out of index range 0-2`.

## Depth-first search

```python
from walgraph.digraph import Digraph
from walgraph.dipaths_dfs import DigraphDipathsDFS

dg = Digraph(4)
dg.add_edge(0, 1)
dg.add_edge(1, 2)

search = DigraphDipathsDFS(dg, 0)
search.has_path_to(2)   # True
search.path_to(2)       # [2, 1, 0]
search.path_to(3)       # None
search.count()          # 3
```

`path_to(v)` lists the path from `v` back to the source. `DigraphDFS` gives
only `marked(i)` and `count()`. `DFS` does the same work over an undirected
`Graph` and also offers `graph()` and `source_vertex()`. Asking about a vertex
outside the graph raises `IndexError`.

## Symbol graphs

`DisymGraph` names its vertices with strings; each new symbol gets the next
index.

```python
import io
from walgraph.symbol_digraph import DisymGraph

g = DisymGraph()
g.add_edge("Admin", ["User"])
g.add_edge("User", ["Guest"])
g.adj("Admin")          # ["User"]
g.index("Guest")        # 2
"Guest" in g            # True
g.reverse().adj("User") # ["Admin"]

routes = DisymGraph.from_reader(io.StringIO("JFK MCO\nORD DEN HOU\n"))
```

Each line read by `digest_lines` or `from_reader` is a symbol followed by the
symbols it points to. `adj` and `adj_indices` return `None` for an unknown
symbol.

`SymbolGraph` is the undirected counterpart. Its vertices are `Symbol`
objects, each identified by `id()`; `GenericSymbol` is a symbol that is just
its string. `SymbolGraph.from_reader(reader, symbol_type=GenericSymbol)`
builds one from the same line format and raises `ValueError` on an empty
line. Its `adj`, `adj_indices` and `degree` raise `KeyError` for an unknown
symbol.

## Graph files

`Graph.from_reader` and `Digraph.from_reader` read this format: the first line
is the vertex count, the second the edge count, and each line after that is
one edge given as two vertex indices.

```
3
2
0 1
1 2
```

`read_vert_and_edge_counts(reader)` reads the two header lines and leaves the
reader at the first edge line. A missing or non-numeric count, or a malformed
edge line, raises `ValueError`.

## What it does not do

walgraph is a library only. It has no command-line tool and does not write
graphs back to files. Vertices cannot be removed from `Digraph`,
`DisymGraph` or `SymbolGraph`.

## Running the tests

```
pip install -e .[test]
pytest
```
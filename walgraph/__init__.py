"""Index graphs, symbol graphs, digraphs and depth-first search."""

__version__ = "0.1.0"
__all__ = [
    "utils",
    "graph",
    "symbol_graph",
    "single_source_dfs",
    "digraph",
    "symbol_digraph",
    "dfs",
    "dipaths_dfs",
]
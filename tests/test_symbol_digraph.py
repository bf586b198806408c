import io

import pytest

from walgraph.symbol_digraph import DisymGraph
from walgraph.utils import InvalidVertexError

SYMBOLS = "all your base are belong to us".split()
VOWELS = "a e i o u".split()


def _chain(symbols):
    dsg = DisymGraph()
    for s, nxt in zip(symbols, symbols[1:]):
        dsg.add_edge(s, [nxt])
    return dsg


def test_new():
    dsg = DisymGraph()
    dsg.add_edge("User", ["Guest"])
    dsg.add_edge("Admin", ["User"])
    assert dsg.vert_count() == 3
    assert dsg.edge_count() == 2
    assert dsg.adj("Admin") == ["User"]


def test_vert_count():
    assert _chain(SYMBOLS).vert_count() == len(SYMBOLS)


def test_edge_count():
    assert _chain(SYMBOLS).edge_count() == len(SYMBOLS) - 1


def test_indegree():
    dsg = DisymGraph()
    for i, v in enumerate(VOWELS):
        dsg.add_edge(v, VOWELS[i + 1:])
        assert dsg.indegree(i) == i


def test_outdegree():
    dsg = DisymGraph()
    limit = len(VOWELS) - 1
    for i, v in enumerate(VOWELS):
        dsg.add_edge(v, VOWELS[i + 1:])
        assert dsg.outdegree(i) == limit - i


def test_degree_invalid_index():
    with pytest.raises(InvalidVertexError):
        DisymGraph().indegree(0)


def test_adj_indices():
    dsg = DisymGraph()
    assert dsg.adj_indices("non-existing-symbol") is None
    for i, v in enumerate(VOWELS):
        weights = VOWELS[i + 1:]
        dsg.add_edge(v, weights)
        adj_indices = dsg.adj_indices(v)
        assert adj_indices is not None
        assert len(adj_indices) == len(weights)
        assert all(dsg.name(x) in weights for x in adj_indices)


def test_adj_missing_returns_none():
    assert DisymGraph().adj("x") is None


def test_contains():
    dsg = DisymGraph()
    assert dsg.contains("hello") is False
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.contains("abc") is True
    assert "efg" in dsg
    assert "hello" not in dsg


def test_index():
    dsg = DisymGraph()
    assert dsg.index("abc") is None
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.index("abc") == 0
    assert dsg.index("efg") == 1


def test_indices():
    dsg = DisymGraph()
    assert dsg.indices(SYMBOLS) is None
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.indices(["abc", "efg"]) == [0, 1]
    assert dsg.indices([]) is None


def test_name():
    dsg = DisymGraph()
    assert dsg.name(0) is None
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.name(0) == "abc"
    assert dsg.name(1) == "efg"
    assert dsg.name(-1) is None


def test_names():
    dsg = DisymGraph()
    indices = list(range(len(SYMBOLS)))
    assert dsg.names(indices) is None
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.names(indices) == ["abc", "efg"]


def test_add_vertex():
    dsg = DisymGraph()
    for s in SYMBOLS:
        dsg.add_vertex(s)
    assert dsg.vert_count() == len(SYMBOLS)
    assert dsg.add_vertex(SYMBOLS[0]) == 0
    assert dsg.vert_count() == len(SYMBOLS)


def test_has_vertex():
    dsg = DisymGraph()
    assert dsg.has_vertex("abc") is False
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.has_vertex("abc") is True
    assert dsg.has_vertex("efg") is True
    assert dsg.has_vertex("non-existent") is False


def test_validate_vertex_returns_self():
    dsg = DisymGraph()
    dsg.add_vertex("abc")
    assert dsg.validate_vertex("abc") is dsg
    assert dsg.validate_vertex("missing") is dsg


def test_add_edge():
    dsg = _chain(SYMBOLS)
    symbol_limit = len(SYMBOLS) - 1
    assert dsg.edge_count() == len(SYMBOLS) - 1

    limit = len(VOWELS) - 1
    for i, v in enumerate(VOWELS):
        index = i + symbol_limit + 1
        dsg.add_edge(v, VOWELS[i + 1:])
        assert dsg.indegree(index) == i
        assert dsg.outdegree(index) == limit - i

    assert dsg.edge_count() == len(SYMBOLS) - 1 + len(VOWELS) * 2
    assert dsg.vert_count() == len(SYMBOLS) + len(VOWELS)


def test_reverse():
    dsg = DisymGraph()
    symbol_limit = len(SYMBOLS) - 1
    for i, s in enumerate(SYMBOLS):
        dsg.add_edge(s, SYMBOLS[i + 1:])
        assert dsg.indegree(i) == i
        assert dsg.outdegree(i) == symbol_limit - i

    rev = dsg.reverse()
    assert rev.vert_count() == dsg.vert_count()
    assert rev.edge_count() == dsg.edge_count()

    for i in range(len(SYMBOLS)):
        name = rev.name(i)
        assert rev.adj(name) == SYMBOLS[:i]
        assert rev.outdegree(i) == dsg.indegree(i)
        assert rev.indegree(i) == dsg.outdegree(i)

    # Original is untouched.
    assert dsg.adj("all") == SYMBOLS[1:]


def test_digest_lines():
    dsg = DisymGraph()
    dsg.digest_lines(["a b c", "b c", "d"])
    assert dsg.vert_count() == 4
    assert dsg.edge_count() == 3
    assert dsg.adj("a") == ["b", "c"]
    assert dsg.adj("d") == []


def test_digest_lines_empty_line_raises():
    with pytest.raises(ValueError):
        DisymGraph().digest_lines(["a b", "   "])


def test_from_reader():
    routes = io.StringIO("JFK MCO\nORD DEN HOU\nDFW PHX\nJFK ATL\n")
    dsg = DisymGraph.from_reader(routes)
    assert dsg.vert_count() == 8
    assert dsg.edge_count() == 5
    assert dsg.adj("ORD") == ["DEN", "HOU"]
    assert dsg.adj("JFK") == ["MCO", "ATL"]
    assert dsg.indegree(dsg.index("ATL")) == 1
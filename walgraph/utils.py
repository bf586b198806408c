"""Shared helpers: vertex error messages, graph-file headers and small math."""

from typing import TextIO


def invalid_vertex_msg(v: int, max_v: int) -> str:
    """Return the message used when vertex ``v`` falls outside ``0..max_v``."""
    return f"Vertex {v} is out of index range 0-{max_v}"


class InvalidVertexError(IndexError):
    """Raised when a vertex index is outside a graph's vertex range."""

    def __init__(self, v: int, max_v: int) -> None:
        super().__init__(invalid_vertex_msg(v, max_v))
        self.vertex = v
        self.max_vertex = max_v


def _read_count(reader: TextIO, what: str) -> int:
    line = reader.readline()
    if not line:
        raise ValueError(f'Unable to read "{what}" line from buffer')
    text = line.strip()
    try:
        count = int(text)
    except ValueError:
        raise ValueError(f'Invalid "{what}" line: {text!r}') from None
    if count < 0:
        raise ValueError(f'Invalid "{what}" line: {text!r}')
    return count


def read_vert_and_edge_counts(reader: TextIO) -> tuple[int, int]:
    """Read the vertex count and edge count from the first two lines of ``reader``.

    The reader is left positioned at the first edge line.
    """
    vert_count = _read_count(reader, "vertex count")
    edge_count = _read_count(reader, "edge count")
    return vert_count, edge_count


def triangular_num(n: int) -> int:
    """Return the ``n``-th triangular number."""
    return n * (n + 1) // 2
"""Reading graphs from the edge-list and coordinate text formats.

Edge-list format::

    V E
    a b [weight]      (E lines, vertices numbered 1..V)

Coordinate format::

    V
    x y               (V lines, one point per vertex)

Lines after the graph are left in the stream so callers can read query
parameters from the same input.
"""
from itertools import combinations
from typing import List, Optional, TextIO
import io
import logging
import math

from .graph import Graph
from .types import Edge, GraphFormatError, Number

logger = logging.getLogger(__name__)


class _LineReader:
    """Reads lines from a stream while keeping count for error messages."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.line_no = 0

    def tokens(self, what: str) -> List[str]:
        line = self.stream.readline()
        self.line_no += 1
        if not line:
            raise GraphFormatError(f"unexpected end of input, expected {what}", self.line_no)
        return line.split()


def _number(token: str, line_no: Optional[int] = None) -> Number:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise GraphFormatError(f"not a number: {token!r}", line_no) from None


def _count(token: str, line_no: int) -> int:
    value = _number(token, line_no)
    if not isinstance(value, int) or value < 0:
        raise GraphFormatError(f"expected a non-negative integer, got {token!r}", line_no)
    return value


def load(stream: TextIO, directed: bool = False) -> Graph:
    """Read a graph in edge-list format."""
    reader = _LineReader(stream)
    header = reader.tokens("'V E' header")
    if len(header) != 2:
        raise GraphFormatError(f"expected 'V E' header, got {len(header)} fields", reader.line_no)
    vertex_count = _count(header[0], reader.line_no)
    edge_count = _count(header[1], reader.line_no)

    edges = []
    for found in range(edge_count):
        tokens = reader.tokens(f"{edge_count} edges, found {found}")
        if len(tokens) not in (2, 3):
            raise GraphFormatError("expected 'a b [weight]'", reader.line_no)
        a = _count(tokens[0], reader.line_no)
        b = _count(tokens[1], reader.line_no)
        for vertex in (a, b):
            if not 1 <= vertex <= vertex_count:
                raise GraphFormatError(
                    f"vertex {vertex} outside 1..{vertex_count}", reader.line_no
                )
        weight = _number(tokens[2], reader.line_no) if len(tokens) == 3 else None
        edges.append(Edge(a, b, weight))

    logger.debug("Loaded %d vertices and %d edges", vertex_count, edge_count)
    return Graph(range(1, vertex_count + 1), edges, directed)


def load_connected_coords(stream: TextIO) -> Graph:
    """Read points and connect every pair, weighted by Euclidean distance."""
    reader = _LineReader(stream)
    header = reader.tokens("point count")
    if len(header) != 1:
        raise GraphFormatError("expected a single point count", reader.line_no)
    count = _count(header[0], reader.line_no)

    points = []
    for found in range(count):
        tokens = reader.tokens(f"{count} points, found {found}")
        if len(tokens) != 2:
            raise GraphFormatError("expected 'x y'", reader.line_no)
        points.append(tuple(_number(t, reader.line_no) for t in tokens))

    edges = [
        Edge(i + 1, j + 1, math.dist(p, q))
        for (i, p), (j, q) in combinations(enumerate(points), 2)
    ]
    logger.debug("Loaded %d points as a complete graph", count)
    return Graph(range(1, count + 1), edges, directed=False)


def read_ints(stream: TextIO, count: Optional[int] = None) -> List[int]:
    """Read one line of integer query parameters."""
    line = stream.readline()
    if not line:
        raise GraphFormatError("unexpected end of input, expected query parameters")
    try:
        values = [int(token) for token in line.split()]
    except ValueError:
        raise GraphFormatError(f"expected integers, got {line.strip()!r}") from None
    if count is not None and len(values) != count:
        raise GraphFormatError(f"expected {count} integers, got {len(values)}")
    return values


def parse_graph(text: str, directed: bool = False) -> Graph:
    return load(io.StringIO(text), directed)


def parse_coords(text: str) -> Graph:
    return load_connected_coords(io.StringIO(text))

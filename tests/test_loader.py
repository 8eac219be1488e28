"""Tests for reading the edge-list and coordinate formats."""
import io
import math

import pytest

from graphwalk import (
    Edge, GraphFormatError, load, load_connected_coords, parse_coords, parse_graph, read_ints,
)


class TestLoad:
    """Tests for the edge-list format."""

    def test_unweighted(self):
        """Vertices are numbered 1..V, edges keep input order."""
        g = parse_graph("4 3\n1 2\n4 1\n3 1\n")
        assert list(g.vertices) == [1, 2, 3, 4]
        assert g.edges == (Edge(1, 2), Edge(4, 1), Edge(3, 1))
        assert not g.is_weighted()

    def test_weighted(self):
        """Third column is the weight."""
        g = parse_graph("3 2\n1 2 -4\n2 3 2.5\n", directed=True)
        assert g.edges == (Edge(1, 2, -4), Edge(2, 3, 2.5))
        assert isinstance(g.edges[0].weight, int)
        assert g.is_directed()

    def test_no_edges(self):
        """Header alone describes isolated vertices."""
        g = parse_graph("3 0\n")
        assert len(g) == 3
        assert g.edges == ()

    def test_query_left_in_stream(self):
        """Lines after the edges stay unread."""
        stream = io.StringIO("2 1\n1 2\n1 2\n")
        load(stream)
        assert read_ints(stream, 2) == [1, 2]

    def test_extra_whitespace(self):
        """Tokens may be separated by any whitespace."""
        g = parse_graph("  2   1 \n 1\t2  \n")
        assert g.edges == (Edge(1, 2),)

    def test_empty_input(self):
        """Empty input has no header."""
        with pytest.raises(GraphFormatError) as exc:
            parse_graph("")
        assert exc.value.line == 1

    def test_bad_header(self):
        """Header needs two fields."""
        with pytest.raises(GraphFormatError) as exc:
            parse_graph("4\n1 2\n")
        assert "header" in str(exc.value)

    def test_negative_count(self):
        """Counts must be non-negative integers."""
        with pytest.raises(GraphFormatError):
            parse_graph("-1 0\n")
        with pytest.raises(GraphFormatError):
            parse_graph("2 1.5\n")

    def test_missing_edges(self):
        """Fewer edge lines than declared is reported with the line number."""
        with pytest.raises(GraphFormatError) as exc:
            parse_graph("3 2\n1 2\n")
        assert exc.value.line == 3
        assert str(exc.value).startswith("line 3:")

    def test_not_a_number(self):
        """Non-numeric tokens are rejected."""
        with pytest.raises(GraphFormatError) as exc:
            parse_graph("2 1\n1 x\n")
        assert exc.value.line == 2

    def test_vertex_out_of_range(self):
        """Endpoints must lie in 1..V."""
        with pytest.raises(GraphFormatError) as exc:
            parse_graph("2 1\n1 3\n")
        assert exc.value.line == 2
        with pytest.raises(GraphFormatError):
            parse_graph("2 1\n0 1\n")

    def test_too_many_tokens(self):
        """Edge lines have two or three fields."""
        with pytest.raises(GraphFormatError):
            parse_graph("2 1\n1 2 3 4\n")


class TestLoadConnectedCoords:
    """Tests for the coordinate format."""

    def test_complete_graph(self):
        """Every pair of points is joined by its Euclidean distance."""
        g = parse_coords("4\n0 0\n0 1\n1 0\n1 1\n")
        assert len(g.edges) == 6
        assert not g.is_directed()
        weights = sorted(e.weight for e in g.edges)
        assert weights[:4] == [1, 1, 1, 1]
        assert weights[4:] == pytest.approx([math.sqrt(2)] * 2)

    def test_edge_order(self):
        """Pairs are listed in index order."""
        g = load_connected_coords(io.StringIO("3\n0 0\n3 4\n0 4\n"))
        assert [(e.a, e.b) for e in g.edges] == [(1, 2), (1, 3), (2, 3)]
        assert [e.weight for e in g.edges] == [5, 4, 3]

    def test_float_coordinates(self):
        """Coordinates may be fractional."""
        g = parse_coords("2\n0.5 0\n0 0\n")
        assert g.edges[0].weight == pytest.approx(0.5)

    def test_missing_point(self):
        """Fewer points than declared is reported."""
        with pytest.raises(GraphFormatError) as exc:
            parse_coords("3\n0 0\n1 1\n")
        assert exc.value.line == 4

    def test_bad_point(self):
        """Points have exactly two coordinates."""
        with pytest.raises(GraphFormatError):
            parse_coords("1\n0 0 0\n")


class TestReadInts:
    """Tests for read_ints."""

    def test_any_count(self):
        """Without a count every integer on the line is read."""
        assert read_ints(io.StringIO("4 3 1 2\n")) == [4, 3, 1, 2]

    def test_wrong_count(self):
        """Line with the wrong number of integers is rejected."""
        with pytest.raises(GraphFormatError):
            read_ints(io.StringIO("1 2 3\n"), 2)

    def test_missing_line(self):
        """End of input is rejected."""
        with pytest.raises(GraphFormatError):
            read_ints(io.StringIO(""))

    def test_not_integers(self):
        """Non-integer tokens are rejected."""
        with pytest.raises(GraphFormatError):
            read_ints(io.StringIO("1 b\n"))

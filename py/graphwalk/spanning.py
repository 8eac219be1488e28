"""Minimum spanning tree (Prim's algorithm)."""
from typing import Iterable, List, Optional

from .graph import Graph
from .heap import MinHeap
from .types import UNREACHED, DirectionError, Edge, Number, Vertex


def prim(graph: Graph, root: Optional[Vertex] = None) -> List[Edge]:
    """Minimum spanning tree of an undirected weighted graph.

    Grows the tree from root (the first vertex by default), always adding
    the cheapest edge that crosses from the tree to the rest of the graph.
    Each returned edge points from the tree vertex to the new vertex.
    A disconnected graph yields a minimum spanning forest.
    """
    if graph.directed:
        raise DirectionError("prim requires an undirected graph")
    if not len(graph):
        return []
    if root is None:
        root = next(iter(graph.vertices))
    graph.check_vertex(root)

    cost = {v: UNREACHED for v in graph.vertices}
    cost[root] = 0
    best_edge = {}
    queue = MinHeap((v, cost[v]) for v in graph.vertices)
    in_tree = set()
    tree: List[Edge] = []

    while queue:
        vertex = queue.pop()
        in_tree.add(vertex)
        if vertex in best_edge:
            tree.append(best_edge[vertex])
        for edge in graph.incident_edges(vertex):
            if edge.b in in_tree:
                continue
            if edge.cost < cost[edge.b]:
                cost[edge.b] = edge.cost
                best_edge[edge.b] = edge
                queue.decrease_key(edge.b, edge.cost)

    return tree


def total_weight(edges: Iterable[Edge]) -> Number:
    """Sum of edge costs."""
    return sum(edge.cost for edge in edges)

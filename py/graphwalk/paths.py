"""Shortest paths: breadth-first, Dijkstra and Bellman-Ford."""
from typing import Dict, List, NamedTuple, Optional
import logging

from .graph import Graph
from .heap import MinHeap
from .traversal import BREADTH_FIRST, STOP, CallbackVisitor, walk
from .types import UNBOUNDED, UNREACHED, Edge, Number, Vertex

logger = logging.getLogger(__name__)


class BellmanFordResult(NamedTuple):
    """Distances, predecessors and the edges still relaxable after |V|-1 passes.

    ``negative_edges`` is empty unless a negative cycle is reachable from
    the source.
    """
    distances: Dict[Vertex, Number]
    predecessors: Dict[Vertex, Vertex]
    negative_edges: List[Edge]


def path_to(prev: Dict[Vertex, Vertex], source: Vertex, target: Vertex) -> Optional[List[Vertex]]:
    """Rebuild the path source..target (inclusive) from a predecessor map."""
    if target != source and target not in prev:
        return None
    path = [target]
    while path[-1] != source:
        path.append(prev[path[-1]])
    path.reverse()
    return path


def shortest_path(graph: Graph, source: Vertex, target: Vertex) -> Optional[List[Vertex]]:
    """Fewest-edge path from source to target.

    Returns the vertices after source up to and including target, or None
    when target is unreachable or equal to source.
    """
    graph.check_vertex(source)
    graph.check_vertex(target)
    if source == target:
        return None

    parent = {}

    def discover(vertex, is_seed, via):
        if not is_seed:
            parent[vertex] = via
        if vertex == target:
            return STOP

    walk(graph, source, BREADTH_FIRST, CallbackVisitor(on_discover=discover))
    path = path_to(parent, source, target)
    return path[1:] if path else None


def distances_from(graph: Graph, source: Vertex) -> Dict[Vertex, int]:
    """Edge counts from source; -1 for unreachable vertices."""
    graph.check_vertex(source)
    dist = {v: -1 for v in graph.vertices}

    def discover(vertex, is_seed, parent):
        dist[vertex] = 0 if is_seed else dist[parent] + 1

    walk(graph, source, BREADTH_FIRST, CallbackVisitor(on_discover=discover))
    return dist


def dijkstra(graph: Graph, source: Vertex):
    """Single-source shortest paths for non-negative edge weights.

    Returns (distances, predecessors). Unreached vertices keep distance
    UNREACHED and have no predecessor; neither does the source.
    Negative weights are not detected, use bellman_ford() for those.
    """
    graph.check_vertex(source)
    dist = {v: UNREACHED for v in graph.vertices}
    dist[source] = 0
    prev = {}
    queue = MinHeap((v, dist[v]) for v in graph.vertices)
    known = set()

    while queue:
        vertex = queue.pop()
        known.add(vertex)
        if dist[vertex] == UNREACHED:
            # Everything left in the queue is unreachable
            break
        for edge in graph.incident_edges(vertex):
            if edge.b in known:
                continue
            candidate = dist[vertex] + edge.cost
            if candidate < dist[edge.b]:
                dist[edge.b] = candidate
                prev[edge.b] = vertex
                queue.decrease_key(edge.b, candidate)

    return dist, prev


def _oriented_edges(graph: Graph) -> List[Edge]:
    """Edges in input order, with both orientations for undirected graphs."""
    if graph.directed:
        return list(graph.edges)
    edges = []
    for edge in graph.edges:
        edges.append(edge)
        if edge.a != edge.b:
            edges.append(edge.reversed())
    return edges


def _can_relax(edge: Edge, dist: Dict[Vertex, Number]) -> bool:
    return dist[edge.a] != UNREACHED and dist[edge.a] + edge.cost < dist[edge.b]


def bellman_ford(graph: Graph, source: Vertex) -> BellmanFordResult:
    """Single-source shortest paths allowing negative weights."""
    graph.check_vertex(source)
    dist = {v: UNREACHED for v in graph.vertices}
    dist[source] = 0
    prev = {}
    edges = _oriented_edges(graph)

    for _ in range(len(graph) - 1):
        changed = False
        for edge in edges:
            if _can_relax(edge, dist):
                dist[edge.b] = dist[edge.a] + edge.cost
                prev[edge.b] = edge.a
                changed = True
        if not changed:
            break

    negative_edges = [edge for edge in edges if _can_relax(edge, dist)]
    if negative_edges:
        logger.info("Negative cycle reachable from %r (%d relaxable edges)",
                    source, len(negative_edges))
    return BellmanFordResult(dist, prev, negative_edges)


def shortest_paths_with_negative_cycles(graph: Graph, source: Vertex) -> Dict[Vertex, Number]:
    """Bellman-Ford distances with negative-cycle victims set to UNBOUNDED.

    Every vertex reachable from the head of an edge that is still
    relaxable after |V|-1 passes has a cost unbounded below.
    """
    result = bellman_ford(graph, source)
    dist = dict(result.distances)
    if not result.negative_edges:
        return dist

    seeds = list(dict.fromkeys(edge.b for edge in result.negative_edges))

    def poison(vertex, is_seed, parent):
        dist[vertex] = UNBOUNDED

    walk(graph, seeds, BREADTH_FIRST, CallbackVisitor(on_discover=poison))
    return dist


def has_negative_cycle(graph: Graph) -> bool:
    """Check if any cycle in the graph has negative total weight."""
    covered = set()
    for vertex in graph.vertices:
        if vertex in covered:
            continue
        result = bellman_ford(graph, vertex)
        if result.negative_edges:
            return True
        # A cycle reachable from these would have shown up in this run
        covered.update(v for v, d in result.distances.items() if d != UNREACHED)
    return False

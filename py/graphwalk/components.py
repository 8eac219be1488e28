"""Cycle detection, topological sort, connected components and bipartiteness."""
from collections import deque
from typing import Dict, List, Optional, Sequence, Set
import logging

from .graph import Graph
from .traversal import (
    BREADTH_FIRST, DEPTH_FIRST, STOP, CallbackVisitor, Visitor, dfs_postorder, walk,
)
from .types import DirectionError, Vertex

logger = logging.getLogger(__name__)


def _require_directed(graph: Graph, operation: str) -> None:
    if not graph.directed:
        logger.warning("%s called on an undirected graph", operation)
        raise DirectionError(f"{operation} requires a directed graph")


class _CycleFinder(Visitor):
    """Stops the walk at the first edge that closes a cycle.

    Directed: the edge leads to a vertex that is discovered but not yet
    finished (a back edge). Forward and cross edges are ignored.
    Undirected: the edge leads anywhere but the tree parent, since the
    edge back to the parent is the same physical edge seen from the
    other end.
    """

    def __init__(self, directed: bool):
        self.directed = directed
        self.parent: Dict[Vertex, Optional[Vertex]] = {}
        self.finished: Set[Vertex] = set()
        self.closing_edge = None

    def on_discover(self, vertex, is_seed, parent):
        self.parent[vertex] = parent

    def on_finish(self, vertex):
        self.finished.add(vertex)

    def on_repeat_edge(self, source, target):
        if self.directed:
            closes = target not in self.finished
        else:
            closes = self.parent.get(source) != target
        if closes:
            self.closing_edge = (source, target)
            return STOP

    def _tree_path(self, vertex: Vertex) -> List[Vertex]:
        path = [vertex]
        while self.parent.get(path[-1]) is not None:
            path.append(self.parent[path[-1]])
        return path

    def cycle(self) -> List[Vertex]:
        """Vertices of the detected cycle, first vertex repeated at the end."""
        source, target = self.closing_edge
        up_source = self._tree_path(source)
        up_target = self._tree_path(target)
        on_target_path = set(up_target)
        # Lowest common ancestor joins the two tree paths
        i = next(i for i, v in enumerate(up_source) if v in on_target_path)
        j = up_target.index(up_source[i])
        return list(reversed(up_source[:i + 1])) + up_target[:j + 1]


def _find_cycle(graph: Graph) -> Optional[_CycleFinder]:
    finder = _CycleFinder(graph.directed)
    if walk(graph, None, DEPTH_FIRST, finder):
        return finder
    return None


def is_acyclic(graph: Graph) -> bool:
    """Check that the graph contains no cycle."""
    return _find_cycle(graph) is None


def is_dag(graph: Graph) -> bool:
    """Check if the graph is a Directed Acyclic Graph."""
    return graph.directed and is_acyclic(graph)


def find_cycle(graph: Graph) -> Optional[List[Vertex]]:
    """Return one cycle as a closed vertex list, or None if there is none."""
    finder = _find_cycle(graph)
    if finder is None:
        return None
    return finder.cycle()


def topological_sort(graph: Graph) -> List[Vertex]:
    """Order the vertices so every edge points forward.

    The result on a cyclic graph is some order but not a valid one;
    check is_acyclic() first when the input is not known to be a DAG.
    """
    _require_directed(graph, "topological_sort")
    order = deque()
    walk(graph, None, DEPTH_FIRST, CallbackVisitor(on_finish=order.appendleft))
    return list(order)


def is_topological_order(graph: Graph, order: Sequence[Vertex]) -> bool:
    """Check that order lists every vertex once and respects every edge."""
    position = {v: i for i, v in enumerate(order)}
    if len(position) != len(order) or position.keys() != graph.vertices:
        return False
    return all(position[e.a] < position[e.b] for e in graph.edges)


def _components(graph: Graph, start=None) -> List[Set[Vertex]]:
    components: List[Set[Vertex]] = []

    def discover(vertex, is_seed, parent):
        if is_seed:
            components.append(set())
        components[-1].add(vertex)

    walk(graph, start, DEPTH_FIRST, CallbackVisitor(on_discover=discover))
    return components


def connected_components(graph: Graph) -> List[Set[Vertex]]:
    """Connected components in seed order (weak connectivity for directed)."""
    return _components(graph.undirected())


def strongly_connected_components(graph: Graph) -> List[Set[Vertex]]:
    """Strongly connected components (Kosaraju's algorithm).

    The first pass records the depth-first finish order of the graph;
    the second walks the reversed graph seeded in reverse finish order,
    so every run stays inside exactly one component.
    """
    _require_directed(graph, "strongly_connected_components")
    finish_order = dfs_postorder(graph)
    return _components(graph.reversed(), reversed(finish_order))


def is_bipartite(graph: Graph) -> bool:
    """Two-colour the graph breadth-first and check every edge."""
    color: Dict[Vertex, int] = {}

    def discover(vertex, is_seed, parent):
        color[vertex] = 0 if is_seed else (color[parent] + 1) % 2

    walk(graph.undirected(), None, BREADTH_FIRST, CallbackVisitor(on_discover=discover))
    return all(color[e.a] != color[e.b] for e in graph.edges)

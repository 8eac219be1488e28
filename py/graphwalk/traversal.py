"""Graph traversal engine shared by every algorithm in the package."""
from collections import deque
from typing import Callable, Iterable, List, Optional

from .graph import Graph
from .types import Vertex

BREADTH_FIRST = "breadth-first"
DEPTH_FIRST = "depth-first"

# Returned from a hook to abort the walk
STOP = object()

# Parent marker for exit entries on the depth-first stack
_EXIT = object()


class Visitor:
    """Hooks called by walk(). Every hook is a no-op by default.

    on_discover(vertex, is_seed, parent)
        Once per vertex, when it is first marked visited. ``is_seed`` is
        true when the vertex starts a new run; ``parent`` is None then.
    on_process(vertex)
        Once per vertex, when it is taken off the pending list.
    on_finish(vertex)
        Once per vertex, after everything discovered through it finished.
        Only tracked when the visitor overrides it.
    on_repeat_edge(source, target)
        For every examined edge whose target was already visited.

    A hook returning STOP aborts the whole walk.
    """

    @property
    def tracks_finish(self) -> bool:
        return type(self).on_finish is not Visitor.on_finish

    def on_discover(self, vertex: Vertex, is_seed: bool, parent: Optional[Vertex]):
        pass

    def on_process(self, vertex: Vertex):
        pass

    def on_finish(self, vertex: Vertex):
        pass

    def on_repeat_edge(self, source: Vertex, target: Vertex):
        pass


class CallbackVisitor(Visitor):
    """Visitor built from plain callables."""

    def __init__(self, on_discover: Optional[Callable] = None,
                 on_process: Optional[Callable] = None,
                 on_finish: Optional[Callable] = None,
                 on_repeat_edge: Optional[Callable] = None):
        self._on_discover = on_discover
        self._on_process = on_process
        self._on_finish = on_finish
        self._on_repeat_edge = on_repeat_edge

    @property
    def tracks_finish(self) -> bool:
        return self._on_finish is not None

    def on_discover(self, vertex, is_seed, parent):
        if self._on_discover:
            return self._on_discover(vertex, is_seed, parent)

    def on_process(self, vertex):
        if self._on_process:
            return self._on_process(vertex)

    def on_finish(self, vertex):
        if self._on_finish:
            return self._on_finish(vertex)

    def on_repeat_edge(self, source, target):
        if self._on_repeat_edge:
            return self._on_repeat_edge(source, target)


def _seeds(graph: Graph, start) -> List[Vertex]:
    if start is None:
        return list(graph.vertices)
    try:
        if start in graph:
            return [start]
    except TypeError:
        # unhashable, so it has to be a collection of seeds
        pass
    if isinstance(start, Iterable) and not isinstance(start, (str, bytes)):
        return list(start)
    return [start]


def walk(graph: Graph, start=None, order: str = DEPTH_FIRST,
         visitor: Optional[Visitor] = None) -> bool:
    """Walk the graph from each unvisited seed in turn.

    ``order`` picks the pending-list discipline: FIFO for breadth-first,
    LIFO for depth-first. Breadth-first marks a vertex visited when it is
    queued, depth-first when it is popped, so the depth-first postorder is
    a true DFS postorder.

    Returns True if a hook stopped the walk, False if it ran to completion.
    """
    if order not in (BREADTH_FIRST, DEPTH_FIRST):
        raise ValueError(f"Unknown traversal order: {order!r}")
    visitor = visitor or Visitor()
    depth_first = order == DEPTH_FIRST
    track_finish = visitor.tracks_finish
    visited = set()

    for seed in _seeds(graph, start):
        graph.check_vertex(seed)
        if seed in visited:
            continue

        pending = deque([(seed, None)])
        finish_stack = []
        if not depth_first:
            visited.add(seed)
            if visitor.on_discover(seed, True, None) is STOP:
                return True
            if track_finish:
                finish_stack.append(seed)

        while pending:
            vertex, parent = pending.pop() if depth_first else pending.popleft()

            if parent is _EXIT:
                if visitor.on_finish(vertex) is STOP:
                    return True
                continue

            if depth_first:
                if vertex in visited:
                    # Stale entry: another path reached it first
                    if visitor.on_repeat_edge(parent, vertex) is STOP:
                        return True
                    continue
                visited.add(vertex)
                if visitor.on_discover(vertex, parent is None, parent) is STOP:
                    return True
                if track_finish:
                    pending.append((vertex, _EXIT))

            if visitor.on_process(vertex) is STOP:
                return True

            for neighbor in graph.adjacency(vertex):
                if neighbor in visited:
                    if visitor.on_repeat_edge(vertex, neighbor) is STOP:
                        return True
                    continue
                if not depth_first:
                    visited.add(neighbor)
                    if visitor.on_discover(neighbor, False, vertex) is STOP:
                        return True
                    if track_finish:
                        finish_stack.append(neighbor)
                pending.append((neighbor, vertex))

        # Reverse discovery order is a postorder of the breadth-first tree
        while finish_stack:
            if visitor.on_finish(finish_stack.pop()) is STOP:
                return True

    return False


def bfs_order(graph: Graph, start=None) -> List[Vertex]:
    """Vertices in breadth-first discovery order."""
    order = []
    walk(graph, start, BREADTH_FIRST,
         CallbackVisitor(on_discover=lambda v, is_seed, parent: order.append(v)))
    return order


def dfs_order(graph: Graph, start=None) -> List[Vertex]:
    """Vertices in depth-first discovery order."""
    order = []
    walk(graph, start, DEPTH_FIRST,
         CallbackVisitor(on_discover=lambda v, is_seed, parent: order.append(v)))
    return order


def dfs_postorder(graph: Graph, start=None) -> List[Vertex]:
    """Vertices in depth-first finish order."""
    postorder = []
    walk(graph, start, DEPTH_FIRST, CallbackVisitor(on_finish=postorder.append))
    return postorder


def reachable(graph: Graph, source: Vertex, target: Vertex) -> bool:
    """Check if target can be reached from source."""
    graph.check_vertex(target)

    def check(vertex, is_seed, parent):
        if vertex == target:
            return STOP

    return walk(graph, source, DEPTH_FIRST, CallbackVisitor(on_discover=check))

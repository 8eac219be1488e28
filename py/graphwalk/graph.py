"""Graph store and its cached derived structures."""
from typing import Dict, Iterable, KeysView, List, Optional, Tuple
import io
import logging
import threading

from .types import Edge, GraphError, Vertex, VertexError

logger = logging.getLogger(__name__)


def _as_edge(edge) -> Edge:
    if isinstance(edge, Edge):
        return edge
    return Edge(*edge)


class Graph:
    """Immutable vertex set, ordered edge list and directedness flag.

    Adjacency and incident-edge maps are derived from the edges on first
    use and cached for the lifetime of the graph. The build happens once
    under a lock so concurrent readers never see a partial map.
    """

    def __init__(self, vertices: Iterable[Vertex], edges: Iterable = (),
                 directed: bool = False):
        # dict keys act as an insertion-ordered set
        self._vertices: Dict[Vertex, None] = dict.fromkeys(vertices)
        self._edges: Tuple[Edge, ...] = tuple(_as_edge(e) for e in edges)
        self._directed = bool(directed)
        for edge in self._edges:
            for endpoint in (edge.a, edge.b):
                if endpoint not in self._vertices:
                    raise GraphError(
                        f"Edge ({edge.a!r}, {edge.b!r}) references unknown vertex {endpoint!r}"
                    )
        self._adj: Optional[Dict[Vertex, Dict[Vertex, None]]] = None
        self._incident: Optional[Dict[Vertex, Tuple[Edge, ...]]] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"<Graph {kind} vertices={len(self._vertices)} edges={len(self._edges)}>"

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: Vertex) -> bool:
        return vertex in self._vertices

    @property
    def vertices(self) -> KeysView:
        return self._vertices.keys()

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def directed(self) -> bool:
        return self._directed

    def is_directed(self) -> bool:
        return self._directed

    def is_weighted(self) -> bool:
        return any(edge.weight is not None for edge in self._edges)

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._vertices

    def check_vertex(self, vertex: Vertex) -> None:
        """Raise VertexError unless vertex belongs to the graph."""
        if vertex not in self._vertices:
            raise VertexError(vertex)

    def _build_indexes(self) -> None:
        if self._adj is not None:
            return
        with self._lock:
            if self._adj is not None:
                return
            adj: Dict[Vertex, Dict[Vertex, None]] = {v: {} for v in self._vertices}
            incident: Dict[Vertex, List[Edge]] = {v: [] for v in self._vertices}
            for edge in self._edges:
                adj[edge.a][edge.b] = None
                incident[edge.a].append(edge)
                # For undirected graphs, index the reverse direction too
                if not self._directed and edge.a != edge.b:
                    adj[edge.b][edge.a] = None
                    incident[edge.b].append(edge.reversed())
            self._incident = {v: tuple(edges) for v, edges in incident.items()}
            self._adj = adj
            logger.debug("Built adjacency for %r", self)

    def adjacency(self, vertex: Vertex) -> KeysView:
        """Neighbors of vertex, in the order edges introduce them."""
        self._build_indexes()
        try:
            return self._adj[vertex].keys()
        except KeyError:
            raise VertexError(vertex) from None

    def incident_edges(self, vertex: Vertex) -> Tuple[Edge, ...]:
        """Edges leaving vertex, each oriented with ``edge.a == vertex``."""
        self._build_indexes()
        try:
            return self._incident[vertex]
        except KeyError:
            raise VertexError(vertex) from None

    def reversed(self) -> "Graph":
        """Graph with every edge flipped, weights and directedness kept."""
        return Graph(self._vertices, [e.reversed() for e in self._edges], self._directed)

    def undirected(self) -> "Graph":
        """Undirected view over the same vertices and edges."""
        if not self._directed:
            return self
        return Graph(self._vertices, self._edges, directed=False)

    def to_dot(self, name: str = "name") -> str:
        """Serialize the graph in the DOT graph-description language."""
        connector = "->" if self._directed else "--"
        out = io.StringIO()
        out.write(f"{'digraph' if self._directed else 'graph'} {name} {{\n")
        for vertex in self._vertices:
            out.write(f"  {vertex};\n")
        for edge in self._edges:
            label = "" if edge.weight is None else f' [label="{edge.weight}"]'
            out.write(f"  {edge.a} {connector} {edge.b}{label};\n")
        out.write("}\n")
        return out.getvalue()

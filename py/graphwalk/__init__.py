"""Graph algorithm engine - public API."""
from .types import (
    Edge, DistanceState, distance_state, UNREACHED, UNBOUNDED,
    GraphError, GraphFormatError, VertexError, DirectionError, UnknownCommandError,
)
from .heap import MinHeap
from .graph import Graph
from .traversal import (
    BREADTH_FIRST, DEPTH_FIRST, STOP, Visitor, CallbackVisitor,
    walk, bfs_order, dfs_order, dfs_postorder, reachable,
)
from .components import (
    is_acyclic, is_dag, find_cycle, topological_sort, is_topological_order,
    connected_components, strongly_connected_components, is_bipartite,
)
from .paths import (
    BellmanFordResult, path_to, shortest_path, distances_from, dijkstra,
    bellman_ford, shortest_paths_with_negative_cycles, has_negative_cycle,
)
from .spanning import prim, total_weight
from .loader import load, load_connected_coords, parse_graph, parse_coords, read_ints

__all__ = [
    # Types
    'Edge', 'DistanceState', 'distance_state', 'UNREACHED', 'UNBOUNDED',
    'GraphError', 'GraphFormatError', 'VertexError', 'DirectionError', 'UnknownCommandError',
    'MinHeap', 'Graph',
    # Traversal
    'BREADTH_FIRST', 'DEPTH_FIRST', 'STOP', 'Visitor', 'CallbackVisitor',
    'walk', 'bfs_order', 'dfs_order', 'dfs_postorder', 'reachable',
    # Structure
    'is_acyclic', 'is_dag', 'find_cycle', 'topological_sort', 'is_topological_order',
    'connected_components', 'strongly_connected_components', 'is_bipartite',
    # Paths
    'BellmanFordResult', 'path_to', 'shortest_path', 'distances_from', 'dijkstra',
    'bellman_ford', 'shortest_paths_with_negative_cycles', 'has_negative_cycle',
    'prim', 'total_weight',
    # Input
    'load', 'load_connected_coords', 'parse_graph', 'parse_coords', 'read_ints',
]

#!/usr/bin/env python3
"""Command-line front end: one command per algorithm.

The command is taken from the executable name when it matches one (so
``ln -s graphwalk toposort`` works), otherwise from the first argument.
Input is read from stdin: the graph, then any query parameters.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, TextIO
import argparse
import logging
import os
import sys

from .components import (
    connected_components, is_acyclic, is_bipartite, is_topological_order,
    strongly_connected_components, topological_sort,
)
from .loader import load, load_connected_coords, read_ints
from .logging_utils import setup_logging
from .paths import dijkstra, has_negative_cycle, shortest_path, shortest_paths_with_negative_cycles
from .spanning import prim, total_weight
from .traversal import reachable
from .types import (
    DirectionError, DistanceState, GraphError, Number, UnknownCommandError, distance_state,
)

logger = logging.getLogger(__name__)


def format_number(value: Number) -> str:
    """Integral values print without a fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_bool(value: bool) -> str:
    return "1" if value else "0"


def format_distance(value: Number) -> str:
    """'*' for unreachable, '-' for unbounded below, the number otherwise."""
    state = distance_state(value)
    if state is DistanceState.UNREACHED:
        return "*"
    if state is DistanceState.UNBOUNDED:
        return "-"
    return format_number(value)


@dataclass(frozen=True)
class Command:
    """A named query: how to read its input and render its result."""
    run: Callable[[TextIO, bool], str]
    directed: bool
    help: str


def _acyclicity(stream, directed):
    # 1 means the graph has a cycle
    return format_bool(not is_acyclic(load(stream, directed)))


def _bfs(stream, directed):
    graph = load(stream, directed)
    s, t = read_ints(stream, 2)
    path = shortest_path(graph, s, t)
    return "-1" if path is None else str(len(path))


def _bipartite(stream, directed):
    return format_bool(is_bipartite(load(stream, directed)))


def _connected_components(stream, directed):
    return str(len(connected_components(load(stream, directed))))


def _dijkstra(stream, directed):
    graph = load(stream, directed)
    s, t = read_ints(stream, 2)
    graph.check_vertex(t)
    dist, _ = dijkstra(graph, s)
    if distance_state(dist[t]) is DistanceState.UNREACHED:
        return "-1"
    return format_number(dist[t])


def _reachability(stream, directed):
    graph = load(stream, directed)
    s, t = read_ints(stream, 2)
    return format_bool(reachable(graph, s, t))


def _strongly_connected(stream, directed):
    return str(len(strongly_connected_components(load(stream, directed))))


def _toposort(stream, directed):
    return " ".join(str(v) for v in topological_sort(load(stream, directed)))


def _negative_cycle(stream, directed):
    return format_bool(has_negative_cycle(load(stream, directed)))


def _shortest_paths(stream, directed):
    graph = load(stream, directed)
    (s,) = read_ints(stream, 1)
    dist = shortest_paths_with_negative_cycles(graph, s)
    return "\n".join(format_distance(dist[v]) for v in graph.vertices)


def _mst(stream, directed):
    if directed:
        raise DirectionError("mst reads a point set, which is always undirected")
    return f"{total_weight(prim(load_connected_coords(stream))):.9f}"


def _topo_checker(stream, directed):
    graph = load(stream, directed)
    return format_bool(is_topological_order(graph, read_ints(stream)))


def _dot(stream, directed):
    return load(stream, directed).to_dot().rstrip("\n")


COMMANDS: Dict[str, Command] = {
    'acyclicity': Command(_acyclicity, True, "1 if the graph has a cycle, else 0"),
    'bfs': Command(_bfs, False, "edges on a shortest s-t path, -1 if none or s == t"),
    'bipartite': Command(_bipartite, False, "1 if the graph is bipartite"),
    'connected_components': Command(_connected_components, False, "number of connected components"),
    'dijkstra': Command(_dijkstra, True, "weighted s-t distance, -1 if unreachable"),
    'reachability': Command(_reachability, False, "1 if t is reachable from s"),
    'strongly_connected': Command(_strongly_connected, True, "number of strongly connected components"),
    'toposort': Command(_toposort, True, "a topological order of a DAG"),
    'negative_cycle': Command(_negative_cycle, True, "1 if some cycle has negative weight"),
    'shortest_paths': Command(_shortest_paths, True, "distance from s per vertex, * unreachable, - unbounded"),
    'mst': Command(_mst, False, "minimum spanning tree weight of a point set (undirected only)"),
    'topo_checker': Command(_topo_checker, True, "1 if the given order is topological"),
    'dot': Command(_dot, True, "the graph in DOT format"),
}


def run_command(name: str, stream: TextIO, directed: Optional[bool] = None) -> str:
    """Run one command against an input stream and return its output."""
    if name not in COMMANDS:
        raise UnknownCommandError(f"Unknown command: {name}")
    command = COMMANDS[name]
    if directed is None:
        directed = command.directed
    logger.debug("Running %s (directed=%s)", name, directed)
    return command.run(stream, directed)


TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


def parse_flag(value: str) -> bool:
    """Read a boolean setting. Unrecognised values raise ValueError."""
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value: {value!r}")


def _env_flag(name: str) -> Optional[bool]:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return parse_flag(value)


def build_parser(command: Optional[str] = None) -> argparse.ArgumentParser:
    """Argument parser; the command positional is omitted when implied."""
    parser = argparse.ArgumentParser(
        prog=command or "graphwalk",
        description=COMMANDS[command].help if command else "Graph algorithms over edge-list input",
    )
    if command is None:
        parser.add_argument('command', choices=sorted(COMMANDS) + ['serve'],
                            help='Algorithm to run, or serve to start the HTTP API')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--directed', dest='directed', action='store_const', const=True,
                       help='Treat edges as directed')
    group.add_argument('--undirected', dest='directed', action='store_const', const=False,
                       help='Treat edges as undirected')
    parser.add_argument('--input', type=str, help='Read input from a file instead of stdin')
    parser.add_argument('--log-level', type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Logging level')
    parser.add_argument('--host', type=str, help='HTTP API host (serve)')
    parser.add_argument('--port', type=int, help='HTTP API port (serve)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    prog = os.path.splitext(os.path.basename(sys.argv[0]))[0]
    implied = prog if prog in COMMANDS else None
    parser = build_parser(implied)
    args = parser.parse_args(argv)
    command = implied or args.command

    # Get configuration from args, environment, or defaults
    setup_logging(args.log_level or os.environ.get('GRAPHWALK_LOG_LEVEL', 'WARNING'))
    directed = args.directed
    if directed is None:
        try:
            directed = _env_flag('GRAPHWALK_DIRECTED')
        except ValueError as e:
            parser.error(f"GRAPHWALK_DIRECTED: {e}")

    if command == 'serve':
        from .server import create_app
        port = args.port or int(os.environ.get('GRAPHWALK_PORT', '8080'))
        host = args.host or os.environ.get('GRAPHWALK_HOST', '127.0.0.1')
        create_app().run(host=host, port=port, debug=False, threaded=True)
        return 0

    try:
        if args.input:
            with open(args.input, 'r') as f:
                output = run_command(command, f, directed)
        else:
            output = run_command(command, sys.stdin, directed)
    except (GraphError, OSError) as e:
        logger.error("%s failed: %s", command, e)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Type definitions for the graph engine."""
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional, Union
import math

Vertex = Hashable
Number = Union[int, float]

# Distance sentinels
UNREACHED = math.inf
UNBOUNDED = -math.inf


class DistanceState(Enum):
    """Classification of a shortest-path distance."""
    UNREACHED = "unreached"
    FINITE = "finite"
    UNBOUNDED = "unbounded"


def distance_state(distance: Number) -> DistanceState:
    """Classify a distance produced by the weighted-path algorithms."""
    if distance == UNREACHED:
        return DistanceState.UNREACHED
    if distance == UNBOUNDED:
        return DistanceState.UNBOUNDED
    return DistanceState.FINITE


@dataclass(frozen=True)
class Edge:
    """An edge from a to b with an optional weight."""
    a: Vertex
    b: Vertex
    weight: Optional[Number] = None

    @property
    def cost(self) -> Number:
        """Weight of the edge, unit weight when none was given."""
        return 1 if self.weight is None else self.weight

    def reversed(self) -> "Edge":
        return Edge(self.b, self.a, self.weight)


# Errors
class GraphError(Exception):
    """Base error for graph operations."""
    pass


class GraphFormatError(GraphError):
    """Error parsing graph input."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class VertexError(GraphError, KeyError):
    """Query on a vertex outside the vertex set."""

    def __init__(self, vertex: Vertex):
        self.vertex = vertex
        super().__init__(f"Unknown vertex: {vertex!r}")

    def __str__(self) -> str:
        return self.args[0]


class DirectionError(GraphError):
    """Algorithm called on a graph with the wrong directedness."""
    pass


class UnknownCommandError(GraphError):
    """Dispatcher given a command it does not know."""
    pass

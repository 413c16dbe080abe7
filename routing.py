"""
Route results and helpers for consumers of a computed path.

The pathfinder returns node identifiers only; these helpers recover the
cost of a path, the roads it uses, and the coordinates needed to draw it.
"""

from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence, Tuple
import math

from graph import NodeId, Road, RoutingEdge

Coordinates = Tuple[float, float]  # (lat, lng)


@dataclass(frozen=True)
class Route:
    """
    A path from start to end plus its total cost.

    An empty path means the end was unreachable; cost is then inf.
    """
    path: Tuple[NodeId, ...]
    cost: float

    @property
    def found(self) -> bool:
        return bool(self.path)


def _cheapest_edge(
    graph: Mapping[NodeId, Sequence[RoutingEdge]],
    src: NodeId,
    dst: NodeId,
    cost: Callable[[RoutingEdge], float],
) -> Optional[RoutingEdge]:
    best = None
    best_cost = math.inf
    for edge in graph.get(src, ()):
        if edge.to != dst:
            continue
        c = cost(edge)
        if best is None or c < best_cost:
            best, best_cost = edge, c
    return best


def path_cost(
    graph: Mapping[NodeId, Sequence[RoutingEdge]],
    path: Sequence[NodeId],
    cost: Callable[[RoutingEdge], float],
) -> float:
    """
    Total cost of walking path, using the cheapest edge for each hop.

    Returns inf for an empty path or when some hop has no edge.
    """
    if not path:
        return math.inf
    total = 0.0
    for src, dst in zip(path, path[1:]):
        edge = _cheapest_edge(graph, src, dst, cost)
        if edge is None:
            return math.inf
        total += cost(edge)
    return total


def roads_along(graph: Mapping[NodeId, Sequence[Road]], path: Sequence[NodeId]) -> List[Road]:
    """
    Roads traversed by path, cheapest road per hop.

    Raises KeyError if two consecutive nodes are not joined by a road.
    """
    roads: List[Road] = []
    for src, dst in zip(path, path[1:]):
        road = _cheapest_edge(graph, src, dst, lambda r: r.cost)
        if road is None:
            raise KeyError(f"No road from {src!r} to {dst!r}")
        roads.append(road)
    return roads


def route_polyline(path: Sequence[NodeId], coordinates: Mapping[NodeId, Coordinates]) -> List[Coordinates]:
    """Translate node identifiers into (lat, lng) points for rendering."""
    return [tuple(coordinates[node]) for node in path]

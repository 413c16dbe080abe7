"""
Directed, weighted road graph types.

Nodes are plain string identifiers. A graph maps each node to the ordered
list of its outgoing edges; it need not be symmetric, so two-way streets
are two edges. Edge targets that are not keys of the graph are allowed and
behave like nodes with no outgoing edges.
"""

from dataclasses import dataclass, replace
from typing import Mapping, Protocol, Sequence
import math

from traffic import TrafficLevel, traffic_multiplier

NodeId = str


class RoutingEdge(Protocol):
    """Anything the pathfinder can traverse: only the target is required."""

    @property
    def to(self) -> NodeId:
        ...


@dataclass(frozen=True)
class Edge:
    """
    Plain weighted edge, cost taken as-is.
    """
    to: NodeId
    weight: float


@dataclass(frozen=True)
class Road:
    """
    Named road segment whose cost depends on the current traffic level.
    """
    id: str
    name: str
    to: NodeId
    base_distance: float
    traffic_level: TrafficLevel = TrafficLevel.CLEAR

    @property
    def cost(self) -> float:
        multiplier = traffic_multiplier(self.traffic_level)
        # 0 * inf would be nan; a blocked road is impassable regardless of length.
        if math.isinf(multiplier):
            return math.inf
        return self.base_distance * multiplier

    def with_traffic(self, level: TrafficLevel) -> "Road":
        return replace(self, traffic_level=level)


WeightedGraph = Mapping[NodeId, Sequence[Edge]]
CityGraph = Mapping[NodeId, Sequence[Road]]

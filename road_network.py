"""
Caller-owned road network.

Holds the editable road table (map builder edits, traffic reports) and hands
out read-only snapshots for routing, so a path search never sees a
half-applied edit.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from dijkstra_engine import TRAFFIC_PATHFINDER
from graph import NodeId, Road
from routing import Coordinates, Route
from traffic import TrafficLevel


class RoadNetwork:
    """
    Directed road graph backed by a node -> [Road] mapping.
    """

    def __init__(self) -> None:
        self._roads: Dict[NodeId, List[Road]] = {}
        self._source: Dict[str, NodeId] = {}  # road id -> source node
        self._coords: Dict[NodeId, Optional[Coordinates]] = {}

    # --- Mutation API --------------------------------------------------------

    def add_node(self, node: NodeId, coordinates: Optional[Coordinates] = None) -> None:
        """Ensure node exists; set its coordinates if given."""
        self._roads.setdefault(node, [])
        if coordinates is not None:
            self._coords[node] = (float(coordinates[0]), float(coordinates[1]))
        else:
            self._coords.setdefault(node, None)

    def add_road(self, src: NodeId, road: Road) -> None:
        """
        Add a directed road leaving src.
        Auto-adds both endpoints if they don't exist.
        """
        self._check_new_road(road)
        self.add_node(src)
        self.add_node(road.to)
        self._roads[src].append(road)
        self._source[road.id] = src

    def add_two_way_road(
        self,
        a: NodeId,
        b: NodeId,
        road_id: str,
        name: str,
        base_distance: float,
        traffic_level: TrafficLevel = TrafficLevel.CLEAR,
    ) -> Tuple[Road, Road]:
        """Add road_id for a -> b and road_id + '_rev' for b -> a."""
        forward = Road(road_id, name, b, base_distance, traffic_level)
        reverse = Road(f"{road_id}_rev", name, a, base_distance, traffic_level)
        # Both directions are checked up front so a rejected pair leaves nothing behind.
        for road in (forward, reverse):
            self._check_new_road(road)
        self.add_road(a, forward)
        self.add_road(b, reverse)
        return forward, reverse

    def set_traffic(self, road_id: str, level: TrafficLevel) -> Road:
        """Replace the traffic level of one directed road; returns the new record."""
        src = self._source[road_id]
        roads = self._roads[src]
        for i, road in enumerate(roads):
            if road.id == road_id:
                roads[i] = road.with_traffic(level)
                return roads[i]
        raise KeyError(road_id)

    def remove_road(self, road_id: str) -> Road:
        src = self._source.pop(road_id)
        roads = self._roads[src]
        for i, road in enumerate(roads):
            if road.id == road_id:
                return roads.pop(i)
        raise KeyError(road_id)

    def _check_new_road(self, road: Road) -> None:
        if road.id in self._source:
            raise ValueError(f"Road id {road.id!r} already exists")
        if road.base_distance < 0:
            raise ValueError(f"Road {road.id!r} has negative base_distance {road.base_distance}")

    # --- Read API ------------------------------------------------------------

    def nodes(self) -> Iterable[NodeId]:
        return list(self._roads.keys())

    def roads_from(self, node: NodeId) -> List[Road]:
        return list(self._roads.get(node, []))

    def road(self, road_id: str) -> Road:
        src = self._source[road_id]
        for road in self._roads[src]:
            if road.id == road_id:
                return road
        raise KeyError(road_id)

    def coordinates(self) -> Mapping[NodeId, Coordinates]:
        """Coordinates of the nodes that have them."""
        return {node: xy for node, xy in self._coords.items() if xy is not None}

    def snapshot(self) -> Mapping[NodeId, Tuple[Road, ...]]:
        """Immutable copy of the current road table."""
        return MappingProxyType({node: tuple(roads) for node, roads in self._roads.items()})

    def route(self, start: NodeId, end: NodeId) -> Route:
        """Traffic-aware route over a snapshot taken now."""
        return TRAFFIC_PATHFINDER.shortest_route(self.snapshot(), start, end)

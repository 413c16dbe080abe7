"""
Heap-based WeightedPathfinder for road graphs.

One Dijkstra search parameterised by an edge cost function. The plain
variant charges each Edge its weight; the traffic-aware variant charges each
Road its base distance times the traffic multiplier. Graphs are only read,
never mutated, so a single snapshot can be searched from several threads.
"""

from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple
import heapq
import math

from algorithms import PathfinderEngine
from graph import CityGraph, Edge, NodeId, Road, RoutingEdge, WeightedGraph
from routing import Route

CostFunction = Callable[[RoutingEdge], float]


def edge_weight(edge: Edge) -> float:
    return edge.weight


def road_cost(road: Road) -> float:
    return road.cost


class WeightedPathfinder(PathfinderEngine):
    """
    Single-pair Dijkstra using a binary heap.

    Ties between equal tentative costs go to the node that appears first in
    the graph's key order; targets that are not keys of the graph rank after
    all keys, in the order the search discovers them.

    Costs must be nonnegative. Negative costs are not detected and give
    undefined results.

    Complexity:
        O((V + E) log V) over the nodes reachable from start.
    """

    def __init__(self, cost: CostFunction) -> None:
        self._cost = cost

    def shortest_paths(
        self,
        graph: Mapping[NodeId, Sequence[RoutingEdge]],
        start: NodeId,
        end: Optional[NodeId] = None,
    ) -> Tuple[Dict[NodeId, float], Dict[NodeId, NodeId]]:
        """
        Run the search and return the (dist, prev) maps.

        Every graph key is present in dist, at inf if it was never reached.
        The search stops once end is settled, or once nothing reachable is
        left. start is inserted even if it is not a key of the graph.
        """
        rank: Dict[NodeId, int] = {node: i for i, node in enumerate(graph)}
        dist: Dict[NodeId, float] = {node: math.inf for node in graph}
        prev: Dict[NodeId, NodeId] = {}

        dist[start] = 0.0
        rank.setdefault(start, len(rank))
        pq = [(0.0, rank[start], start)]  # priority queue of (distance, rank, node)
        settled = set()

        while pq:
            d_u, _, u = heapq.heappop(pq)

            # Skip outdated entries
            if u in settled or d_u != dist[u]:
                continue
            settled.add(u)

            if u == end:
                break

            for edge in graph.get(u, ()):
                v = edge.to
                alt = d_u + self._cost(edge)
                if alt < dist.get(v, math.inf):
                    dist[v] = alt
                    prev[v] = u
                    rank.setdefault(v, len(rank))
                    heapq.heappush(pq, (alt, rank[v], v))

        return dist, prev

    def shortest_route(
        self,
        graph: Mapping[NodeId, Sequence[RoutingEdge]],
        start: NodeId,
        end: NodeId,
    ) -> Route:
        """
        Lowest-cost route from start to end together with its total cost.

        An unreachable end gives an empty path with cost inf.
        """
        dist, prev = self.shortest_paths(graph, start, end)
        cost = dist.get(end, math.inf)
        if math.isinf(cost):
            return Route((), math.inf)

        path = [end]
        node = end
        while node != start:
            node = prev[node]
            path.append(node)
        path.reverse()
        return Route(tuple(path), cost)

    def find_path(
        self,
        graph: Mapping[NodeId, Sequence[RoutingEdge]],
        start: NodeId,
        end: NodeId,
    ) -> List[NodeId]:
        return list(self.shortest_route(graph, start, end).path)


PLAIN_PATHFINDER = WeightedPathfinder(edge_weight)
TRAFFIC_PATHFINDER = WeightedPathfinder(road_cost)


def find_shortest_path(graph: WeightedGraph, start: NodeId, end: NodeId) -> List[NodeId]:
    """Lowest-cost path using each edge's precomputed weight."""
    return PLAIN_PATHFINDER.find_path(graph, start, end)


def calculate_smart_route(graph: CityGraph, start: NodeId, end: NodeId) -> List[NodeId]:
    """Lowest-cost path where each road costs base_distance x traffic multiplier."""
    return TRAFFIC_PATHFINDER.find_path(graph, start, end)

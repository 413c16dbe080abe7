"""
Algorithm interfaces for routing.

Keeps the path search separate from road-network ownership and the CLI.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from graph import NodeId, RoutingEdge


class PathfinderEngine(ABC):
    """
    Interface for single-pair lowest-cost path search.
    """

    @abstractmethod
    def shortest_paths(
        self,
        graph: Mapping[NodeId, Sequence[RoutingEdge]],
        start: NodeId,
        end: Optional[NodeId] = None,
    ) -> Tuple[Dict[NodeId, float], Dict[NodeId, NodeId]]:
        """
        Compute tentative costs plus the predecessor chain from start.

        When end is given the search may stop as soon as end is settled, so
        costs of nodes farther away than end are not final.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError

    @abstractmethod
    def find_path(
        self,
        graph: Mapping[NodeId, Sequence[RoutingEdge]],
        start: NodeId,
        end: NodeId,
    ) -> List[NodeId]:
        """
        Return the lowest-cost path from start to end, both included.

        Returns an empty list if end is unreachable.
        """
        raise NotImplementedError

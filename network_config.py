"""
YAML road-network configuration.

Schema:

    nodes:
      Koduvally: [11.355, 75.91]
    roads:
      - id: r1
        name: NH 766
        from: Koduvally
        to: Thamarassery_Rd
        base_distance: 3
        traffic: CLEAR      # optional
        two_way: true       # optional, adds "<id>_rev"
    traffic:                # optional overrides by road id
      r1: MODERATE
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from graph import Road
from road_network import RoadNetwork
from traffic import TrafficLevel


def load_network(path: Path) -> RoadNetwork:
    data = yaml.safe_load(Path(path).read_text()) or {}
    return network_from_dict(data)


def network_from_dict(data: Mapping[str, Any]) -> RoadNetwork:
    if not isinstance(data, Mapping):
        raise ValueError("Network config must be a mapping with nodes, roads and traffic")
    network = RoadNetwork()

    nodes = data.get("nodes") or {}
    if not isinstance(nodes, Mapping):
        raise ValueError("'nodes' must be a mapping of node id -> [lat, lng]")
    for node, coords in nodes.items():
        if coords is not None and (
            not isinstance(coords, (list, tuple)) or len(coords) != 2
        ):
            raise ValueError(f"Node {node!r} coordinates must be [lat, lng], got {coords!r}")
        network.add_node(str(node), coords)

    roads = data.get("roads") or []
    if not isinstance(roads, list):
        raise ValueError("'roads' must be a list of road entries")
    for entry in roads:
        if not isinstance(entry, Mapping):
            raise ValueError(f"Road entry must be a mapping, got {entry!r}")
        _add_road_entry(network, entry)

    traffic = data.get("traffic") or {}
    if not isinstance(traffic, Mapping):
        raise ValueError("'traffic' must be a mapping of road id -> level")
    apply_traffic(network, traffic)
    return network


def apply_traffic(network: RoadNetwork, overrides: Mapping[str, Any]) -> None:
    """Set traffic levels from a {road_id: level} mapping."""
    for road_id, level in overrides.items():
        try:
            network.set_traffic(str(road_id), TrafficLevel.parse(level))
        except KeyError:
            raise ValueError(f"Traffic override for unknown road {road_id!r}") from None


def _add_road_entry(network: RoadNetwork, entry: Mapping[str, Any]) -> None:
    road_id = entry.get("id")
    if not road_id:
        raise ValueError(f"Road entry without an id: {entry!r}")
    missing = [key for key in ("from", "to", "base_distance") if key not in entry]
    if missing:
        raise ValueError(f"Road {road_id!r} is missing {', '.join(missing)}")

    try:
        base_distance = float(entry["base_distance"])
    except (TypeError, ValueError):
        raise ValueError(f"Road {road_id!r} has non-numeric base_distance {entry['base_distance']!r}") from None
    level = TrafficLevel.parse(entry.get("traffic", TrafficLevel.CLEAR.value))
    name = str(entry.get("name", road_id))
    src, dst = str(entry["from"]), str(entry["to"])

    if entry.get("two_way", False):
        network.add_two_way_road(src, dst, str(road_id), name, base_distance, level)
    else:
        network.add_road(src, Road(str(road_id), name, dst, base_distance, level))

"""
CLI to compute an ambulance route over a road network.

Reads a network from YAML (or uses the built-in Kozhikode corridor), applies
any --traffic overrides, and prints the traffic-aware route with the roads
it uses.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence
import argparse

from city_graph import build_city_network
from network_config import apply_traffic, load_network
from road_network import RoadNetwork
from routing import roads_along


def parse_traffic_overrides(items: Sequence[str]) -> dict:
    overrides = {}
    for item in items:
        road_id, sep, level = item.partition("=")
        if not sep or not road_id or not level:
            raise ValueError(f"Expected ROAD_ID=LEVEL, got {item!r}")
        overrides[road_id.strip()] = level.strip()
    return overrides


def run_route(network: RoadNetwork, start: str, end: str) -> List[str]:
    route = network.route(start, end)
    if not route.found:
        print(f"[route] no route from {start} to {end}")
        return []

    print(f"[route] {' -> '.join(route.path)} cost={route.cost:g}")
    for road in roads_along(network.snapshot(), route.path):
        print(f"[route]   {road.id:<12} {road.name:<22} {road.traffic_level.name:<8} cost={road.cost:g}")
    return list(route.path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--network", type=Path, default=None, help="YAML road network (default: built-in city)")
    parser.add_argument("--start", default="Koduvally")
    parser.add_argument("--end", default="Medical_College")
    parser.add_argument(
        "--traffic",
        action="append",
        default=[],
        metavar="ROAD_ID=LEVEL",
        help="override a road's traffic level (CLEAR, MODERATE, HEAVY, BLOCKED); repeatable",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.network is not None:
        network = load_network(args.network)
        print(f"[route] loaded network from {args.network}")
    else:
        network = build_city_network()
        print("[route] using built-in city network")

    try:
        overrides = parse_traffic_overrides(args.traffic)
        apply_traffic(network, overrides)
    except ValueError as exc:
        parser.error(str(exc))
    if overrides:
        print(f"[route] applied {len(overrides)} traffic override(s)")

    path = run_route(network, args.start, args.end)
    return 0 if path else 1


if __name__ == "__main__":
    raise SystemExit(main())

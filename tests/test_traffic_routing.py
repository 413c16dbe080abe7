"""
Traffic-aware routing over the Kozhikode corridor.
"""

import math

import pytest

from city_graph import INITIAL_ROADS, build_city_network
from dijkstra_engine import TRAFFIC_PATHFINDER, calculate_smart_route, road_cost
from graph import Road
from routing import path_cost
from traffic import TrafficLevel, traffic_multiplier

MAIN_ROUTE = ["Koduvally", "Thamarassery_Rd", "Karanthur", "Vellimadukunnu", "Medical_College"]
BYPASS_ROUTE = ["Koduvally", "Thamarassery_Rd", "Kunnamangalam", "Vellimadukunnu", "Medical_College"]


def _with_traffic(graph, road_id, level):
    return {
        node: [r.with_traffic(level) if r.id == road_id else r for r in roads]
        for node, roads in graph.items()
    }


def _without_road(graph, road_id):
    return {node: [r for r in roads if r.id != road_id] for node, roads in graph.items()}


@pytest.mark.parametrize(
    "level, expected",
    [
        (TrafficLevel.CLEAR, 1.0),
        (TrafficLevel.MODERATE, 2.0),
        (TrafficLevel.HEAVY, 5.0),
        (TrafficLevel.BLOCKED, math.inf),
    ],
)
def test_traffic_multipliers(level, expected):
    assert traffic_multiplier(level) == expected


def test_traffic_level_parse():
    assert TrafficLevel.parse("heavy") is TrafficLevel.HEAVY
    assert TrafficLevel.parse(" Blocked ") is TrafficLevel.BLOCKED
    assert TrafficLevel.parse(TrafficLevel.CLEAR) is TrafficLevel.CLEAR
    with pytest.raises(ValueError):
        TrafficLevel.parse("GRIDLOCK")


def test_road_cost():
    road = Road("r", "Test Road", "B", 4)
    assert road.cost == 4
    assert road.with_traffic(TrafficLevel.HEAVY).cost == 20
    assert math.isinf(road.with_traffic(TrafficLevel.BLOCKED).cost)
    # A zero-length blocked road is still impassable.
    assert math.isinf(Road("z", "Zero", "B", 0, TrafficLevel.BLOCKED).cost)


def test_clear_roads_take_karanthur_highway():
    route = TRAFFIC_PATHFINDER.shortest_route(INITIAL_ROADS, "Koduvally", "Medical_College")

    assert list(route.path) == MAIN_ROUTE
    assert route.cost == 12
    assert path_cost(INITIAL_ROADS, BYPASS_ROUTE, road_cost) == 16


def test_heavy_highway_flips_to_bypass():
    g = _with_traffic(INITIAL_ROADS, "r2_main", TrafficLevel.HEAVY)

    route = TRAFFIC_PATHFINDER.shortest_route(g, "Koduvally", "Medical_College")

    assert list(route.path) == BYPASS_ROUTE
    assert route.cost == 16
    assert path_cost(g, MAIN_ROUTE, road_cost) == 28


def test_moderate_highway_tie_keeps_first_relaxed_predecessor():
    g = _with_traffic(INITIAL_ROADS, "r2_main", TrafficLevel.MODERATE)

    route = TRAFFIC_PATHFINDER.shortest_route(g, "Koduvally", "Medical_College")

    # 3 + 8 + 3 + 2 == 3 + 6 + 5 + 2. Kunnamangalam (9) settles before
    # Karanthur (11) and reaches Vellimadukunnu first; the equal-cost
    # relaxation via Karanthur does not replace it.
    assert route.cost == 16
    assert list(route.path) == BYPASS_ROUTE


@pytest.mark.parametrize("road_id", ["r1", "r2_main", "r2_alt", "r3_main", "r4"])
def test_blocked_road_equals_removed_road(road_id):
    blocked = _with_traffic(INITIAL_ROADS, road_id, TrafficLevel.BLOCKED)
    removed = _without_road(INITIAL_ROADS, road_id)

    for start in INITIAL_ROADS:
        for end in INITIAL_ROADS:
            assert calculate_smart_route(blocked, start, end) == calculate_smart_route(removed, start, end)


def test_blocking_the_only_way_in_is_unreachable():
    g = _with_traffic(INITIAL_ROADS, "r4", TrafficLevel.BLOCKED)
    assert calculate_smart_route(g, "Koduvally", "Medical_College") == []


def test_increasing_traffic_never_lowers_cost():
    levels = [TrafficLevel.CLEAR, TrafficLevel.MODERATE, TrafficLevel.HEAVY, TrafficLevel.BLOCKED]
    for road_id in ("r2_main", "r3_main", "r4"):
        costs = []
        for level in levels:
            g = _with_traffic(INITIAL_ROADS, road_id, level)
            costs.append(TRAFFIC_PATHFINDER.shortest_route(g, "Koduvally", "Medical_College").cost)
        assert costs == sorted(costs)


def test_network_snapshot_reroutes_after_traffic_report():
    network = build_city_network()
    assert list(network.route("Koduvally", "Medical_College").path) == MAIN_ROUTE

    network.set_traffic("r2_main", TrafficLevel.HEAVY)
    assert list(network.route("Koduvally", "Medical_College").path) == BYPASS_ROUTE

    network.set_traffic("r2_main", TrafficLevel.CLEAR)
    network.set_traffic("r3_main", TrafficLevel.BLOCKED)
    assert list(network.route("Koduvally", "Medical_College").path) == BYPASS_ROUTE

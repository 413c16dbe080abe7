"""
Demo road networks around Kozhikode.

CITY_GRAPH / INITIAL_CONNECTIONS: the Eranjipalam junction with a bypass,
plain weighted edges (higher weight = slower road).
MAP_NODES / INITIAL_ROADS: the Koduvally -> Medical College corridor with
traffic levels, all roads clear.
"""

from typing import Dict, List

from graph import Edge, NodeId, Road
from road_network import RoadNetwork
from routing import Coordinates

CITY_GRAPH: Dict[NodeId, Coordinates] = {
    "START": (11.2750, 75.7900),
    "J1": (11.2730, 75.7895),
    "J2": (11.2710, 75.7890),   # Eranjipalam junction
    "J3": (11.2690, 75.7885),
    "END": (11.2670, 75.7880),  # hospital
    "ALT1": (11.2730, 75.7920),  # bypass road A
    "ALT2": (11.2690, 75.7920),  # bypass road B
}

INITIAL_CONNECTIONS: Dict[NodeId, List[Edge]] = {
    "START": [Edge("J1", 1)],
    "J1": [Edge("J2", 2), Edge("ALT1", 4)],
    "J2": [Edge("J3", 2), Edge("J1", 2)],
    "J3": [Edge("END", 1), Edge("J2", 2), Edge("ALT2", 4)],
    "ALT1": [Edge("ALT2", 3), Edge("J1", 4)],
    "ALT2": [Edge("J3", 4), Edge("ALT1", 3), Edge("END", 3)],
    "END": [Edge("J3", 1), Edge("ALT2", 3)],
}

MAP_NODES: Dict[NodeId, Coordinates] = {
    "Koduvally": (11.3550, 75.9100),
    "Thamarassery_Rd": (11.3300, 75.8800),
    "Karanthur": (11.3000, 75.8500),       # main highway
    "Kunnamangalam": (11.3100, 75.8700),   # bypass
    "Vellimadukunnu": (11.2800, 75.8300),
    "Medical_College": (11.2650, 75.8350),
}

INITIAL_ROADS: Dict[NodeId, List[Road]] = {
    "Koduvally": [
        Road("r1", "NH 766", "Thamarassery_Rd", 3),
    ],
    "Thamarassery_Rd": [
        Road("r1_rev", "NH 766", "Koduvally", 3),
        # Shorter, but prone to traffic
        Road("r2_main", "Karanthur Highway", "Karanthur", 4),
        Road("r2_alt", "Kunnamangalam Bypass", "Kunnamangalam", 6),
    ],
    "Karanthur": [
        Road("r2_main_rev", "Karanthur Highway", "Thamarassery_Rd", 4),
        Road("r3_main", "City Road", "Vellimadukunnu", 3),
    ],
    "Kunnamangalam": [
        Road("r2_alt_rev", "Kunnamangalam Bypass", "Thamarassery_Rd", 6),
        Road("r3_alt", "Ring Road", "Vellimadukunnu", 5),
    ],
    "Vellimadukunnu": [
        Road("r3_main_rev", "City Road", "Karanthur", 3),
        Road("r3_alt_rev", "Ring Road", "Kunnamangalam", 5),
        Road("r4", "MCH Road", "Medical_College", 2),
    ],
    "Medical_College": [
        Road("r4_rev", "MCH Road", "Vellimadukunnu", 2),
    ],
}


def build_city_network() -> RoadNetwork:
    """Fresh RoadNetwork seeded with MAP_NODES and INITIAL_ROADS."""
    network = RoadNetwork()
    for node, coords in MAP_NODES.items():
        network.add_node(node, coords)
    for src, roads in INITIAL_ROADS.items():
        for road in roads:
            network.add_road(src, road)
    return network

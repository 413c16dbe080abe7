"""
Traffic levels and their cost multipliers.

A road's effective cost is its base distance scaled by the multiplier of
its current traffic level. BLOCKED maps to infinity, which makes the road
unusable for routing without removing it from the network.
"""

from enum import Enum
from typing import Dict
import math


class TrafficLevel(Enum):
    """Closed set of congestion categories a road can be in."""

    CLEAR = "CLEAR"
    MODERATE = "MODERATE"
    HEAVY = "HEAVY"
    BLOCKED = "BLOCKED"

    @classmethod
    def parse(cls, text: str) -> "TrafficLevel":
        """
        Parse a traffic level name, ignoring case and surrounding whitespace.

        Raises ValueError for anything outside the closed set.
        """
        if isinstance(text, cls):
            return text
        key = str(text).strip().upper()
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(level.name for level in cls)
            raise ValueError(f"Unknown traffic level {text!r} (expected one of: {valid})") from None


TRAFFIC_MULTIPLIERS: Dict[TrafficLevel, float] = {
    TrafficLevel.CLEAR: 1.0,
    TrafficLevel.MODERATE: 2.0,  # takes 2x longer
    TrafficLevel.HEAVY: 5.0,     # takes 5x longer
    TrafficLevel.BLOCKED: math.inf,
}


def traffic_multiplier(level: TrafficLevel) -> float:
    """Cost multiplier applied to a road's base distance."""
    return TRAFFIC_MULTIPLIERS[level]

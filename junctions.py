"""
Road network domain types.

Junctions are the vertices of a road map; roads are the edge payloads.
Coordinates are Dutch RD coordinates in km.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional
import math

from vertices import Vertex


@dataclass(frozen=True)
class Junction(Vertex):
    """
    Named junction (town, interchange) with location and population.

    The name is the unique id; equality and hashing use it alone.
    """

    name: str
    location_x: float = field(default=0.0, compare=False)  # km
    location_y: float = field(default=0.0, compare=False)  # km
    province: Optional[str] = field(default=None, compare=False)
    population: int = field(default=0, compare=False)

    @property
    def id(self) -> str:
        return self.name

    def distance_to(self, other: "Junction") -> float:
        """Cartesian distance between the two RD locations in km."""
        return math.hypot(other.location_x - self.location_x, other.location_y - self.location_y)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Road:
    """
    Road segment between two junctions.

    Stored as the payload of both directed edges of a connection.
    """

    name: str
    length_km: float
    max_speed_kmh: float
    road_type: str = ""

    @property
    def travel_time_min(self) -> float:
        """Minutes needed at the speed limit; infinite if max_speed_kmh is not positive."""
        if self.max_speed_kmh <= 0:
            return math.inf
        return 60.0 * self.length_km / self.max_speed_kmh

    def __str__(self) -> str:
        return self.name


# Weight functions usable as the Dijkstra weight_of plug-in.
WEIGHT_FUNCTIONS: Dict[str, Callable[[Road], float]] = {
    "length": lambda road: road.length_km,
    "travel_time": lambda road: road.travel_time_min,
}


def weight_function(name: str) -> Callable[[Road], float]:
    """Look up a road weight function by name; ValueError if unknown."""
    try:
        return WEIGHT_FUNCTIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown weight '{name}', expected one of: {', '.join(sorted(WEIGHT_FUNCTIONS))}"
        ) from None

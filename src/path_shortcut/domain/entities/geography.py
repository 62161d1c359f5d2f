from dataclasses import dataclass
from typing import Any


# Planar waypoint used by the straight-line and Manhattan generators
@dataclass(frozen=True)
class Point:
    x: float  # meters in projected CRS
    y: float


# Waypoints are opaque to the engine; generators decide what they mean.
Waypoint = Any

JointVector = tuple[float, ...]

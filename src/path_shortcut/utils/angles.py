# utils/angles.py
import math
from collections.abc import Sequence

TWO_PI = 2.0 * math.pi


def normalize_angle(angle_rad: float, angle_min_rad: float, angle_max_rad: float) -> float:
    """Fold an angle into [angle_min, angle_max]; the range is assumed to span 2*pi."""
    if abs(angle_rad) > TWO_PI:
        angle_rad = math.fmod(angle_rad, TWO_PI)
    while angle_rad > angle_max_rad:
        angle_rad -= TWO_PI
    while angle_rad < angle_min_rad:
        angle_rad += TWO_PI
    return angle_rad


def shortest_angle_diff(a1_rad: float, a2_rad: float) -> float:
    """
    Signed shortest difference a1 - a2 in [-pi, pi].
    Positive when following the short way from a2 to a1 is counter-clockwise.
    """
    return normalize_angle(a1_rad - a2_rad, -math.pi, math.pi)


def shortest_angle_dist(a1_rad: float, a2_rad: float) -> float:
    return abs(shortest_angle_diff(a1_rad, a2_rad))


def shortest_angle_dist_with_limits(
    a1_rad: float, a2_rad: float, min_angle: float, max_angle: float
) -> float:
    """
    Shortest distance between a1 and a2, or the major arc when moving from a1
    along the minor arc would leave [min_angle, max_angle].
    """
    diff = shortest_angle_diff(a2_rad, a1_rad)
    if a1_rad + diff > max_angle or a1_rad + diff < min_angle:
        return TWO_PI - abs(diff)
    return abs(diff)


def normalize_angles_into_range(
    angles: Sequence[float], min_limits: Sequence[float], max_limits: Sequence[float]
) -> list[float] | None:
    """
    Normalize each angle into [min_limits[i], min_limits[i] + 2*pi].

    Returns None when the sizes differ, a min limit exceeds its max, or a
    normalized angle still lies outside its limits.
    """
    dim = len(angles)
    if len(min_limits) != dim or len(max_limits) != dim:
        return None
    if any(lo > hi for lo, hi in zip(min_limits, max_limits)):
        return None

    out = []
    for a, lo, hi in zip(angles, min_limits, max_limits):
        a = normalize_angle(a, lo, lo + TWO_PI)
        if a < lo or a > hi:
            return None
        out.append(a)
    return out


def are_joints_within_limits(
    angles: Sequence[float], min_limits: Sequence[float], max_limits: Sequence[float]
) -> bool:
    if len(min_limits) != len(angles) or len(max_limits) != len(angles):
        return False
    return all(lo <= a <= hi for a, lo, hi in zip(angles, min_limits, max_limits))


def sign(val: float) -> int:
    return (val > 0) - (val < 0)


def to_degrees(angle_rad: float) -> float:
    return math.degrees(angle_rad)


def to_radians(angle_deg: float) -> float:
    return math.radians(angle_deg)

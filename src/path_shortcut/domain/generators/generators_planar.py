import math

from path_shortcut.app.protocols import PathGenerator
from path_shortcut.domain.entities.geography import Point
from path_shortcut.domain.entities.paths import GeneratedPath


def euclid_m(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def manhattan_m(a: Point, b: Point) -> float:
    return abs(b.x - a.x) + abs(b.y - a.y)


class StraightLineGenerator(PathGenerator):
    def __init__(self, max_length_m: float | None = None):
        self.max_length_m = max_length_m

    def generate_path(self, a, b):
        L = euclid_m(a, b)
        if self.max_length_m is not None and L > self.max_length_m:
            return None
        return GeneratedPath([a, b], L)


class ManhattanGenerator(PathGenerator):
    """x first, then y. Axis-aligned moves skip the corner."""

    def generate_path(self, a, b):
        corner = Point(b.x, a.y)
        pts = [a, b] if corner in (a, b) else [a, corner, b]
        return GeneratedPath(pts, manhattan_m(a, b))

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from path_shortcut.domain.entities.geography import Waypoint
from path_shortcut.domain.entities.paths import GeneratedPath


# ------------- Generators --------------------
@runtime_checkable
class PathGenerator(Protocol):
    """
    Responsibilities:
      • Propose a path connecting two waypoints, endpoints inclusive.
      • Report its total cost on the scale the engine's comparator expects.
    Return None when the connection is infeasible for any reason
    (constraint violation, collision, joint limits). That is not an error.
    """

    def generate_path(self, start: Waypoint, end: Waypoint) -> GeneratedPath | None: ...


@runtime_checkable
class PathValidator(Protocol):
    """Feasibility check over a whole candidate path (e.g. collision checking)."""

    def __call__(self, path: Sequence[Waypoint]) -> bool: ...


# --------------- Costs -------------------------


@runtime_checkable
class CostCompare(Protocol):
    """
    leq(a, b): is cost a an acceptable replacement for (no worse than) cost b?
    Need not be a strict total order; it may embed a tolerance.
    """

    def __call__(self, a: Any, b: Any) -> bool: ...

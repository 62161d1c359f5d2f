from dataclasses import dataclass, field
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class GeneratedPath:
    """A generator's proposal: waypoints from start to end (inclusive) and their total cost."""

    path: list[Any]
    cost: Any


class ShortcutStatus(Enum):
    OK = "ok"
    TRIVIAL = "trivial"  # fewer than two waypoints, nothing to do
    SHAPE_MISMATCH = "shape_mismatch"  # len(costs) != len(path) - 1


@dataclass(frozen=True)
class ShortcutResult:
    ok: bool
    status: ShortcutStatus
    path: list[Any] = field(default_factory=list)
    passes: int = 0  # generator passes over a window
    commits: int = 0  # spans appended to the output

    def __bool__(self) -> bool:
        return self.ok

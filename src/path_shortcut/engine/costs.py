# engine/costs.py
from collections.abc import Callable, Sequence
from typing import Any

from path_shortcut.app.protocols import CostCompare


def accumulate_costs(costs: Sequence[Any]) -> list[Any]:
    """
    Prefix sums over per-segment costs: accum[0] = 0, accum[i] = accum[i-1] + costs[i-1].
    accum[i] - accum[j] is the original cost of travelling waypoints j..i.
    The zero is taken from the cost type itself so Fraction/Decimal/numpy costs stay exact.
    """
    zero = costs[0] - costs[0] if costs else 0
    accum = [zero]
    for c in costs:
        accum.append(accum[-1] + c)
    return accum


def segment_costs(path: Sequence[Any], distance: Callable[[Any, Any], Any]) -> list[Any]:
    """Cost of each original transition, len(path) - 1 entries."""
    return [distance(a, b) for a, b in zip(path, path[1:])]


# ------------- Comparators ------------------


def strict_leq(a, b) -> bool:
    return a <= b


def tolerance_leq(*, rel_tol: float = 0.0, abs_tol: float = 0.0) -> CostCompare:
    """Accept a when it exceeds b by at most max(abs_tol, rel_tol * |b|)."""
    if rel_tol < 0 or abs_tol < 0:
        raise ValueError("tolerances must be >= 0")

    def leq(a, b) -> bool:
        return a <= b + max(abs_tol, rel_tol * abs(b))

    return leq

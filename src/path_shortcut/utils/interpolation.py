# utils/interpolation.py
import math
from collections.abc import Sequence

import numpy as np

from path_shortcut.utils.angles import (
    TWO_PI,
    normalize_angles_into_range,
    shortest_angle_diff,
    sign,
)


def _remaining_along(goal: float, cur: float, direction: float, eps: float) -> float:
    """Signed distance from cur to goal travelling only in `direction`."""
    rem = math.fmod(direction * (goal - cur), TWO_PI)
    if rem < 0:
        rem += TWO_PI
    if rem > TWO_PI - eps:
        rem -= TWO_PI  # already at the goal up to rounding
    return direction * rem


def interpolate_path(
    start: Sequence[float],
    end: Sequence[float],
    min_limits: Sequence[float],
    max_limits: Sequence[float],
    inc: Sequence[float],
    continuous_joints: Sequence[bool] | None = None,
    eps: float = 1e-6,
) -> list[tuple[float, ...]] | None:
    """
    Dense joint-space path from start to end, stepping each joint by at most inc[i].

    Every joint heads along its shortest arc unless that arc would leave the
    joint limits of a non-continuous joint, in which case it goes the other way
    around. The normalized start is the first waypoint.

    Returns None on size mismatch, inconsistent limits, non-positive increments,
    or endpoints that cannot be normalized into their limits.
    """
    dim = len(start)
    if continuous_joints is None:
        continuous_joints = [False] * dim
    if any(len(v) != dim for v in (end, min_limits, max_limits, inc, continuous_joints)):
        return None
    if any(i <= 0 for i in inc):
        return None

    start_norm = normalize_angles_into_range(start, min_limits, max_limits)
    end_norm = normalize_angles_into_range(end, min_limits, max_limits)
    if start_norm is None or end_norm is None:
        return None

    lo = np.asarray(min_limits, dtype=float)
    hi = np.asarray(max_limits, dtype=float)
    step = np.asarray(inc, dtype=float)

    dirs = np.zeros(dim)
    long_way = [False] * dim
    max_iterations = 0
    for i in range(dim):
        diff = shortest_angle_diff(end_norm[i], start_norm[i])
        wraps = not (lo[i] <= start_norm[i] + diff <= hi[i])
        if wraps and not continuous_joints[i]:
            dirs[i] = -sign(diff)
            long_way[i] = True
            dist = TWO_PI - abs(diff)
        else:
            dirs[i] = sign(diff)
            dist = abs(diff)

        delta = abs(end_norm[i] - start_norm[i])
        if delta < eps or delta <= step[i]:
            iters = 1
        else:
            iters = math.ceil(dist / step[i])
        max_iterations = max(max_iterations, iters)

    cur = np.asarray(start_norm, dtype=float)
    goal = np.asarray(end_norm, dtype=float)
    path = [tuple(float(v) for v in cur)]
    for _ in range(max_iterations):
        remaining = np.array(
            [
                _remaining_along(g, c, d, eps) if lw else shortest_angle_diff(g, c)
                for g, c, d, lw in zip(goal, cur, dirs, long_way)
            ]
        )
        # finish a joint with the last partial increment, otherwise take a full step
        cur = cur + np.where(np.abs(remaining) < step, remaining, dirs * step)
        cur = np.where(cur > hi, cur - TWO_PI, cur)
        cur = np.where(cur < lo, cur + TWO_PI, cur)
        path.append(tuple(float(v) for v in cur))
    return path

# engine/engine.py

import time
from collections.abc import Iterable, Sequence
from typing import Any

from path_shortcut.app.protocols import CostCompare, PathGenerator
from path_shortcut.domain.entities.paths import GeneratedPath, ShortcutResult, ShortcutStatus

from .costs import accumulate_costs, strict_leq
from .hooks import EngineHooks, NoopHooks


def _commit(result: list, span: Sequence[Any]) -> None:
    # consecutive spans share their junction waypoint; keep one copy
    if result:
        result.pop()
    result.extend(span)


class ShortcutEngine:
    """
    Greedy, windowed path shortcutting.

    A window [start, end] over the original path grows while some generator
    keeps proposing an acceptable connection between its endpoints. When a
    pass over the generators finds nothing, the best connection found so far
    is committed and a new window opens where that connection ended.

    A candidate for [start, end] is accepted when
    ``leq(candidate_cost, best_cost + cost(end - 1 -> end))``, where best_cost
    is updated as soon as a generator is accepted. Generator order therefore
    matters and is preserved exactly.

    ``granularity`` is the maximum number of original segments the window
    advances after a successful pass. ``window`` is reserved: it is validated,
    stored and reported to hooks, but it does not affect the result.

    The engine keeps no per-call state, so one instance can serve many calls.
    """

    def __init__(
        self,
        *,
        granularity: int = 1,
        window: int = 0,
        leq: CostCompare = strict_leq,
        hooks: EngineHooks | None = None,
    ):
        if granularity < 1:
            raise ValueError(f"granularity must be >= 1, got {granularity}")
        if window < 0:
            raise ValueError(f"window must be >= 0, got {window}")
        self.granularity, self.window, self.leq = granularity, window, leq
        self._hooks = hooks or NoopHooks()

    def shortcut(
        self,
        path: Iterable[Any],
        costs: Iterable[Any],
        generators: Iterable[PathGenerator],
    ) -> ShortcutResult:
        t0 = time.perf_counter()
        path, costs, generators = list(path), list(costs), list(generators)
        n = len(path)
        self._hooks.run_start(
            waypoints=n,
            generators=len(generators),
            granularity=self.granularity,
            window=self.window,
        )

        if len(costs) != max(n - 1, 0):
            return self._finish(t0, n, ShortcutResult(False, ShortcutStatus.SHAPE_MISMATCH))
        if n < 2:
            return self._finish(t0, n, ShortcutResult(True, ShortcutStatus.TRIVIAL, path=path))

        accum = accumulate_costs(costs)
        result: list[Any] = []
        passes = commits = 0

        start, end = 0, 1
        best_end = end  # where best_path stops in the original path
        best_path: list[Any] | None = path[start : end + 1]
        best_cost = accum[end] - accum[start]

        while end < n:
            passes += 1
            improved = False
            last_seg = accum[end] - accum[end - 1]
            for gen in generators:
                threshold = best_cost + last_seg
                cand = self._generate(gen, path, start, end)
                accepted = cand is not None and self.leq(cand.cost, threshold)
                self._hooks.candidate(
                    start=start,
                    end=end,
                    generator=gen,
                    accepted=accepted,
                    cost=None if cand is None else cand.cost,
                    threshold=threshold,
                )
                if accepted:
                    improved = True
                    best_path, best_cost, best_end = list(cand.path), cand.cost, end

            if improved:
                remaining = n - 1 - end
                end = n if remaining == 0 else end + min(self.granularity, remaining)
                self._hooks.extend(start=start, end=end)
                continue

            _commit(result, best_path)
            commits += 1
            self._hooks.commit(start=start, end=best_end, size=len(best_path))

            start = best_end
            if start == n - 1:
                best_path = None  # committed through the last waypoint
                break
            if end == start:
                end += 1
            best_path = path[start : end + 1]
            best_cost = accum[end] - accum[start]
            best_end = end

        if best_path is not None:
            _commit(result, best_path)
            commits += 1
            self._hooks.commit(start=start, end=best_end, size=len(best_path))

        return self._finish(
            t0,
            n,
            ShortcutResult(True, ShortcutStatus.OK, path=result, passes=passes, commits=commits),
        )

    # --------------- Helpers -----------------------------

    def _generate(self, gen: PathGenerator, path: list, start: int, end: int) -> GeneratedPath | None:
        try:
            return gen.generate_path(path[start], path[end])
        except Exception as exc:
            self._hooks.error(start=start, end=end, generator=gen, exc=exc)
            raise

    def _finish(self, t0: float, n: int, res: ShortcutResult) -> ShortcutResult:
        self._hooks.run_end(
            status=res.status.value,
            waypoints_in=n,
            waypoints_out=len(res.path),
            passes=res.passes,
            commits=res.commits,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return res


def shortcut_path(
    path: Iterable[Any],
    costs: Iterable[Any],
    generators: Iterable[PathGenerator],
    *,
    window: int = 0,
    granularity: int = 1,
    leq: CostCompare = strict_leq,
    hooks: EngineHooks | None = None,
) -> ShortcutResult:
    """One-shot form of ShortcutEngine(...).shortcut(path, costs, generators)."""
    engine = ShortcutEngine(granularity=granularity, window=window, leq=leq, hooks=hooks)
    return engine.shortcut(path, costs, generators)

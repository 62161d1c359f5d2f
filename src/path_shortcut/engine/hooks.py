# engine/hooks.py
from typing import Protocol


class EngineHooks(Protocol):
    def run_start(self, *, waypoints, generators, granularity, window): ...
    def candidate(self, *, start, end, generator, accepted, cost, threshold): ...
    def extend(self, *, start, end): ...
    def commit(self, *, start, end, size): ...
    def run_end(self, *, status, waypoints_in, waypoints_out, passes, commits, wall_ms): ...
    def error(self, *, start, end, generator, exc: BaseException): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def candidate(self, **_):
        pass

    def extend(self, **_):
        pass

    def commit(self, **_):
        pass

    def run_end(self, **_):
        pass

    def error(self, **_):
        pass

# io/engine_logging.py
import json
import logging
import sys

from path_shortcut.engine.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="path_shortcut", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class EngineLogging(NoopHooks):
    """
    Structured logs for a shortcut run. Lifecycle at INFO, commits at DEBUG,
    per-candidate decisions only in debug mode (sampled).
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._candidates = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    @staticmethod
    def _name(gen) -> str:
        return type(gen).__name__

    # --------------------------------------------------------

    def run_start(self, *, waypoints, generators, granularity, window):
        self._candidates = 0
        self._emit(
            "INFO",
            "run_start",
            waypoints=waypoints,
            generators=generators,
            granularity=granularity,
            window=window,
        )

    def candidate(self, *, start, end, generator, accepted, cost, threshold):
        self._candidates += 1
        if self.debug and (self._candidates % self.sample_every) == 0:
            self._emit(
                "DEBUG",
                "candidate",
                start=start,
                end=end,
                generator=self._name(generator),
                accepted=accepted,
                cost=cost,
                threshold=threshold,
            )

    def extend(self, *, start, end):
        if self.debug:
            self._emit("DEBUG", "extend", start=start, end=end)

    def commit(self, *, start, end, size):
        self._emit("DEBUG", "commit", start=start, end=end, size=size)

    def run_end(self, *, status, waypoints_in, waypoints_out, passes, commits, wall_ms):
        level = "WARNING" if status == "shape_mismatch" else "INFO"
        self._emit(
            level,
            "run_end",
            status=status,
            waypoints_in=waypoints_in,
            waypoints_out=waypoints_out,
            passes=passes,
            commits=commits,
            candidates=self._candidates,
            wall_ms=wall_ms,
        )

    def error(self, *, start, end, generator, exc: BaseException):
        self._emit(
            "ERROR",
            "generator_error",
            start=start,
            end=end,
            generator=self._name(generator),
            error=str(exc),
        )

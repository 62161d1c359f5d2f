import json
import logging

import pytest

from path_shortcut.domain.entities.paths import GeneratedPath
from path_shortcut.engine.engine import shortcut_path
from path_shortcut.io.engine_logging import EngineLogging, _JsonFormatter


class _Direct:
    def generate_path(self, a, b):
        return GeneratedPath([a, b], b - a)


class _Broken:
    def generate_path(self, a, b):
        raise ValueError("bad waypoint")


@pytest.fixture
def logger() -> logging.Logger:
    log = logging.getLogger("test.path_shortcut.engine_logging")
    log.setLevel(logging.DEBUG)
    return log


def _messages(caplog) -> list[str]:
    return [r.getMessage() for r in caplog.records]


def test_lifecycle_records_carry_run_id(caplog, logger):
    hooks = EngineLogging(run_id="r-1", logger=logger)
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        shortcut_path([0, 1, 2, 3], [1, 1, 1], [_Direct()], hooks=hooks)

    msgs = _messages(caplog)
    assert msgs[0] == "run_start" and msgs[-1] == "run_end"
    assert "commit" in msgs
    assert "candidate" not in msgs  # only logged in debug mode
    assert all(r.extra["run_id"] == "r-1" for r in caplog.records)

    end = caplog.records[-1]
    assert end.levelno == logging.INFO
    assert end.extra["status"] == "ok"
    assert end.extra["waypoints_in"] == 4 and end.extra["waypoints_out"] == 2
    assert end.extra["candidates"] == 3


def test_debug_mode_samples_candidates(caplog, logger):
    hooks = EngineLogging(run_id="r-2", debug=True, sample_every=2, logger=logger)
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        shortcut_path(list(range(6)), [1] * 5, [_Direct()], hooks=hooks)

    cands = [r for r in caplog.records if r.getMessage() == "candidate"]
    assert len(cands) == 2  # 5 candidates, every second one logged
    assert cands[0].extra["generator"] == "_Direct"
    assert cands[0].extra["accepted"] is True
    assert "extend" in _messages(caplog)


def test_shape_mismatch_logs_warning(caplog, logger):
    hooks = EngineLogging(logger=logger)
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        shortcut_path([0, 1, 2], [1], [], hooks=hooks)
    end = caplog.records[-1]
    assert end.getMessage() == "run_end"
    assert end.levelno == logging.WARNING
    assert end.extra["status"] == "shape_mismatch"


def test_generator_error_logged(caplog, logger):
    hooks = EngineLogging(logger=logger)
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with pytest.raises(ValueError):
            shortcut_path([0, 1], [1], [_Broken()], hooks=hooks)
    err = [r for r in caplog.records if r.getMessage() == "generator_error"]
    assert len(err) == 1
    assert err[0].levelno == logging.ERROR
    assert err[0].extra["error"] == "bad waypoint"
    assert err[0].extra["generator"] == "_Broken"


def test_json_formatter_flattens_extra():
    rec = logging.LogRecord("path_shortcut", logging.INFO, __file__, 1, "run_end", None, None)
    rec.extra = {"run_id": "r-3", "passes": 4}
    out = json.loads(_JsonFormatter().format(rec))
    assert out == {
        "level": "INFO",
        "msg": "run_end",
        "logger": "path_shortcut",
        "run_id": "r-3",
        "passes": 4,
    }

from types import SimpleNamespace

import pytest

from path_shortcut.config.models import (
    CheckedGeneratorModel,
    ComparatorToleranceModel,
    JointInterpolationGeneratorModel,
    ManhattanGeneratorModel,
    StraightLineGeneratorModel,
)
from path_shortcut.domain.entities.geography import Point
from path_shortcut.domain.generators.generators_checked import CheckedGenerator
from path_shortcut.domain.generators.generators_joint import JointInterpolationGenerator
from path_shortcut.domain.generators.generators_planar import (
    ManhattanGenerator,
    StraightLineGenerator,
)
from path_shortcut.engine.costs import strict_leq
from path_shortcut.runtime.registries import (
    make_comparator,
    make_generator,
    make_generators,
    register_validator,
    resolve_validator,
)


def test_make_generators_builds_each_kind_in_order():
    cfgs = [
        ManhattanGeneratorModel(),
        StraightLineGeneratorModel(max_length_m=2.0),
        JointInterpolationGeneratorModel(min_limits=[-1.0], max_limits=[1.0], increments=[0.1]),
    ]
    gens = make_generators(cfgs)
    assert [type(g) for g in gens] == [
        ManhattanGenerator,
        StraightLineGenerator,
        JointInterpolationGenerator,
    ]
    assert gens[1].max_length_m == 2.0


def test_unknown_kinds_raise_value_error():
    with pytest.raises(ValueError, match="generator kind"):
        make_generator(SimpleNamespace(kind="teleport"))
    with pytest.raises(ValueError, match="comparator kind"):
        make_comparator(SimpleNamespace(kind="fuzzy"))


def test_checked_generator_uses_validator_from_deps():
    cfg = CheckedGeneratorModel(inner=StraightLineGeneratorModel(), validator="short_only")
    gen = make_generator(
        cfg, deps={"validators": {"short_only": lambda path: path[-1].x < 2}}
    )
    assert isinstance(gen, CheckedGenerator)
    assert gen.generate_path(Point(0, 0), Point(1, 0)) is not None
    assert gen.generate_path(Point(0, 0), Point(3, 0)) is None


def test_registered_validator_is_found_by_name():
    @register_validator("test_registry_always_free")
    def _free(path):
        return True

    assert resolve_validator("test_registry_always_free", deps={}) is _free
    # per-build validators take precedence
    def _blocked(path):
        return False

    deps = {"validators": {"test_registry_always_free": _blocked}}
    assert resolve_validator("test_registry_always_free", deps=deps) is _blocked


def test_missing_validator_raises_value_error():
    cfg = CheckedGeneratorModel(inner=ManhattanGeneratorModel(), validator="no_such_check")
    with pytest.raises(ValueError, match="Unknown validator 'no_such_check'"):
        make_generator(cfg)
    with pytest.raises(ValueError, match="Unknown validator"):
        resolve_validator("no_such_check", deps={"validators": {}})


def test_comparators():
    assert make_comparator(SimpleNamespace(kind="strict")) is strict_leq
    leq = make_comparator(ComparatorToleranceModel(abs_tol=0.5))
    assert leq(1.4, 1.0)
    assert not leq(1.6, 1.0)

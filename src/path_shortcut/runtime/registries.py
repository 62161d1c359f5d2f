# runtime/registries.py
from collections.abc import Callable
from typing import Any

from path_shortcut.app.protocols import CostCompare, PathGenerator, PathValidator
from path_shortcut.config.models import (
    CheckedGeneratorModel,
    ComparatorStrictModel,
    ComparatorToleranceModel,
    ComparatorUnion,
    GeneratorUnion,
    JointInterpolationGeneratorModel,
    ManhattanGeneratorModel,
    StraightLineGeneratorModel,
)
from path_shortcut.domain.generators.generators_checked import CheckedGenerator
from path_shortcut.domain.generators.generators_joint import JointInterpolationGenerator
from path_shortcut.domain.generators.generators_planar import (
    ManhattanGenerator,
    StraightLineGenerator,
)
from path_shortcut.engine.costs import strict_leq, tolerance_leq

GeneratorFactory = Callable[[GeneratorUnion, dict], PathGenerator]
ComparatorFactory = Callable[[ComparatorUnion, dict], CostCompare]

_generator_registry: dict[str, GeneratorFactory] = {}
_comparator_registry: dict[str, ComparatorFactory] = {}
_validator_registry: dict[str, PathValidator] = {}


# ------------------- Generators ---------------------------


def register_generator(kind: str):
    def deco(fn: GeneratorFactory):
        _generator_registry[kind] = fn
        return fn

    return deco


def make_generator(cfg: GeneratorUnion, *, deps: dict | None = None) -> PathGenerator:
    try:
        factory = _generator_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown generator kind {cfg.kind!r}")
    return factory(cfg, deps or {})


def make_generators(cfgs: list[GeneratorUnion], *, deps: dict | None = None) -> list[PathGenerator]:
    return [make_generator(c, deps=deps) for c in cfgs]


@register_generator("straight_line")
def _make_straight_line(cfg: StraightLineGeneratorModel, deps):
    return StraightLineGenerator(max_length_m=cfg.max_length_m)


@register_generator("manhattan")
def _make_manhattan(cfg: ManhattanGeneratorModel, deps):
    return ManhattanGenerator()


@register_generator("joint_interpolation")
def _make_joint(cfg: JointInterpolationGeneratorModel, deps):
    return JointInterpolationGenerator(
        cfg.min_limits, cfg.max_limits, cfg.increments, cfg.continuous_joints, cfg.eps
    )


@register_generator("checked")
def _make_checked(cfg: CheckedGeneratorModel, deps):
    inner = make_generator(cfg.inner, deps=deps)
    return CheckedGenerator(inner, resolve_validator(cfg.validator, deps=deps))


# ----- Validators --------------------------


def register_validator(name: str):
    def deco(fn: PathValidator):
        _validator_registry[name] = fn
        return fn

    return deco


def resolve_validator(name: str, *, deps: dict) -> PathValidator:
    """
    deps can include:
      - 'validators': dict[str, PathValidator]  # per-build validators, checked first
    """
    local = deps.get("validators", {})
    if name in local:
        return local[name]
    try:
        return _validator_registry[name]
    except KeyError:
        raise ValueError(f"Unknown validator {name!r}")


# --------------------- Comparators ---------------------


def register_comparator(kind: str):
    def deco(fn: ComparatorFactory):
        _comparator_registry[kind] = fn
        return fn

    return deco


def make_comparator(cfg: ComparatorUnion, *, deps: dict | None = None) -> CostCompare:
    try:
        factory = _comparator_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown comparator kind {cfg.kind!r}")
    return factory(cfg, deps or {})


@register_comparator("strict")
def _make_strict(cfg: ComparatorStrictModel, deps: dict[str, Any]):
    return strict_leq


@register_comparator("tolerance")
def _make_tolerance(cfg: ComparatorToleranceModel, deps: dict[str, Any]):
    return tolerance_leq(rel_tol=cfg.rel_tol, abs_tol=cfg.abs_tol)

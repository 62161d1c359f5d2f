# path_shortcut/app/build.py
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from path_shortcut.app.protocols import PathGenerator, PathValidator
from path_shortcut.config.models import ScenarioModel
from path_shortcut.domain.entities.paths import ShortcutResult
from path_shortcut.engine.engine import ShortcutEngine
from path_shortcut.engine.hooks import NoopHooks
from path_shortcut.io.engine_logging import EngineLogging
from path_shortcut.runtime.registries import make_comparator, make_generators


@dataclass
class App:
    engine: ShortcutEngine
    generators: list[PathGenerator]

    def shortcut(self, path: Iterable[Any], costs: Iterable[Any]) -> ShortcutResult:
        return self.engine.shortcut(path, costs, self.generators)


def build(
    cfg: ScenarioModel | Mapping,
    *,
    validators: Mapping[str, PathValidator] | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)
    deps = {"validators": dict(validators or {})}

    # 1) Hooks
    hooks = (
        EngineLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )

    # 2) Strategies, in configured order
    sc = model.shortcut
    generators = make_generators(sc.generators, deps=deps)
    leq = make_comparator(sc.comparator, deps=deps)

    engine = ShortcutEngine(granularity=sc.granularity, window=sc.window, leq=leq, hooks=hooks)
    return App(engine=engine, generators=generators)

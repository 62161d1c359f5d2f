from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(1, ge=1)


# ----------------- GENERATORS ---------------------


class StraightLineGeneratorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["straight_line"] = "straight_line"
    max_length_m: float | None = Field(None, gt=0)


class ManhattanGeneratorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["manhattan"] = "manhattan"


class JointInterpolationGeneratorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["joint_interpolation"] = "joint_interpolation"
    min_limits: list[float]
    max_limits: list[float]
    increments: list[float]
    continuous_joints: list[bool] | None = None
    eps: float = 1e-6

    @field_validator("increments")
    @classmethod
    def _positive(cls, v: list[float], info: ValidationInfo) -> list[float]:
        if any(x <= 0 for x in v):
            raise ValueError(f"{info.field_name} must all be > 0")
        return v

    @model_validator(mode="after")
    def _check_dims(self):
        n = len(self.min_limits)
        for name in ("max_limits", "increments", "continuous_joints"):
            v = getattr(self, name)
            if v is not None and len(v) != n:
                raise ValueError(f"{name} must have length {n}, got {len(v)}")
        if any(lo > hi for lo, hi in zip(self.min_limits, self.max_limits)):
            raise ValueError("min_limits must not exceed max_limits")
        return self


BaseGeneratorUnion = Annotated[
    StraightLineGeneratorModel | ManhattanGeneratorModel | JointInterpolationGeneratorModel,
    Field(discriminator="kind"),
]


class CheckedGeneratorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["checked"] = "checked"
    inner: BaseGeneratorUnion
    validator: str  # name in the validator registry or deps["validators"]


GeneratorUnion = Annotated[
    StraightLineGeneratorModel
    | ManhattanGeneratorModel
    | JointInterpolationGeneratorModel
    | CheckedGeneratorModel,
    Field(discriminator="kind"),
]

# ----------------- COMPARATORS ---------------------


class ComparatorStrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["strict"] = "strict"


class ComparatorToleranceModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["tolerance"] = "tolerance"
    rel_tol: float = Field(0.0, ge=0)
    abs_tol: float = Field(0.0, ge=0)


ComparatorUnion = Annotated[
    ComparatorStrictModel | ComparatorToleranceModel, Field(discriminator="kind")
]


# ------------------------------------------------------------------


class ShortcutModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    granularity: int = Field(1, ge=1)
    window: int = Field(
        0, ge=0, description="Reserved. Accepted and logged; has no effect on the result."
    )
    comparator: ComparatorUnion = Field(default_factory=ComparatorStrictModel)
    generators: list[GeneratorUnion] = Field(default_factory=list)  # order matters


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    shortcut: ShortcutModel = Field(default_factory=ShortcutModel)

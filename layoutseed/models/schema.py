"""Possibility schema models — the registry wire format.

Raw schemas are plain dicts (camelCase keys, as authored). Polymorphic fields
are normalised on load into tagged variants:

    spacing:    5 | [2, 6] | [{"percent": 50, "value": 4}, ...] | {"min": 0, "max": 16, "units": 4}
    arguments:  {"key": "value"} | [{"percent": 30, "values": {...}}, ...]
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter


# ---------------------------------------------------------------------------
# Spacing variants
# ---------------------------------------------------------------------------


class FixedSpacing(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    value: float = 0.0


class RangeSpacing(BaseModel):
    """Uniform integer draw between two bounds, inclusive."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["range"] = "range"
    low: float
    high: float


class UnitSpacing(BaseModel):
    """Uniform draw in [min, max], rounded to a multiple of ``units``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["units"] = "units"
    min: float
    max: float
    units: float | None = None


class WeightedSpacingOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    percent: float = 0.0
    value: Union[float, UnitSpacing] = 0.0


class WeightedSpacing(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["weighted"] = "weighted"
    options: list[WeightedSpacingOption] = Field(default_factory=list)


SpacingVariant = Union[FixedSpacing, RangeSpacing, WeightedSpacing, UnitSpacing]
_SPACING_MODELS = (FixedSpacing, RangeSpacing, WeightedSpacing, UnitSpacing)


def coerce_spacing(raw: Any) -> Any:
    """Tag a raw spacing value with its variant kind."""
    if raw is None or isinstance(raw, _SPACING_MODELS):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return {"kind": "fixed", "value": raw}
    if isinstance(raw, (list, tuple)):
        if raw and all(isinstance(v, (int, float)) for v in raw):
            return {"kind": "range", "low": raw[0], "high": raw[-1]}
        return {"kind": "weighted", "options": list(raw)}
    if isinstance(raw, dict) and "kind" not in raw:
        return {"kind": "units", **raw}
    return raw


SpacingSpec = Annotated[
    Union[Annotated[SpacingVariant, Field(discriminator="kind")], None],
    BeforeValidator(coerce_spacing),
]

_spacing_adapter: TypeAdapter[Any] = TypeAdapter(SpacingSpec)


def parse_spacing(raw: Any) -> SpacingVariant | None:
    """Validate a raw spacing value into its tagged variant (or None)."""
    return _spacing_adapter.validate_python(raw)


# ---------------------------------------------------------------------------
# Argument variants
# ---------------------------------------------------------------------------


class LiteralArguments(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    values: dict[str, Any] = Field(default_factory=dict)


class WeightedArgumentsOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    percent: float = 0.0
    values: dict[str, Any] = Field(default_factory=dict)


class WeightedArguments(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["weighted"] = "weighted"
    options: list[WeightedArgumentsOption] = Field(default_factory=list)


ArgumentsVariant = Union[LiteralArguments, WeightedArguments]


def coerce_arguments(raw: Any) -> Any:
    # Literal dicts are wrapped whole: game arguments may use any key, "kind" included.
    if raw is None or isinstance(raw, (LiteralArguments, WeightedArguments)):
        return raw
    if isinstance(raw, (list, tuple)):
        return {"kind": "weighted", "options": list(raw)}
    if isinstance(raw, dict):
        return {"kind": "literal", "values": raw}
    return raw


ArgumentsSpec = Annotated[
    Union[Annotated[ArgumentsVariant, Field(discriminator="kind")], None],
    BeforeValidator(coerce_arguments),
]


# ---------------------------------------------------------------------------
# Schema records
# ---------------------------------------------------------------------------


class Sizing(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float | None = None
    height: float | None = None


class Stretch(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: bool = False
    height: bool = False


class ChildReference(BaseModel):
    """One potential sub-placement inside a schema's contents.

    Extra keys are kept: ``argumentMap`` copies them into arguments.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    title: str
    type: str | None = None
    source: str | None = None
    percent: float | None = None
    sizing: Sizing | None = None
    arguments: ArgumentsSpec = None
    stretch: Stretch | None = None

    def lookup(self, key: str) -> Any:
        """Value of a declared or extra key, None when absent."""
        if self.model_extra and key in self.model_extra:
            return self.model_extra[key]
        return getattr(self, key, None)


class PossibilityContents(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    # mode/direction/snap stay plain strings: unknown values load and are skipped later
    direction: str | None = None
    mode: str | None = None
    snap: str | None = None
    spacing: SpacingSpec = None
    argument_map: dict[str, str] | None = Field(default=None, alias="argumentMap")
    limit: int | None = None
    children: list[ChildReference] = Field(default_factory=list)


class Possibility(BaseModel):
    """A named template: fixed size plus the rule for subdividing it."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    contents: PossibilityContents | None = None

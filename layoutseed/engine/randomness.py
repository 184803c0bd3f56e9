"""Random draws behind an injected source.

The source only needs a ``random() -> float`` method returning values in
[0, 1); a numpy Generator, ``random.Random`` or a scripted test double all
qualify. Replaying the same sequence of draws reproduces the same layout.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

import numpy as np

from layoutseed.models.schema import (
    FixedSpacing,
    RangeSpacing,
    UnitSpacing,
    WeightedSpacing,
    parse_spacing,
)
from layoutseed.utils.geometry import Position, fits

if TYPE_CHECKING:
    from layoutseed.engine.registry import PossibilityRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float: ...


class NumpyRandomSource:
    """Uniform floats in [0, 1) from a numpy Generator."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def random(self) -> float:
        return float(self._rng.random())


class _CallableSource:
    def __init__(self, fn: Callable[[], float]) -> None:
        self._fn = fn

    def random(self) -> float:
        return self._fn()


def as_random_source(source: RandomSource | Callable[[], float] | None) -> RandomSource:
    """Accept a source object, a bare zero-argument function, or None for numpy."""
    if source is None:
        return NumpyRandomSource()
    if hasattr(source, "random"):
        return source
    if callable(source):
        return _CallableSource(source)
    raise TypeError(f"Not a random source: {source!r}")


class Randomizer:
    """Percentage draws, ranged draws and weighted choice over one source."""

    def __init__(self, source: RandomSource | Callable[[], float] | None = None) -> None:
        self.source = as_random_source(source)
        self._spacing_handlers: dict[str, Callable[[Any], float]] = {
            "fixed": self._fixed_spacing,
            "range": self._range_spacing,
            "weighted": self._weighted_spacing,
            "units": self._unit_spacing,
        }

    def percentage_draw(self) -> int:
        """Integer in [1, 100]."""
        return math.floor(self.source.random() * 100) + 1

    def range_draw(self, low: float, high: float) -> float:
        """Integer step in [low, high], inclusive of both bounds."""
        return math.floor(self.source.random() * (1 + high - low)) + low

    def weighted_choose(self, items: Sequence[T]) -> T | None:
        """Pick one item by its ``percent`` weight.

        Weights need not sum to 100: the last item catches any draw beyond
        the accumulated total.
        """
        if not items:
            return None
        if len(items) == 1:
            return items[0]

        draw = self.percentage_draw()
        total = 0.0
        for item in items:
            total += getattr(item, "percent", None) or 0
            if total >= draw:
                return item
        return items[-1]

    def weighted_choose_fitting(
        self,
        items: Sequence[T],
        box: Position,
        registry: PossibilityRegistry,
    ) -> T | None:
        """Weighted choice among items whose schema fits the box's remaining space."""
        width, height = box.span_width, box.span_height
        fitting = []
        for item in items:
            schema = registry.require(item.title)
            if fits(schema.width, schema.height, width, height):
                fitting.append(item)
        return self.weighted_choose(fitting)

    # ---- spacing ---------------------------------------------------------

    def resolve_spacing(self, spec: Any) -> float:
        """Turn any spacing form (number, range, weighted list, min/max/units) into a number."""
        variant = parse_spacing(spec)
        if variant is None:
            return 0
        return self._spacing_handlers[variant.kind](variant)

    def _fixed_spacing(self, spec: FixedSpacing) -> float:
        return spec.value

    def _range_spacing(self, spec: RangeSpacing) -> float:
        return self.range_draw(spec.low, spec.high)

    def _weighted_spacing(self, spec: WeightedSpacing) -> float:
        option = self.weighted_choose(spec.options)
        if option is None:
            return 0
        if isinstance(option.value, UnitSpacing):
            return self._unit_spacing(option.value)
        return option.value

    def _unit_spacing(self, spec: UnitSpacing) -> float:
        units = spec.units or 1
        return self.range_draw(spec.min / units, spec.max / units) * units

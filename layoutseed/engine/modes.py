"""Mode strategies — how a schema's children populate its box.

Every strategy is a standalone function registered for one Mode:

    @strategy(Mode.CERTAIN, description="...")
    def generate_certain(generator, contents, cursor, direction, spacing):
        ...
        return children, cursor

Strategies own the cursor they are handed and return the updated one; nothing
is mutated through shared references.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from layoutseed.engine.context import Choice, NodeType
from layoutseed.models.schema import ChildReference, PossibilityContents, SpacingVariant
from layoutseed.utils.geometry import (
    Direction,
    Position,
    choice_fits_position,
    has_remaining_space,
    shrink,
    translate,
)

if TYPE_CHECKING:
    from layoutseed.engine.generator import Generator

logger = logging.getLogger(__name__)


class Mode(str, enum.Enum):
    CERTAIN = "Certain"
    REPEAT = "Repeat"
    RANDOM = "Random"
    MULTIPLE = "Multiple"

    @classmethod
    def lookup(cls, value: str | Mode | None) -> Mode | None:
        if value is None or isinstance(value, Mode):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


StrategyResult = tuple[list[Choice], Position]
StrategyFn = Callable[
    ["Generator", PossibilityContents, Position, "Direction | None", "SpacingVariant | None"],
    StrategyResult,
]


@dataclass
class StrategySpec:
    mode: Mode
    fn: StrategyFn
    description: str = ""


_strategies: dict[Mode, StrategySpec] = {}


def strategy(mode: Mode, *, description: str = ""):
    """Decorator to register the strategy for a mode."""

    def decorator(fn: StrategyFn) -> StrategyFn:
        if mode in _strategies:
            raise ValueError(f"Duplicate strategy for mode: {mode.value}")
        _strategies[mode] = StrategySpec(mode=mode, fn=fn, description=description)
        logger.debug("Registered strategy %s -> %s", mode.value, fn.__name__)
        return fn

    return decorator


def get_strategy(mode: str | Mode | None) -> StrategySpec | None:
    """Strategy for a raw mode value; None for unknown modes."""
    resolved = Mode.lookup(mode)
    if resolved is None:
        return None
    return _strategies.get(resolved)


# ---------------------------------------------------------------------------
# Shared placement steps
# ---------------------------------------------------------------------------


def _parse(
    generator: Generator,
    contents: PossibilityContents,
    ref: ChildReference,
    cursor: Position,
    direction: Direction | None,
) -> Choice:
    if ref.type == NodeType.FINAL:
        return generator.parser.parse_choice_final(contents, ref, cursor, direction)
    return generator.parser.parse_choice(ref, cursor, direction)


def _expand(generator: Generator, choice: Choice) -> None:
    """Generate the nested contents of a non-terminal choice inside its own box."""
    if choice.type != NodeType.KNOWN:
        choice.contents = generator.generate(choice.title, choice)


def _advance(
    generator: Generator,
    cursor: Position,
    choice: Choice,
    direction: Direction | None,
    spacing: SpacingVariant | None,
) -> Position:
    if direction is None:
        return cursor
    return shrink(cursor, choice, direction, generator.randomizer.resolve_spacing(spacing))


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


@strategy(Mode.CERTAIN, description="Every child once, in list order")
def generate_certain(
    generator: Generator,
    contents: PossibilityContents,
    cursor: Position,
    direction: Direction | None,
    spacing: SpacingVariant | None,
) -> StrategyResult:
    children: list[Choice] = []
    for ref in contents.children:
        choice = _parse(generator, contents, ref, cursor, direction)
        _expand(generator, choice)
        cursor = _advance(generator, cursor, choice, direction, spacing)
        children.append(choice)
    return children, cursor


@strategy(Mode.REPEAT, description="Children round-robin until the next one no longer fits")
def generate_repeat(
    generator: Generator,
    contents: PossibilityContents,
    cursor: Position,
    direction: Direction | None,
    spacing: SpacingVariant | None,
) -> StrategyResult:
    refs = contents.children
    if not refs:
        return [], cursor
    if direction is None:
        logger.warning("Repeat mode needs a direction to fill along; no children placed")
        return [], cursor

    children: list[Choice] = []
    index = 0
    while has_remaining_space(cursor, direction):
        ref = refs[index]
        choice = _parse(generator, contents, ref, cursor, direction)
        if not choice_fits_position(choice, cursor):
            break
        _expand(generator, choice)

        previous = cursor
        cursor = _advance(generator, cursor, choice, direction, spacing)
        children.append(choice)
        if cursor.edges() == previous.edges():
            # Zero-size child with no spacing: the cursor can never empty
            break
        index = (index + 1) % len(refs)

    return children, cursor


@strategy(Mode.RANDOM, description="Weighted draws among fitting children until none fit")
def generate_random(
    generator: Generator,
    contents: PossibilityContents,
    cursor: Position,
    direction: Direction | None,
    spacing: SpacingVariant | None,
) -> StrategyResult:
    if direction is None:
        logger.warning("Random mode needs a direction to fill along; no children placed")
        return [], cursor

    limit = contents.limit
    discard = generator.config.limit_policy == "discard"
    children: list[Choice] = []

    while has_remaining_space(cursor, direction):
        ref = generator.randomizer.weighted_choose_fitting(
            contents.children, cursor, generator.possibilities
        )
        if ref is None:
            break

        choice = generator.parser.parse_choice(ref, cursor, direction)
        previous = cursor
        cursor = _advance(generator, cursor, choice, direction, spacing)
        children.append(choice)

        if limit:
            if discard and len(children) > limit:
                logger.debug("Random mode exceeded limit %d; discarding %d children", limit, len(children))
                return [], cursor
            if not discard and len(children) >= limit:
                break
        if cursor.edges() == previous.edges():
            break

    return children, cursor


@strategy(Mode.MULTIPLE, description="Every child over a private copy of the same box")
def generate_multiple(
    generator: Generator,
    contents: PossibilityContents,
    cursor: Position,
    direction: Direction | None,
    spacing: SpacingVariant | None,
) -> StrategyResult:
    children: list[Choice] = []
    for ref in contents.children:
        children.append(generator.parser.parse_choice(ref, cursor.copy(), direction))
        if direction is not None:
            cursor = translate(cursor, direction, generator.randomizer.resolve_spacing(spacing))
    return children, cursor

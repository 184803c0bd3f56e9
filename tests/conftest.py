"""Shared test fixtures."""

from __future__ import annotations

import itertools

import pytest

from layoutseed.engine.config import GeneratorConfig
from layoutseed.engine.generator import Generator
from layoutseed.engine.parser import ChoiceParser
from layoutseed.engine.randomness import Randomizer
from layoutseed.engine.registry import PossibilityRegistry
from layoutseed.utils.geometry import Position


class SequenceRandom:
    """Scripted random source: replays the given floats, cycling."""

    def __init__(self, *values: float) -> None:
        self.values = values or (0.0,)
        self._cycle = itertools.cycle(self.values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return next(self._cycle)


# Schemas

ROW = {
    "Row": {
        "width": 100,
        "height": 20,
        "contents": {
            "mode": "Certain",
            "direction": "right",
            "children": [
                {"title": "Short", "type": "Known"},
                {"title": "Long", "type": "Known"},
            ],
        },
    },
    "Short": {"width": 40, "height": 20},
    "Long": {"width": 60, "height": 20},
}

FENCE = {
    "Fence": {
        "width": 100,
        "height": 10,
        "contents": {
            "mode": "Repeat",
            "direction": "right",
            "children": [{"title": "Post", "type": "Known"}],
        },
    },
    "Post": {"width": 30, "height": 10},
}

FOREST = {
    "Forest": {
        "width": 100,
        "height": 50,
        "contents": {
            "mode": "Random",
            "direction": "right",
            "children": [
                {"title": "Tree", "type": "Known", "percent": 50},
                {"title": "Bush", "type": "Known", "percent": 50},
            ],
        },
    },
    "Tree": {"width": 30, "height": 50},
    "Bush": {"width": 10, "height": 20},
}

STACK = {
    "Stack": {
        "width": 10,
        "height": 10,
        "contents": {
            "mode": "Multiple",
            "direction": "top",
            "spacing": 5,
            "children": [
                {"title": "Plate", "type": "Known"},
                {"title": "Plate", "type": "Known"},
            ],
        },
    },
    "Plate": {"width": 10, "height": 10},
}

WORLD = {
    "World": {
        "width": 100,
        "height": 50,
        "contents": {
            "mode": "Certain",
            "direction": "right",
            "children": [
                {"title": "Rock", "type": "Known"},
                {"title": "Hill", "type": "Random"},
            ],
        },
    },
    "Rock": {"width": 20, "height": 10},
    "Hill": {
        "width": 50,
        "height": 30,
        "contents": {
            "mode": "Certain",
            "direction": "right",
            "children": [
                {"title": "Grass", "type": "Known"},
                {"title": "Flower", "type": "Known"},
            ],
        },
    },
    "Grass": {"width": 10, "height": 5},
    "Flower": {"width": 10, "height": 8},
}


def make_generator(possibilities, *values: float, **config) -> Generator:
    return Generator(
        possibilities,
        random=SequenceRandom(*values),
        config=GeneratorConfig(**config),
    )


def make_parser(possibilities, *values: float) -> ChoiceParser:
    registry = PossibilityRegistry.from_mapping(possibilities)
    return ChoiceParser(registry, Randomizer(SequenceRandom(*values)))


@pytest.fixture
def box() -> Position:
    return Position(top=50, right=100, bottom=0, left=0)


@pytest.fixture
def randomizer() -> Randomizer:
    return Randomizer(SequenceRandom(0.5))

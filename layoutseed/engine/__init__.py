"""Recursive possibility-schema layout engine."""

from layoutseed.engine.config import GeneratorConfig
from layoutseed.engine.context import Choice, NodeType
from layoutseed.engine.errors import (
    EmptyContents,
    GenerationDepthExceeded,
    LayoutSeedError,
    MissingPossibilities,
    SchemaNotFound,
)
from layoutseed.engine.generator import Generator
from layoutseed.engine.modes import Mode, get_strategy, strategy
from layoutseed.engine.parser import ChoiceParser
from layoutseed.engine.randomness import NumpyRandomSource, RandomSource, Randomizer
from layoutseed.engine.registry import PossibilityRegistry

__all__ = [
    "GeneratorConfig",
    "Choice",
    "NodeType",
    "EmptyContents",
    "GenerationDepthExceeded",
    "LayoutSeedError",
    "MissingPossibilities",
    "SchemaNotFound",
    "Generator",
    "Mode",
    "get_strategy",
    "strategy",
    "ChoiceParser",
    "NumpyRandomSource",
    "RandomSource",
    "Randomizer",
    "PossibilityRegistry",
]

"""layoutseed — schema-driven recursive procedural layout generation."""

from layoutseed.engine import (
    Choice,
    EmptyContents,
    GenerationDepthExceeded,
    Generator,
    GeneratorConfig,
    LayoutSeedError,
    MissingPossibilities,
    PossibilityRegistry,
    SchemaNotFound,
)
from layoutseed.main import configure_logging, create_generator
from layoutseed.utils.geometry import Direction, Position

__version__ = "0.1.0"

__all__ = [
    "Choice",
    "EmptyContents",
    "GenerationDepthExceeded",
    "Generator",
    "GeneratorConfig",
    "LayoutSeedError",
    "MissingPossibilities",
    "PossibilityRegistry",
    "SchemaNotFound",
    "Direction",
    "Position",
    "configure_logging",
    "create_generator",
]

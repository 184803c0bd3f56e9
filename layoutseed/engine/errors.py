"""Generation errors. All are fail-fast; nothing here is retried."""

from __future__ import annotations


class LayoutSeedError(Exception):
    """Base class for generator failures."""


class SchemaNotFound(LayoutSeedError, KeyError):
    def __init__(self, name: str | None) -> None:
        self.name = name
        super().__init__(f"No possibility exists under {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class EmptyContents(LayoutSeedError, ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Possibility {name!r} has no possible outcomes")


class MissingPossibilities(LayoutSeedError, ValueError):
    pass


class GenerationDepthExceeded(LayoutSeedError, RecursionError):
    """Schema nesting went deeper than the configured limit (usually a cycle)."""

    def __init__(self, name: str | None, max_depth: int) -> None:
        self.name = name
        self.max_depth = max_depth
        super().__init__(f"Generating {name!r} exceeded the maximum depth of {max_depth}")

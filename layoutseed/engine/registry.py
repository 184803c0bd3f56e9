"""Possibility registry — name → schema lookup, loaded once and read-only after.

Usage:
    registry = PossibilityRegistry.from_mapping({
        "Row": {"width": 100, "height": 20, "contents": {...}},
        "Brick": {"width": 10, "height": 20},
    })
    registry.require("Row").contents.mode
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from layoutseed.engine.errors import SchemaNotFound
from layoutseed.models.schema import Possibility

logger = logging.getLogger(__name__)


class PossibilityRegistry:
    """Immutable listing of possibility schemas keyed by name."""

    def __init__(self, possibilities: Mapping[str, Possibility] | None = None) -> None:
        schemas: dict[str, Possibility] = {}
        for name, schema in (possibilities or {}).items():
            schemas[name] = schema
            logger.debug("Registered possibility %s (%gx%g)", name, schema.width, schema.height)
        self._possibilities = MappingProxyType(schemas)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> PossibilityRegistry:
        """Validate raw schema dicts (or ready models) into a registry."""
        return cls({
            name: value if isinstance(value, Possibility) else Possibility.model_validate(value)
            for name, value in raw.items()
        })

    def get(self, name: str | None) -> Possibility | None:
        if name is None:
            return None
        return self._possibilities.get(name)

    def require(self, name: str | None) -> Possibility:
        schema = self.get(name)
        if schema is None:
            raise SchemaNotFound(name)
        return schema

    def names(self) -> list[str]:
        return list(self._possibilities)

    def __contains__(self, name: object) -> bool:
        return name in self._possibilities

    def __iter__(self) -> Iterator[str]:
        return iter(self._possibilities)

    def __len__(self) -> int:
        return len(self._possibilities)

    @property
    def count(self) -> int:
        return len(self._possibilities)

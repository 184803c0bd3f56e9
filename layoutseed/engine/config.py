"""Generator configuration — recursion guard and Random-mode limit handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from layoutseed.config import Settings

LIMIT_POLICIES = ("truncate", "discard")


@dataclass
class GeneratorConfig:
    """Controls how deep generation may recurse and how Random mode stops."""

    # Nested generate calls allowed before failing; None disables the guard
    max_depth: int | None = 64

    # Random mode past contents.limit:
    #   "truncate" keeps the first `limit` children
    #   "discard"  drops every child of that call once the limit is exceeded
    limit_policy: str = "truncate"

    # Seed for the default numpy random source (None = fresh entropy)
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.limit_policy not in LIMIT_POLICIES:
            raise ValueError(
                f"Unknown limit policy {self.limit_policy!r}; expected one of {LIMIT_POLICIES}"
            )
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    @classmethod
    def from_settings(cls, settings: Settings) -> GeneratorConfig:
        return cls(
            max_depth=settings.layoutseed_max_depth,
            limit_policy=settings.layoutseed_limit_policy,
            seed=settings.layoutseed_seed,
        )

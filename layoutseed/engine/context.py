"""Choice — the positioned node produced for every placed child.

Terminal ("Known") choices are collected for the completion callback;
expandable ("Random") choices name another schema to generate into.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

from layoutseed.utils.geometry import Position


class NodeType(str, enum.Enum):
    KNOWN = "Known"
    RANDOM = "Random"
    FINAL = "Final"


@dataclass
class Choice(Position):
    """A Position plus what was placed there."""

    title: str | None = None
    type: str | None = None
    arguments: dict[str, Any] = field(default_factory=dict)
    # Nested generation result, once expanded
    contents: Choice | None = None
    # Nodes placed directly by a mode strategy (set on generation results)
    children: list[Choice] = field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return self.type == NodeType.KNOWN

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "title": self.title,
            "type": self.type,
            "arguments": dict(self.arguments),
            **super().to_dict(),
        }
        if self.contents is not None:
            out["contents"] = self.contents.to_dict()
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out

"""Leaf-node position helpers. No engine imports.

Positions follow the layout convention ``top >= bottom`` and ``right >= left``:
"top" and "right" are the numerically larger edges.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any

logger = logging.getLogger(__name__)

EDGE_NAMES = ("top", "right", "bottom", "left")


class Direction(str, enum.Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @classmethod
    def lookup(cls, value: str | Direction | None) -> Direction | None:
        """Map a raw schema value to a Direction; unknown values give None."""
        if value is None or isinstance(value, Direction):
            return value
        try:
            return cls(value)
        except ValueError:
            logger.debug("Ignoring unknown direction %r", value)
            return None

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def axis(self) -> str:
        """Name of the dimension this direction moves along."""
        return "height" if self in (Direction.TOP, Direction.BOTTOM) else "width"

    @property
    def sign(self) -> int:
        """+1 when moving this way increases coordinates, -1 otherwise."""
        return 1 if self in (Direction.TOP, Direction.RIGHT) else -1

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)


_OPPOSITES = {
    Direction.TOP: Direction.BOTTOM,
    Direction.RIGHT: Direction.LEFT,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
}


@dataclass
class Position:
    """Bounding box. width/height are derived from the edges unless given."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    width: float | None = None
    height: float | None = None

    def __post_init__(self) -> None:
        if self.width is None:
            self.width = self.right - self.left
        if self.height is None:
            self.height = self.top - self.bottom

    @property
    def span_width(self) -> float:
        """Width actually available between the left and right edges."""
        return self.right - self.left

    @property
    def span_height(self) -> float:
        return self.top - self.bottom

    def edge(self, direction: Direction) -> float:
        return getattr(self, direction.value)

    def edges(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in EDGE_NAMES}

    def copy(self) -> Position:
        """Plain Position copy, dropping anything a subclass adds."""
        return Position(
            top=self.top,
            right=self.right,
            bottom=self.bottom,
            left=self.left,
            width=self.width,
            height=self.height,
        )

    @classmethod
    def from_box(cls, box: Any) -> Position:
        """Build a Position from anything with top/right/bottom/left attributes."""
        return cls(
            top=box.top,
            right=box.right,
            bottom=box.bottom,
            left=box.left,
            width=getattr(box, "width", None),
            height=getattr(box, "height", None),
        )

    def to_dict(self) -> dict[str, float]:
        return {**self.edges(), "width": self.width, "height": self.height}


def merge(primary: Mapping[str, float | None], secondary: Position) -> Position:
    """Combine fields from two sources; values set in *primary* win."""
    fields: dict[str, Any] = {**secondary.edges(), "width": secondary.width, "height": secondary.height}
    for name, value in primary.items():
        if name in fields and value is not None:
            fields[name] = value
    return Position(**fields)


def shrink(
    position: Position,
    child: Position,
    direction: Direction | None,
    spacing: float = 0,
) -> Position:
    """Consume the space *child* took up along *direction*, plus spacing.

    The trailing edge of the cursor moves to the child's leading edge, so the
    next sibling is placed right after it.
    """
    if direction is None:
        return position.copy()
    if direction is Direction.TOP:
        moved = {"bottom": child.top + spacing}
    elif direction is Direction.RIGHT:
        moved = {"left": child.right + spacing}
    elif direction is Direction.BOTTOM:
        moved = {"top": child.bottom - spacing}
    else:
        moved = {"right": child.left - spacing}
    return replace(position.copy(), width=None, height=None, **moved)


def translate(position: Position, direction: Direction | None, spacing: float = 0) -> Position:
    """Shift all four edges by *spacing* along *direction*."""
    if direction is None or not spacing:
        return position.copy()
    offset = direction.sign * spacing
    if direction.is_horizontal:
        return replace(position.copy(), left=position.left + offset, right=position.right + offset)
    return replace(position.copy(), top=position.top + offset, bottom=position.bottom + offset)


def has_remaining_space(position: Position, direction: Direction | None) -> bool:
    """True while the cursor still has length along *direction*'s axis."""
    if direction is not None and direction.is_horizontal:
        return position.left < position.right
    return position.top > position.bottom


def fits(width: float, height: float, box_width: float, box_height: float) -> bool:
    return width <= box_width and height <= box_height


def choice_fits_position(choice: Position, position: Position) -> bool:
    """Whether a placed choice's size fits in what is left of *position*."""
    return fits(choice.width, choice.height, position.span_width, position.span_height)


def envelope(children: Sequence[Position | None]) -> Position | None:
    """Smallest box enclosing every child.

    A ``None`` entry marks an aborted placement: the envelope collected up to
    that point is returned as-is.
    """
    if not children or children[0] is None:
        return None

    first = children[0]
    top, right, bottom, left = first.top, first.right, first.bottom, first.left

    for child in children[1:]:
        if child is None:
            break
        top = max(top, child.top)
        right = max(right, child.right)
        bottom = min(bottom, child.bottom)
        left = min(left, child.left)

    return Position(top=top, right=right, bottom=bottom, left=left)

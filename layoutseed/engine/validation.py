"""Validate generated commands against the box they were generated into.

Commands become Shapely boxes. A command reaching outside the bounds makes
the layout invalid. Overlaps are only reported, since Multiple mode stacks
children over the same footprint.
"""

from __future__ import annotations

from collections.abc import Sequence

from shapely.geometry import Polygon, box
from shapely.ops import unary_union

from layoutseed.utils.geometry import Position


def command_polygon(command: Position) -> Polygon:
    """Axis-aligned Shapely box for a command's edges."""
    return box(command.left, command.bottom, command.right, command.top)


def find_out_of_bounds(
    commands: Sequence[Position],
    bounds: Position,
    tolerance: float = 1e-6,
) -> list[int]:
    """Indices of commands not covered by *bounds* (grown by *tolerance*)."""
    outer = command_polygon(bounds).buffer(tolerance, join_style="mitre")
    return [i for i, cmd in enumerate(commands) if not outer.covers(command_polygon(cmd))]


def find_overlaps(
    commands: Sequence[Position],
    tolerance: float = 0.01,
) -> list[tuple[int, int]]:
    """(i, j) index pairs of commands whose overlap area exceeds *tolerance*.

    Commands that only share an edge do not count.
    """
    polygons = [command_polygon(cmd) for cmd in commands]
    overlaps = []
    for i in range(len(polygons)):
        for j in range(i + 1, len(polygons)):
            if polygons[i].intersection(polygons[j]).area > tolerance:
                overlaps.append((i, j))
    return overlaps


def coverage_ratio(commands: Sequence[Position], bounds: Position) -> float:
    """Fraction of the bounds area covered by the union of commands."""
    outer = command_polygon(bounds)
    if outer.area <= 0 or not commands:
        return 0.0
    merged = unary_union([command_polygon(cmd) for cmd in commands])
    return float(merged.intersection(outer).area / outer.area)


def validate_commands(commands: Sequence[Position], bounds: Position) -> dict:
    """Check generated commands against the generation bounds.

    Returns a dict with:
    - valid: bool
    - command_count: int
    - issues: list[str]
    - overlaps: list[tuple[int, int]]
    - coverage: float
    """
    if not commands:
        return {
            "valid": False,
            "command_count": 0,
            "issues": ["No commands generated"],
            "overlaps": [],
            "coverage": 0.0,
        }

    issues: list[str] = []
    for i in find_out_of_bounds(commands, bounds):
        title = getattr(commands[i], "title", None) or f"command {i}"
        issues.append(f"{title} (#{i}) extends outside the generation bounds")

    return {
        "valid": not issues,
        "command_count": len(commands),
        "issues": issues,
        "overlaps": find_overlaps(commands),
        "coverage": round(coverage_ratio(commands, bounds), 4),
    }

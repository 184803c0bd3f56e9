"""Choice parsing — turns a child reference plus a cursor into a placed Choice."""

from __future__ import annotations

from typing import Any

from layoutseed.engine.context import Choice, NodeType
from layoutseed.engine.randomness import Randomizer
from layoutseed.engine.registry import PossibilityRegistry
from layoutseed.models.schema import (
    ArgumentsVariant,
    ChildReference,
    LiteralArguments,
    Possibility,
    PossibilityContents,
)
from layoutseed.utils.geometry import Direction, Position


class ChoiceParser:
    """Sizes, positions and fills in arguments for child references."""

    def __init__(self, registry: PossibilityRegistry, randomizer: Randomizer) -> None:
        self.registry = registry
        self.randomizer = randomizer

    def parse_choice(
        self,
        ref: ChildReference,
        position: Position,
        direction: Direction | None,
    ) -> Choice:
        """Place *ref* against the leading edge of *position* along *direction*.

        Steps: size (sizing override, else schema size), leading edge, snap,
        stretch, arguments, argument map.
        """
        schema = self.registry.require(ref.title)
        width, height = self._resolve_size(ref, schema)
        edges = position.edges()

        if direction is not None:
            size = width if direction.axis == "width" else height
            edges[direction.value] = edges[direction.opposite.value] + direction.sign * size

        snap = Direction.lookup(schema.contents.snap) if schema.contents else None
        if snap is not None:
            # Flush against the snap edge, whatever the placement direction
            size = width if snap.axis == "width" else height
            edges[snap.opposite.value] = edges[snap.value] - snap.sign * size

        arguments = self.resolve_arguments(ref.arguments)

        if ref.stretch is not None:
            if ref.stretch.width:
                edges["left"], edges["right"] = position.left, position.right
                width = position.right - position.left
                arguments["width"] = width
            if ref.stretch.height:
                edges["top"], edges["bottom"] = position.top, position.bottom
                height = position.top - position.bottom
                arguments["height"] = height

        choice = Choice(
            **edges,
            width=width,
            height=height,
            title=ref.title,
            type=ref.type,
            arguments=arguments,
        )
        self.copy_schema_arguments(schema, ref, choice.arguments)
        return choice

    def parse_choice_final(
        self,
        parent: PossibilityContents,
        ref: ChildReference,
        position: Position,
        direction: Direction | None = None,
    ) -> Choice:
        """Pin a "Final" child to exactly the current position.

        The size comes from the ``source`` schema; no leading edge, snap or
        stretch is applied.
        """
        schema = self.registry.require(ref.source)
        choice = Choice(
            **position.edges(),
            width=schema.width,
            height=schema.height,
            title=ref.title,
            type=NodeType.KNOWN.value,
            arguments=self.resolve_arguments(ref.arguments),
        )
        self.copy_schema_arguments(schema, ref, choice.arguments)
        return choice

    def resolve_arguments(self, spec: ArgumentsVariant | None) -> dict[str, Any]:
        """Literal arguments are copied; weighted alternatives are drawn from."""
        if spec is None:
            return {}
        if isinstance(spec, LiteralArguments):
            return dict(spec.values)
        option = self.randomizer.weighted_choose(spec.options)
        return dict(option.values) if option is not None else {}

    @staticmethod
    def copy_schema_arguments(
        schema: Possibility,
        ref: ChildReference,
        arguments: dict[str, Any],
    ) -> None:
        """Expose child-reference keys as named arguments per the schema's argumentMap."""
        if schema.contents is None or not schema.contents.argument_map:
            return
        for key, name in schema.contents.argument_map.items():
            arguments[name] = ref.lookup(key)

    @staticmethod
    def _resolve_size(ref: ChildReference, schema: Possibility) -> tuple[float, float]:
        width, height = schema.width, schema.height
        if ref.sizing is not None:
            if ref.sizing.width is not None:
                width = ref.sizing.width
            if ref.sizing.height is not None:
                height = ref.sizing.height
        return width, height

"""Generator — resolves schemas, dispatches to mode strategies, walks the result tree."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from layoutseed.engine.config import GeneratorConfig
from layoutseed.engine.context import Choice, NodeType
from layoutseed.engine.errors import EmptyContents, GenerationDepthExceeded, MissingPossibilities
from layoutseed.engine.modes import get_strategy
from layoutseed.engine.parser import ChoiceParser
from layoutseed.engine.randomness import NumpyRandomSource, RandomSource, Randomizer
from layoutseed.engine.registry import PossibilityRegistry
from layoutseed.models.schema import Possibility
from layoutseed.utils.geometry import Direction, Position, envelope, merge

logger = logging.getLogger(__name__)

OnPlacement = Callable[[list[Choice]], None]


def _log_placement(commands: list[Choice]) -> None:
    logger.info("Got %d generated commands", len(commands))


class Generator:
    """Recursive, schema-driven layout generation.

    Typical workflow::

        gen = Generator(possibilities, on_placement=spawn_things)
        gen.clear_generated_commands()
        gen.generate_full(Choice(title="World", top=80, right=400, bottom=0, left=0))
        gen.run_generated_commands()

    The generated-commands accumulator is per-instance state: clear it between
    independent passes and do not share one instance across concurrent callers.
    """

    def __init__(
        self,
        possibilities: PossibilityRegistry | Mapping[str, Any] | None,
        random: RandomSource | Callable[[], float] | None = None,
        on_placement: OnPlacement | None = None,
        config: GeneratorConfig | None = None,
    ) -> None:
        if possibilities is None:
            raise MissingPossibilities("No possibilities given to the generator")

        self.config = config or GeneratorConfig()
        if isinstance(possibilities, PossibilityRegistry):
            self._possibilities = possibilities
        else:
            self._possibilities = PossibilityRegistry.from_mapping(possibilities)

        self.randomizer = Randomizer(random if random is not None else NumpyRandomSource(self.config.seed))
        self.parser = ChoiceParser(self._possibilities, self.randomizer)
        self._on_placement: OnPlacement = on_placement or _log_placement
        self._generated_commands: list[Choice] = []
        self._depth = 0

        logger.debug("Generator ready with %d possibilities", self._possibilities.count)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def possibilities(self) -> PossibilityRegistry:
        return self._possibilities

    @property
    def on_placement(self) -> OnPlacement:
        return self._on_placement

    @on_placement.setter
    def on_placement(self, callback: OnPlacement) -> None:
        self._on_placement = callback

    # ------------------------------------------------------------------
    # Generated commands
    # ------------------------------------------------------------------

    @property
    def generated_commands(self) -> tuple[Choice, ...]:
        return tuple(self._generated_commands)

    def clear_generated_commands(self) -> None:
        """Reset the accumulator before a new generation pass."""
        self._generated_commands = []

    def run_generated_commands(self) -> None:
        """Hand the accumulated terminal commands to the on_placement callback."""
        self._on_placement(list(self._generated_commands))

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, name: str | None, box: Position) -> Choice | None:
        """Generate one level of children for schema *name* inside *box*.

        Returns the envelope of the placed children (with ``.children`` set),
        or None when nothing was placed. Does not recurse into the children;
        use generate_full for that.
        """
        with self._descend(name):
            schema = self._possibilities.require(name)
            if schema.contents is None:
                raise EmptyContents(name)
            return self._generate_children(schema, Position.from_box(box))

    def generate_full(self, node: Choice) -> None:
        """Generate *node* recursively, collecting "Known" results in order.

        "Random" children are expanded depth-first; any other type is skipped.
        """
        with self._descend(node.title):
            generated = self.generate(node.title, node)
            if generated is None or not generated.children:
                return

            for child in generated.children:
                if child.type == NodeType.KNOWN:
                    self._generated_commands.append(child)
                elif child.type == NodeType.RANDOM:
                    self.generate_full(child)
                else:
                    logger.debug("Skipping %r of unhandled type %r", child.title, child.type)

    def _generate_children(
        self,
        schema: Possibility,
        position: Position,
        direction: Direction | None = None,
    ) -> Choice | None:
        contents = schema.contents
        merged = merge({"width": schema.width, "height": schema.height}, position)

        resolved = Direction.lookup(contents.direction)
        if resolved is not None:
            direction = resolved

        spec = get_strategy(contents.mode)
        if spec is None:
            logger.debug("Unknown mode %r; no children generated", contents.mode)
            return None

        children, _ = spec.fn(self, contents, merged, direction, contents.spacing)

        bounds = envelope(children)
        if bounds is None:
            return None
        return Choice(**bounds.edges(), children=children)

    @contextmanager
    def _descend(self, name: str | None) -> Iterator[None]:
        max_depth = self.config.max_depth
        if max_depth is not None and self._depth >= max_depth:
            raise GenerationDepthExceeded(name, max_depth)
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

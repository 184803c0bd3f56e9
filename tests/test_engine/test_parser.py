"""Tests for child-reference parsing into placed choices."""

import pytest

from layoutseed.engine.context import NodeType
from layoutseed.engine.errors import SchemaNotFound
from layoutseed.models.schema import ChildReference, PossibilityContents
from layoutseed.utils.geometry import Direction, Position
from tests.conftest import make_parser

SCHEMAS = {
    "Brick": {"width": 10, "height": 5},
    "Lamp": {"width": 10, "height": 5, "contents": {"snap": "top"}},
    "Sign": {"width": 20, "height": 10, "contents": {"argumentMap": {"color": "tint"}}},
}


def _cursor() -> Position:
    return Position(top=50, right=100, bottom=0, left=0)


@pytest.mark.parametrize(
    "direction, edges",
    [
        (Direction.RIGHT, {"left": 0, "right": 10}),
        (Direction.LEFT, {"right": 100, "left": 90}),
        (Direction.TOP, {"bottom": 0, "top": 5}),
        (Direction.BOTTOM, {"top": 50, "bottom": 45}),
    ],
)
def test_leading_edge(direction, edges):
    parser = make_parser(SCHEMAS)
    choice = parser.parse_choice(ChildReference(title="Brick", type="Known"), _cursor(), direction)
    for name, value in edges.items():
        assert getattr(choice, name) == value
    assert (choice.width, choice.height) == (10, 5)
    assert choice.title == "Brick"
    assert choice.type == "Known"


def test_no_direction_keeps_cursor_edges():
    parser = make_parser(SCHEMAS)
    choice = parser.parse_choice(ChildReference(title="Brick"), _cursor(), None)
    assert choice.edges() == _cursor().edges()
    assert choice.width == 10


def test_sizing_overrides_schema_size():
    parser = make_parser(SCHEMAS)
    ref = ChildReference.model_validate({"title": "Brick", "sizing": {"width": 25}})
    choice = parser.parse_choice(ref, _cursor(), Direction.RIGHT)
    assert choice.right == 25
    assert (choice.width, choice.height) == (25, 5)


def test_snap_top():
    parser = make_parser(SCHEMAS)
    choice = parser.parse_choice(ChildReference(title="Lamp"), _cursor(), Direction.RIGHT)
    assert choice.top == 50
    assert choice.bottom == 45
    assert (choice.left, choice.right) == (0, 10)


def test_stretch_width_publishes_argument():
    parser = make_parser(SCHEMAS)
    cursor = Position(top=50, right=90, bottom=0, left=10)
    ref = ChildReference.model_validate({"title": "Brick", "stretch": {"width": True}})
    choice = parser.parse_choice(ref, cursor, Direction.TOP)
    assert (choice.left, choice.right) == (10, 90)
    assert choice.width == 80
    assert choice.arguments["width"] == 80
    assert "height" not in choice.arguments


def test_stretch_height():
    parser = make_parser(SCHEMAS)
    ref = ChildReference.model_validate({"title": "Brick", "stretch": {"height": True}})
    choice = parser.parse_choice(ref, _cursor(), Direction.RIGHT)
    assert (choice.bottom, choice.top) == (0, 50)
    assert choice.arguments["height"] == 50


def test_literal_arguments_copied():
    parser = make_parser(SCHEMAS)
    ref = ChildReference.model_validate({"title": "Brick", "arguments": {"solid": True}})
    choice = parser.parse_choice(ref, _cursor(), Direction.RIGHT)
    assert choice.arguments == {"solid": True}


def test_weighted_arguments_drawn():
    parser = make_parser(SCHEMAS, 0.5)
    ref = ChildReference.model_validate({
        "title": "Brick",
        "arguments": [
            {"percent": 30, "values": {"colour": "red"}},
            {"percent": 70, "values": {"colour": "blue"}},
        ],
    })
    choice = parser.parse_choice(ref, _cursor(), Direction.RIGHT)
    assert choice.arguments == {"colour": "blue"}


def test_argument_map_copies_extra_keys():
    parser = make_parser(SCHEMAS)
    ref = ChildReference.model_validate({"title": "Sign", "color": "red"})
    choice = parser.parse_choice(ref, _cursor(), Direction.RIGHT)
    assert choice.arguments["tint"] == "red"


def test_argument_map_missing_key_is_none():
    parser = make_parser(SCHEMAS)
    choice = parser.parse_choice(ChildReference(title="Sign"), _cursor(), Direction.RIGHT)
    assert choice.arguments == {"tint": None}


def test_parse_choice_final_pins_to_cursor():
    parser = make_parser(SCHEMAS)
    ref = ChildReference(title="Cap", type="Final", source="Brick")
    cursor = Position(top=40, right=70, bottom=30, left=20)
    choice = parser.parse_choice_final(PossibilityContents(), ref, cursor, Direction.RIGHT)
    assert choice.edges() == cursor.edges()
    assert (choice.width, choice.height) == (10, 5)
    assert choice.title == "Cap"
    assert choice.type == NodeType.KNOWN


def test_unknown_schema_raises():
    parser = make_parser(SCHEMAS)
    with pytest.raises(SchemaNotFound) as exc:
        parser.parse_choice(ChildReference(title="Ghost"), _cursor(), Direction.RIGHT)
    assert "Ghost" in str(exc.value)


def test_final_with_unknown_source_raises():
    parser = make_parser(SCHEMAS)
    ref = ChildReference(title="Cap", type="Final", source="Ghost")
    with pytest.raises(SchemaNotFound):
        parser.parse_choice_final(PossibilityContents(), ref, _cursor())

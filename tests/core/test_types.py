"""
Tests for classic_games.core.types

Tests the small value types shared by the engines.
"""

import pytest

from classic_games.core.types import (
    Difficulty,
    Direction,
    Mark,
    Mode,
    Position,
    Stats,
    coerce,
)


class TestDirection:
    """Direction vectors and parsing."""

    @pytest.mark.parametrize("direction, opposite", [
        (Direction.UP, Direction.DOWN),
        (Direction.DOWN, Direction.UP),
        (Direction.LEFT, Direction.RIGHT),
        (Direction.RIGHT, Direction.LEFT),
    ])
    def test_opposites(self, direction, opposite):
        """Opposite directions cancel out."""
        assert direction.opposite is opposite
        assert direction.dx + opposite.dx == 0
        assert direction.dy + opposite.dy == 0

    def test_up_decreases_y(self):
        """Screen coordinates: up is -y."""
        assert (Direction.UP.dx, Direction.UP.dy) == (0, -1)

    @pytest.mark.parametrize("text, expected", [
        ("up", Direction.UP),
        ("LEFT", Direction.LEFT),
        (" Down ", Direction.DOWN),
        ("w", Direction.UP),
        ("a", Direction.LEFT),
        ("s", Direction.DOWN),
        ("d", Direction.RIGHT),
    ])
    def test_parse(self, text, expected):
        assert Direction.parse(text) is expected

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.parse("sideways")


class TestMark:
    """Board marks."""

    def test_int_encoding(self):
        assert (Mark.EMPTY, Mark.X, Mark.O) == (0, 1, 2)

    def test_other_toggles(self):
        assert Mark.X.other is Mark.O
        assert Mark.O.other is Mark.X
        assert Mark.EMPTY.other is Mark.EMPTY


class TestStats:
    """Stats counters."""

    def test_defaults_zero(self):
        assert Stats() == (0, 0, 0)
        assert Stats().total == 0

    def test_record_from_x_side(self):
        """X wins count as wins, O wins as losses, None as draws."""
        s = Stats().record(Mark.X).record(Mark.O).record(Mark.O).record(None)
        assert s == Stats(wins=1, losses=2, draws=1)
        assert s.total == 4

    def test_immutable(self):
        s = Stats(1, 2, 3)
        with pytest.raises(AttributeError):
            s.wins = 99


class TestCoerce:
    """coerce() maps loose input onto enum members."""

    def test_member_passthrough(self):
        assert coerce(Difficulty, Difficulty.HARD) is Difficulty.HARD

    def test_value_and_name(self):
        assert coerce(Difficulty, "hard") is Difficulty.HARD
        assert coerce(Mode, "AI") is Mode.AI
        assert coerce(Mark, "x") is Mark.X

    def test_int_value(self):
        assert coerce(Mark, 2) is Mark.O

    def test_direction_strings(self):
        assert coerce(Direction, "left") is Direction.LEFT

    @pytest.mark.parametrize("enum_cls, value", [
        (Difficulty, "impossible"),
        (Mode, ""),
        (Mark, 7),
        (Direction, "north"),
        (Difficulty, None),
    ])
    def test_unknown_is_none(self, enum_cls, value):
        assert coerce(enum_cls, value) is None


class TestPosition:
    def test_named_fields(self):
        p = Position(3, 4)
        assert (p.x, p.y) == (3, 4)
        assert p == (3, 4)

"""Unit tests for core.positions."""

from types import SimpleNamespace

from pmutils.core.positions import Position, different_pos, ptos, vtos


class TestDifferentPos:
    def test_same(self):
        assert different_pos(Position(1, 2, 3), Position(1, 2, 3)) is False

    def test_each_axis(self):
        base = Position(1, 2, 3)
        assert different_pos(base, Position(0, 2, 3))
        assert different_pos(base, Position(1, 0, 3))
        assert different_pos(base, Position(1, 2, 0))

    def test_duck_typed(self):
        assert different_pos(SimpleNamespace(x=1, y=2, z=3), Position(1, 2, 3)) is False


def test_ptos():
    assert ptos(1, 2.5, -3) == "1, 2.5, -3"


def test_vtos():
    assert vtos(Position(0, 10, 0.5)) == "0, 10, 0.5"

import numpy as np
import pytest

from hexmap.coordinate import CellCoordinate
from hexmap.shape import Shape
from hexmap.transform import Transform

C = CellCoordinate


class Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.calls


def test_triangle_masks():
    upper = Shape.make_triangle(3, 0, True, lambda: 1)
    lower = Shape.make_triangle(3, 0, False, lambda: 1)
    assert upper.shape == lower.shape == (3, 3)
    assert {i for i, _ in upper.populated()} == {
        (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (2, 0),
    }
    assert {i for i, _ in lower.populated()} == {
        (0, 2), (1, 1), (1, 2), (2, 0), (2, 1), (2, 2),
    }


def test_factory_called_once_per_member_in_array_order():
    factory = Counter()
    shape = Shape.make_triangle(4, 0, True, factory)
    assert factory.calls == len(shape) == 10
    values = [v for _, v in shape.populated()]
    assert values == list(range(1, 11))


def test_rhombus_fills_every_slot():
    factory = Counter()
    shape = Shape.make_rhombus(3, 2, True, factory)
    assert factory.calls == 9
    assert all(v is not None for _, v in shape.get_hexes())
    assert shape.transform == Transform(rotation=2)
    assert Shape.make_rhombus(3, 0, False, factory).transform.reflect


def test_hexagon():
    shape = Shape.make_hexagon(1, lambda: "x")
    assert shape.shape == (3, 3)
    assert len(shape) == 7
    hexes = dict(shape.get_hexes())
    assert hexes[(0, 0)] is None
    assert hexes[(2, 2)] is None
    assert len(Shape.make_hexagon(2, lambda: 0)) == 19


def test_get_hexes_covers_all_slots_in_order():
    shape = Shape.make_triangle(2, 0, True, lambda: 5)
    assert shape.get_hexes() == [((0, 0), 5), ((0, 1), 5), ((1, 0), 5), ((1, 1), None)]


def test_get_hexes_mut_writes_through():
    shape = Shape.make_rhombus(2, 0, True, lambda: 0)
    shape.get_hexes_mut()[1, 0] = 42
    assert dict(shape.get_hexes())[(1, 0)] == 42


def test_coordinates_follow_transform():
    shape = Shape.make_rhombus(2, 0, True, lambda: 0)
    shape.transform = Transform(translation=C(10, -10))
    assert shape.coordinates() == [C(10, -10), C(10, -9), C(11, -10), C(11, -9)]


def test_empty_and_invalid_sizes():
    assert len(Shape.make_rhombus(0, 0, True, lambda: 1)) == 0
    with pytest.raises(ValueError):
        Shape.make_triangle(-1, 0, True, lambda: 1)
    with pytest.raises(ValueError):
        Shape.make_hexagon(-2, lambda: 1)
    with pytest.raises(ValueError):
        Shape(np.empty(3, dtype=object))

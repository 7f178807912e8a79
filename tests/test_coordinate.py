import itertools

import pytest

from hexmap.coordinate import CellCoordinate, HEX_DIRECTIONS
from hexmap.vertex import Vertex, VertexSpin

C = CellCoordinate
SAMPLE = [C(q, r) for q in range(-3, 4) for r in range(-3, 4)]


def test_cube_coordinate_and_arithmetic():
    c = C(2, -5)
    assert c.s == 3
    assert c.cube == (2, -5, 3)
    assert C(1, 2) + C(3, -1) == C(4, 1)
    assert C(1, 2) - C(3, -1) == C(-2, 3)
    assert C(1, -2) * 3 == 3 * C(1, -2) == C(3, -6)
    assert str(C(-1, 4)) == "-1,4"


def test_coordinates_are_dict_keys():
    tiles = {C(0, 0): "a", C(1, -1): "b"}
    assert tiles[C(1, -1)] == "b"
    assert C(0, 0) in tiles


def test_distance_values():
    assert C(0, 0).distance(C(2, 1)) == 3
    assert C(0, 0).distance(C(2, -1)) == 2
    assert C(-3, 1).distance(C(3, -1)) == 6


def test_distance_metric_properties():
    for a in SAMPLE:
        assert a.distance(a) == 0
    for a, b in itertools.product(SAMPLE[::5], SAMPLE[::3]):
        assert a.distance(b) == b.distance(a)
        assert a.distance(b) >= 0
    for a, b, c in itertools.product(SAMPLE[::7], SAMPLE[::5], SAMPLE[::4]):
        assert a.distance(c) <= a.distance(b) + b.distance(c)


def test_direction_on_axis_is_exact():
    origin = C(0, 0)
    expected = [0.0, 60.0, 120.0, 180.0, 240.0, 300.0]
    for (dq, dr), angle in zip(HEX_DIRECTIONS, expected):
        assert origin.direction(C(dq, dr)) == angle
        assert origin.direction(C(3 * dq, 3 * dr)) == angle


def test_direction_between_axes():
    angle = C(-1, 0).direction(C(1, 1))
    assert 0.0 < angle < 60.0
    assert angle == pytest.approx(19.1066, abs=1e-3)
    assert C(0, 0).direction(C(1, -2)) == pytest.approx(270.0)


def test_neighbor_index_wraps():
    c = C(4, -2)
    assert c.neighbor(7) == c.neighbor(1)
    assert c.neighbor(-1) == c.neighbor(5)
    assert all(c.distance(n) == 1 for n in c.neighbors())
    assert len(set(c.neighbors())) == 6


def test_ring_and_spiral():
    center = C(1, 1)
    assert center.ring(0) == [center]
    ring = center.ring(2)
    assert len(ring) == 12
    assert len(set(ring)) == 12
    assert all(center.distance(c) == 2 for c in ring)
    spiral = center.spiral(2)
    assert len(spiral) == len(set(spiral)) == 19
    with pytest.raises(ValueError):
        center.ring(-1)
    with pytest.raises(ValueError):
        center.spiral(-1)


def test_rotate():
    assert C(1, 0).rotate(1) == C(0, 1)
    assert C(1, 0).rotate(-1) == C(1, -1)
    assert C(3, -2).rotate(6) == C(3, -2)
    assert C(2, 0).rotate(1, center=C(1, 0)) == C(1, 1)
    for c in SAMPLE:
        assert c.rotate(2).distance(C(0, 0)) == c.distance(C(0, 0))


def test_reflections():
    c = C(1, 2)
    assert c.reflect_q() == C(1, -3)
    assert c.reflect_r() == C(-3, 2)
    assert c.reflect_s() == C(2, 1)
    for r in (c.reflect_q(), c.reflect_r(), c.reflect_s()):
        assert r.distance(C(0, 0)) == c.distance(C(0, 0))


def test_cell_vertices_touch_the_cell():
    cell = C(0, 0)
    corners = cell.vertices()
    assert corners == [
        Vertex(0, 0, VertexSpin.UP),
        Vertex(1, -1, VertexSpin.DOWN),
        Vertex(0, 1, VertexSpin.UP),
        Vertex(0, 0, VertexSpin.DOWN),
        Vertex(-1, 1, VertexSpin.UP),
        Vertex(0, -1, VertexSpin.DOWN),
    ]
    for c in (C(0, 0), C(3, -4)):
        for v in c.vertices():
            assert c in v.adjacent_hexes()


def test_cell_edges_are_canonical_and_distinct():
    cell = C(2, -1)
    edges = cell.edges()
    assert len(set(edges)) == 6
    for e in edges:
        assert cell in e.adjacent_hexes()

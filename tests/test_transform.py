import itertools

from hexmap.coordinate import CellCoordinate
from hexmap.transform import Transform

C = CellCoordinate

TRANSFORMS = [
    Transform(),
    Transform(translation=C(2, -1)),
    Transform(rotation=1),
    Transform(rotation=4, reflect=True),
    Transform(translation=C(-3, 5), rotation=2, reflect=True),
    Transform(translation=C(1, 1), rotation=5),
]
COORDS = [C(0, 0), C(1, 0), C(2, -3), C(-1, 4), C(5, 5)]


def test_identity():
    for c in COORDS:
        assert c.apply_transform(Transform.identity()) == c


def test_rotation_is_normalised():
    assert Transform(rotation=7).rotation == 1
    assert Transform(rotation=-1).rotation == 5


def test_apply_order_reflect_rotate_translate():
    t = Transform(translation=C(1, 1), rotation=1, reflect=True)
    # (1,0) -> reflect (1,-1) -> rotate (1,0) -> translate (2,1)
    assert C(1, 0).apply_transform(t) == C(2, 1)


def test_composition_matches_sequential_application():
    for a, b in itertools.product(TRANSFORMS, TRANSFORMS):
        combined = a.then(b)
        for c in COORDS:
            assert c.apply_transform(combined) == c.apply_transform(a).apply_transform(b)


def test_inverse():
    for t in TRANSFORMS:
        for c in COORDS:
            assert c.apply_transform(t).apply_transform(t.inverse()) == c


def test_transforms_preserve_distance():
    for t in TRANSFORMS:
        for a, b in itertools.combinations(COORDS, 2):
            assert a.apply_transform(t).distance(b.apply_transform(t)) == a.distance(b)

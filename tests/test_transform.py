from mobagen.transform import Transform
from mobagen.vector2 import Vector2


def test_defaults():
    t = Transform()
    assert t.position == Vector2.zero()
    assert t.scale == Vector2.identity()
    assert t.rotation == Vector2.zero()


def test_positional_order():
    t = Transform(Vector2(1, 2), Vector2(3, 4), Vector2(5, 6))
    assert t.position == Vector2(1, 2)
    assert t.scale == Vector2(3, 4)
    assert t.rotation == Vector2(5, 6)


def test_instances_are_independent():
    t1 = Transform()
    t2 = Transform()
    t1.position = Vector2(9, 9)
    t1.scale *= 2.0
    assert t2.position == Vector2.zero()
    assert t2.scale == Vector2.identity()
    assert t1.scale == Vector2(2, 2)
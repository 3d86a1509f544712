"""Outlines of simple shapes placed by a transform."""

from __future__ import annotations

from dataclasses import dataclass, field

from mobagen.point2d import Point2D
from mobagen.transform import Transform
from mobagen.vector2 import Vector2


@dataclass
class Polygon:
    """A closed outline given by its points in local space."""

    points: list[Vector2] = field(default_factory=list)

    def drawable_points(self, transform: Transform) -> list[Vector2]:
        """The points scaled, rotated and moved by ``transform``."""
        angle = transform.rotation.angle_degree()
        return [
            Vector2(transform.scale.x * p.x, transform.scale.y * p.y).rotate(angle) + transform.position
            for p in self.points
        ]

    def edges(self, transform: Transform) -> list[tuple[Point2D, Point2D]]:
        """The closed outline as pixel line segments, last point joined to the first."""
        pixels = [Point2D(int(p.x), int(p.y)) for p in self.drawable_points(transform)]
        return list(zip(pixels, pixels[1:] + pixels[:1]))


def _unit_ring(angles) -> list[Vector2]:
    up = Vector2.up()
    return [up.rotate(angle) for angle in angles]


class Circle(Polygon):
    """A regular polygon approximating the unit circle."""

    def __init__(self, sample: int) -> None:
        super().__init__(_unit_ring(360.0 * i / sample for i in range(sample)))


class Square(Polygon):
    """A unit-radius square standing on one side."""

    def __init__(self) -> None:
        super().__init__(_unit_ring((45, 135, 225, 315)))


class Hexagon(Polygon):
    """A unit-radius hexagon with a vertex pointing up."""

    def __init__(self) -> None:
        super().__init__(_unit_ring((0, 60, 120, 180, 240, 300)))
"""Position, scale and orientation of an object in the plane."""

from __future__ import annotations

from dataclasses import dataclass, field

from mobagen.vector2 import Vector2


@dataclass
class Transform:
    """Placement of an object; ``rotation`` is the vector pointing up."""

    position: Vector2 = field(default_factory=Vector2.zero)
    scale: Vector2 = field(default_factory=Vector2.identity)
    rotation: Vector2 = field(default_factory=Vector2.zero)
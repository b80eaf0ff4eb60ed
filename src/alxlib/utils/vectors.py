"""
Plain 2D and 3D vector records.

These only hold coordinates; there is no arithmetic.
"""

from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass
class Vector2D:
    """A 2D vector."""
    x: Number = 0.0
    y: Number = 0.0


@dataclass
class Vector3D:
    """A 3D vector."""
    x: Number = 0.0
    y: Number = 0.0
    z: Number = 0.0


# Python floats are already double precision
Vec2D = Vector2D
Vec2D64 = Vector2D
Vec3D = Vector3D
Vec3D64 = Vector3D

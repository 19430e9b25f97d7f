"""Two-dimensional scene objects, their transforms and the draw calls they emit."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Optional, Sequence, Tuple

from .colors import Color

Point2 = Tuple[float, float]


def _vec(values: Sequence[float], size: int) -> tuple:
    result = tuple(float(v) for v in values)
    if len(result) != size:
        raise ValueError(f"expected {size} components, got {len(result)}")
    return result


class Alignment(IntEnum):
    LEFT = 0
    TOP = 1
    CENTER = 2
    BOTTOM = 3
    RIGHT = 4


class Mode(Enum):
    """Primitive assembly mode of a draw call."""

    POINTS = "points"
    LINES = "lines"
    LINE_LOOP = "line_loop"
    TRIANGLES = "triangles"
    TRIANGLE_STRIP = "triangle_strip"
    TRIANGLE_FAN = "triangle_fan"


@dataclass(frozen=True)
class DrawCall:
    """One batch of geometry.

    ``normals``, when given, pair with ``vertices`` one to one. ``matrix`` is a
    row-major 4x4 model matrix the vertices are to be transformed by.
    """

    mode: Mode
    vertices: tuple
    normals: tuple = ()
    color: Optional[Color] = None
    matrix: Optional[tuple] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(tuple(v) for v in self.vertices))
        object.__setattr__(self, "normals", tuple(tuple(n) for n in self.normals))
        if self.normals and len(self.normals) != len(self.vertices):
            raise ValueError("normals must match vertices one to one")


@dataclass(frozen=True)
class Transform2:
    """A rotation about the origin followed by a translation."""

    translation: Point2 = (0.0, 0.0)
    rotation: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "translation", _vec(self.translation, 2))
        object.__setattr__(self, "rotation", float(self.rotation))

    def apply(self, point: Point2) -> Point2:
        x, y = _vec(point, 2)
        cos_r, sin_r = math.cos(self.rotation), math.sin(self.rotation)
        tx, ty = self.translation
        return (cos_r * x - sin_r * y + tx, sin_r * x + cos_r * y + ty)


class Object2:
    """A positioned, rotated object in the plane."""

    def __init__(self, position: Point2 = (0.0, 0.0)) -> None:
        self._position: Point2 = _vec(position, 2)
        self._rotation = 0.0
        self._transform = Transform2(self._position, self._rotation)

    @property
    def position(self) -> Point2:
        return self._position

    @position.setter
    def position(self, value: Point2) -> None:
        self._position = _vec(value, 2)
        self._transform = replace(self._transform, translation=self._position)

    @property
    def rotation(self) -> float:
        """Rotation in radians."""
        return self._rotation

    @rotation.setter
    def rotation(self, radians: float) -> None:
        self._rotation = float(radians)
        self._transform = replace(self._transform, rotation=self._rotation)

    @property
    def transformation(self) -> Transform2:
        return self._transform

    @transformation.setter
    def transformation(self, value: Transform2) -> None:
        if not isinstance(value, Transform2):
            raise TypeError("transformation must be a Transform2")
        self._transform = value

    def transform_point(self, point: Point2) -> Point2:
        """Map a point from object space into the plane."""
        return self._transform.apply(point)

    def render(self) -> list:
        return [DrawCall(Mode.POINTS, (self._position,))]
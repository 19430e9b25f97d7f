"""Flat shapes in the plane: circles, lines, rectangles and equilateral triangles."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .colors import Color
from .object2 import DrawCall, Mode, Object2, Point2

_FACING = (0.0, 0.0, 1.0)
_SQRT3_DIV_2 = math.sqrt(3.0) / 2.0


def _non_negative(value: float) -> float:
    return max(float(value), 0.0)


def _facing(count: int) -> Tuple[Tuple[float, float, float], ...]:
    return (_FACING,) * count


class Circle(Object2):
    """A filled disc with a black outline."""

    def __init__(self, position: Point2 = (0.0, 0.0), radius: float = 1.0) -> None:
        super().__init__(position)
        self.radius = radius

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = _non_negative(value)

    def _precision(self) -> float:
        return min(max(0.2 * self._radius, 25.0), 250.0)

    def _rim(self, closed: bool) -> List[Point2]:
        precision = self._precision()
        count = math.floor(precision) + 1 if closed else math.ceil(precision)
        points = []
        for step in range(count):
            angle = (step / precision) * 2.0 * math.pi
            local = (self._radius * math.cos(angle), self._radius * math.sin(angle))
            points.append(self.transform_point(local))
        return points

    def render(self) -> list:
        fan = [self.transform_point((0.0, 0.0)), *self._rim(closed=True)]
        outline = self._rim(closed=False)
        return [
            DrawCall(Mode.TRIANGLE_FAN, fan, normals=_facing(len(fan))),
            DrawCall(Mode.LINE_LOOP, outline, color=Color.black()),
        ]


class Line(Object2):
    """A straight segment centred on its position, lying along the local x axis."""

    def __init__(self, position: Point2 = (0.0, 0.0), length: float = 1.0) -> None:
        super().__init__(position)
        self.length = length

    @property
    def length(self) -> float:
        return self._length

    @length.setter
    def length(self, value: float) -> None:
        self._length = _non_negative(value)

    def endpoints(self) -> Tuple[Point2, Point2]:
        """Both ends of the segment in plane coordinates."""
        half = self._length / 2.0
        return (self.transform_point((-half, 0.0)), self.transform_point((half, 0.0)))

    def render(self) -> list:
        return [DrawCall(Mode.LINES, self.endpoints())]


class Rectangle(Object2):
    """An axis-aligned (in object space) rectangle centred on its position."""

    def __init__(
        self,
        position: Point2 = (0.0, 0.0),
        dimensions: Sequence[float] = (0.0, 0.0),
    ) -> None:
        super().__init__(position)
        self.dimensions = dimensions

    @property
    def dimensions(self) -> Point2:
        return self._dimensions

    @dimensions.setter
    def dimensions(self, value: Sequence[float]) -> None:
        width, height = value
        self._dimensions = (_non_negative(width), _non_negative(height))

    def center(self) -> Point2:
        """Half the dimensions: the centre measured from a corner."""
        width, height = self._dimensions
        return (width * 0.5, height * 0.5)

    def ratio(self) -> float:
        """Width divided by height; raises ZeroDivisionError for zero height."""
        width, height = self._dimensions
        return width / height

    def _local_corners(self) -> Tuple[Point2, Point2, Point2, Point2]:
        hx, hy = self.center()
        return ((hx, -hy), (hx, hy), (-hx, hy), (-hx, -hy))

    def corners(self) -> Tuple[Point2, ...]:
        """The corners in plane coordinates, counter-clockwise from lower right."""
        return tuple(self.transform_point(c) for c in self._local_corners())

    def render(self) -> list:
        c0, c1, c2, c3 = self.corners()
        strip = (c0, c1, c3, c2)
        return [
            DrawCall(Mode.TRIANGLE_STRIP, strip, normals=_facing(len(strip))),
            DrawCall(Mode.LINE_LOOP, (c0, c1, c2, c3), color=Color.black()),
        ]


class Triangle(Object2):
    """An equilateral triangle whose centroid sits on its position."""

    def __init__(self, position: Point2 = (0.0, 0.0), size: float = 1.0) -> None:
        super().__init__(position)
        self.size = size

    @property
    def size(self) -> float:
        """Length of each side."""
        return self._size

    @size.setter
    def size(self, value: float) -> None:
        self._size = _non_negative(value)

    def _local_corners(self) -> Tuple[Point2, Point2, Point2]:
        s = self._size * 0.5
        h = (_SQRT3_DIV_2 * self._size) / 3.0
        return ((-s, -h), (s, -h), (0.0, 2.0 * h))

    def corners(self) -> Tuple[Point2, ...]:
        """The corners in plane coordinates."""
        return tuple(self.transform_point(c) for c in self._local_corners())

    def render(self) -> list:
        corners = self.corners()
        return [
            DrawCall(Mode.TRIANGLES, corners, normals=_facing(len(corners))),
            DrawCall(Mode.LINE_LOOP, corners, color=Color.black()),
        ]
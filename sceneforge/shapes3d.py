"""Solid shapes in space (boxes, cylinders and spheres) and a flat reference grid."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .object2 import DrawCall, Mode
from .object3 import Object3, Point3

_CIRCLE_STEPS = 20
_SPHERE_SLICES = 20
_SPHERE_STACKS = 20


def _non_negative(value: float) -> float:
    return max(float(value), 0.0)


def _repeat(normal: Point3, count: int) -> Tuple[Point3, ...]:
    return (normal,) * count


class Box(Object3):
    """An axis-aligned (in object space) box centred on its position."""

    def __init__(
        self,
        position: Point3 = (0.0, 0.0, 0.0),
        width: float = 1.0,
        height: float = 1.0,
        depth: float = 1.0,
    ) -> None:
        super().__init__(position)
        self.dimensions = (width, height, depth)

    @property
    def dimensions(self) -> Point3:
        """Full width, height and depth."""
        hx, hy, hz = self._half
        return (hx * 2.0, hy * 2.0, hz * 2.0)

    @dimensions.setter
    def dimensions(self, value: Sequence[float]) -> None:
        width, height, depth = value
        self._half: Point3 = (
            _non_negative(float(width) * 0.5),
            _non_negative(float(height) * 0.5),
            _non_negative(float(depth) * 0.5),
        )

    def bounding_sphere_radius(self) -> float:
        """Distance from the centre to a corner."""
        return math.hypot(*self._half)

    def render(self) -> list:
        x, y, z = self._half
        sides = [
            ((0.0, 0.0, -1.0), [(-x, y, -z), (-x, -y, -z), (x, y, -z), (x, -y, -z)]),
            ((1.0, 0.0, 0.0), [(x, y, -z), (x, -y, -z), (x, y, z), (x, -y, z)]),
            ((0.0, 0.0, 1.0), [(x, y, z), (x, -y, z), (-x, y, z), (-x, -y, z)]),
            ((-1.0, 0.0, 0.0), [(-x, y, z), (-x, -y, z), (-x, y, -z), (-x, -y, -z)]),
        ]
        side_vertices = [v for _, quad in sides for v in quad]
        side_normals = [n for n, quad in sides for _ in quad]
        top = [(-x, y, -z), (x, y, -z), (-x, y, z), (x, y, z)]
        bottom = [(x, -y, z), (-x, -y, z), (x, -y, -z), (-x, -y, -z)]
        color = self.material.color
        matrix = self.model_matrix
        return [
            DrawCall(Mode.TRIANGLE_STRIP, side_vertices, side_normals, color, matrix),
            DrawCall(Mode.TRIANGLE_STRIP, top, _repeat((0.0, 1.0, 0.0), 4), color, matrix),
            DrawCall(
                Mode.TRIANGLE_STRIP, bottom, _repeat((0.0, -1.0, 0.0), 4), color, matrix
            ),
        ]


class Cylinder(Object3):
    """An upright cylinder centred on its position, its axis along local y."""

    def __init__(
        self,
        position: Point3 = (0.0, 0.0, 0.0),
        height: float = 5.0,
        radius: float = 0.5,
    ) -> None:
        super().__init__(position)
        self.height = height
        self.radius = radius

    @property
    def height(self) -> float:
        return self._half_height * 2.0

    @height.setter
    def height(self, value: float) -> None:
        self._half_height = _non_negative(float(value) * 0.5)

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = _non_negative(value)

    def bounding_sphere_radius(self) -> float:
        """Distance from the centre to a point on a rim."""
        return math.sqrt(self._radius ** 2 + self._half_height ** 2)

    def _rim_directions(self) -> List[Tuple[float, float]]:
        return [
            (math.cos(2.0 * math.pi * i / _CIRCLE_STEPS),
             math.sin(2.0 * math.pi * i / _CIRCLE_STEPS))
            for i in range(_CIRCLE_STEPS + 1)
        ]

    def render(self) -> list:
        r, h = self._radius, self._half_height
        rim = self._rim_directions()
        surface: List[Point3] = []
        surface_normals: List[Point3] = []
        for c, s in rim:
            surface += [(r * c, h, r * s), (r * c, -h, r * s)]
            surface_normals += [(c, 0.0, s), (c, 0.0, s)]
        top = [(0.0, h, 0.0)] + [(r * c, h, r * s) for c, s in rim]
        bottom = [(0.0, -h, 0.0)] + [(r * c, -h, r * s) for c, s in rim]
        color = self.material.color
        matrix = self.model_matrix
        return [
            DrawCall(Mode.TRIANGLE_STRIP, surface, surface_normals, color, matrix),
            DrawCall(
                Mode.TRIANGLE_FAN, top, _repeat((0.0, 1.0, 0.0), len(top)), color, matrix
            ),
            DrawCall(
                Mode.TRIANGLE_FAN,
                bottom,
                _repeat((0.0, -1.0, 0.0), len(bottom)),
                color,
                matrix,
            ),
        ]


class Sphere(Object3):
    """A sphere centred on its position."""

    def __init__(self, position: Point3 = (0.0, 0.0, 0.0), radius: float = 0.5) -> None:
        super().__init__(position)
        self.radius = radius

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = _non_negative(value)

    def bounding_sphere_radius(self) -> float:
        return self._radius

    @staticmethod
    def point_on_surface(u: float, v: float, w: float) -> Point3:
        """The point of the unit sphere in the direction (u, v, w)."""
        length = math.hypot(u, v, w)
        if length == 0.0:
            raise ValueError("direction must not be the zero vector")
        return (u / length, v / length, w / length)

    @staticmethod
    def point_at_angles(theta: float, phi: float) -> Point3:
        """The point of the unit sphere at latitude theta and longitude phi."""
        cos_theta = math.cos(theta)
        return (cos_theta * math.cos(phi), cos_theta * math.sin(phi), math.sin(theta))

    def render(self) -> list:
        color = self.material.color
        matrix = self.model_matrix
        calls = []
        for stack in range(_SPHERE_STACKS):
            lower = -math.pi / 2 + math.pi * stack / _SPHERE_STACKS
            upper = -math.pi / 2 + math.pi * (stack + 1) / _SPHERE_STACKS
            normals: List[Point3] = []
            for slice_ in range(_SPHERE_SLICES + 1):
                phi = 2.0 * math.pi * slice_ / _SPHERE_SLICES
                normals.append(self.point_at_angles(upper, phi))
                normals.append(self.point_at_angles(lower, phi))
            vertices = [tuple(self._radius * c for c in n) for n in normals]
            calls.append(DrawCall(Mode.TRIANGLE_STRIP, vertices, normals, color, matrix))
        return calls


class Grid3(Object3):
    """A flat grid of lines in the y = 0 plane, centred on the origin."""

    def __init__(
        self,
        position: Point3 = (0.0, 0.0, 0.0),
        dimensions: Sequence[float] = (1.0, 1.0),
        resolution: Sequence[float] = (1.0, 1.0),
    ) -> None:
        super().__init__(position)
        self.dimensions = dimensions
        self.resolution = resolution

    @property
    def dimensions(self) -> Tuple[float, float]:
        return self._dimensions

    @dimensions.setter
    def dimensions(self, value: Sequence[float]) -> None:
        x, y = value
        self._dimensions = (float(x), float(y))

    @property
    def resolution(self) -> Tuple[float, float]:
        """Spacing between neighbouring lines along x and along z."""
        return self._resolution

    @resolution.setter
    def resolution(self, value: Sequence[float]) -> None:
        x, y = (float(v) for v in value)
        if x <= 0.0 or y <= 0.0:
            raise ValueError("grid resolution must be positive")
        self._resolution = (x, y)

    def render(self) -> list:
        dx, dy = self._dimensions
        rx, ry = self._resolution
        nx = math.floor(dx / rx)
        ny = math.floor(dy / ry)
        x0, y0 = -dx / 2.0, -dy / 2.0
        x1, y1 = -x0, -y0
        vertices: List[Point3] = []
        for i in range(nx):
            vertices += [(x0 + i * rx, 0.0, y0), (x0 + i * rx, 0.0, y1)]
        vertices += [(x1, 0.0, y0), (x1, 0.0, y1)]
        for j in range(ny):
            vertices += [(x0, 0.0, y0 + j * ry), (x1, 0.0, y0 + j * ry)]
        vertices += [(x0, 0.0, y1), (x1, 0.0, y1)]
        return [DrawCall(Mode.LINES, vertices)]
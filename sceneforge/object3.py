"""Three-dimensional scene objects with position, orientation and material."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

from .material import Material
from .object2 import DrawCall, Mode

Point3 = Tuple[float, float, float]
Quaternion = Tuple[float, float, float, float]

_IDENTITY: Quaternion = (1.0, 0.0, 0.0, 0.0)


def _quat_mul(p: Quaternion, q: Quaternion) -> Quaternion:
    pw, px, py, pz = p
    qw, qx, qy, qz = q
    return (
        pw * qw - px * qx - py * qy - pz * qz,
        pw * qx + px * qw + py * qz - pz * qy,
        pw * qy - px * qz + py * qw + pz * qx,
        pw * qz + px * qy - py * qx + pz * qw,
    )


def _euler_quaternion(yaw: float, pitch: float, roll: float) -> Quaternion:
    """Yaw about y, then pitch about x, then roll about z."""
    qy = (math.cos(yaw / 2), 0.0, math.sin(yaw / 2), 0.0)
    qx = (math.cos(pitch / 2), math.sin(pitch / 2), 0.0, 0.0)
    qz = (math.cos(roll / 2), 0.0, 0.0, math.sin(roll / 2))
    return _quat_mul(_quat_mul(qy, qx), qz)


def _normalised(q: Sequence[float]) -> Quaternion:
    values = tuple(float(v) for v in q)
    norm = math.sqrt(sum(v * v for v in values))
    if norm == 0.0:
        raise ValueError("orientation quaternion must not be zero")
    return tuple(v / norm for v in values)  # type: ignore[return-value]


class Object3:
    """A positioned, oriented object in space carrying a material."""

    def __init__(self, position: Point3 = (0.0, 0.0, 0.0)) -> None:
        self.position = position
        self._orientation: Quaternion = _IDENTITY
        self._material = Material()

    @property
    def position(self) -> Point3:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        point = tuple(float(v) for v in value)
        if len(point) != 3:
            raise ValueError(f"expected 3 components, got {len(point)}")
        self._position: Point3 = point  # type: ignore[assignment]

    @property
    def orientation(self) -> Quaternion:
        """Unit quaternion (w, x, y, z)."""
        return self._orientation

    @orientation.setter
    def orientation(self, value: Sequence[float]) -> None:
        """Accept a quaternion (w, x, y, z) or Euler angles (yaw, pitch, roll)."""
        values = tuple(float(v) for v in value)
        if len(values) == 3:
            self._orientation = _normalised(_euler_quaternion(*values))
        elif len(values) == 4:
            self._orientation = _normalised(values)
        else:
            raise ValueError("orientation needs a quaternion or three Euler angles")

    @property
    def material(self) -> Material:
        return self._material

    @material.setter
    def material(self, value: Material) -> None:
        self._material = Material(value.color)

    @property
    def model_matrix(self) -> tuple:
        """Row-major 4x4 matrix: the orientation followed by the translation."""
        w, x, y, z = self._orientation
        tx, ty, tz = self._position
        return (
            (1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y), tx),
            (2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x), ty),
            (2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y), tz),
            (0.0, 0.0, 0.0, 1.0),
        )

    def render(self) -> list:
        return [
            DrawCall(Mode.POINTS, (self._position,), color=self._material.color)
        ]
"""Surface materials for three-dimensional objects."""

from __future__ import annotations

from dataclasses import dataclass, field

from .colors import Color


@dataclass
class Material:
    """A surface description; currently its diffuse colour."""

    color: Color = field(default_factory=Color.white)

    def __post_init__(self) -> None:
        self.color = Color(*self.color.rgba())

    @classmethod
    def from_rgb(cls, r: float, g: float, b: float) -> "Material":
        return cls(Color.from_rgb(r, g, b))
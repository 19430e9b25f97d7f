"""Colors, 2D and 3D primitives as draw calls, input state, timing, textures and terrain."""

__version__ = "0.1.0"
__all__ = [
    "colors",
    "material",
    "object2",
    "object3",
    "shapes2d",
    "shapes3d",
    "devices",
    "timer",
    "files",
    "texture",
    "terrain",
]
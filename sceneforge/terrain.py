"""Height-field terrain with procedural generators and derived normals."""

from __future__ import annotations

import math
import os
import random
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

import numpy as np

from .colors import Color
from .object2 import DrawCall, Mode
from .object3 import Object3
from .texture import Texture

PathLike = Union[str, "os.PathLike[str]"]
FaultFunction = Callable[[float, float], float]


def fault_line_step(distance: float, size: float) -> float:
    """Raise one side of the fault, lower the other; the width is ignored."""
    return fault_line_plateau(distance, 0.0)


def fault_line_plateau(distance: float, size: float) -> float:
    """Like the step, but leave a flat band of the given width along the fault."""
    size *= 0.5
    if distance >= size:
        return 1.0
    if distance <= -size:
        return -1.0
    return 0.0


def fault_line_sine(distance: float, size: float) -> float:
    """A smooth sine ramp of the given width across the fault."""
    size *= 0.5
    if distance >= size:
        return 1.0
    if distance <= -size:
        return -1.0
    return math.sin(distance * (math.pi / 2.0) / size)


def fault_line_cosine(distance: float, size: float) -> float:
    """A cosine ridge of the given width along the fault."""
    size *= 0.5
    if distance >= size or distance <= -size:
        return -1.0
    return math.cos(distance * math.pi / size)


@dataclass(frozen=True)
class TerrainMesh:
    """Vertex data for indexed drawing, one entry per heightmap cell."""

    indices: np.ndarray
    vertices: np.ndarray
    normals: np.ndarray
    texcoords: np.ndarray


class Terrain(Object3):
    """A heightmap spread over ``width`` by ``depth`` units and scaled by ``height``."""

    def __init__(
        self,
        width: float,
        height: float,
        depth: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__()
        self._dimensions: Tuple[float, float, float] = (
            max(float(width), 0.0),
            float(height),
            max(float(depth), 0.0),
        )
        self._rng = rng if rng is not None else random.Random()
        self._heightmap = Texture()
        self._normalmap = Texture()
        self._mesh: Optional[TerrainMesh] = None

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        return self._dimensions

    @property
    def heightmap(self) -> Texture:
        return self._heightmap

    @property
    def normalmap(self) -> Texture:
        return self._normalmap

    @property
    def mesh(self) -> Optional[TerrainMesh]:
        """The vertex data from the last call to update_maps, if any."""
        return self._mesh

    # helpers ------------------------------------------------------------

    def _heights(self) -> np.ndarray:
        return self._heightmap.data[:, :, 0]

    def _ensure_heightmap(self) -> np.ndarray:
        dx, _, dz = self._dimensions
        if self._heightmap.size != dx * dz:
            self._heightmap.generate(int(dx), int(dz), 1)
        if self._heightmap.size == 0:
            raise ValueError("terrain has no area to generate on")
        return self._heights()

    def _positions(self) -> np.ndarray:
        heights = self._heights()
        rows, cols = heights.shape
        dx, dy, dz = self._dimensions
        xs = dx * (np.arange(cols) / cols - 0.5) if cols else np.zeros(0)
        zs = dz * (np.arange(rows) / rows - 0.5) if rows else np.zeros(0)
        return np.stack(
            [
                np.broadcast_to(xs[np.newaxis, :], (rows, cols)),
                dy * heights.astype(np.float64),
                np.broadcast_to(zs[:, np.newaxis], (rows, cols)),
            ],
            axis=-1,
        )

    def _calculate_normals(self) -> None:
        heights = self._heights().astype(np.float64)
        rows, cols = heights.shape
        if self._normalmap.size != self._heightmap.size or self._normalmap.channels != 3:
            self._normalmap.generate(cols, rows, 3)
        left = np.zeros((rows, cols, 3))
        up = np.zeros((rows, cols, 3))
        right = np.zeros((rows, cols, 3))
        down = np.zeros((rows, cols, 3))
        left[:, 1:, 0] = -1.0
        left[:, 1:, 1] = heights[:, :-1] - heights[:, 1:]
        up[1:, :, 1] = heights[:-1, :] - heights[1:, :]
        up[1:, :, 2] = -1.0
        right[:, :-1, 0] = 1.0
        right[:, :-1, 1] = heights[:, 1:] - heights[:, :-1]
        down[:-1, :, 1] = heights[1:, :] - heights[:-1, :]
        down[:-1, :, 2] = 1.0
        normal = (
            np.cross(up, left)
            + np.cross(right, up)
            + np.cross(down, right)
            + np.cross(left, down)
        )
        length = np.linalg.norm(normal, axis=-1, keepdims=True)
        np.divide(normal, length, out=normal, where=length > 0)
        self._normalmap.data[:] = normal

    # generation ---------------------------------------------------------

    def generate_random(self, steps: int) -> None:
        """Fill every cell with a random multiple of 1/steps in [0, 1)."""
        steps = int(steps)
        if steps <= 0:
            raise ValueError("steps must be positive")
        heights = self._ensure_heightmap()
        rows, cols = heights.shape
        values = [self._rng.randrange(steps) / steps for _ in range(rows * cols)]
        heights[:] = np.asarray(values).reshape(rows, cols)
        self._calculate_normals()

    def generate_fault_line(self, iterations: int) -> None:
        self.generate_fault_line_with_function(fault_line_step, 0.0, iterations)

    def generate_fault_line_plateau(self, size: float, iterations: int) -> None:
        self.generate_fault_line_with_function(fault_line_plateau, size, iterations)

    def generate_fault_line_sine(self, size: float, iterations: int) -> None:
        self.generate_fault_line_with_function(fault_line_sine, size, iterations)

    def generate_fault_line_cosine(self, size: float, iterations: int) -> None:
        self.generate_fault_line_with_function(fault_line_cosine, size, iterations)

    def generate_fault_line_with_function(
        self, function: FaultFunction, size: float, iterations: int
    ) -> None:
        """Displace the terrain along random fault lines, each weaker than the last."""
        heights = self._ensure_heightmap()
        rows, cols = heights.shape
        grid_rows, grid_cols = np.mgrid[0:rows, 0:cols]
        profile = np.vectorize(lambda d: function(float(d), size), otypes=[np.float64])
        iterations = int(iterations)
        for i in range(iterations):
            x1, y1 = self._rng.randrange(cols), self._rng.randrange(rows)
            x2, y2 = self._rng.randrange(cols), self._rng.randrange(rows)
            nx, ny = float(x2 - x1), float(y2 - y1)
            length = math.hypot(nx, ny)
            if length > 0.0:
                nx, ny = nx / length, ny / length
            displacement = 1.0 - i / iterations
            distance = nx * (y1 - grid_rows) - ny * (x1 - grid_cols)
            heights += profile(distance) * displacement
        self.normalize()
        self.update_maps()

    def generate_particle_deposition(self, series: int, iterations: int) -> None:
        """Drop particles along random walks that wrap around the edges."""
        heights = self._ensure_heightmap()
        rows, cols = heights.shape
        for _ in range(int(series)):
            x, y = self._rng.randrange(cols), self._rng.randrange(rows)
            for _ in range(int(iterations)):
                direction = self._rng.randrange(4)
                if direction == 0:
                    y = (y - 1) % rows
                elif direction == 1:
                    x = (x + 1) % cols
                elif direction == 2:
                    y = (y + 1) % rows
                else:
                    x = (x - 1) % cols
                heights[y, x] += 1.0
        self.normalize()

    # adjustments --------------------------------------------------------

    def normalize(self) -> None:
        """Rescale the heights so they span [0, 1]."""
        heights = self._heights()
        if heights.size == 0:
            return
        high, low = float(heights.max()), float(heights.min())
        spread = high - low
        if spread != 0.0:
            heights[:] = heights / spread - low / spread
        self._calculate_normals()

    def flatten(self) -> None:
        self._heights()[:] = 0.0

    def update_maps(self) -> TerrainMesh:
        """Rebuild the index, vertex, normal and texture-coordinate arrays."""
        heights = self._heights()
        rows, cols = heights.shape
        if self._normalmap.size != self._heightmap.size:
            self._calculate_normals()
        strip = np.arange(cols * max(rows - 1, 0), dtype=np.uint32)
        indices = np.empty(strip.size * 2, dtype=np.uint32)
        indices[0::2] = strip
        indices[1::2] = strip + cols
        u = np.broadcast_to((np.arange(cols) / max(cols, 1))[np.newaxis, :], (rows, cols))
        v = np.broadcast_to((np.arange(rows) / max(rows, 1))[:, np.newaxis], (rows, cols))
        self._mesh = TerrainMesh(
            indices=indices,
            vertices=self._positions().reshape(-1, 3).astype(np.float32),
            normals=self._normalmap.data.reshape(-1, 3).copy(),
            texcoords=np.stack([u, v], axis=-1).reshape(-1, 2).astype(np.float32),
        )
        return self._mesh

    # files --------------------------------------------------------------

    def save_heightmap(self, path: PathLike) -> None:
        self._heightmap.save(path)

    def load_heightmap(self, path: PathLike) -> None:
        """Read heights from the first channel of an image and rebuild the normals."""
        self._heightmap.load(path)
        self._calculate_normals()

    # drawing ------------------------------------------------------------

    def render(self) -> list:
        heights = self._heights()
        if heights.size == 0:
            return []
        if self._normalmap.size != self._heightmap.size:
            self._calculate_normals()
        positions = self._positions()
        normals = self._normalmap.data.astype(np.float64)
        matrix = self.model_matrix
        calls = []
        for row in range(heights.shape[0] - 1):
            vertices = np.stack((positions[row], positions[row + 1]), axis=1).reshape(-1, 3)
            row_normals = np.stack((normals[row], normals[row + 1]), axis=1).reshape(-1, 3)
            calls.append(
                DrawCall(
                    Mode.TRIANGLE_STRIP,
                    vertices.tolist(),
                    row_normals.tolist(),
                    matrix=matrix,
                )
            )
        return calls

    def render_normals(self) -> list:
        """Short green lines from every vertex along its normal."""
        if self._heights().size == 0:
            return []
        if self._normalmap.size != self._heightmap.size:
            self._calculate_normals()
        starts = self._positions().reshape(-1, 3)
        ends = starts + self._normalmap.data.reshape(-1, 3)
        vertices = np.stack((starts, ends), axis=1).reshape(-1, 3)
        return [
            DrawCall(
                Mode.LINES, vertices.tolist(), color=Color.green(), matrix=self.model_matrix
            )
        ]
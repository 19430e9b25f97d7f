"""Floating-point images with one to four channels, stored as numpy arrays."""

from __future__ import annotations

import os
from typing import Union

import numpy as np
from PIL import Image

PathLike = Union[str, "os.PathLike[str]"]

_CHANNELS_BY_MODE = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


class Texture:
    """An image whose channels hold floats, usually in [0, 1].

    The pixels live in an array of shape ``(height, width, channels)``.
    """

    def __init__(self) -> None:
        self._data = np.zeros((0, 0, 4), dtype=np.float32)

    def generate(self, width: int, height: int, channels: int = 4) -> None:
        """Replace the image with a black one; channel counts other than 1-3 become 4."""
        width, height, channels = int(width), int(height), int(channels)
        if width < 0 or height < 0:
            raise ValueError("texture dimensions must not be negative")
        if channels not in (1, 2, 3):
            channels = 4
        self._data = np.zeros((height, width, channels), dtype=np.float32)

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> int:
        """Number of pixels."""
        return self.width * self.height

    @property
    def channels(self) -> int:
        return self._data.shape[2]

    @property
    def data(self) -> np.ndarray:
        """The pixel array itself; changes to it change the texture."""
        return self._data

    def save(self, path: PathLike) -> None:
        """Write the image as 8 bits per channel; the file suffix picks the format."""
        if self.size == 0:
            raise ValueError("cannot save an empty texture")
        pixels = np.clip(np.rint(self._data * 255.0), 0, 255).astype(np.uint8)
        if self.channels == 1:
            pixels = pixels[:, :, 0]
        Image.fromarray(pixels).save(path)

    def load(self, path: PathLike) -> None:
        """Read an image file; on failure the texture is left as it was."""
        with Image.open(path) as image:
            if image.mode not in _CHANNELS_BY_MODE:
                image = image.convert("RGBA")
            pixels = np.asarray(image, dtype=np.float32) / 255.0
        if pixels.ndim == 2:
            pixels = pixels[:, :, np.newaxis]
        self._data = np.ascontiguousarray(pixels, dtype=np.float32)
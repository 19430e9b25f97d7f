"""Reading whole files into memory."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def read_text_file(path: PathLike) -> str:
    """Return the whole contents of a UTF-8 text file."""
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read()


def read_binary_file(path: PathLike) -> bytes:
    """Return the whole contents of a file as bytes."""
    with open(path, "rb") as handle:
        return handle.read()
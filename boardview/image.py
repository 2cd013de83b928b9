"""A single background image with its placement on the board."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from PIL import Image as PILImage


class ImageError(Exception):
    """An image file could not be loaded."""


UV = tuple[float, float]


@dataclass
class Image:
    """An image file shown behind the board, with offset, scale and mirroring."""

    file: Path | str | None = None
    width: int = 0
    height: int = 0
    offset_x: int = 0
    offset_y: int = 0
    scaling_x: float = 1.0
    scaling_y: float = 1.0
    mirror_x: bool = False
    mirror_y: bool = False
    transparency: float = 0.0
    texture: Any = field(default=None, repr=False, compare=False)

    def reload(self) -> None:
        """(Re)load the pixels from ``file``; an empty path loads nothing.

        Raises ImageError when the file cannot be read or decoded.
        """
        self.texture = None
        if not self.file:
            return
        path = Path(os.fspath(self.file))
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ImageError(f"{path}: {exc.strerror or exc}") from exc
        if not data:
            raise ImageError(f"{path}: file is empty")
        try:
            with PILImage.open(io.BytesIO(data)) as source:
                pixels = source.convert("RGBA")
        except (OSError, ValueError) as exc:
            raise ImageError(f"Could not load image from {path}: {exc}") from exc
        self.texture = pixels
        self.width, self.height = pixels.size

    def uv_corners(self, rotation: int) -> list[UV]:
        """Texture coordinates for the top-left, top-right, bottom-right and
        bottom-left screen corners at the given rotation."""
        low_x = 1.0 if self.mirror_x else 0.0
        high_x = 0.0 if self.mirror_x else 1.0
        low_y = 0.0 if self.mirror_y else 1.0
        high_y = 1.0 if self.mirror_y else 0.0
        if rotation in (0, 2):
            return [(low_x, low_y), (high_x, low_y), (high_x, high_y), (low_x, high_y)]
        return [(low_x, low_y), (low_x, high_y), (high_x, high_y), (high_x, low_y)]

    def x0(self) -> float:
        """Left edge in board coordinates."""
        return float(self.offset_x)

    def y0(self) -> float:
        """Top edge in board coordinates."""
        return float(self.offset_y)

    def x1(self) -> float:
        """Right edge in board coordinates."""
        return self.offset_x + self.width * self.scaling_x

    def y1(self) -> float:
        """Bottom edge in board coordinates."""
        return self.offset_y + self.height * self.scaling_y
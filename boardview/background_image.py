"""Background images of both board sides, stored in the board's config file."""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Callable, Union

from boardview.boardconf import ConfigFile
from boardview.image import Image, ImageError

log = logging.getLogger(__name__)


class Side(Enum):
    """Board side being displayed."""

    TOP = 0
    BOTTOM = 1


SideSource = Union[Side, Callable[[], Side]]

_PREFIXES = (("Top", "top_image"), ("Bottom", "bottom_image"))


class BackgroundImage:
    """Top and bottom images; the one shown follows the current board side.

    ``side`` is either a fixed Side or a callable returning the side
    currently displayed.
    """

    def __init__(self, side: SideSource = Side.TOP) -> None:
        self._side = side
        self.top_image = Image()
        self.bottom_image = Image()
        self.config_filepath: Path | None = None
        self.error = ""
        self.enabled = True

    @property
    def side(self) -> Side:
        """The side currently displayed."""
        return self._side() if callable(self._side) else self._side

    def load_from_config(self, filepath: str | os.PathLike[str]) -> None:
        """Read image settings from the config file, normalise it and load images."""
        path = Path(filepath)
        self.config_filepath = path
        if not path.exists():
            return
        config_dir = path.resolve().parent
        config = ConfigFile(path)
        for prefix, attribute in _PREFIXES:
            filename = config.get(f"{prefix}ImageFile", "")
            setattr(
                self,
                attribute,
                Image(
                    file=config_dir / filename if filename else None,
                    offset_x=config.get_int(f"{prefix}ImageOffsetX", 0),
                    offset_y=config.get_int(f"{prefix}ImageOffsetY", 0),
                    scaling_x=config.get_float(f"{prefix}ImageScalingX", 1.0),
                    scaling_y=config.get_float(f"{prefix}ImageScalingY", 1.0),
                    mirror_x=config.get_bool(f"{prefix}ImageMirrorX", False),
                    mirror_y=config.get_bool(f"{prefix}ImageMirrorY", False),
                    transparency=config.get_float(f"{prefix}ImageTransparency", 0.0),
                ),
            )
        self.write_to_config(path)
        self.reload()

    def write_to_config(self, filepath: str | os.PathLike[str] | None) -> None:
        """Store the image settings in the config file; nothing without a path."""
        if not filepath:
            return
        path = Path(filepath)
        config = ConfigFile(path)
        config_dir = path.resolve().parent
        for prefix, attribute in _PREFIXES:
            image: Image = getattr(self, attribute)
            if image.file:
                try:
                    relative = os.path.relpath(Path(image.file).resolve(), config_dir)
                except ValueError as exc:
                    log.error("Error writing %s image path: %s", prefix.lower(), exc)
                else:
                    config.set(f"{prefix}ImageFile", Path(relative).as_posix())
            config.set(f"{prefix}ImageOffsetX", image.offset_x)
            config.set(f"{prefix}ImageOffsetY", image.offset_y)
            config.set(f"{prefix}ImageScalingX", float(image.scaling_x))
            config.set(f"{prefix}ImageScalingY", float(image.scaling_y))
            config.set(f"{prefix}ImageMirrorX", bool(image.mirror_x))
            config.set(f"{prefix}ImageMirrorY", bool(image.mirror_y))
            config.set(f"{prefix}ImageTransparency", float(image.transparency))

    def reload(self) -> str:
        """Reload both images; return (and keep) the error text, empty if none."""
        errors = []
        for image in (self.top_image, self.bottom_image):
            try:
                image.reload()
            except ImageError as exc:
                errors.append(str(exc))
        self.error = "\n".join(errors)
        return self.error

    def selected_image(self) -> Image:
        """The image for the side currently displayed."""
        return self.top_image if self.side is Side.TOP else self.bottom_image

    def x0(self) -> float:
        """Left edge of the shown image."""
        return self.selected_image().x0()

    def y0(self) -> float:
        """Top edge of the shown image."""
        return self.selected_image().y0()

    def x1(self) -> float:
        """Right edge of the shown image."""
        return self.selected_image().x1()

    def y1(self) -> float:
        """Bottom edge of the shown image."""
        return self.selected_image().y1()
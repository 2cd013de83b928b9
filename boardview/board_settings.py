"""Editing of per-board settings: PDF document and background images."""

from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path

from boardview.background_image import BackgroundImage, Side
from boardview.image import Image, ImageError
from boardview.pdffile import PDFFile


class BackgroundImagePreferences:
    """Edits a BackgroundImage, with a copy to restore on cancel."""

    def __init__(self, background_image: BackgroundImage) -> None:
        self.background_image = background_image
        self.errored_files: list[str] = []
        self._snapshot = self._take_snapshot()

    def _take_snapshot(self) -> tuple:
        bg = self.background_image
        return (
            replace(bg.top_image),
            replace(bg.bottom_image),
            bg.config_filepath,
            bg.error,
            bg.enabled,
        )

    def _image(self, side: Side) -> Image:
        bg = self.background_image
        return bg.top_image if side is Side.TOP else bg.bottom_image

    def _reload_image(self, image: Image) -> None:
        try:
            image.reload()
        except ImageError as exc:
            self.errored_files.append(str(exc))

    def open(self) -> None:
        """Start editing: clear past errors and remember the current state."""
        self.errored_files.clear()
        self._snapshot = self._take_snapshot()

    def set_image_file(self, side: Side, path: str | os.PathLike[str] | None) -> None:
        """Use ``path`` as the image of ``side`` and load it; empty is ignored."""
        if not path:
            return
        image = self._image(side)
        image.file = Path(path)
        self._reload_image(image)

    def save(self) -> None:
        """Write the settings to the board's config file and reload the images."""
        bg = self.background_image
        bg.write_to_config(bg.config_filepath)
        self._reload_image(bg.top_image)
        self._reload_image(bg.bottom_image)

    def cancel(self) -> None:
        """Restore the state remembered when editing started."""
        top, bottom, config_filepath, error, enabled = self._snapshot
        bg = self.background_image
        bg.top_image = replace(top)
        bg.bottom_image = replace(bottom)
        bg.config_filepath = config_filepath
        bg.error = error
        bg.enabled = enabled
        bg.reload()  # errors do not matter once the user cancelled

    def clear(self) -> None:
        """Remove both images."""
        bg = self.background_image
        bg.top_image = Image()
        bg.bottom_image = Image()
        bg.reload()


class PDFFilePreferences:
    """Edits a PDFFile, with a copy to restore on cancel."""

    def __init__(self, pdf_file: PDFFile) -> None:
        self.pdf_file = pdf_file
        self._snapshot = (pdf_file.path, pdf_file.config_filepath)

    def open(self) -> None:
        """Start editing: remember the current state."""
        self._snapshot = (self.pdf_file.path, self.pdf_file.config_filepath)

    def set_path(self, path: str | os.PathLike[str] | None) -> None:
        """Use ``path`` as the board's PDF document; empty is ignored."""
        if path:
            self.pdf_file.path = Path(path)

    def save(self) -> None:
        """Write the path to the board's config file and reopen the document."""
        self.pdf_file.write_to_config(self.pdf_file.config_filepath)
        self.pdf_file.reload()

    def cancel(self) -> None:
        """Restore the state remembered when editing started."""
        self.pdf_file.path, self.pdf_file.config_filepath = self._snapshot

    def clear(self) -> None:
        """Forget the PDF document and close it in the viewer."""
        self.pdf_file.path = None
        self.pdf_file.close()


class BoardSettings:
    """The board settings panel: PDF document and background images together."""

    def __init__(self, background_image: BackgroundImage, pdf_file: PDFFile) -> None:
        self.shown = False
        self.background_image_preferences = BackgroundImagePreferences(background_image)
        self.pdf_file_preferences = PDFFilePreferences(pdf_file)

    def show(self) -> None:
        """Open the panel, remembering the current settings if it was closed."""
        if not self.shown:
            self.pdf_file_preferences.open()
            self.background_image_preferences.open()
        self.shown = True

    def save(self) -> None:
        """Close the panel and keep the settings."""
        self.shown = False
        self.pdf_file_preferences.save()
        self.background_image_preferences.save()

    def cancel(self) -> None:
        """Close the panel and restore the previous settings."""
        self.shown = False
        self.pdf_file_preferences.cancel()
        self.background_image_preferences.cancel()

    def clear(self) -> None:
        """Remove the PDF document and both images."""
        self.pdf_file_preferences.clear()
        self.background_image_preferences.clear()
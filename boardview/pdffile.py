"""The PDF document attached to a board and its place in the board's config."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from boardview.boardconf import ConfigFile
from boardview.pdfbridge import PDFBridge

log = logging.getLogger(__name__)

CONFIG_KEY = "PDFFilePath"


class PDFFile:
    """A board's PDF document, shown through a viewer bridge."""

    def __init__(self, bridge: PDFBridge | None = None) -> None:
        self.bridge = bridge
        self.path: Path | None = None
        self.config_filepath: Path | None = None

    def reload(self) -> None:
        """Close the document in the viewer and open it again."""
        if self.bridge is None:
            log.error("PDFFile could not reload: no viewer bridge")
            return
        self.bridge.close_document()
        self.bridge.open_document(self)

    def close(self) -> None:
        """Close the document in the viewer."""
        if self.bridge is None:
            log.error("PDFFile could not close: no viewer bridge")
            return
        self.bridge.close_document()

    def load_from_config(self, filepath: str | os.PathLike[str] | None) -> None:
        """Take the PDF path from the config file, next to it by default."""
        if not filepath:
            self.config_filepath = None
            self.path = None
            return
        config_path = Path(filepath)
        self.config_filepath = config_path
        self.path = config_path.with_suffix(".pdf")
        if not config_path.exists():
            return
        config_dir = config_path.resolve().parent
        config = ConfigFile(config_path)
        stored = config.get(CONFIG_KEY, "")
        if stored:
            self.path = config_dir / stored
        self.write_to_config(config_path)

    def write_to_config(self, filepath: str | os.PathLike[str] | None) -> None:
        """Store the PDF path, relative to the config file; nothing without a path."""
        if not filepath:
            return
        config_path = Path(filepath)
        config = ConfigFile(config_path)
        if not self.path:
            return
        config_dir = config_path.resolve().parent
        try:
            relative = os.path.relpath(Path(self.path).resolve(), config_dir)
        except ValueError as exc:
            log.error("Error writing PDF file path: %s", exc)
            return
        config.set(CONFIG_KEY, relative)
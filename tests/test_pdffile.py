from pathlib import Path

from boardview.boardconf import ConfigFile
from boardview.pdfbridge import PDFBridge
from boardview.pdffile import CONFIG_KEY, PDFFile


class RecordingBridge(PDFBridge):
    def __init__(self):
        self.events = []

    def open_document(self, pdf_file):
        self.events.append(("open", pdf_file))

    def close_document(self):
        self.events.append(("close", None))


def test_reload_closes_then_opens_itself():
    bridge = RecordingBridge()
    pdf_file = PDFFile(bridge)
    pdf_file.reload()
    assert bridge.events == [("close", None), ("open", pdf_file)]


def test_close_closes_document():
    bridge = RecordingBridge()
    PDFFile(bridge).close()
    assert bridge.events == [("close", None)]


def test_reload_without_bridge_keeps_path(tmp_path):
    pdf_file = PDFFile(None)
    pdf_file.path = tmp_path / "x.pdf"
    pdf_file.reload()
    pdf_file.close()
    assert pdf_file.path == tmp_path / "x.pdf"


def test_missing_config_defaults_to_sibling_pdf(tmp_path):
    conf = tmp_path / "board.conf"
    pdf_file = PDFFile(RecordingBridge())
    pdf_file.load_from_config(conf)
    assert pdf_file.config_filepath == conf
    assert pdf_file.path == tmp_path / "board.pdf"
    assert not conf.exists()


def test_existing_config_without_key_gets_default_written(tmp_path):
    conf = tmp_path / "board.conf"
    conf.write_text("Other = 1\n", encoding="utf-8")
    pdf_file = PDFFile()
    pdf_file.load_from_config(conf)
    assert pdf_file.path == tmp_path / "board.pdf"
    config = ConfigFile(conf)
    assert config.get(CONFIG_KEY) == "board.pdf"
    assert config.get("Other") == "1"


def test_config_path_is_relative_to_config_dir(tmp_path):
    conf = tmp_path / "board.conf"
    conf.write_text(f"{CONFIG_KEY} = docs/schematic.pdf\n", encoding="utf-8")
    pdf_file = PDFFile()
    pdf_file.load_from_config(conf)
    assert pdf_file.path == tmp_path.resolve() / "docs" / "schematic.pdf"


def test_write_and_load_round_trip(tmp_path):
    conf = tmp_path / "board.conf"
    first = PDFFile()
    first.path = tmp_path / "sub" / "manual.pdf"
    first.write_to_config(conf)
    second = PDFFile()
    second.load_from_config(conf)
    assert Path(second.path).resolve() == first.path.resolve()


def test_write_without_destination_creates_nothing(tmp_path):
    pdf_file = PDFFile()
    pdf_file.path = tmp_path / "manual.pdf"
    pdf_file.write_to_config(None)
    assert list(tmp_path.iterdir()) == []
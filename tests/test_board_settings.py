from PIL import Image as PILImage

from boardview.background_image import BackgroundImage, Side
from boardview.board_settings import (
    BackgroundImagePreferences,
    BoardSettings,
    PDFFilePreferences,
)
from boardview.boardconf import ConfigFile
from boardview.pdfbridge import PDFBridge
from boardview.pdffile import CONFIG_KEY, PDFFile


class RecordingBridge(PDFBridge):
    def __init__(self):
        self.events = []

    def open_document(self, pdf_file):
        self.events.append("open")

    def close_document(self):
        self.events.append("close")


def make_png(path, size):
    PILImage.new("RGB", size).save(path)
    return path


def test_set_image_file_loads_image(tmp_path):
    bg = BackgroundImage(Side.TOP)
    prefs = BackgroundImagePreferences(bg)
    prefs.open()
    prefs.set_image_file(Side.TOP, make_png(tmp_path / "top.png", (4, 3)))
    assert (bg.top_image.width, bg.top_image.height) == (4, 3)
    assert prefs.errored_files == []


def test_set_missing_image_file_records_error(tmp_path):
    bg = BackgroundImage(Side.TOP)
    prefs = BackgroundImagePreferences(bg)
    prefs.set_image_file(Side.BOTTOM, tmp_path / "nope.png")
    assert len(prefs.errored_files) == 1
    assert "nope.png" in prefs.errored_files[0]


def test_open_clears_errors(tmp_path):
    prefs = BackgroundImagePreferences(BackgroundImage())
    prefs.set_image_file(Side.TOP, tmp_path / "nope.png")
    prefs.open()
    assert prefs.errored_files == []


def test_cancel_restores_previous_images(tmp_path):
    first = make_png(tmp_path / "first.png", (2, 2))
    bg = BackgroundImage(Side.TOP)
    bg.top_image.file = first
    bg.top_image.offset_x = 7
    prefs = BackgroundImagePreferences(bg)
    prefs.open()
    prefs.set_image_file(Side.TOP, make_png(tmp_path / "second.png", (5, 5)))
    bg.top_image.offset_x = 99
    prefs.cancel()
    assert bg.top_image.file == first
    assert bg.top_image.offset_x == 7
    assert bg.top_image.width == 2


def test_clear_removes_both_images(tmp_path):
    bg = BackgroundImage(Side.BOTTOM)
    prefs = BackgroundImagePreferences(bg)
    prefs.set_image_file(Side.TOP, make_png(tmp_path / "a.png", (2, 2)))
    prefs.set_image_file(Side.BOTTOM, make_png(tmp_path / "b.png", (2, 2)))
    prefs.clear()
    assert bg.top_image.file is None
    assert bg.bottom_image.file is None
    assert bg.x1() == bg.x0()


def test_save_writes_config(tmp_path):
    conf = tmp_path / "board.conf"
    bg = BackgroundImage(Side.TOP)
    bg.load_from_config(conf)
    prefs = BackgroundImagePreferences(bg)
    prefs.set_image_file(Side.TOP, make_png(tmp_path / "top.png", (3, 3)))
    prefs.save()
    assert ConfigFile(conf).get("TopImageFile") == "top.png"


def test_pdf_preferences_cancel_restores_path(tmp_path):
    pdf_file = PDFFile(RecordingBridge())
    pdf_file.path = tmp_path / "old.pdf"
    prefs = PDFFilePreferences(pdf_file)
    prefs.open()
    prefs.set_path(tmp_path / "new.pdf")
    assert pdf_file.path == tmp_path / "new.pdf"
    prefs.cancel()
    assert pdf_file.path == tmp_path / "old.pdf"


def test_pdf_preferences_save_writes_and_reopens(tmp_path):
    conf = tmp_path / "board.conf"
    bridge = RecordingBridge()
    pdf_file = PDFFile(bridge)
    pdf_file.load_from_config(conf)
    prefs = PDFFilePreferences(pdf_file)
    prefs.set_path(tmp_path / "manual.pdf")
    prefs.save()
    assert ConfigFile(conf).get(CONFIG_KEY) == "manual.pdf"
    assert bridge.events == ["close", "open"]


def test_pdf_preferences_clear_closes(tmp_path):
    bridge = RecordingBridge()
    pdf_file = PDFFile(bridge)
    pdf_file.path = tmp_path / "manual.pdf"
    PDFFilePreferences(pdf_file).clear()
    assert pdf_file.path is None
    assert bridge.events == ["close"]


def test_board_settings_cancel_restores_everything(tmp_path):
    bg = BackgroundImage(Side.TOP)
    pdf_file = PDFFile(RecordingBridge())
    pdf_file.path = tmp_path / "old.pdf"
    settings = BoardSettings(bg, pdf_file)
    settings.show()
    assert settings.shown is True
    settings.pdf_file_preferences.set_path(tmp_path / "new.pdf")
    settings.background_image_preferences.set_image_file(
        Side.TOP, make_png(tmp_path / "t.png", (2, 2))
    )
    settings.cancel()
    assert settings.shown is False
    assert pdf_file.path == tmp_path / "old.pdf"
    assert bg.top_image.file is None


def test_board_settings_show_twice_keeps_first_snapshot(tmp_path):
    pdf_file = PDFFile(RecordingBridge())
    pdf_file.path = tmp_path / "old.pdf"
    settings = BoardSettings(BackgroundImage(), pdf_file)
    settings.show()
    settings.pdf_file_preferences.set_path(tmp_path / "new.pdf")
    settings.show()
    settings.cancel()
    assert pdf_file.path == tmp_path / "old.pdf"


def test_board_settings_save_and_clear(tmp_path):
    conf = tmp_path / "board.conf"
    bg = BackgroundImage(Side.TOP)
    bridge = RecordingBridge()
    pdf_file = PDFFile(bridge)
    pdf_file.load_from_config(conf)
    bg.load_from_config(conf)
    settings = BoardSettings(bg, pdf_file)
    settings.show()
    settings.pdf_file_preferences.set_path(tmp_path / "doc.pdf")
    settings.save()
    assert settings.shown is False
    assert ConfigFile(conf).get(CONFIG_KEY) == "doc.pdf"
    settings.clear()
    assert pdf_file.path is None
    assert bridge.events[-1] == "close"
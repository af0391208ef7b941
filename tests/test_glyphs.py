"""Tests for glyph resolution on the Qt side."""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from PySide6.QtGui import QColor, QImage
from PySide6.QtWidgets import QLabel

from core.rating import Glyph
from gui.glyphs import SYSTEM_SYMBOLS, apply_glyph, symbol_text, tinted_pixmap


def _solid_png(path, size=8, colour="black"):
    image = QImage(size, size, QImage.Format_ARGB32)
    image.fill(QColor(colour))
    assert image.save(str(path), "PNG")
    return str(path)


class TestSymbolText:

    def test_known_symbols(self):
        assert symbol_text(Glyph.system("star.fill")) == "★"
        assert symbol_text(Glyph.system("star")) == "☆"
        assert symbol_text(Glyph.system("heart.fill")) == "♥"

    def test_unknown_symbol_falls_back_to_star(self, caplog):
        with caplog.at_level("WARNING"):
            assert symbol_text(Glyph.system("no.such.symbol")) == SYSTEM_SYMBOLS["star.fill"]
        assert "no.such.symbol" in caplog.text


class TestTintedPixmap:

    def test_recolours_opaque_pixels(self, qapp, tmp_path):
        path = _solid_png(tmp_path / "glyph.png")
        pixmap = tinted_pixmap(path, "red", 8)
        assert not pixmap.isNull()
        assert pixmap.width() == 8
        assert pixmap.toImage().pixelColor(3, 3).name() == "#ff0000"

    def test_scales_to_size(self, qapp, tmp_path):
        path = _solid_png(tmp_path / "big.png", size=64)
        pixmap = tinted_pixmap(path, "blue", 16)
        assert (pixmap.width(), pixmap.height()) == (16, 16)

    def test_missing_file_yields_null_pixmap(self, qapp, tmp_path, caplog):
        with caplog.at_level("WARNING"):
            pixmap = tinted_pixmap(str(tmp_path / "missing.png"), "red")
        assert pixmap.isNull()
        assert "missing.png" in caplog.text


class TestApplyGlyph:

    def test_system_glyph_sets_text_and_colour(self, qapp):
        label = QLabel()
        apply_glyph(label, Glyph.system("heart"), "#00ff00")
        assert label.text() == "♡"
        assert "color: #00ff00" in label.styleSheet()

    def test_image_glyph_sets_pixmap(self, qapp, tmp_path):
        label = QLabel()
        path = _solid_png(tmp_path / "glyph.png", size=20)
        apply_glyph(label, Glyph.image(path), "yellow")
        assert label.text() == ""
        assert not label.pixmap().isNull()

    def test_switching_back_to_text_clears_pixmap(self, qapp, tmp_path):
        label = QLabel()
        path = _solid_png(tmp_path / "glyph.png", size=20)
        apply_glyph(label, Glyph.image(path), "yellow")
        apply_glyph(label, Glyph.system("star.fill"), "yellow")
        assert label.text() == "★"
        assert label.pixmap().isNull()

import logging

from PySide6.QtWidgets import QLabel
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPainter, QPixmap

from core.rating import Glyph, GlyphKind

# Named symbols rendered as text. Outline variants are only used when a caller asks
# for them explicitly; an unset off-glyph reuses the on-glyph.
SYSTEM_SYMBOLS = {
    "star.fill": "★",
    "star": "☆",
    "heart.fill": "♥",
    "heart": "♡",
    "circle.fill": "●",
    "circle": "○",
    "flag.fill": "⚑",
    "flag": "⚐",
}
_FALLBACK_SYMBOL = "star.fill"

DEFAULT_GLYPH_SIZE = 20  # px


def symbol_text(glyph: Glyph) -> str:
    text = SYSTEM_SYMBOLS.get(glyph.name)
    if text is None:
        logging.warning(f"Unknown system symbol '{glyph.name}', using {_FALLBACK_SYMBOL}")
        text = SYSTEM_SYMBOLS[_FALLBACK_SYMBOL]
    return text


def tinted_pixmap(path: str, colour: str, size: int = DEFAULT_GLYPH_SIZE) -> QPixmap:
    """Loads an image and recolours every opaque pixel with ``colour``."""
    source = QPixmap(path)
    if source.isNull():
        logging.warning(f"Could not load glyph image: {path}")
        return QPixmap()

    source = source.scaled(size, size, Qt.KeepAspectRatio, Qt.SmoothTransformation)
    tinted = QPixmap(source.size())
    tinted.fill(Qt.transparent)

    painter = QPainter(tinted)
    painter.drawPixmap(0, 0, source)
    painter.setCompositionMode(QPainter.CompositionMode_SourceIn)
    painter.fillRect(tinted.rect(), QColor(colour))
    painter.end()
    return tinted


def apply_glyph(label: QLabel, glyph: Glyph, colour: str, size: int = DEFAULT_GLYPH_SIZE):
    """Shows ``glyph`` on ``label`` tinted with ``colour``."""
    if glyph.kind is GlyphKind.IMAGE:
        label.setPixmap(tinted_pixmap(glyph.name, colour, size))
        label.setStyleSheet("QLabel { border: none; background: transparent; }")
    else:
        label.setText(symbol_text(glyph))
        label.setStyleSheet(
            f"QLabel {{ color: {colour}; font-size: {size}px; border: none; background: transparent; }}"
        )

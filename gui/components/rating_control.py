from typing import List, Optional

from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PySide6.QtCore import Qt, Signal
import logging

from core.binding import Binding
from core.rating import RatingRow, RatingStyle, Slot, render_row
from gui.glyphs import apply_glyph


class RatingSlot(QLabel):
    """One tappable icon in a rating row."""

    # Signal emitted when the slot is tapped
    # Parameters: index (int)
    tapped = Signal(int)

    def __init__(self, slot: Slot, parent=None):
        super().__init__(parent)
        self.index = slot.index  # 1-based; the value written on tap
        self._slot = slot
        self.setAlignment(Qt.AlignCenter)
        self.setCursor(Qt.PointingHandCursor)
        self.update_slot(slot)

    def is_on(self) -> bool:
        return self._slot.is_on

    def update_slot(self, slot: Slot):
        """Updates glyph and tint. The index never changes."""
        self._slot = slot
        apply_glyph(self, slot.glyph, slot.colour)

    def tap(self):
        self.tapped.emit(self.index)

    def mousePressEvent(self, event):
        """Handles mouse click events."""
        if event.button() == Qt.LeftButton:
            logging.debug(f"Mouse press on rating slot {self.index}")
            self.tap()
            event.accept()
        else:
            super().mousePressEvent(event)


class RatingControl(QWidget):
    """A row of tappable icons bound to an integer owned by the caller.

    The control keeps no rating of its own. Every render reads the binding, and a tap
    on slot ``i`` writes ``i`` back through it. Hosts that change the value directly
    should use an observable binding or call ``refresh()``.
    """

    def __init__(self, binding: Binding, style: Optional[RatingStyle] = None, parent=None):
        super().__init__(parent)
        self._binding = binding
        self._style = style or RatingStyle()
        self._label: Optional[QLabel] = None
        self._slots: List[RatingSlot] = []

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

        self._subscription = binding.observe(self._on_binding_changed)
        if self._subscription is not None:
            self.destroyed.connect(self._subscription.cancel)
        self.refresh()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def rating_style(self) -> RatingStyle:
        return self._style

    def set_rating_style(self, style: RatingStyle):
        self._style = style
        self.refresh()

    def label_widget(self) -> Optional[QLabel]:
        return self._label

    def slots(self) -> List[RatingSlot]:
        return list(self._slots)

    def refresh(self):
        """Re-derives the row from the current style and bound value."""
        row = render_row(self._binding.get(), self._style)
        # Qt reads a negative spacing as "use the style default"
        self._layout.setSpacing(max(0, round(row.spacing)))
        if self._same_structure(row):
            for widget, slot in zip(self._slots, row.slots):
                widget.update_slot(slot)
        else:
            self._rebuild(row)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _same_structure(self, row: RatingRow) -> bool:
        current_label = self._label.text() if self._label is not None else None
        return current_label == row.label and len(self._slots) == len(row.slots)

    def _rebuild(self, row: RatingRow):
        logging.debug(f"Rebuilding rating row: label={row.label!r}, slots={len(row.slots)}")
        while self._layout.count():
            item = self._layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                # why: detach now so findChildren() stops seeing it before deleteLater runs
                widget.setParent(None)
                widget.deleteLater()
        self._label = None
        self._slots = []

        if row.label is not None:
            self._label = QLabel(row.label)
            self._layout.addWidget(self._label)

        for slot in row.slots:
            widget = RatingSlot(slot)
            widget.tapped.connect(self._on_slot_tapped)
            self._layout.addWidget(widget)
            self._slots.append(widget)

    def _on_slot_tapped(self, index: int):
        logging.debug(f"Rating slot {index} tapped, writing to binding")
        self._binding.set(index)
        if not self._binding.is_observable:
            self.refresh()

    def _on_binding_changed(self, _value):
        self.refresh()

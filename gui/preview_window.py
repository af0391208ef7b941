from typing import Optional

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt
import logging

from core.binding import Binding, RatingState
from core.rating import RatingStyle
from gui.components.rating_control import RatingControl


class PreviewWindow(QMainWindow):
    """Hosts a RatingControl and a readout of the value it is bound to.

    With ``constant=True`` the control is bound to a fixed value, so taps are
    accepted but never change what is shown.
    """

    def __init__(self, config_manager, style: RatingStyle, initial_rating: int,
                 constant: bool = False, parent=None):
        super().__init__(parent)
        self.config_manager = config_manager

        if constant:
            self.state: Optional[RatingState] = None
            binding = Binding.constant(initial_rating)
        else:
            self.state = RatingState(initial_rating, self)
            binding = self.state.binding()

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self._layout = QVBoxLayout(self.central_widget)
        self._layout.setContentsMargins(12, 12, 12, 12)

        self.rating_control = RatingControl(binding, style)
        self._layout.addWidget(self.rating_control, 0, Qt.AlignCenter)

        self.readout = QLabel()
        self.readout.setAlignment(Qt.AlignCenter)
        self._layout.addWidget(self.readout)
        self._update_readout(binding.get())

        if self.state is not None:
            self.state.rating_changed.connect(self._update_readout)

        title = config_manager.get("preview.window_title", "Rating Preview") if config_manager else "Rating Preview"
        self.setWindowTitle(title)

    def _update_readout(self, rating: int):
        self.readout.setText(f"Rating: {rating}")
        logging.info(f"Preview rating is now {rating}")

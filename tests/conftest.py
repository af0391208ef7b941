"""
Shared pytest fixtures for rating control tests.
"""
import os
import sys

# Ensure project root is on path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Widgets are created without a display; must be set before QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from core.binding import Binding


@pytest.fixture(scope="session")
def qapp():
    """The process-wide QApplication, created once."""
    app = QApplication.instance() or QApplication([])
    yield app


class IntCell:
    """Plain external owner of a rating, with a log of every write."""

    def __init__(self, value: int = 0):
        self.value = value
        self.writes: list[int] = []

    def get(self) -> int:
        return self.value

    def set(self, value: int):
        self.writes.append(value)
        self.value = value

    def binding(self) -> Binding:
        return Binding(self.get, self.set)


@pytest.fixture()
def cell():
    return IntCell(0)

"""
UI-related settings for grh-indexer.
"""

from typing import Any, Union

from PySide6.QtCore import QByteArray, QSettings
from PySide6.QtWidgets import QWidget, QMainWindow


class UISettings:
    """Stores main window geometry and dock layout."""

    def __init__(self, settings: QSettings):
        self.settings = settings

    @staticmethod
    def _as_byte_array(value: Any) -> QByteArray | None:
        if not value:
            return None
        if isinstance(value, QByteArray):
            return value
        if isinstance(value, bytes):
            return QByteArray(value)
        try:
            return QByteArray(bytes(value))
        except (TypeError, ValueError):
            return None

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        """Save window geometry and, for main windows, dock state."""
        self.settings.setValue("ui/window_geometry", widget.saveGeometry())
        if isinstance(widget, QMainWindow):
            self.settings.setValue("ui/window_state", widget.saveState())
        self.settings.sync()

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        """Restore window geometry and state. Returns True if restored."""
        geometry = self._as_byte_array(self.settings.value("ui/window_geometry"))
        state = self._as_byte_array(self.settings.value("ui/window_state"))

        restored = False
        if geometry is not None:
            restored = widget.restoreGeometry(geometry)
        if state is not None and isinstance(widget, QMainWindow):
            widget.restoreState(state)
        return restored

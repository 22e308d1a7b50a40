"""Action handlers for MainWindow.

Keeps UI action logic separate from window construction and layout.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from PIL.ImageQt import ImageQt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QApplication, QFileDialog, QMessageBox

from .. import __version__
from ..imaging import IMAGE_FILE_FILTER, GraphicSheet, ImageLoadError, load_graphic_sheet
from .dialogs import LoggingSettingsDialog, show_about_dialog

if TYPE_CHECKING:
    from .main_window import MainWindow


def sheet_to_pixmap(sheet: GraphicSheet) -> QPixmap:
    """Convert a decoded sheet to a QPixmap."""
    return QPixmap.fromImage(ImageQt(sheet.image))


class MainWindowActions:
    """Handles actions and events for the main window."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def open_image(self) -> None:
        """Ask for a graphic sheet and load it."""
        mw = self.main_window
        last_dir = mw.settings.last_image_dir
        initial_dir = str(last_dir) if last_dir and last_dir.exists() else str(Path.cwd())

        file_path, _ = QFileDialog.getOpenFileName(
            mw, "Open Graphic Sheet", initial_dir, IMAGE_FILE_FILTER
        )
        if file_path:
            self.load_image(Path(file_path))

    def load_image(self, path: Path) -> bool:
        """Load a graphic sheet into the session. Returns True on success."""
        mw = self.main_window
        try:
            sheet = load_graphic_sheet(path)
        except ImageLoadError as e:
            self.logger.error(str(e))
            QMessageBox.critical(mw, "Open Graphic Sheet", f"Failed to load image:\n{e}")
            return False

        mw.canvas.set_pixmap(sheet_to_pixmap(sheet))
        mw.session.set_image(str(sheet.path.resolve()), sheet.width, sheet.height)
        mw.settings.add_recent_image(sheet.path)
        mw.menu_builder.update_recent_menu()

        mw.setWindowTitle(f"{sheet.path.name} - grh-indexer")
        mw.status_bar.showMessage(
            f"Loaded {sheet.path.name} ({sheet.width}x{sheet.height})", 5000
        )
        return True

    def open_recent(self, path_str: str) -> None:
        path = Path(path_str)
        if not path.exists():
            self.logger.warning(f"Recent image no longer exists: {path}")
            self.main_window.status_bar.showMessage(f"File not found: {path}", 5000)
            return
        self.load_image(path)

    def clear_recent(self) -> None:
        self.main_window.settings.clear_recent_images()
        self.main_window.menu_builder.update_recent_menu()

    def copy_to_clipboard(self) -> None:
        """Copy the export text; an empty selection leaves the clipboard untouched."""
        mw = self.main_window
        text = mw.session.copy_to_clipboard()
        if text is None:
            mw.status_bar.showMessage("Nothing selected", 3000)
            return

        clipboard = QApplication.clipboard()
        clipboard.setText(text)
        lines = text.count("\n") + 1
        mw.status_bar.showMessage(f"Copied {lines} lines to clipboard", 3000)

    def clear_selection(self) -> None:
        mw = self.main_window
        mw.session.clear()
        mw.status_bar.showMessage("Selection cleared", 3000)

    def logging_settings(self) -> None:
        dialog = LoggingSettingsDialog(self.main_window.settings, self.main_window)
        dialog.exec()

    def about(self) -> None:
        mw = self.main_window
        show_about_dialog(
            version=__version__,
            settings_path=mw.settings.get_settings_file_path(),
            parent=mw,
        )

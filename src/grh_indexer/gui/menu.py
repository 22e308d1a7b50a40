"""
Menu and toolbar builder for the main window.
"""

import logging
from functools import partial
from typing import TYPE_CHECKING

from PySide6.QtGui import QAction, QKeySequence, QPalette
import qtawesome as qta  # type: ignore

if TYPE_CHECKING:
    from .main_window import MainWindow


class MenuBuilder:
    """Builds and manages the application menu bar and toolbar."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _icon(self, name: str):
        color = self.main_window.palette().color(QPalette.ColorRole.WindowText)
        return qta.icon(name, color=color)

    def setup_actions(self) -> None:
        """Create all actions for menus and toolbar."""
        mw = self.main_window
        actions = mw.main_window_actions

        mw.action_open = QAction(self._icon("mdi.folder-image"), "&Open Image...", mw)
        mw.action_open.setShortcut(QKeySequence.StandardKey.Open)
        mw.action_open.setStatusTip("Open a graphic sheet")
        mw.action_open.triggered.connect(actions.open_image)

        mw.action_exit = QAction("E&xit", mw)
        mw.action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        mw.action_exit.triggered.connect(mw.close)

        mw.action_copy = QAction(
            self._icon("mdi.clipboard-text-outline"), "&Copy to Clipboard", mw
        )
        mw.action_copy.setShortcut(QKeySequence.StandardKey.Copy)
        mw.action_copy.setStatusTip("Copy the selected tiles as Grh entries")
        mw.action_copy.triggered.connect(actions.copy_to_clipboard)

        mw.action_clear = QAction(self._icon("mdi.selection-off"), "C&lear Selection", mw)
        mw.action_clear.setShortcut(QKeySequence("Esc"))
        mw.action_clear.setStatusTip("Deselect all tiles")
        mw.action_clear.triggered.connect(actions.clear_selection)

        mw.action_logging_settings = QAction("&Logging Settings...", mw)
        mw.action_logging_settings.triggered.connect(actions.logging_settings)

        mw.action_toggle_settings = mw.settings_dock.toggleViewAction()
        mw.action_toggle_settings.setText("&Settings Panel")

        mw.action_about = QAction("&About", mw)
        mw.action_about.triggered.connect(actions.about)

        self.logger.debug("Actions created")

    def setup_menus(self) -> None:
        """Create menu bar and toolbar from the actions."""
        mw = self.main_window
        menubar = mw.menuBar()

        file_menu = menubar.addMenu("&File")
        file_menu.addAction(mw.action_open)
        mw.recent_menu = file_menu.addMenu("Open &Recent")
        self.update_recent_menu()
        file_menu.addSeparator()
        file_menu.addAction(mw.action_exit)

        edit_menu = menubar.addMenu("&Edit")
        edit_menu.addAction(mw.action_copy)
        edit_menu.addAction(mw.action_clear)

        view_menu = menubar.addMenu("&View")
        view_menu.addAction(mw.action_toggle_settings)

        settings_menu = menubar.addMenu("&Settings")
        settings_menu.addAction(mw.action_logging_settings)

        help_menu = menubar.addMenu("&Help")
        help_menu.addAction(mw.action_about)

        toolbar = mw.addToolBar("Main")
        toolbar.setObjectName("main_toolbar")
        toolbar.addAction(mw.action_open)
        toolbar.addAction(mw.action_copy)
        toolbar.addAction(mw.action_clear)

        self.logger.debug("Menus created")

    def update_recent_menu(self) -> None:
        """Rebuild the recent images submenu."""
        mw = self.main_window
        actions = mw.main_window_actions
        mw.recent_menu.clear()

        recent = mw.settings.recent_images
        for path_str in recent:
            action = mw.recent_menu.addAction(path_str)
            action.triggered.connect(partial(actions.open_recent, path_str))

        if recent:
            mw.recent_menu.addSeparator()
            clear_action = mw.recent_menu.addAction("Clear List")
            clear_action.triggered.connect(actions.clear_recent)
        mw.recent_menu.setEnabled(bool(recent))

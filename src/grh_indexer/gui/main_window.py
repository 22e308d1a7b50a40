"""
Main application window for grh-indexer.
"""

import logging
from typing import Optional

from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QDockWidget, QMainWindow, QMenu, QWidget

from ..settings import AppSettings
from ..tiling.geometry import TileCoordinate
from ..tiling.session import TilingSession
from .actions import MainWindowActions
from .layout import DockLayoutBuilder
from .menu import MenuBuilder
from .settings_panel import SettingsPanel
from .tile_canvas import TileCanvas


class MainWindow(QMainWindow):
    """Main application window."""

    # Menu actions (created by MenuBuilder)
    action_open: QAction
    action_exit: QAction
    action_copy: QAction
    action_clear: QAction
    action_logging_settings: QAction
    action_toggle_settings: QAction
    action_about: QAction
    recent_menu: QMenu

    # Widgets (created by DockLayoutBuilder)
    canvas: TileCanvas
    settings_dock: QDockWidget
    settings_panel: SettingsPanel

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings
        self.session = TilingSession()

        self.main_window_actions = MainWindowActions(self)
        self.menu_builder = MenuBuilder(self)
        self.dock_layout_builder = DockLayoutBuilder(self)

        self.dock_layout_builder.setup_dock_widgets()
        self.menu_builder.setup_actions()
        self.menu_builder.setup_menus()

        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Ready", 3000)

        if not self.settings.restore_window_geometry(self):
            self.resize(1200, 800)

        self.setWindowTitle("grh-indexer")
        self.logger.info("Main window initialized")

    def on_tile_toggled(self, tile: TileCoordinate, selected: bool) -> None:
        state = "selected" if selected else "deselected"
        self.status_bar.showMessage(
            f"Tile {tile.column},{tile.row} {state} ({len(self.session.selection)} total)",
            2000,
        )

    def closeEvent(self, event: QCloseEvent) -> None:
        """Save window geometry on close."""
        self.settings.save_window_geometry(self)
        self.logger.info("Window geometry saved")
        super().closeEvent(event)

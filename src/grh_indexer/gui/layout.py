"""
Dock widget layout for the main window.
"""

import logging
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDockWidget

from .settings_panel import SettingsPanel
from .tile_canvas import TileCanvas

if TYPE_CHECKING:
    from .main_window import MainWindow


class DockLayoutBuilder:
    """Creates the canvas and the settings dock."""

    def __init__(self, main_window: "MainWindow") -> None:
        self.main_window = main_window
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def setup_dock_widgets(self) -> None:
        """
        Layout:
        - Center: tile canvas
        - Right: grid/export settings panel
        """
        mw = self.main_window

        mw.canvas = TileCanvas(mw.session)
        mw.setCentralWidget(mw.canvas)

        mw.settings_dock = QDockWidget("Settings")
        mw.settings_dock.setObjectName("settings_dock")
        mw.settings_panel = SettingsPanel(mw.settings, mw.session)
        mw.settings_dock.setWidget(mw.settings_panel)
        mw.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, mw.settings_dock)

        self._connect_signals()
        self.logger.debug("Dock widgets created")

    def _connect_signals(self) -> None:
        mw = self.main_window
        actions = mw.main_window_actions
        mw.settings_panel.copyRequested.connect(actions.copy_to_clipboard)
        mw.settings_panel.clearRequested.connect(actions.clear_selection)
        mw.canvas.tileToggled.connect(mw.on_tile_toggled)

"""
Logging settings dialog for grh-indexer.
"""

import subprocess
import sys
from typing import Optional
from PySide6.QtWidgets import (
    QVBoxLayout,
    QFormLayout,
    QGroupBox,
    QCheckBox,
    QComboBox,
    QLabel,
    QPushButton,
    QWidget,
)
from PySide6.QtCore import Qt

from ...settings import AppSettings
from ...settings.logging import VALID_LEVELS
from .base_dialog import BaseDialog


class LoggingSettingsDialog(BaseDialog):
    """Dialog for configuring console and file logging."""

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None):
        super().__init__(parent, title="Logging Settings")
        self.settings = settings

        self._setup_ui()
        self._load_settings()

    def _setup_ui(self):
        main_vbox = QVBoxLayout(self)

        # region Console logging group
        console_group = QGroupBox("Console Logging")
        console_layout = QFormLayout(console_group)

        self.console_enabled_check = QCheckBox("Enable console logging")
        console_layout.addRow(self.console_enabled_check)

        self.console_level_combo = QComboBox()
        self.console_level_combo.addItems(VALID_LEVELS)
        console_layout.addRow("Console log level:", self.console_level_combo)

        self.console_colors_check = QCheckBox("Use colors in console")
        console_layout.addRow(self.console_colors_check)
        main_vbox.addWidget(console_group)

        # region File logging group
        file_group = QGroupBox("File Logging")
        file_layout = QFormLayout(file_group)

        self.file_enabled_check = QCheckBox("Enable file logging")
        file_layout.addRow(self.file_enabled_check)

        open_button = QPushButton("Open Folder")
        open_button.clicked.connect(self._open_log_folder)
        file_layout.addRow(f"{self.settings.log_file_path}:", open_button)

        info_label = QLabel("File logging always captures DEBUG level")
        info_label.setWordWrap(True)
        file_layout.addRow(info_label)
        main_vbox.addWidget(file_group)

        restart_note = QLabel("Changes take effect after application restart")
        restart_note.setAlignment(Qt.AlignmentFlag.AlignCenter)
        main_vbox.addWidget(restart_note)

        self.add_ok_cancel(main_vbox, self._save_and_accept)

    def _load_settings(self):
        self.console_enabled_check.setChecked(self.settings.console_logging)
        self.console_level_combo.setCurrentText(self.settings.console_log_level)
        self.console_colors_check.setChecked(self.settings.console_use_colors)
        self.file_enabled_check.setChecked(self.settings.file_logging)

    def _save_and_accept(self):
        self.settings.console_logging = self.console_enabled_check.isChecked()
        self.settings.console_log_level = self.console_level_combo.currentText()
        self.settings.console_use_colors = self.console_colors_check.isChecked()
        self.settings.file_logging = self.file_enabled_check.isChecked()
        self.settings.sync()

        self.logger.info("Logging settings updated")
        self.accept()

    def _open_log_folder(self) -> None:
        """Open the folder containing the log file in the system file browser."""
        folder_path = self.settings.logging.log_file_absolute_path.parent
        folder_path.mkdir(parents=True, exist_ok=True)

        if sys.platform == "win32":
            command = ["explorer", str(folder_path)]
        elif sys.platform == "darwin":
            command = ["open", str(folder_path)]
        else:
            command = ["xdg-open", str(folder_path)]

        try:
            subprocess.run(command, check=False)
        except OSError as e:
            self.logger.error(f"Failed to open log folder: {e}")

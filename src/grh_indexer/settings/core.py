"""
Core settings management for grh-indexer.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QWidget, QMainWindow

from .types import ConfigError, ConfigVersion, ValidationResult
from .migration import SettingsMigrator
from .validation import SettingsValidator
from .paths import PathSettings
from .ui import UISettings
from .logging import LoggingSettings
from .tiler import TilerSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "grh_indexer"
APPLICATION = "grh_indexer"


class AppSettings:
    """
    Application configuration stored with QSettings.

    Values are grouped under a profile name and split into subsystems
    (paths, ui, logging, tiler) with type-safe accessors.
    """

    def __init__(self, profile: str = "default"):
        """Open the settings store for a profile.

        Args:
            profile: Settings profile name (default: "default")

        Raises:
            ConfigError: If the settings store is not accessible
        """
        self.settings = QSettings(ORGANIZATION, APPLICATION)
        if self.settings.status() != QSettings.Status.NoError:
            raise ConfigError(
                f"Cannot access settings at {self.settings.fileName()}: {self.settings.status()}"
            )
        self.profile = profile

        # grh_indexer/grh_indexer/<profile>/...
        self.settings.beginGroup(profile)

        self._migrator = SettingsMigrator(self.settings)
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._ui = UISettings(self.settings)
        self._logging = LoggingSettings(self.settings)
        self._tiler = TilerSettings(self.settings)

        self._migrator.ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        return self._paths

    @property
    def ui(self) -> UISettings:
        return self._ui

    @property
    def logging(self) -> LoggingSettings:
        return self._logging

    @property
    def tiler(self) -> TilerSettings:
        return self._tiler

    # === VERSION AND FIRST RUN ===

    @property
    def is_first_run(self) -> bool:
        """Check if this is the first run of the application."""
        value = self.settings.value("app/first_run", True)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)

    def set_first_run_complete(self) -> None:
        self.settings.setValue("app/first_run", False)
        self.settings.sync()

    @property
    def version(self) -> str:
        """Stored configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === PATHS (DELEGATED) ===

    @property
    def last_image_dir(self) -> Optional[Path]:
        return self._paths.last_image_dir

    @property
    def recent_images(self) -> List[str]:
        return self._paths.recent_images

    def add_recent_image(self, image_path: Union[str, Path]) -> None:
        """Add image to the recent list (max 10 items)."""
        self._paths.add_recent_image(image_path)

    def clear_recent_images(self) -> None:
        self._paths.clear_recent_images()

    # === UI (DELEGATED) ===

    def save_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> None:
        """Save window geometry and state."""
        self._ui.save_window_geometry(widget)

    def restore_window_geometry(self, widget: Union[QWidget, QMainWindow]) -> bool:
        """Restore window geometry and state. Returns True if restored."""
        return self._ui.restore_window_geometry(widget)

    # === LOGGING (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only)."""
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()

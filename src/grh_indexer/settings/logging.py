"""
Console and log file preferences for grh-indexer.

Read once by ``setup_logging`` at startup; the logging dialog edits them
for the next launch.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/grh_indexer.csv"
VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_CONSOLE_LEVEL = "INFO"

_CONSOLE_ENABLED = "logging/console_enabled"
_CONSOLE_LEVEL = "logging/console_level"
_CONSOLE_COLORS = "logging/console_use_colors"
_FILE_ENABLED = "logging/file_enabled"


class LoggingSettings:
    """Where log records go and how verbose the console is."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _flag(self, key: str, default: bool) -> bool:
        # INI-backed stores hand booleans back as strings
        value = self.settings.value(key, default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        if value is None:
            return default
        return bool(value)

    def _set(self, key: str, value: object) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()

    @property
    def console_logging(self) -> bool:
        """Print records to stderr (on by default)."""
        return self._flag(_CONSOLE_ENABLED, True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._set(_CONSOLE_ENABLED, value)

    @property
    def console_log_level(self) -> str:
        value = self.settings.value(_CONSOLE_LEVEL, DEFAULT_CONSOLE_LEVEL)
        level = str(value).upper() if value is not None else DEFAULT_CONSOLE_LEVEL
        return level if level in VALID_LEVELS else DEFAULT_CONSOLE_LEVEL

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(
                f"Ignoring console log level {value!r}, staying at {self.console_log_level}"
            )
            return
        self._set(_CONSOLE_LEVEL, level)

    @property
    def console_use_colors(self) -> bool:
        """Color the level name with ANSI escapes."""
        return self._flag(_CONSOLE_COLORS, True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._set(_CONSOLE_COLORS, value)

    @property
    def file_logging(self) -> bool:
        """Write DEBUG and above to the rotating CSV log (off by default)."""
        return self._flag(_FILE_ENABLED, False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._set(_FILE_ENABLED, value)

    @property
    def log_file_path(self) -> str:
        """CSV log location relative to the working directory."""
        return LOG_FILE_PATH

    @property
    def log_file_absolute_path(self) -> Path:
        return Path(LOG_FILE_PATH).resolve()

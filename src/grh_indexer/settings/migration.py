"""
Settings version stamping for grh-indexer.
"""

import logging
from typing import TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class SettingsMigrator:
    """Keeps the stored layout version current."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Stamp a version on first run, restamp foreign versions otherwise."""
        current_version = str(self.settings.value("app/version", ""))

        if not current_version:
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
        elif current_version != ConfigVersion.CURRENT.value:
            self._restamp(current_version)

    def _restamp(self, from_version: str) -> None:
        # No earlier layouts exist; values are read through clamping accessors
        logger.warning(
            f"Unknown configuration version {from_version}, keeping stored values"
        )
        self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
        self.settings.setValue("app/migrated_from", from_version)
        self.settings.sync()

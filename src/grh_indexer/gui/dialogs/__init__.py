"""Dialogs for grh-indexer."""

from .base_dialog import BaseDialog
from .logging_settings_dialog import LoggingSettingsDialog
from .about_dialog import show_about_dialog

__all__ = [
    "BaseDialog",
    "LoggingSettingsDialog",
    "show_about_dialog",
]

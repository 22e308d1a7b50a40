"""
Settings package for grh-indexer.

Configuration is stored with Qt's QSettings and split into subsystems.

Usage:
    from grh_indexer.settings import AppSettings

    settings = AppSettings()
    config = settings.tiler.export_config()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .tiler import TilerSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "TilerSettings",
]

"""
Configuration types and exceptions for grh-indexer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Stored configuration layout version."""
    V1_0 = "1.0"
    CURRENT = V1_0


class ConfigError(Exception):
    """Raised when the settings store cannot be read or written."""
    pass


@dataclass
class ValidationResult:
    """Outcome of a settings check."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

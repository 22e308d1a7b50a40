"""
Settings validation for grh-indexer.
"""

import logging
from pathlib import Path
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration.

        Recent images that no longer exist are reported as warnings and
        dropped from the list. A non-positive stored tile size is reset to
        its clamped value with a warning.
        """
        errors: List[str] = []
        warnings: List[str] = []

        tiler = self.settings.tiler
        raw_width, raw_height = tiler.stored_tile_size()
        if raw_width <= 0 or raw_height <= 0:
            # Properties clamp on read; writing them back repairs the store
            tiler.tile_width = tiler.tile_width
            tiler.tile_height = tiler.tile_height
            warnings.append(
                f"Stored tile size {raw_width}x{raw_height} is not positive, "
                f"using {tiler.tile_width}x{tiler.tile_height}"
            )

        last_dir = self.settings.paths.last_image_dir
        if last_dir and not last_dir.exists():
            warnings.append(f"Last image directory no longer exists: {last_dir}")

        recent = self.settings.paths.recent_images
        valid_recent: List[str] = []
        for image_path in recent:
            if Path(image_path).exists():
                valid_recent.append(image_path)
            else:
                warnings.append(f"Recent image no longer exists: {image_path}")

        if len(valid_recent) != len(recent):
            self.settings.paths.set_recent_images(valid_recent)
            logger.debug(f"Dropped {len(recent) - len(valid_recent)} missing recent images")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )

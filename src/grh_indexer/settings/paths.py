"""
Path-related settings for grh-indexer.
"""

from pathlib import Path
from typing import List, Optional, Union, TYPE_CHECKING, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

MAX_RECENT_IMAGES = 10


class PathSettings:
    """Remembers where graphic sheets were opened from."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_list(self, key: str) -> List[str]:
        value = self.settings.value(key, [])
        if isinstance(value, list):
            return [str(item) for item in cast(list[object], value) if item]
        # QSettings hands back a bare string for single-item lists in INI files
        if isinstance(value, str) and value:
            return [value]
        return []

    @property
    def last_image_dir(self) -> Optional[Path]:
        """Directory of the most recently opened image."""
        value = self.settings.value("paths/last_image_dir", "")
        return Path(str(value)) if value else None

    @property
    def recent_images(self) -> List[str]:
        """Recently opened images, newest first."""
        return self._get_list("paths/recent_images")

    def add_recent_image(self, image_path: Union[str, Path]) -> None:
        """Record an opened image and remember its directory."""
        path = Path(image_path)
        path_str = str(path)

        recent = [item for item in self.recent_images if item != path_str]
        recent.insert(0, path_str)

        self.settings.setValue("paths/recent_images", recent[:MAX_RECENT_IMAGES])
        self.settings.setValue("paths/last_image_dir", str(path.parent))
        self.settings.sync()

    def set_recent_images(self, images: List[str]) -> None:
        self.settings.setValue("paths/recent_images", list(images)[:MAX_RECENT_IMAGES])
        self.settings.sync()

    def clear_recent_images(self) -> None:
        self.settings.setValue("paths/recent_images", [])
        self.settings.sync()

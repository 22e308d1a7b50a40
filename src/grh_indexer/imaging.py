"""
Graphic sheet loading for grh-indexer.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

# File dialog filter for sheets Pillow can open
IMAGE_FILE_FILTER = "Images (*.png *.bmp *.jpg *.jpeg *.gif);;All Files (*)"


class ImageLoadError(Exception):
    """Raised when a graphic sheet cannot be read."""
    pass


@dataclass
class GraphicSheet:
    """Decoded graphic sheet."""
    path: Path
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height


def load_graphic_sheet(path: Union[str, Path]) -> GraphicSheet:
    """Load and fully decode a graphic sheet.

    Palette and other exotic modes are converted to RGBA so the sheet can
    be handed to Qt directly.

    Raises:
        ImageLoadError: If the file is missing, not an image or truncated
    """
    sheet_path = Path(path)
    try:
        with Image.open(sheet_path) as image:
            image.load()
            if image.mode not in ("RGBA", "RGB", "L"):
                decoded = image.convert("RGBA")
            else:
                decoded = image.copy()
    except (FileNotFoundError, UnidentifiedImageError, OSError) as e:
        raise ImageLoadError(f"Cannot load graphic sheet {sheet_path}: {e}") from e

    logger.debug(
        f"Loaded graphic sheet {sheet_path.name}: {decoded.width}x{decoded.height} {decoded.mode}"
    )
    return GraphicSheet(path=sheet_path, image=decoded)

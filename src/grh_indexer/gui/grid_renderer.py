"""Grid overlay rendering.

Draws the graphic sheet with its tile grid and the selected tiles onto a
QPainter. This is the only place that paints; the painter is expected to
be set up in image space (translated to the image corner and scaled by
the display transform).
"""

import logging
from typing import Optional

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPen, QPixmap

from ..tiling.geometry import GridConfig, tile_to_pixel_rect
from ..tiling.selection import TileSelection


class GridRenderer:
    """Renders a graphic sheet with its tile grid overlay."""

    GRID_COLOR = QColor(255, 0, 0)
    SELECTION_COLOR = QColor(255, 0, 0, 128)

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.pixmap: Optional[QPixmap] = None

    def set_pixmap(self, pixmap: Optional[QPixmap]) -> None:
        self.pixmap = pixmap

    @staticmethod
    def line_width(config: GridConfig) -> float:
        """Grid line width that stays visible on large sheets."""
        return max((config.image_width + config.image_height) / 1000, 1.0)

    def render(
        self, painter: QPainter, config: GridConfig, selection: TileSelection
    ) -> None:
        """Paint image, grid lines and selection in one pass.

        Args:
            painter: Painter already transformed into image space
            config: Grid to draw
            selection: Tiles to highlight
        """
        if self.pixmap is not None and not self.pixmap.isNull():
            painter.drawPixmap(0, 0, self.pixmap)

        pen = QPen(self.GRID_COLOR)
        pen.setWidthF(self.line_width(config))
        pen.setCosmetic(False)
        fill = QBrush(self.SELECTION_COLOR)

        painter.save()
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        for tile in config.tiles():
            rect = tile_to_pixel_rect(tile, config)
            qrect = QRectF(rect.x, rect.y, rect.width, rect.height)
            if tile in selection:
                painter.fillRect(qrect, fill)
            painter.drawRect(qrect)
        painter.restore()

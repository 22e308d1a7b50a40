"""Canvas widget showing the graphic sheet and its tile grid.

The canvas fits the sheet into the widget, forwards left clicks to the
tiling session and repaints whenever any session input changes.
"""

import logging
from typing import Optional

from PySide6.QtCore import QPointF, QSize, Qt, Signal
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QPixmap, QResizeEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from ..tiling.session import TilingSession
from .grid_renderer import GridRenderer


class TileCanvas(QWidget):
    """Interactive view of a tiling session."""

    tileToggled = Signal(object, bool)  # TileCoordinate, selected

    def __init__(self, session: TilingSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.session = session
        self.renderer = GridRenderer()

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(200, 200)
        self.setCursor(Qt.CursorShape.CrossCursor)

        self.session.subscribe(self._on_session_changed)

    def sizeHint(self) -> QSize:
        return QSize(800, 600)

    def set_pixmap(self, pixmap: Optional[QPixmap]) -> None:
        """Show a new sheet. The session must be told about the image separately."""
        self.renderer.set_pixmap(pixmap)
        self.update()

    def image_origin(self) -> QPointF:
        """Top-left corner of the displayed image, centered in the widget."""
        transform = self.session.transform
        return QPointF(
            (self.width() - transform.displayed_width) / 2,
            (self.height() - transform.displayed_height) / 2,
        )

    def _on_session_changed(self, _changed: frozenset[str]) -> None:
        self.update()

    # === QT EVENTS ===

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self.session.resize_container(float(self.width()), float(self.height()))

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.fillRect(self.rect(), self.palette().window())
            if not self.session.has_image:
                painter.drawText(
                    self.rect(),
                    Qt.AlignmentFlag.AlignCenter,
                    "Open a graphic sheet to start (Ctrl+O)",
                )
                return

            origin = self.image_origin()
            painter.translate(origin)
            painter.scale(self.session.transform.scale, self.session.transform.scale)
            self.renderer.render(painter, self.session.grid, self.session.selection)
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        origin = self.image_origin()
        position = event.position()
        tile = self.session.click(position.x(), position.y(), origin.x(), origin.y())
        if tile is not None:
            self.tileToggled.emit(tile, tile in self.session.selection)
        event.accept()

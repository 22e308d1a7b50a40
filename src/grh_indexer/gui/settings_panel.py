"""
Grid and export settings panel for grh-indexer.

Edits the tiling session inputs, stores them in AppSettings and shows a
live preview of the export text.
"""

import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFontDatabase, QPalette
from PySide6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)
import qtawesome as qta  # type: ignore

from ..settings import AppSettings
from ..settings.tiler import MAX_TILE_SIZE
from ..tiling.export import (
    MAX_FRAME_DELAY,
    MIN_FRAME_DELAY,
    MIN_STARTING_INDEX,
    ExportConfig,
)
from ..tiling.session import EXPORT, SELECTION, TILE_SIZE, TilingSession

# Large enough for any sheet the engine can load
OFFSET_LIMIT = 100_000
INDEX_LIMIT = 2_000_000


class SettingsPanel(QWidget):
    """Form for tile size, offsets and export parameters."""

    copyRequested = Signal()
    clearRequested = Signal()

    def __init__(
        self,
        settings: AppSettings,
        session: TilingSession,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings
        self.session = session
        self._is_loading = False

        self._setup_ui()
        self._load_settings()
        self._connect_signals()
        self._update_preview()

        self.logger.debug("SettingsPanel initialized")

    @staticmethod
    def _spin_box(minimum: int, maximum: int, suffix: str = "") -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(minimum, maximum)
        spin.setSuffix(suffix)
        spin.setKeyboardTracking(False)
        return spin

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)

        # region Grid group
        grid_group = QGroupBox("Grid")
        grid_form = QFormLayout(grid_group)

        self.tile_width_spin = self._spin_box(1, MAX_TILE_SIZE, " px")
        grid_form.addRow("Width:", self.tile_width_spin)
        self.tile_height_spin = self._spin_box(1, MAX_TILE_SIZE, " px")
        grid_form.addRow("Height:", self.tile_height_spin)
        self.offset_x_spin = self._spin_box(-OFFSET_LIMIT, OFFSET_LIMIT, " px")
        grid_form.addRow("Offset X:", self.offset_x_spin)
        self.offset_y_spin = self._spin_box(-OFFSET_LIMIT, OFFSET_LIMIT, " px")
        grid_form.addRow("Offset Y:", self.offset_y_spin)

        self.grid_info_label = QLabel()
        grid_form.addRow(self.grid_info_label)
        layout.addWidget(grid_group)

        # region Export group
        export_group = QGroupBox("Export")
        export_form = QFormLayout(export_group)

        self.graphic_spin = self._spin_box(0, INDEX_LIMIT)
        export_form.addRow("Graphic number:", self.graphic_spin)
        self.frame_delay_spin = self._spin_box(MIN_FRAME_DELAY, MAX_FRAME_DELAY)
        export_form.addRow("Animation speed:", self.frame_delay_spin)
        self.starting_index_spin = self._spin_box(MIN_STARTING_INDEX, INDEX_LIMIT)
        export_form.addRow("Starting index:", self.starting_index_spin)
        layout.addWidget(export_group)

        # region Preview
        self.preview = QPlainTextEdit()
        self.preview.setReadOnly(True)
        self.preview.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.preview.setPlaceholderText("Click tiles to select them")
        layout.addWidget(self.preview, 1)

        icon_color = self.palette().color(QPalette.ColorRole.ButtonText)
        self.copy_button = QPushButton(
            qta.icon("mdi.clipboard-text-outline", color=icon_color),
            "Copy to clipboard",
        )
        layout.addWidget(self.copy_button)

        self.clear_button = QPushButton(
            qta.icon("mdi.selection-off", color=icon_color), "Clear selection"
        )
        layout.addWidget(self.clear_button)

        self.selection_label = QLabel()
        self.selection_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.selection_label)

    def _load_settings(self) -> None:
        """Fill the form from stored settings and push them to the session."""
        tiler = self.settings.tiler
        self._is_loading = True
        try:
            self.tile_width_spin.setValue(tiler.tile_width)
            self.tile_height_spin.setValue(tiler.tile_height)
            self.offset_x_spin.setValue(tiler.offset_x)
            self.offset_y_spin.setValue(tiler.offset_y)
            self.graphic_spin.setValue(tiler.graphic_sheet_id)
            self.frame_delay_spin.setValue(tiler.frame_delay)
            self.starting_index_spin.setValue(tiler.starting_index)
        finally:
            self._is_loading = False

        self.session.set_tile_size(tiler.tile_width, tiler.tile_height)
        self.session.set_offset(tiler.offset_x, tiler.offset_y)
        self.session.set_export_config(tiler.export_config())

    def _connect_signals(self) -> None:
        self.tile_width_spin.valueChanged.connect(self._on_tile_size_changed)
        self.tile_height_spin.valueChanged.connect(self._on_tile_size_changed)
        self.offset_x_spin.valueChanged.connect(self._on_offset_changed)
        self.offset_y_spin.valueChanged.connect(self._on_offset_changed)
        self.graphic_spin.valueChanged.connect(self._on_export_changed)
        self.frame_delay_spin.valueChanged.connect(self._on_export_changed)
        self.starting_index_spin.valueChanged.connect(self._on_export_changed)
        self.copy_button.clicked.connect(self.copyRequested.emit)
        self.clear_button.clicked.connect(self.clearRequested.emit)
        self.session.subscribe(self._on_session_changed)

    # === FORM -> SESSION ===

    def _on_tile_size_changed(self, _value: int) -> None:
        if self._is_loading:
            return
        width = self.tile_width_spin.value()
        height = self.tile_height_spin.value()
        self.settings.tiler.tile_width = width
        self.settings.tiler.tile_height = height
        self.session.set_tile_size(width, height)

    def _on_offset_changed(self, _value: int) -> None:
        if self._is_loading:
            return
        offset_x = self.offset_x_spin.value()
        offset_y = self.offset_y_spin.value()
        self.settings.tiler.offset_x = offset_x
        self.settings.tiler.offset_y = offset_y
        self.session.set_offset(offset_x, offset_y)

    def _on_export_changed(self, _value: int) -> None:
        if self._is_loading:
            return
        config = ExportConfig(
            graphic_sheet_id=self.graphic_spin.value(),
            frame_delay=self.frame_delay_spin.value(),
            starting_index=self.starting_index_spin.value(),
        )
        tiler = self.settings.tiler
        tiler.graphic_sheet_id = config.graphic_sheet_id
        tiler.frame_delay = config.frame_delay
        tiler.starting_index = config.starting_index
        self.session.set_export_config(config)

    # === SESSION -> FORM ===

    def _on_session_changed(self, changed: frozenset[str]) -> None:
        if changed & {SELECTION, EXPORT, TILE_SIZE}:
            self._update_preview()
        self._update_grid_info()

    def _update_grid_info(self) -> None:
        if not self.session.has_image:
            self.grid_info_label.setText("No image loaded")
            return
        grid = self.session.grid
        self.grid_info_label.setText(
            f"{grid.image_width}x{grid.image_height} px, {grid.columns} x {grid.rows} tiles"
        )

    def _update_preview(self) -> None:
        text = self.session.compile_export()
        self.preview.setPlainText(text or "")
        count = len(self.session.selection)
        self.selection_label.setText(f"{count} tile(s) selected")
        self.copy_button.setEnabled(text is not None)
        self.clear_button.setEnabled(count > 0)
        self._update_grid_info()

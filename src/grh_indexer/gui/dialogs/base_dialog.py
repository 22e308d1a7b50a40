"""
Common dialog plumbing for grh-indexer.
"""

import logging
from typing import Callable, Optional
from PySide6.QtWidgets import QDialog, QDialogButtonBox, QLayout, QWidget
from PySide6.QtCore import Qt
from PySide6.QtGui import QShowEvent


class BaseDialog(QDialog):
    """Titled dialog without minimize/maximize buttons that fits its content."""

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        title: str = "Dialog",
        modal: bool = True,
    ):
        super().__init__(parent)
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setWindowTitle(title)
        self.setWindowFlags(
            Qt.WindowType.Dialog
            | Qt.WindowType.CustomizeWindowHint
            | Qt.WindowType.WindowTitleHint
        )
        self.setModal(modal)

    def add_ok_cancel(self, layout: QLayout, on_accept: Callable[[], None]) -> QDialogButtonBox:
        """Append OK/Cancel buttons; OK runs ``on_accept``, Cancel rejects."""
        button_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        button_box.accepted.connect(on_accept)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)
        return button_box

    def showEvent(self, arg__1: QShowEvent) -> None:
        super().showEvent(arg__1)
        self.adjustSize()

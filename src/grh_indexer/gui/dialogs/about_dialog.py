"""
About dialog for grh-indexer.
"""

from typing import Optional
from PySide6.QtWidgets import QMessageBox, QWidget
from PySide6.QtCore import Qt


def show_about_dialog(
    version: str,
    settings_path: Optional[str] = None,
    parent: Optional[QWidget] = None,
) -> None:
    """
    Show about dialog with application information.

    Args:
        version: Application version string
        settings_path: Location of the settings store (optional)
        parent: Parent widget
    """
    msg = QMessageBox(parent)
    msg.setWindowTitle("About grh-indexer")
    msg.setIcon(QMessageBox.Icon.Information)

    msg.setText(
        f"<h3>grh-indexer v{version}</h3>"
        "<p>Select tiles of a graphic sheet and export them as "
        "<code>Grh</code> entries with per-row animations.</p>"
        f"<p><b>Settings:</b><br>{settings_path or 'default location'}</p>"
    )

    msg.setWindowFlags(
        Qt.WindowType.Dialog
        | Qt.WindowType.CustomizeWindowHint
        | Qt.WindowType.WindowTitleHint
        | Qt.WindowType.MSWindowsFixedSizeDialogHint
    )

    msg.exec()

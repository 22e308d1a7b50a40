"""
Main entry point for grh-indexer.
Usage: python -m grh_indexer [IMAGE]
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication, QMessageBox

from . import __version__
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging


def show_error_dialog(title: str, message: str, details: Optional[str] = None) -> None:
    """Show error dialog to user."""
    app = QApplication.instance()
    if not app:
        app = QApplication(sys.argv)

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)

    if details:
        msg_box.setDetailedText(details)

    msg_box.exec()


def main() -> int:
    """Main application entry point."""
    logger = logging.getLogger(f"{__name__}.main")
    try:
        app = QApplication(sys.argv)
        app.setApplicationName("grh_indexer")
        app.setApplicationVersion(__version__)
        app.setStyle("Fusion")

        settings = AppSettings()
        setup_logging(settings)

        logger.info("Starting grh-indexer")
        logger.info(
            f"Configuration {settings.version} loaded from {settings.get_settings_file_path()}"
        )

        validation = settings.validate()
        for warning in validation.warnings:
            logger.warning(f"  {warning}")

        if not validation.is_valid:
            logger.error("Configuration validation failed:")
            for error in validation.errors:
                logger.error(f"  {error}")
            show_error_dialog(
                "Configuration Error",
                "Configuration validation failed. Please check your settings.",
                "\n".join(validation.errors),
            )
            return 1

        from .gui.main_window import MainWindow

        main_window = MainWindow(settings)
        main_window.show()

        # Optional image path on the command line
        args = [arg for arg in app.arguments()[1:] if not arg.startswith("-")]
        if args:
            main_window.main_window_actions.load_image(Path(args[0]))

        if settings.is_first_run:
            settings.set_first_run_complete()

        logger.info("Application started successfully")
        return app.exec()

    except ConfigError as e:
        logger.exception("Settings store unavailable")
        show_error_dialog("Configuration Error", "Cannot access settings.", str(e))
        return 1
    except Exception as e:
        logger.exception("Unhandled exception in main")
        show_error_dialog("Application Error", "An unexpected error occurred.", str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""PySide6 user interface for grh-indexer."""

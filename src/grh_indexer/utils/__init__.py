"""Utility helpers for grh-indexer."""

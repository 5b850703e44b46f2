"""PySide6 desktop front-end for the quick search."""

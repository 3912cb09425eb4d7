"""Desktop calculator built on PySide6."""

__version__ = "1.0.0"

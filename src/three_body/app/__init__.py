"""Desktop application (PySide6 + VisPy)."""

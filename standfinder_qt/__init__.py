"""Qt (PySide6) frontend for Stand Finder."""

"""
gui - PySide6 Interface for Renamer
"""

from .gui_entry import main

__all__ = ["main"]

"""
cli - Command Line Interface for Renamer
"""

from .cli_entry import main
from .cli_interactive import interactive_mode, InteractiveShell

__all__ = ["main", "interactive_mode", "InteractiveShell"]

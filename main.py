#!/usr/bin/env python3
"""
Renamer - Main Entry

Supports:
- GUI mode (default startup)
- CLI mode (--cli or -c parameter)

Usage:
    python main.py                                 # GUI mode (default)
    python main.py --cli                           # CLI interactive mode
    python main.py -c ./src OldName NewName        # CLI one-shot mode
    python main.py -c ./src OldName NewName --rename-root
"""

import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    argv = sys.argv[1:] if argv is None else argv

    # Check if CLI should be started
    if "--cli" in argv or "-c" in argv:
        # Remove --cli parameter
        cli_args = [arg for arg in argv if arg not in ("--cli", "-c")]

        # CLI mode
        from cli import main as cli_main
        return cli_main(cli_args)

    # Default to starting GUI
    try:
        from gui import main as gui_main
    except ImportError as e:
        print(f"Error: Unable to start GUI, please ensure PySide6 is installed")
        print(f"Detailed error: {e}")
        print("\nInstall command: pip install PySide6")
        print("\nTo use CLI mode, run:")
        print("    python main.py --cli")
        print("or  python main.py -c")
        return 1
    return gui_main()


if __name__ == "__main__":
    sys.exit(main())

"""
gui_workers.py - GUI Worker Threads

Runs the traversal in the background to avoid blocking the UI
"""

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from core import (
    Pass, Change, TraversalRequest, TraversalOptions,
    run_passes, pass_title, get_logger,
)

log = get_logger(__name__)


class TraversalWorker(QThread):
    """Find/replace traversal worker thread"""

    # Signals
    pass_started = Signal(str)      # Pass heading
    change = Signal(str)            # One line per change
    finished = Signal(object)       # TraversalResult
    error = Signal(str)             # Error message

    def __init__(
        self,
        directory: Path,
        find: str,
        replace: str,
        rename_root: bool = False,
        options: Optional[TraversalOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.request = TraversalRequest(Path(directory), find, replace, rename_root=rename_root)
        self.options = options or TraversalOptions()

    def run(self):
        try:
            def on_pass(pass_kind: Pass, find: str, replace: str):
                self.pass_started.emit(pass_title(pass_kind, find, replace))

            def on_change(change: Change):
                self.change.emit(change.describe())

            result = run_passes(
                self.request,
                self.options,
                on_pass=on_pass,
                on_change=on_change,
            )

            self.finished.emit(result)
        except Exception as e:
            log.exception("Traversal failed")
            self.error.emit(str(e))

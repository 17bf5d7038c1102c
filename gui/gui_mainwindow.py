"""
gui_mainwindow.py - GUI Main Window

Single find/replace tab with a live change log
"""

from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QTextEdit, QProgressBar,
    QFileDialog, QMessageBox, QGroupBox
)
from PySide6.QtCore import Slot

from core import (
    TraversalOptions, TraversalResult, DEFAULT_SKIP_DIRS,
    check_request,
)
from .gui_workers import TraversalWorker


class FindReplaceTab(QWidget):
    """Find and Replace Tab"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.worker: Optional[TraversalWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Input group
        input_group = QGroupBox("Find and Replace")
        input_layout = QGridLayout(input_group)

        # Directory selection
        input_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select source directory...")
        input_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        input_layout.addWidget(self.browse_btn, 0, 2)

        input_layout.addWidget(QLabel("Find:"), 1, 0)
        self.find_edit = QLineEdit()
        self.find_edit.setPlaceholderText("Literal, case-sensitive")
        input_layout.addWidget(self.find_edit, 1, 1, 1, 2)

        input_layout.addWidget(QLabel("Replace with:"), 2, 0)
        self.replace_edit = QLineEdit()
        self.replace_edit.setPlaceholderText("Replacement string (leave empty to delete)")
        input_layout.addWidget(self.replace_edit, 2, 1, 1, 2)

        # Options
        options_layout = QHBoxLayout()
        self.rename_root_check = QCheckBox("Rename root directory")
        self.fail_fast_check = QCheckBox("Stop at first error")
        options_layout.addWidget(self.rename_root_check)
        options_layout.addWidget(self.fail_fast_check)
        options_layout.addStretch()
        input_layout.addLayout(options_layout, 3, 0, 1, 3)

        skipped = QLabel(f"Skipped directories: {', '.join(sorted(DEFAULT_SKIP_DIRS))}")
        skipped.setEnabled(False)
        input_layout.addWidget(skipped, 4, 0, 1, 3)

        layout.addWidget(input_group)

        # Change log
        self.log_view = QTextEdit()
        self.log_view.setReadOnly(True)
        layout.addWidget(self.log_view, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.run_btn = QPushButton("Run")
        self.run_btn.clicked.connect(self._do_run)
        self.run_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.run_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _do_run(self):
        """Validate, confirm and start the traversal"""
        directory = self.dir_edit.text().strip()
        find = self.find_edit.text()
        replace = self.replace_edit.text()

        valid, error = check_request(Path(directory), find, replace)
        if not valid:
            QMessageBox.warning(self, "Warning", error)
            return

        reply = QMessageBox.question(
            self, "Confirm",
            f"Replace \"{find}\" with \"{replace}\" in \"{directory}\"?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.run_btn.setEnabled(False)
        self.run_btn.setText("Running...")
        self.browse_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate progress
        self.log_view.clear()
        self.log_view.append(f"Dir: {directory}")

        options = TraversalOptions(fail_fast=self.fail_fast_check.isChecked())
        self.worker = TraversalWorker(
            Path(directory), find, replace,
            rename_root=self.rename_root_check.isChecked(),
            options=options,
        )
        self.worker.pass_started.connect(self._on_pass_started)
        self.worker.change.connect(self._on_change)
        self.worker.finished.connect(self._on_finished)
        self.worker.error.connect(self._on_error)
        self.worker.start()

    @Slot(str)
    def _on_pass_started(self, title: str):
        self.log_view.append(f"\n{title}\n")
        self.status_label.setText(title)

    @Slot(str)
    def _on_change(self, line: str):
        self.log_view.append(line)

    def _reset_controls(self):
        self.run_btn.setEnabled(True)
        self.run_btn.setText("Run")
        self.browse_btn.setEnabled(True)
        self.progress_bar.setVisible(False)

    @Slot(object)
    def _on_finished(self, result: TraversalResult):
        """Traversal complete"""
        self._reset_controls()
        self.log_view.append("\nDone!")

        # Root may have been renamed
        if result.root is not None and self.rename_root_check.isChecked():
            self.dir_edit.setText(str(result.root))

        msg = f"Content updates: {result.updated_count}\nRenames: {result.renamed_count}\nFailed: {result.failed_count}"
        if result.failed_count > 0:
            msg += "\n\nFailure Details:\n"
            for path, error in result.failed[:5]:
                msg += f"  {path.name}: {error}\n"
            if len(result.failed) > 5:
                msg += f"  ... and {len(result.failed) - 5} more failures"
            QMessageBox.warning(self, "Complete", msg)
        else:
            QMessageBox.information(self, "Complete", msg)

        self.status_label.setText("Complete")

    @Slot(str)
    def _on_error(self, error: str):
        """Traversal aborted"""
        self._reset_controls()
        self.log_view.append(f"\nAborted: {error}")
        self.status_label.setText("Aborted")
        QMessageBox.critical(self, "Error", f"Execution failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Renamer")
        self.setMinimumSize(720, 520)

        self.find_replace_tab = FindReplaceTab()
        self.setCentralWidget(self.find_replace_tab)

        # Status bar
        self.statusBar().showMessage("Ready")

from __future__ import annotations

from typing import List

import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QCoreApplication  # noqa: E402

from core.models_fs import TraversalOptions  # noqa: E402
from gui.gui_workers import TraversalWorker  # noqa: E402


@pytest.fixture(scope="module")
def qt_app():
    return QCoreApplication.instance() or QCoreApplication([])


def test_worker_emits_passes_changes_and_result(qt_app, make_tree, tree_contents) -> None:
    root = make_tree({"Foo.txt": "Foo"})
    worker = TraversalWorker(root, "Foo", "Bar")

    passes: List[str] = []
    changes: List[str] = []
    results: List[object] = []
    errors: List[str] = []
    worker.pass_started.connect(passes.append)
    worker.change.connect(changes.append)
    worker.finished.connect(results.append)
    worker.error.connect(errors.append)

    # Run synchronously in this thread
    worker.run()

    assert errors == []
    assert passes == ["1. Exact match: 'Foo' -> 'Bar'", "2. Lower case: 'foo' -> 'bar'"]
    assert len(changes) == 2
    assert results[0].renamed_count == 1
    assert tree_contents(root) == {"Bar.txt": "Bar"}


def test_worker_reports_fail_fast_abort(qt_app, make_tree) -> None:
    root = make_tree({"Foo.txt": "x", "Bar.txt": "y"})
    worker = TraversalWorker(root, "Foo", "Bar", options=TraversalOptions(fail_fast=True))

    errors: List[str] = []
    results: List[object] = []
    worker.error.connect(errors.append)
    worker.finished.connect(results.append)

    worker.run()

    assert results == []
    assert len(errors) == 1
    assert "exists" in errors[0]

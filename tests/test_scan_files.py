from __future__ import annotations

import os
from pathlib import Path

import pytest

from core.models_fs import DEFAULT_SKIP_DIRS
from core.scan_files import is_skipped, snapshot_entries


def test_is_skipped_matches_exact_base_name(tmp_path: Path) -> None:
    assert is_skipped(tmp_path / ".git", DEFAULT_SKIP_DIRS)
    assert is_skipped(tmp_path / "a" / "node_modules", DEFAULT_SKIP_DIRS)
    assert not is_skipped(tmp_path / ".GIT", DEFAULT_SKIP_DIRS)
    assert not is_skipped(tmp_path / "bin2", DEFAULT_SKIP_DIRS)
    assert not is_skipped(tmp_path / "src", DEFAULT_SKIP_DIRS)


def test_snapshot_entries_splits_and_sorts(tmp_path: Path) -> None:
    (tmp_path / "b_dir").mkdir()
    (tmp_path / "a_dir").mkdir()
    (tmp_path / "z.txt").write_text("z", encoding="utf-8")
    (tmp_path / "m.txt").write_text("m", encoding="utf-8")
    (tmp_path / "a_dir" / "nested.txt").write_text("n", encoding="utf-8")

    subdirs, files = snapshot_entries(tmp_path)

    assert [p.name for p in subdirs] == ["a_dir", "b_dir"]
    assert [p.name for p in files] == ["m.txt", "z.txt"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_snapshot_entries_ignores_dangling_links(tmp_path: Path) -> None:
    (tmp_path / "real.txt").write_text("r", encoding="utf-8")
    try:
        os.symlink(tmp_path / "missing.txt", tmp_path / "dangling.txt")
    except OSError:
        pytest.skip("cannot create symlinks")

    subdirs, files = snapshot_entries(tmp_path)

    assert subdirs == []
    assert [p.name for p in files] == ["real.txt"]


def test_snapshot_is_not_affected_by_later_renames(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")

    _, files = snapshot_entries(tmp_path)
    (tmp_path / "a.txt").rename(tmp_path / "b.txt")

    assert [p.name for p in files] == ["a.txt"]

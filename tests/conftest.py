from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterator, List

import pytest


def write_tree(root: Path, files: Dict[str, str]) -> Path:
    """Create files (relative path -> text content) below root."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


def read_tree(root: Path) -> Dict[str, str]:
    """Map every file below root (POSIX relative path) to its content."""
    return {
        path.relative_to(root).as_posix(): path.read_text(encoding="utf-8")
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "proj"
        root.mkdir(exist_ok=True)
        return write_tree(root, files)

    return _make


class ScriptedInput:
    """Feeds canned answers to a prompt function; EOF when exhausted."""

    def __init__(self, answers: List[str]) -> None:
        self._answers: Iterator[str] = iter(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError from None


@pytest.fixture
def tree_contents() -> Callable[[Path], Dict[str, str]]:
    return read_tree


@pytest.fixture
def scripted_input() -> Callable[[List[str]], ScriptedInput]:
    return ScriptedInput

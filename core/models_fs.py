"""
models_fs.py - Core Data Structure Definitions

Contains:
- Pass: Exact or lowercase-normalized traversal pass
- TraversalRequest: Root directory plus find/replace pair
- TraversalOptions: Engine configuration (skip list, error policy, encoding)
- Change: Single content update or rename
- TraversalResult: Changes and failures collected over all passes
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Tuple, FrozenSet
from enum import Enum

from .text_match import needs_lowercase_pass, lowercase_pair


# Version control, IDE, build output and dependency cache directories
DEFAULT_SKIP_DIRS: FrozenSet[str] = frozenset({
    ".git",
    ".vs",
    "bin",
    "obj",
    "node_modules",
})


class Pass(Enum):
    """Traversal pass enumeration"""
    EXACT = "exact"          # Original find/replace strings
    LOWERCASE = "lowercase"  # Both strings lower-cased


class ChangeKind(Enum):
    """Kind of filesystem change"""
    CONTENT = "content"
    FILE_RENAME = "file_rename"
    DIR_RENAME = "dir_rename"


@dataclass(frozen=True)
class TraversalRequest:
    """One find/replace run over a directory tree"""
    root: Path
    find: str
    replace: str
    rename_root: bool = False       # Whether the root directory itself may be renamed

    def passes(self) -> List[Tuple[Pass, str, str]]:
        """
        Get the ordered passes for this request

        The lowercase pass is only included when lower-casing changes
        find or replace.

        Returns:
            [(pass, find, replace), ...]
        """
        passes = [(Pass.EXACT, self.find, self.replace)]
        if needs_lowercase_pass(self.find, self.replace):
            find_lower, replace_lower = lowercase_pair(self.find, self.replace)
            passes.append((Pass.LOWERCASE, find_lower, replace_lower))
        return passes


@dataclass
class TraversalOptions:
    """Traversal options configuration"""
    # Directory base names excluded from all processing (exact, case-sensitive)
    skip_dirs: FrozenSet[str] = DEFAULT_SKIP_DIRS

    # Abort on the first failed item instead of recording it and continuing
    fail_fast: bool = False

    # Text encoding used for content replacement
    encoding: str = "utf-8"


@dataclass
class Change:
    """Single filesystem change"""
    kind: ChangeKind
    src: Path                       # Path before the change
    dst: Optional[Path] = None      # New path (renames only)
    pass_kind: Pass = Pass.EXACT

    def describe(self) -> str:
        """Console line for this change"""
        if self.kind == ChangeKind.CONTENT:
            return f"Updated {self.src}"
        if self.kind == ChangeKind.FILE_RENAME:
            return f"Renamed {self.src} to {self.dst.name}"
        return f"Renamed {self.src} to {self.dst}"


@dataclass
class TraversalResult:
    """Traversal execution result"""
    changes: List[Change] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)  # (path, error_msg)
    passes_run: List[Pass] = field(default_factory=list)
    root: Optional[Path] = None     # Root path after all passes

    @property
    def updated_count(self) -> int:
        return sum(1 for c in self.changes if c.kind == ChangeKind.CONTENT)

    @property
    def renamed_count(self) -> int:
        return sum(1 for c in self.changes if c.kind != ChangeKind.CONTENT)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    def add_change(self, change: Change) -> None:
        self.changes.append(change)

    def add_failure(self, path: Path, error: str) -> None:
        self.failed.append((path, error))

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Traversal Result:",
            f"  - Passes: {len(self.passes_run)}",
            f"  - Content updates: {self.updated_count}",
            f"  - Renames: {self.renamed_count}",
            f"  - Failed: {self.failed_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for path, error in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {path}: {error}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)


def pass_title(pass_kind: Pass, find: str, replace: str) -> str:
    """Numbered pass heading shared by all front ends"""
    if pass_kind == Pass.EXACT:
        return f"1. Exact match: '{find}' -> '{replace}'"
    return f"2. Lower case: '{find}' -> '{replace}'"

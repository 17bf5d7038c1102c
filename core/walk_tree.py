"""
walk_tree.py - Traversal Engine

Responsibilities:
- Depth-first walk that finishes children before touching the parent
- Content replacement, file renaming and directory renaming per level
- Skip-list filtering
- Two-pass (exact + lowercase) execution
"""

from pathlib import Path
from typing import Optional, Callable

from .models_fs import (
    Pass, Change, ChangeKind,
    TraversalRequest, TraversalOptions, TraversalResult,
)
from .scan_files import is_skipped, snapshot_entries
from .exec_rename import replace_in_file, rename_entry
from .log_setup import get_logger

log = get_logger(__name__)

ChangeCallback = Callable[[Change], None]
PassCallback = Callable[[Pass, str, str], None]


class _Context:
    """Per-call state shared by one pass"""

    def __init__(
        self,
        options: TraversalOptions,
        result: TraversalResult,
        on_change: Optional[ChangeCallback],
        pass_kind: Pass,
    ):
        self.options = options
        self.result = result
        self.on_change = on_change
        self.pass_kind = pass_kind

    def record(self, kind: ChangeKind, src: Path, dst: Optional[Path] = None) -> None:
        change = Change(kind=kind, src=src, dst=dst, pass_kind=self.pass_kind)
        self.result.add_change(change)
        log.debug(change.describe())
        if self.on_change:
            self.on_change(change)

    def fail(self, path: Path, action: str, exc: Exception) -> None:
        if self.options.fail_fast:
            raise exc
        self.result.add_failure(path, f"{action} failed: {exc}")
        log.error(f"{action} failed for {path}: {exc}")


def process_directory(
    directory: Path,
    find: str,
    replace: str,
    rename_root: bool = False,
    options: Optional[TraversalOptions] = None,
    result: Optional[TraversalResult] = None,
    on_change: Optional[ChangeCallback] = None,
    pass_kind: Pass = Pass.EXACT,
) -> Path:
    """
    Apply one find/replace pair to a directory tree

    Subdirectories are processed (and possibly renamed) first, then the
    files of this directory, then the directory itself if rename_root is set.

    Args:
        directory: Directory to process
        find: String to replace
        replace: Replacement string
        rename_root: Whether this directory itself may be renamed
        options: Traversal options
        result: Result to collect changes and failures into
        on_change: Called for every successful change
        pass_kind: Pass recorded on each change

    Returns:
        Path of the directory after processing
    """
    ctx = _Context(
        options or TraversalOptions(),
        result if result is not None else TraversalResult(),
        on_change,
        pass_kind,
    )
    return _process(Path(directory), find, replace, rename_root, ctx)


def _process(directory: Path, find: str, replace: str, rename_root: bool, ctx: _Context) -> Path:
    if is_skipped(directory, ctx.options.skip_dirs):
        log.debug(f"Skipping {directory}")
        return directory

    try:
        subdirs, files = snapshot_entries(directory)
    except OSError as e:
        ctx.fail(directory, "Listing", e)
        return directory

    # Subdirectories are always eligible for renaming
    for subdir in subdirs:
        _process(subdir, find, replace, True, ctx)

    for file in files:
        try:
            if replace_in_file(file, find, replace, ctx.options.encoding):
                ctx.record(ChangeKind.CONTENT, file)
        except (OSError, ValueError) as e:
            ctx.fail(file, "Content update", e)

    # Same snapshot, independent of content changes
    for file in files:
        try:
            new_file = rename_entry(file, find, replace)
        except (OSError, ValueError) as e:
            ctx.fail(file, "Rename", e)
            continue
        if new_file is not None:
            ctx.record(ChangeKind.FILE_RENAME, file, new_file)

    if not rename_root:
        return directory

    try:
        new_directory = rename_entry(directory, find, replace)
    except (OSError, ValueError) as e:
        ctx.fail(directory, "Rename", e)
        return directory
    if new_directory is None:
        return directory

    ctx.record(ChangeKind.DIR_RENAME, directory, new_directory)
    return new_directory


def run_passes(
    request: TraversalRequest,
    options: Optional[TraversalOptions] = None,
    on_pass: Optional[PassCallback] = None,
    on_change: Optional[ChangeCallback] = None,
) -> TraversalResult:
    """
    Run the exact pass and, if needed, the lowercase pass over a tree

    The request is assumed to be validated (see safety_checks.check_request).

    Args:
        request: Traversal request
        options: Traversal options
        on_pass: Called before each pass with (pass, find, replace)
        on_change: Called for every successful change

    Returns:
        Traversal result over all passes
    """
    options = options or TraversalOptions()
    result = TraversalResult()
    root = Path(request.root).absolute()

    for pass_kind, find, replace in request.passes():
        log.info(f"{pass_kind.value} pass: '{find}' -> '{replace}' in {root}")
        if on_pass:
            on_pass(pass_kind, find, replace)
        result.passes_run.append(pass_kind)
        root = process_directory(
            root, find, replace,
            rename_root=request.rename_root,
            options=options,
            result=result,
            on_change=on_change,
            pass_kind=pass_kind,
        )

    result.root = root
    return result

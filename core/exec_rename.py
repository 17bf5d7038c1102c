"""
exec_rename.py - Filesystem Operation Module

Responsibilities:
- In-place content replacement
- In-place rename of files and directories (no overwrite)
"""

from pathlib import Path
from typing import Optional
import errno
import os

from .text_match import contains, replace_text, is_valid_filename


def replace_in_file(path: Path, find: str, replace: str, encoding: str = "utf-8") -> bool:
    """
    Replace find with replace in a file's contents

    The file is only rewritten when the text actually changed. Bytes that
    are not valid in the encoding are carried through unchanged.

    Args:
        path: File path
        find: String to replace
        replace: Replacement string
        encoding: Text encoding

    Returns:
        Whether the file was rewritten
    """
    with open(path, "r", encoding=encoding, errors="surrogateescape", newline="") as f:
        content = f.read()

    new_content = replace_text(content, find, replace)
    if new_content == content:
        return False

    with open(path, "w", encoding=encoding, errors="surrogateescape", newline="") as f:
        f.write(new_content)
    return True


def _is_same_entry(src: Path, dst: Path) -> bool:
    """Whether dst is src itself (case-only rename on case-insensitive filesystems)"""
    try:
        return os.path.samefile(src, dst)
    except OSError:
        return False


def rename_entry(path: Path, find: str, replace: str) -> Optional[Path]:
    """
    Rename a file or directory in place within its parent

    Args:
        path: File or directory path
        find: String to replace in the base name
        replace: Replacement string

    Returns:
        New path, or None if nothing was renamed

    Raises:
        ValueError: The new name is not a valid file name
        FileExistsError: Another entry already has the new name
        OSError: The rename itself failed
    """
    path = Path(path)
    name = path.name
    if not contains(name, find):
        return None

    # Unresolvable parent (filesystem root)
    parent = path.parent
    if parent == path:
        return None

    new_name = replace_text(name, find, replace)
    if new_name == name:
        return None

    valid, error = is_valid_filename(new_name)
    if not valid:
        raise ValueError(f"Cannot rename {path}: {error}")

    dst = parent / new_name
    if os.path.lexists(dst) and not _is_same_entry(path, dst):
        raise FileExistsError(errno.EEXIST, "Target already exists", str(dst))

    os.rename(path, dst)
    return dst

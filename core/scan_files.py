"""
scan_files.py - Directory Listing Module

Provides the per-level listing snapshot and skip-list filtering
"""

from pathlib import Path
from typing import List, Tuple, Iterable


def is_skipped(directory: Path, skip_dirs: Iterable[str]) -> bool:
    """
    Check if directory base name is in the skip list

    Matching is exact and case-sensitive, no wildcards.

    Args:
        directory: Directory to check
        skip_dirs: Skipped base names

    Returns:
        Whether skipped
    """
    return Path(directory).name in skip_dirs


def snapshot_entries(directory: Path) -> Tuple[List[Path], List[Path]]:
    """
    List immediate subdirectories and files of a directory (non-recursive)

    The listing is materialized before the caller mutates anything at this
    level, so renames never disturb the enumeration.

    Args:
        directory: Target directory

    Returns:
        (subdirectories, files), each sorted by name
    """
    directory = Path(directory)
    entries = sorted(directory.iterdir(), key=lambda p: p.name)

    subdirs: List[Path] = []
    files: List[Path] = []
    for item in entries:
        if item.is_dir():
            subdirs.append(item)
        elif item.is_file():
            files.append(item)
        # Dangling links, sockets, fifos etc. are ignored

    return subdirs, files

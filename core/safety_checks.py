"""
safety_checks.py - Safety Check Module

Validates front-end input before the traversal engine is invoked
"""

from pathlib import Path
from typing import Tuple, Optional


def check_directory(path: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if the root directory exists

    Args:
        path: Directory path

    Returns:
        (is_valid, error_reason)
    """
    if not str(path) or not Path(path).is_dir():
        return False, f"Directory {path} does not exist"
    return True, None


def check_find_replace(find: str, replace: str) -> Tuple[bool, Optional[str]]:
    """
    Check the find/replace pair

    Args:
        find: String to replace
        replace: Replacement string

    Returns:
        (is_valid, error_reason)
    """
    if not find:
        return False, "'find' parameter cannot be empty"
    if find == replace:
        return False, "'find' and 'replace' are equal: nothing to do."
    return True, None


def is_noop(find: str, replace: str) -> bool:
    """Whether the pair is a non-empty no-op (find equals replace)"""
    return bool(find) and find == replace


def check_request(directory: Path, find: str, replace: str) -> Tuple[bool, Optional[str]]:
    """
    Check a complete request (directory first, then find/replace)

    Args:
        directory: Root directory
        find: String to replace
        replace: Replacement string

    Returns:
        (is_valid, error_reason)
    """
    valid, error = check_directory(directory)
    if not valid:
        return False, error

    return check_find_replace(find, replace)

"""
text_match.py - Text Matching Tools

Provides literal, case-sensitive string matching and replacement
"""

from typing import Optional, Tuple


def contains(text: str, keyword: str) -> bool:
    """
    Check if text contains keyword

    Args:
        text: Text to check
        keyword: Keyword (empty never matches)

    Returns:
        Whether contains
    """
    if not keyword:
        return False
    return keyword in text


def replace_text(text: str, old: str, new: str) -> str:
    """
    Replace every occurrence of old in text

    Matching is literal and case-sensitive, left to right, non-overlapping.

    Args:
        text: Original text
        old: String to replace
        new: Replacement string

    Returns:
        Replaced text
    """
    if not old:
        return text
    return text.replace(old, new)


def lowercase_pair(find: str, replace: str) -> Tuple[str, str]:
    """Lower-case both strings of a find/replace pair"""
    return find.lower(), replace.lower()


def needs_lowercase_pass(find: str, replace: str) -> bool:
    """Whether lower-casing changes at least one of find/replace"""
    find_lower, replace_lower = lowercase_pair(find, replace)
    return find_lower != find or replace_lower != replace


def is_valid_filename(name: str) -> Tuple[bool, Optional[str]]:
    """
    Check if a name can be used as a rename target

    Args:
        name: File or directory base name

    Returns:
        (is_valid, error_reason)
    """
    if not name:
        return False, "Name cannot be empty"

    if name in (".", ".."):
        return False, f"Name is reserved: {name}"

    for char in ("/", "\\", "\0"):
        if char in name:
            return False, f"Name contains invalid character: {char!r}"

    if len(name) > 255:
        return False, "Name exceeds 255 characters"

    return True, None

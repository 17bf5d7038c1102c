from __future__ import annotations

import pytest

from core.text_match import (
    contains,
    is_valid_filename,
    lowercase_pair,
    needs_lowercase_pass,
    replace_text,
)


def test_contains_is_case_sensitive() -> None:
    assert contains("FooBar", "Foo")
    assert not contains("FooBar", "foo")
    assert not contains("FooBar", "")


def test_replace_text_is_literal_and_non_overlapping() -> None:
    assert replace_text("aaa", "aa", "b") == "ba"
    assert replace_text("a.c abc", ".", "-") == "a-c abc"
    assert replace_text("Foo foo", "Foo", "Bar") == "Bar foo"
    assert replace_text("unchanged", "", "x") == "unchanged"


@pytest.mark.parametrize(
    "find, replace, expected",
    [
        ("Foo", "Bar", True),
        ("foo", "Bar", True),
        ("FOO", "bar", True),
        ("foo", "bar", False),
        ("foo", "", False),
        ("123", "456", False),
    ],
)
def test_needs_lowercase_pass(find: str, replace: str, expected: bool) -> None:
    assert needs_lowercase_pass(find, replace) is expected


def test_lowercase_pair() -> None:
    assert lowercase_pair("MyApp", "YourApp") == ("myapp", "yourapp")


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b", "a\0b", "x" * 256])
def test_invalid_filenames(name: str) -> None:
    valid, error = is_valid_filename(name)
    assert not valid
    assert error


def test_valid_filename() -> None:
    assert is_valid_filename("Baz.txt") == (True, None)

"""
cli_output.py - Console Reporting

Shared by the one-shot command and the interactive shell
"""

from pathlib import Path
from typing import Callable, Optional

from core import (
    Pass, Change, TraversalRequest, TraversalOptions, TraversalResult,
    run_passes, pass_title,
)

Output = Callable[[str], None]


def print_header(title: str, output: Output = print):
    """Print header"""
    output("")
    output("=" * 60)
    output(f"  {title}")
    output("=" * 60)
    output("")


def run_and_report(
    directory: Path,
    find: str,
    replace: str,
    rename_root: bool = False,
    options: Optional[TraversalOptions] = None,
    output: Output = print,
) -> TraversalResult:
    """
    Run both passes, printing one line per pass, change and failure summary

    Args:
        directory: Validated root directory
        find: String to replace
        replace: Replacement string
        rename_root: Whether the root directory itself may be renamed
        options: Traversal options
        output: Line printer

    Returns:
        Traversal result
    """
    def on_pass(pass_kind: Pass, pass_find: str, pass_replace: str):
        output(f"\n{pass_title(pass_kind, pass_find, pass_replace)}\n")

    def on_change(change: Change):
        output(change.describe())

    request = TraversalRequest(Path(directory), find, replace, rename_root=rename_root)
    result = run_passes(request, options, on_pass=on_pass, on_change=on_change)

    if result.failed:
        output("")
        output(result.summary())

    output("\nDone!")
    return result

"""
cli_entry.py - CLI Entry Point

Supports:
- One-shot mode: renamer <directory> <find> <replace>
- Interactive mode (no arguments or --interactive)
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from core import (
    DEFAULT_SKIP_DIRS, TraversalOptions,
    check_request, is_noop, setup_logging, get_logger,
)

from .cli_interactive import interactive_mode
from .cli_output import run_and_report

log = get_logger(__name__)

USAGE = "Usage: renamer <directory> <find> <replace>"


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="renamer",
        description="Recursive find and replace in file contents, file names and directory names",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  renamer

  # Replace in contents and names below ./src (the ./src directory itself is kept)
  renamer ./src OldName NewName

  # Also rename the root directory, skip an extra directory name
  renamer ./OldName OldName NewName --rename-root --skip-dir dist
"""
    )

    parser.add_argument("directory", nargs="?", help="Root directory")
    parser.add_argument("find", nargs="?", help="String to find (literal, case-sensitive)")
    parser.add_argument("replace", nargs="?", help="Replacement string")

    parser.add_argument("--interactive", "-i", action="store_true", help="Start the interactive menu")
    parser.add_argument("--rename-root", "-r", action="store_true", help="Also rename the root directory")
    parser.add_argument("--skip-dir", "-s", action="append", default=[], metavar="NAME",
                        help="Additional directory name to skip (repeatable)")
    parser.add_argument("--no-default-skips", action="store_true",
                        help=f"Do not skip the default directories ({', '.join(sorted(DEFAULT_SKIP_DIRS))})")
    parser.add_argument("--fail-fast", action="store_true", help="Abort on the first failed file or directory")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set logging verbosity (default: WARNING)")

    return parser


def build_options(args: argparse.Namespace) -> TraversalOptions:
    """Build traversal options from parsed arguments"""
    skip_dirs = set() if args.no_default_skips else set(DEFAULT_SKIP_DIRS)
    skip_dirs.update(args.skip_dir)
    return TraversalOptions(skip_dirs=frozenset(skip_dirs), fail_fast=args.fail_fast)


def cmd_replace(args: argparse.Namespace) -> int:
    """Handle one-shot find/replace"""
    valid, error = check_request(Path(args.directory), args.find, args.replace)
    if not valid:
        print(error)
        return 0 if is_noop(args.find, args.replace) and Path(args.directory).is_dir() else 1

    directory = Path(args.directory)
    print(f"Dir: {directory}\n----------------------------")

    result = run_and_report(
        directory,
        args.find,
        args.replace,
        rename_root=args.rename_root,
        options=build_options(args),
    )

    return 0 if result.failed_count == 0 else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    log.debug(f"Arguments: {args}")

    try:
        if args.interactive or args.directory is None:
            return interactive_mode(
                options=build_options(args),
                rename_root=args.rename_root,
            )

        if args.find is None or args.replace is None:
            print(USAGE)
            return 1

        return cmd_replace(args)
    except KeyboardInterrupt:
        log.warning("Operation cancelled by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())

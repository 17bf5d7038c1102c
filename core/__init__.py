"""
core - Renamer Core Module

Provides the recursive find/replace traversal engine, its data model,
text matching, filesystem operations and input validation.
"""

from .models_fs import (
    DEFAULT_SKIP_DIRS,
    Pass,
    ChangeKind,
    Change,
    TraversalRequest,
    TraversalOptions,
    TraversalResult,
    pass_title,
)

from .scan_files import (
    is_skipped,
    snapshot_entries,
)

from .text_match import (
    contains,
    replace_text,
    lowercase_pair,
    needs_lowercase_pass,
    is_valid_filename,
)

from .exec_rename import (
    replace_in_file,
    rename_entry,
)

from .walk_tree import (
    process_directory,
    run_passes,
)

from .safety_checks import (
    check_directory,
    check_find_replace,
    check_request,
    is_noop,
)

from .log_setup import (
    setup_logging,
    get_logger,
)

__all__ = [
    # Data models
    "DEFAULT_SKIP_DIRS",
    "Pass",
    "ChangeKind",
    "Change",
    "TraversalRequest",
    "TraversalOptions",
    "TraversalResult",
    "pass_title",

    # Listing
    "is_skipped",
    "snapshot_entries",

    # Text processing
    "contains",
    "replace_text",
    "lowercase_pair",
    "needs_lowercase_pass",
    "is_valid_filename",

    # Filesystem operations
    "replace_in_file",
    "rename_entry",

    # Traversal
    "process_directory",
    "run_passes",

    # Safety checks
    "check_directory",
    "check_find_replace",
    "check_request",
    "is_noop",

    # Logging
    "setup_logging",
    "get_logger",
]

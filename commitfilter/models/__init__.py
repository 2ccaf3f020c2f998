"""Commit filters."""

from .commit_diff_filter import CommitDiffFilter, accept_all
from .composite_filters import AndCommitFilter, NotCommitFilter, OrCommitFilter
from .message_filters import (
    SIGNED_OFF_BY,
    CommitMessageFindFilter,
    SignedOffByFilter,
    build_signed_off_by_pattern,
)
from .tree_walk import MISSING_ENTRY, TreeEntry, read_tree_entries, walk_trees

__all__ = [
    "MISSING_ENTRY",
    "SIGNED_OFF_BY",
    "AndCommitFilter",
    "CommitDiffFilter",
    "CommitMessageFindFilter",
    "NotCommitFilter",
    "OrCommitFilter",
    "SignedOffByFilter",
    "TreeEntry",
    "accept_all",
    "build_signed_off_by_pattern",
    "read_tree_entries",
    "walk_trees",
]

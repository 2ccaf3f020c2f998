"""Commit filters over GitPython commit walks."""

from .exceptions import (
    CommitFilterError,
    RepositoryNotFoundError,
    RevisionNotFoundError,
    TreeReadError,
)
from .models import CommitDiffFilter, CommitMessageFindFilter, SignedOffByFilter
from .schemas import ChangeType, FileChange, PersonIdent

__all__ = [
    "ChangeType",
    "CommitDiffFilter",
    "CommitFilterError",
    "CommitMessageFindFilter",
    "FileChange",
    "PersonIdent",
    "RepositoryNotFoundError",
    "RevisionNotFoundError",
    "SignedOffByFilter",
    "TreeReadError",
]

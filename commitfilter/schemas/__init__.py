"""Schema classes for the application."""

from .app_schemas import CommitChanges, CommitSummary, SignedOffRequest
from .git import ZERO_ID, ChangeType, FileChange, FileMode, PersonIdent

__all__ = [
    "ZERO_ID",
    "ChangeType",
    "CommitChanges",
    "CommitSummary",
    "FileChange",
    "FileMode",
    "PersonIdent",
    "SignedOffRequest",
]

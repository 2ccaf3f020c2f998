"""Services for the application."""

from .commit_scanner import CommitScanner, summarize_commit
from .repository_factory import create_scanner_from_settings, open_repository

__all__ = [
    "CommitScanner",
    "create_scanner_from_settings",
    "open_repository",
    "summarize_commit",
]

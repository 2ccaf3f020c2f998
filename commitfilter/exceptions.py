"""Errors raised by commit filters and the scanning services."""


class CommitFilterError(Exception):
    """Base class for commit-filter errors."""


class TreeReadError(CommitFilterError):
    """A commit's tree could not be read from the object store."""

    def __init__(self, commit_id: str, message: str):
        self.commit_id = commit_id
        super().__init__(f"Failed to read tree of commit {commit_id}: {message}")


class RevisionNotFoundError(CommitFilterError):
    """A revision could not be resolved to a commit."""

    def __init__(self, rev: str):
        self.rev = rev
        super().__init__(f"Revision not found: {rev}")


class RepositoryNotFoundError(CommitFilterError):
    """The configured path is not a git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Not a git repository: {path}")

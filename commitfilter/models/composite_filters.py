"""Filters combining other commit filters."""

from ..protocols.commit_filter_protocol import CommitFilterProtocol


class AndCommitFilter:
    """Includes a commit only when every child filter includes it."""

    def __init__(self, *filters: CommitFilterProtocol):
        self.filters = list(filters)

    def include(self, commit) -> bool:
        return all(f.include(commit) for f in self.filters)

    def __call__(self, commit) -> bool:
        return self.include(commit)

    def clone(self) -> "AndCommitFilter":
        return AndCommitFilter(*(f.clone() for f in self.filters))


class OrCommitFilter:
    """Includes a commit when any child filter includes it."""

    def __init__(self, *filters: CommitFilterProtocol):
        self.filters = list(filters)

    def include(self, commit) -> bool:
        return any(f.include(commit) for f in self.filters)

    def __call__(self, commit) -> bool:
        return self.include(commit)

    def clone(self) -> "OrCommitFilter":
        return OrCommitFilter(*(f.clone() for f in self.filters))


class NotCommitFilter:
    def __init__(self, commit_filter: CommitFilterProtocol):
        self.filter = commit_filter

    def include(self, commit) -> bool:
        return not self.filter.include(commit)

    def __call__(self, commit) -> bool:
        return self.include(commit)

    def clone(self) -> "NotCommitFilter":
        return NotCommitFilter(self.filter.clone())

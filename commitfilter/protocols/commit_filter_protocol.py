"""Commit filter protocol interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CommitFilterProtocol(Protocol):
    """Protocol for filters applied to each commit of a walk."""

    def include(self, commit) -> bool:
        """Return True to include the commit."""
        ...

    def clone(self) -> "CommitFilterProtocol":
        """Return an instance safe to use in a separate walk."""
        ...

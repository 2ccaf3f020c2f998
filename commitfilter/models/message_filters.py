"""Commit filters that search commit messages."""

import re
from typing import Union

from ..schemas import PersonIdent

SIGNED_OFF_BY = "Signed-off-by: {0} <{1}>"


class CommitMessageFindFilter:
    """Includes commits whose message contains a match for a pattern."""

    def __init__(self, pattern: Union[str, re.Pattern], flags: int = 0):
        if isinstance(pattern, str):
            pattern = re.compile(pattern, flags)
        self.pattern = pattern

    def include(self, commit) -> bool:
        message = commit.message
        if isinstance(message, bytes):
            message = message.decode("utf-8", "replace")
        return self.pattern.search(message) is not None

    def __call__(self, commit) -> bool:
        return self.include(commit)

    def clone(self) -> "CommitMessageFindFilter":
        return CommitMessageFindFilter(self.pattern.pattern, self.pattern.flags)


def build_signed_off_by_pattern(person: PersonIdent) -> re.Pattern:
    """Compile a line-anchored pattern for the person's Signed-off-by trailer."""
    trailer = SIGNED_OFF_BY.format(person.name, person.email)
    return re.compile(re.escape(trailer), re.MULTILINE)


class SignedOffByFilter(CommitMessageFindFilter):
    """Includes commits carrying a Signed-off-by line for a person."""

    def __init__(self, person: PersonIdent):
        if person is None:
            raise ValueError("person must not be None")
        super().__init__(build_signed_off_by_pattern(person))
        self.person = person

    def clone(self) -> "SignedOffByFilter":
        return SignedOffByFilter(self.person)

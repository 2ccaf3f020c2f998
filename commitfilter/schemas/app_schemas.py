"""Application-wide schema classes."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .git import FileChange


class CommitSummary(BaseModel):
    commit: str
    parents: List[str]
    author: str
    author_email: str
    authored_date: int
    summary: str


class CommitChanges(CommitSummary):
    changes: List[FileChange]


class SignedOffRequest(BaseModel):
    name: str
    email: str
    rev: Optional[str] = None
    max_count: Optional[int] = Field(default=None, ge=1)

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

ZERO_ID = "0" * 40


class ChangeType(str, Enum):
    """Enum for file change kinds."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"


class FileMode(IntEnum):
    """Raw git tree entry modes."""

    MISSING = 0
    TREE = 0o040000
    REGULAR_FILE = 0o100644
    EXECUTABLE_FILE = 0o100755
    SYMLINK = 0o120000
    GITLINK = 0o160000


class FileChange(BaseModel):
    """A single path changed by a commit."""

    model_config = ConfigDict(frozen=True)

    path: str
    change_type: ChangeType
    mode: int  # raw mode of the commit's own entry, 0 when deleted
    object_id: str = ZERO_ID
    abbreviated_id: str = ZERO_ID[:7]
    old_mode: Optional[int] = None  # not populated for merge commits
    old_object_id: Optional[str] = None

    @property
    def file_mode(self) -> Optional[FileMode]:
        try:
            return FileMode(self.mode)
        except ValueError:
            return None


class PersonIdent(BaseModel):
    """Name and email of a commit author, committer or signer."""

    model_config = ConfigDict(frozen=True)

    name: str
    email: str

    @field_validator("name", "email")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @classmethod
    def from_actor(cls, actor) -> "PersonIdent":
        """Build an identity from a GitPython Actor."""
        return cls(name=actor.name, email=actor.email)

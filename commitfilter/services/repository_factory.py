"""Factory for opening repositories and building scanners."""

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from ..config.settings import Settings
from ..exceptions import RepositoryNotFoundError
from .commit_scanner import CommitScanner


def open_repository(path: str) -> Repo:
    """
    Open an existing repository.

    Args:
        path: Working tree or bare repository path

    Returns:
        GitPython Repo

    Raises:
        RepositoryNotFoundError: If the path does not hold a repository
    """
    try:
        repo = Repo(path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        print(f"Failed to open repository at {path}: {e}")
        raise RepositoryNotFoundError(path) from e
    print(f"Opened repository at {path}")
    return repo


def create_scanner_from_settings(settings: Settings) -> CommitScanner:
    """
    Create a CommitScanner using application settings.

    Args:
        settings: Application settings

    Returns:
        CommitScanner over the configured repository
    """
    return CommitScanner(
        open_repository(settings.REPOSITORY_PATH),
        abbrev_length=settings.ABBREV_LENGTH,
    )

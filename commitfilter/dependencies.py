from typing import Iterator

from fastapi import Depends, HTTPException

from .config.settings import Settings, get_settings
from .exceptions import RepositoryNotFoundError
from .services import CommitScanner, create_scanner_from_settings


def get_commit_scanner(
    settings: Settings = Depends(get_settings),
) -> Iterator[CommitScanner]:
    """Yield a scanner for the request and close its repository afterwards."""
    try:
        scanner = create_scanner_from_settings(settings)
    except RepositoryNotFoundError as e:
        raise HTTPException(status_code=503, detail=str(e))
    try:
        yield scanner
    finally:
        # Stops the persistent git cat-file processes
        scanner.repo.close()

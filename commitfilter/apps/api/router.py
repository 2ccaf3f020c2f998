import asyncio
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from ...config.settings import Settings, get_settings
from ...dependencies import get_commit_scanner
from ...exceptions import RevisionNotFoundError, TreeReadError
from ...schemas import CommitChanges, CommitSummary, PersonIdent, SignedOffRequest
from ...services import CommitScanner

router = APIRouter(prefix="/commit-filter", tags=["commit-filter"])


def _limit(max_count: Optional[int], settings: Settings) -> int:
    if max_count is None:
        return settings.MAX_COUNT
    return min(max_count, settings.MAX_COUNT)


@router.get("/changes", response_model=List[CommitChanges])
async def list_changes(
    rev: Optional[str] = None,
    max_count: Optional[int] = Query(default=None, ge=1),
    settings: Settings = Depends(get_settings),
    scanner: CommitScanner = Depends(get_commit_scanner),
):
    """List the file changes introduced by each commit reachable from a revision."""
    rev = rev or settings.DEFAULT_REV
    try:
        return await asyncio.to_thread(
            scanner.collect_changes, rev, _limit(max_count, settings)
        )
    except RevisionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except TreeReadError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/signed-off", response_model=List[CommitSummary])
async def find_signed_off(
    request: SignedOffRequest,
    settings: Settings = Depends(get_settings),
    scanner: CommitScanner = Depends(get_commit_scanner),
):
    """Find commits signed off by a person."""
    try:
        person = PersonIdent(name=request.name, email=request.email)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid person identity: {e.error_count()} invalid field(s)",
        )

    rev = request.rev or settings.DEFAULT_REV
    try:
        return await asyncio.to_thread(
            scanner.find_signed_off, person, rev, _limit(request.max_count, settings)
        )
    except RevisionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

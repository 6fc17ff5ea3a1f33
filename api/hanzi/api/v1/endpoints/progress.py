"""
Character progress endpoints.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List, Optional
from hanzi.core.database import get_session
from hanzi.api.v1.endpoints.utils import get_current_user_id
from hanzi.schemas.progress import ProgressResponse, UpsertProgressRequest, ProgressSummaryResponse
from hanzi.services.character_service import validate_range
from hanzi.services.progress_service import (
    validate_character_index,
    parse_indices,
    get_progress,
    get_progress_range,
    get_progress_batch,
    get_progress_summary,
    upsert_progress,
)

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("/summary", response_model=ProgressSummaryResponse)
async def get_summary(
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get the caller's mastery counts per skill."""
    return ProgressSummaryResponse(**get_progress_summary(session, user_id))


@router.get("/batch", response_model=List[ProgressResponse])
async def get_batch(
    indices: Optional[str] = None,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get stored progress for a comma-separated list of indices; untouched characters are omitted."""
    index_list = parse_indices(indices)
    progress_entries = get_progress_batch(session, user_id, index_list)
    return [ProgressResponse.model_validate(p) for p in progress_entries]


@router.get("/range/{start}/{count}", response_model=List[ProgressResponse])
async def get_range(
    start: int,
    count: int,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get stored progress for index in [start, start + count); untouched characters are omitted."""
    safe_count = validate_range(start, count)
    progress_entries = get_progress_range(session, user_id, start, safe_count)
    return [ProgressResponse.model_validate(p) for p in progress_entries]


@router.get("/{character_index}", response_model=ProgressResponse)
async def get_one(
    character_index: int,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get progress for one character; all flags are False if it was never touched."""
    validate_character_index(character_index)
    return ProgressResponse.model_validate(get_progress(session, user_id, character_index))


@router.post("", response_model=ProgressResponse)
async def upsert(
    progress_data: UpsertProgressRequest,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Replace the full progress triple for one character."""
    validate_character_index(progress_data.character_index)
    progress = upsert_progress(
        session,
        user_id,
        progress_data.character_index,
        progress_data.reading,
        progress_data.writing,
        progress_data.radical
    )
    return ProgressResponse.model_validate(progress)

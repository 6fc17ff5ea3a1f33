"""
Character catalog endpoints.
"""
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import List, Optional
from hanzi.core.config import settings
from hanzi.core.database import get_session
from hanzi.api.v1.endpoints.utils import get_current_user_id, to_character_with_progress
from hanzi.schemas.character import CharacterResponse, CatalogStatsResponse, HskLevelCount
from hanzi.schemas.filter import FilterConfig, FilteredCharactersResponse
from hanzi.services.character_service import (
    validate_index,
    validate_range,
    validate_search_limit,
    get_character,
    get_characters,
    search_characters,
    count_characters,
    count_characters_by_hsk_level,
)
from hanzi.services.filter_service import (
    validate_pagination,
    parse_hsk_levels,
    get_filtered_characters,
)
from hanzi.services.progress_service import default_progress

# Every catalog route requires a known caller
router = APIRouter(
    prefix="/characters",
    tags=["characters"],
    dependencies=[Depends(get_current_user_id)]
)

# Specific routes must be declared before the generic /{index} route


@router.get("/search", response_model=List[CharacterResponse])
async def search(
    q: Optional[str] = None,
    limit: int = Query(settings.default_search_limit),
    session: Session = Depends(get_session)
):
    """Search characters by simplified/traditional glyph, pinyin, or definition."""
    if not q or not q.strip():
        return []
    validate_search_limit(limit)

    characters = search_characters(session, q, limit)
    return [CharacterResponse.model_validate(c) for c in characters]


@router.get("/filtered", response_model=FilteredCharactersResponse)
async def get_filtered(
    page: int = 0,
    page_size: int = 20,
    hsk_levels: Optional[str] = None,
    filter_reading: bool = False,
    filter_writing: bool = False,
    filter_radical: bool = False,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    Get one page of characters matching the filters, joined with the caller's progress.

    Args:
        page: 0-based page number
        page_size: Characters per page (1-100)
        hsk_levels: Comma-separated HSK levels (1-6); omitted means all levels
        filter_reading: Only characters whose reading is not mastered
        filter_writing: Only characters whose writing is not mastered
        filter_radical: Only characters whose radical is not mastered
    """
    # Validate everything before touching storage
    validate_pagination(page, page_size)
    parse_hsk_levels(hsk_levels)

    filter_config = FilterConfig(
        user_id=user_id,
        hsk_levels=hsk_levels,
        filter_reading=filter_reading,
        filter_writing=filter_writing,
        filter_radical=filter_radical,
    )
    rows, total = get_filtered_characters(session, filter_config, page, page_size)

    items = [
        to_character_with_progress(character, progress or default_progress(user_id, character.index))
        for character, progress in rows
    ]

    # Calculate pagination metadata
    offset = page * page_size
    total_pages = (total + page_size - 1) // page_size
    return FilteredCharactersResponse(
        items=items,
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        has_next=offset + page_size < total,
        has_previous=page > 0,
    )


@router.get("/stats", response_model=CatalogStatsResponse)
async def get_stats(
    session: Session = Depends(get_session)
):
    """Get how much of the catalog is seeded, in total and per HSK level."""
    return CatalogStatsResponse(
        populated=count_characters(session),
        catalog_size=settings.catalog_size,
        by_hsk_level=[
            HskLevelCount(hsk_level=level, count=count)
            for level, count in count_characters_by_hsk_level(session)
        ],
    )


@router.get("/range/{start}/{count}", response_model=List[CharacterResponse])
async def get_range(
    start: int,
    count: int,
    session: Session = Depends(get_session)
):
    """Get characters with index in [start, start + count); count is shortened at the catalog end."""
    safe_count = validate_range(start, count)
    characters = get_characters(session, start, safe_count)
    return [CharacterResponse.model_validate(c) for c in characters]


@router.get("/{index}", response_model=CharacterResponse)
async def get_one(
    index: int,
    session: Session = Depends(get_session)
):
    """Get one character by catalog index."""
    validate_index(index)
    return CharacterResponse.model_validate(get_character(session, index))

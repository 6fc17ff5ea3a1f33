"""
Filter service for parsing and applying character browse filters.
"""
from sqlmodel import Session, select, func, or_
from sqlalchemy import and_
from typing import Optional, List, Tuple
from hanzi.core.config import settings
from hanzi.core.exceptions import ValidationError
from hanzi.models.models import ChineseCharacter, CharacterProgress
from hanzi.schemas.filter import FilterConfig
from hanzi.utils.text_utils import parse_int_list

HSK_LEVELS = range(1, 7)


# ============================================================================
# Parameter Parsing Helpers
# ============================================================================

def validate_pagination(page: int, page_size: int) -> None:
    """Validate 0-based pagination parameters."""
    if page < 0:
        raise ValidationError("page must be >= 0")
    if page_size < 1 or page_size > settings.max_page_size:
        raise ValidationError(f"page_size must be between 1 and {settings.max_page_size}")
    # No page can start past the last catalog index
    if page * page_size >= settings.catalog_size:
        raise ValidationError(f"page must be less than {(settings.catalog_size + page_size - 1) // page_size}")


def parse_hsk_levels(hsk_levels: Optional[str]) -> Optional[List[int]]:
    """Parse hsk_levels parameter into a list of levels, or None for no restriction."""
    if not hsk_levels:
        return None
    try:
        level_list = parse_int_list(hsk_levels)
    except ValueError as exc:
        raise ValidationError("hsk_levels must be comma-separated integers") from exc

    for level in level_list:
        if level not in HSK_LEVELS:
            raise ValidationError(f"Invalid HSK level: {level}. Must be between 1 and 6")
    return sorted(set(level_list)) or None


def parse_filter_config(filter_config: FilterConfig) -> dict:
    """Parse FilterConfig into internal representation with parsed values."""
    return {
        "user_id": filter_config.user_id,
        "hsk_level_list": parse_hsk_levels(filter_config.hsk_levels),
        "filter_reading": filter_config.filter_reading,
        "filter_writing": filter_config.filter_writing,
        "filter_radical": filter_config.filter_radical,
    }


# ============================================================================
# Query Filter Building Helpers
# ============================================================================

def join_user_progress(query, user_id: int):
    """LEFT JOIN the user's progress rows; characters never touched get NULLs."""
    return query.outerjoin(
        CharacterProgress,
        and_(
            CharacterProgress.character_index == ChineseCharacter.index,
            CharacterProgress.user_id == user_id
        )
    )


def apply_hsk_levels_filter(query, hsk_level_list: Optional[List[int]]):
    """Apply HSK level filter to character query."""
    if hsk_level_list:
        return query.where(ChineseCharacter.hsk_level.in_(hsk_level_list))  # type: ignore
    return query


def not_mastered(column):
    """Flag is false, or there is no progress row at all."""
    return or_(column.is_(None), column == False)  # noqa: E712


def apply_mastery_filters(query, filter_reading: bool, filter_writing: bool, filter_radical: bool):
    """Keep only characters unmastered in every requested skill (AND across skills)."""
    if filter_reading:
        query = query.where(not_mastered(CharacterProgress.reading))
    if filter_writing:
        query = query.where(not_mastered(CharacterProgress.writing))
    if filter_radical:
        query = query.where(not_mastered(CharacterProgress.radical))
    return query


def build_filtered_query(filter_config: FilterConfig):
    """Build the character/progress query with all filters applied.

    Args:
        filter_config: FilterConfig object with filter parameters

    Returns:
        Select of (ChineseCharacter, CharacterProgress | None) rows, unordered
    """
    parsed = parse_filter_config(filter_config)

    query = select(ChineseCharacter, CharacterProgress)
    query = join_user_progress(query, parsed["user_id"])
    query = apply_hsk_levels_filter(query, parsed["hsk_level_list"])
    query = apply_mastery_filters(
        query,
        parsed["filter_reading"],
        parsed["filter_writing"],
        parsed["filter_radical"]
    )
    return query


def get_filtered_characters(
    session: Session,
    filter_config: FilterConfig,
    page: int,
    page_size: int
) -> Tuple[List[Tuple[ChineseCharacter, Optional[CharacterProgress]]], int]:
    """
    Get one page of filtered characters joined with the user's progress.

    Always reads the latest committed progress.

    Returns:
        (rows, total) where rows are (character, progress-or-None) pairs ordered
        by catalog index and total counts every match before pagination
    """
    query = build_filtered_query(filter_config)

    # The join is on a unique (user_id, character_index) key, so each
    # character appears at most once
    filtered_subquery = query.subquery()
    total = session.exec(select(func.count()).select_from(filtered_subquery)).one()

    query = (
        query
        .order_by(ChineseCharacter.index)
        .offset(page * page_size)
        .limit(page_size)
    )
    rows = session.exec(query).all()
    return [(character, progress) for character, progress in rows], total

"""
Character service for reading the character catalog.
"""
from sqlmodel import Session, select, func, or_
from typing import List
from hanzi.core.config import settings
from hanzi.core.exceptions import ValidationError, NotFoundError
from hanzi.models.models import ChineseCharacter
from hanzi.utils.text_utils import normalize_pinyin, DEFINITION_SEPARATOR


# ============================================================================
# Request Validation Helpers
# ============================================================================

def validate_index(index: int, field: str = "index") -> None:
    """Reject indices that can never name a catalog entry."""
    if index < 0:
        raise ValidationError(f"{field} must be >= 0")


def validate_range(start: int, count: int) -> int:
    """Validate a (start, count) range request and return the capped count.

    Requests larger than the maximum batch size are rejected; a range that runs
    past the end of the catalog is silently shortened.
    """
    if start < 0 or start >= settings.catalog_size:
        raise ValidationError(f"start must be between 0 and {settings.catalog_size - 1}")
    if count < 1 or count > settings.max_batch_size:
        raise ValidationError(f"count must be between 1 and {settings.max_batch_size}")
    return min(count, settings.catalog_size - start)


def validate_search_limit(limit: int) -> None:
    """Validate the search result limit."""
    if limit < 1 or limit > settings.max_search_limit:
        raise ValidationError(f"limit must be between 1 and {settings.max_search_limit}")


# ============================================================================
# Queries
# ============================================================================

def get_character(session: Session, index: int) -> ChineseCharacter:
    """
    Get one character by catalog index.

    Raises:
        NotFoundError: If no character is stored at that index (the catalog
            may be only partially seeded)
    """
    if index < 0 or index >= settings.catalog_size:
        raise NotFoundError(f"Character {index} not found")

    character = session.get(ChineseCharacter, index)
    if not character:
        raise NotFoundError(f"Character {index} not found")
    return character


def get_characters(session: Session, start: int, count: int) -> List[ChineseCharacter]:
    """Get characters with index in [start, start + count), ascending."""
    query = (
        select(ChineseCharacter)
        .where(
            ChineseCharacter.index >= start,
            ChineseCharacter.index < start + count
        )
        .order_by(ChineseCharacter.index)
        .limit(count)
    )
    return list(session.exec(query).all())


def build_search_conditions(term: str):
    """Build the OR-ed match conditions for a search term.

    Glyphs, pinyin and definitions are matched as case-insensitive substrings.
    Pinyin is also matched tone-insensitively, so "xue" and "xue2" find "xué".
    """
    term_lower = term.lower()
    conditions = [
        ChineseCharacter.simplified.contains(term, autoescape=True),
        ChineseCharacter.traditional.contains(term, autoescape=True),
        func.lower(ChineseCharacter.pinyin).contains(term_lower, autoescape=True),
    ]

    # definition_text is stored lowercased by the model hooks
    if DEFINITION_SEPARATOR not in term_lower:
        conditions.append(ChineseCharacter.definition_text.contains(term_lower, autoescape=True))

    plain_term = normalize_pinyin(term)
    if plain_term:
        conditions.append(ChineseCharacter.pinyin_plain.contains(plain_term, autoescape=True))

    return or_(*conditions)


def search_characters(session: Session, term: str, limit: int) -> List[ChineseCharacter]:
    """
    Search characters by glyph, pinyin, or definition.

    Args:
        session: Database session
        term: Free-text search term
        limit: Maximum number of results

    Returns:
        Matching characters ordered by catalog index; empty for a blank term
    """
    if not term or not term.strip():
        return []

    query = (
        select(ChineseCharacter)
        .where(build_search_conditions(term.strip()))
        .order_by(ChineseCharacter.index)
        .limit(limit)
    )
    return list(session.exec(query).all())


def count_characters(session: Session) -> int:
    """Number of characters actually seeded."""
    return session.exec(select(func.count(ChineseCharacter.index))).one()


def count_characters_by_hsk_level(session: Session) -> List[tuple]:
    """(hsk_level, count) pairs ordered by level."""
    query = (
        select(ChineseCharacter.hsk_level, func.count(ChineseCharacter.index))
        .group_by(ChineseCharacter.hsk_level)
        .order_by(ChineseCharacter.hsk_level)
    )
    return list(session.exec(query).all())

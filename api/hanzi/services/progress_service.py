"""
Progress service for per-user character mastery flags.
"""
import logging
from datetime import datetime
from sqlmodel import Session, select, func
from sqlalchemy import and_, case
from sqlalchemy.exc import IntegrityError
from typing import List, Optional, Dict

from hanzi.core.config import settings
from hanzi.core.exceptions import ValidationError
from hanzi.models.models import CharacterProgress
from hanzi.utils.text_utils import parse_int_list

logger = logging.getLogger(__name__)


# ============================================================================
# Parameter Parsing Helpers
# ============================================================================

def validate_character_index(index: int) -> None:
    """Range-check a character index against the catalog bound."""
    if index < 0 or index >= settings.catalog_size:
        raise ValidationError(f"character_index must be between 0 and {settings.catalog_size - 1}")


def parse_indices(indices: Optional[str]) -> List[int]:
    """Parse the comma-separated indices parameter of a batch request."""
    if indices is None:
        raise ValidationError("indices parameter is required")
    try:
        index_list = parse_int_list(indices)
    except ValueError as exc:
        raise ValidationError("indices must be comma-separated integers") from exc

    for index in index_list:
        validate_character_index(index)

    # Deduplicate, keeping request order
    index_list = list(dict.fromkeys(index_list))
    if len(index_list) > settings.max_batch_size:
        raise ValidationError(f"Too many indices (max {settings.max_batch_size})")
    return index_list


# ============================================================================
# Queries
# ============================================================================

def default_progress(user_id: int, index: int) -> CharacterProgress:
    """Unsaved all-false entry standing in for a missing row."""
    return CharacterProgress(
        user_id=user_id,
        character_index=index,
        reading=False,
        writing=False,
        radical=False,
        updated_at=None,
    )


def find_progress(session: Session, user_id: int, index: int) -> Optional[CharacterProgress]:
    """Get the stored progress row, or None if the character was never touched."""
    return session.exec(
        select(CharacterProgress).where(
            CharacterProgress.user_id == user_id,
            CharacterProgress.character_index == index
        )
    ).first()


def get_progress(session: Session, user_id: int, index: int) -> CharacterProgress:
    """Get progress for one character, defaulting to all flags False."""
    return find_progress(session, user_id, index) or default_progress(user_id, index)


def get_progress_range(session: Session, user_id: int, start: int, count: int) -> List[CharacterProgress]:
    """Get the existing progress rows with index in [start, start + count).

    Characters without a row are omitted, not synthesized.
    """
    query = (
        select(CharacterProgress)
        .where(
            and_(
                CharacterProgress.user_id == user_id,
                CharacterProgress.character_index >= start,
                CharacterProgress.character_index < start + count
            )
        )
        .order_by(CharacterProgress.character_index)
    )
    return list(session.exec(query).all())


def get_progress_batch(session: Session, user_id: int, indices: List[int]) -> List[CharacterProgress]:
    """Get the existing progress rows for an explicit set of indices."""
    if not indices:
        return []
    query = (
        select(CharacterProgress)
        .where(
            CharacterProgress.user_id == user_id,
            CharacterProgress.character_index.in_(indices)  # type: ignore
        )
        .order_by(CharacterProgress.character_index)
    )
    return list(session.exec(query).all())


def get_progress_map(session: Session, user_id: int, indices: List[int]) -> Dict[int, CharacterProgress]:
    """Progress rows for the given indices keyed by index, missing rows defaulted."""
    existing = {p.character_index: p for p in get_progress_batch(session, user_id, indices)}
    return {index: existing.get(index) or default_progress(user_id, index) for index in indices}


# ============================================================================
# Mutations
# ============================================================================

def upsert_progress(
    session: Session,
    user_id: int,
    index: int,
    reading: bool,
    writing: bool,
    radical: bool
) -> CharacterProgress:
    """
    Create or overwrite the full progress triple for one character.

    All three flags are replaced together in a single commit; this is not a
    merge. Concurrent writers race and the last commit wins.

    Returns:
        The stored progress row
    """
    progress = find_progress(session, user_id, index)
    if progress is None:
        progress = CharacterProgress(user_id=user_id, character_index=index)

    progress.reading = reading
    progress.writing = writing
    progress.radical = radical
    progress.updated_at = datetime.utcnow()
    session.add(progress)

    try:
        session.commit()
    except IntegrityError:
        # Another request inserted the row first; overwrite it instead
        session.rollback()
        progress = find_progress(session, user_id, index)
        if progress is None:
            raise
        progress.reading = reading
        progress.writing = writing
        progress.radical = radical
        progress.updated_at = datetime.utcnow()
        session.add(progress)
        session.commit()

    session.refresh(progress)
    logger.info(
        f"Progress for user {user_id}, character {index}: "
        f"reading={reading}, writing={writing}, radical={radical}"
    )
    return progress


def get_progress_summary(session: Session, user_id: int) -> Dict[str, int]:
    """Count mastered characters per skill for a user."""
    query = select(
        func.count(CharacterProgress.id),
        func.sum(case((CharacterProgress.reading == True, 1), else_=0)),  # noqa: E712
        func.sum(case((CharacterProgress.writing == True, 1), else_=0)),  # noqa: E712
        func.sum(case((CharacterProgress.radical == True, 1), else_=0)),  # noqa: E712
    ).where(CharacterProgress.user_id == user_id)
    touched, reading, writing, radical = session.exec(query).one()

    fully_mastered = session.exec(
        select(func.count(CharacterProgress.id)).where(
            CharacterProgress.user_id == user_id,
            CharacterProgress.reading == True,  # noqa: E712
            CharacterProgress.writing == True,  # noqa: E712
            CharacterProgress.radical == True,  # noqa: E712
        )
    ).one()

    return {
        'reading': reading or 0,
        'writing': writing or 0,
        'radical': radical or 0,
        'fully_mastered': fully_mastered,
        'touched': touched,
    }

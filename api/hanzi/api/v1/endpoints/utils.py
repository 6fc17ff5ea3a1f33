"""
Utility functions for endpoint operations.
"""
from fastapi import Depends, Query
from sqlmodel import Session
from hanzi.core.database import get_session
from hanzi.models.models import ChineseCharacter, CharacterProgress
from hanzi.schemas.character import CharacterResponse
from hanzi.schemas.filter import CharacterWithProgress
from hanzi.schemas.progress import ProgressResponse
from hanzi.services.user_service import resolve_current_user


def get_current_user_id(
    user_id: int = Query(..., description="Authenticated user ID supplied by the auth layer"),
    session: Session = Depends(get_session)
) -> int:
    """Dependency resolving the caller's identity; unknown users get 401."""
    return resolve_current_user(session, user_id).id


def to_character_with_progress(
    character: ChineseCharacter,
    progress: CharacterProgress
) -> CharacterWithProgress:
    """Pair a character with its (possibly defaulted) progress."""
    return CharacterWithProgress(
        character=CharacterResponse.model_validate(character),
        progress=ProgressResponse.model_validate(progress),
    )

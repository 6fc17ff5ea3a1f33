"""
Study service for the settings-driven daily study batch.
"""
from sqlmodel import Session
from typing import List, Tuple

from hanzi.core.config import settings
from hanzi.models.models import ChineseCharacter, CharacterProgress, UserSettings
from hanzi.services.character_service import get_characters
from hanzi.services.progress_service import get_progress_map
from hanzi.services.settings_service import get_or_create_settings


def get_daily_batch(
    session: Session,
    user_id: int
) -> Tuple[UserSettings, int, List[Tuple[ChineseCharacter, CharacterProgress]]]:
    """
    Get the characters the user is currently studying.

    The batch starts at current_level and holds daily_char_count characters,
    shortened at the end of the catalog.

    Returns:
        (settings, start, [(character, progress), ...]) with missing progress
        defaulted to all flags False
    """
    user_settings = get_or_create_settings(session, user_id)
    start = user_settings.current_level
    count = min(user_settings.daily_char_count, settings.catalog_size - start)

    characters = get_characters(session, start, count) if count > 0 else []
    progress_map = get_progress_map(session, user_id, [c.index for c in characters])
    return user_settings, start, [(c, progress_map[c.index]) for c in characters]

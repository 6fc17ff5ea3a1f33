"""
Settings service for per-user study preferences.
"""
import logging
from datetime import datetime
from sqlmodel import Session
from sqlalchemy.exc import IntegrityError

from hanzi.core.config import settings as app_settings
from hanzi.models.models import UserSettings
from hanzi.schemas.settings import UpdateSettingsRequest

logger = logging.getLogger(__name__)


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))


def get_or_create_settings(session: Session, user_id: int) -> UserSettings:
    """
    Get a user's settings, creating the default record on first access.

    Defaults: current_level=0, daily_char_count=5, prefer_traditional=True,
    standard_mode_page_size=20.
    """
    user_settings = session.get(UserSettings, user_id)
    if user_settings:
        return user_settings

    user_settings = UserSettings(user_id=user_id)
    session.add(user_settings)
    try:
        session.commit()
    except IntegrityError:
        # A concurrent request created the row first
        session.rollback()
        existing = session.get(UserSettings, user_id)
        if existing is None:
            raise
        return existing
    session.refresh(user_settings)
    logger.info(f"Created default settings for user {user_id}")
    return user_settings


def clamp_settings_update(update: UpdateSettingsRequest) -> dict:
    """Return only the supplied fields, clamped into their allowed ranges."""
    values = update.model_dump(exclude_unset=True, exclude_none=True)

    if 'current_level' in values:
        values['current_level'] = clamp(values['current_level'], 0, app_settings.catalog_size - 1)
    if 'daily_char_count' in values:
        values['daily_char_count'] = clamp(
            values['daily_char_count'],
            app_settings.min_daily_char_count,
            app_settings.max_daily_char_count
        )
    if 'standard_mode_page_size' in values:
        values['standard_mode_page_size'] = clamp(
            values['standard_mode_page_size'],
            app_settings.min_standard_mode_page_size,
            app_settings.max_standard_mode_page_size
        )
    return values


def update_settings(session: Session, user_id: int, update: UpdateSettingsRequest) -> UserSettings:
    """
    Merge a partial update into the user's settings.

    Fields not present in the update keep their stored values; the
    last-modified timestamp is always refreshed.
    """
    user_settings = get_or_create_settings(session, user_id)

    values = clamp_settings_update(update)
    for field, value in values.items():
        setattr(user_settings, field, value)
    user_settings.updated_at = datetime.utcnow()

    session.add(user_settings)
    session.commit()
    session.refresh(user_settings)

    logger.info(f"Updated settings for user {user_id}: {values}")
    return user_settings

"""
User service for the identity records the auth layer provisions.
"""
import logging
from datetime import datetime
from sqlmodel import Session, select
from typing import Dict, Any

from hanzi.core.config import settings
from hanzi.core.exceptions import AuthenticationError, ConflictError, NotFoundError
from hanzi.models.models import User, UserSettings, CharacterProgress
from hanzi.schemas.user import UpsertUserRequest

logger = logging.getLogger(__name__)


def is_storable_id(user_id: int) -> bool:
    """True if the ID fits the primary key column; larger values can name no user."""
    return 1 <= user_id <= settings.max_id


def get_user(session: Session, user_id: int) -> User:
    """
    Get a user by ID.

    Raises:
        NotFoundError: If the user does not exist
    """
    user = session.get(User, user_id) if is_storable_id(user_id) else None
    if not user:
        raise NotFoundError(f"User with id {user_id} not found")
    return user


def resolve_current_user(session: Session, user_id: int) -> User:
    """
    Resolve the identity supplied by the auth layer.

    Raises:
        AuthenticationError: If no such user is known
    """
    user = session.get(User, user_id) if is_storable_id(user_id) else None
    if not user:
        raise AuthenticationError("Unknown user")
    return user


def upsert_user(session: Session, user_data: UpsertUserRequest) -> User:
    """
    Create a user, or update the existing user with the given ID.

    Raises:
        NotFoundError: If an ID is given that does not exist
        ConflictError: If the username or email belongs to another user
    """
    username_owner = session.exec(select(User).where(User.username == user_data.username)).first()
    if username_owner and username_owner.id != user_data.id:
        raise ConflictError("Username already exists")

    if user_data.email:
        email_owner = session.exec(select(User).where(User.email == user_data.email)).first()
        if email_owner and email_owner.id != user_data.id:
            raise ConflictError("Email already exists")

    if user_data.id is not None:
        user = get_user(session, user_data.id)
        user.updated_at = datetime.utcnow()
    else:
        user = User(username=user_data.username)

    user.username = user_data.username
    user.email = user_data.email
    user.first_name = user_data.first_name
    user.last_name = user_data.last_name
    user.profile_image_url = user_data.profile_image_url

    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info(f"Upserted user {user.id} ({user.username})")
    return user


def delete_user(
    session: Session,
    user_id: int
) -> Dict[str, Any]:
    """
    Delete a user together with its settings and progress.

    The foreign keys cascade on delete; rows are also removed explicitly so
    databases without enforced foreign keys (SQLite by default) stay clean.

    Args:
        session: Database session
        user_id: The user ID to delete

    Returns:
        Dict with counts of deleted items:
        {
            'settings_deleted': int,
            'progress_deleted': int
        }

    Raises:
        NotFoundError: If user not found
    """
    user = get_user(session, user_id)

    progress_entries = session.exec(
        select(CharacterProgress).where(CharacterProgress.user_id == user_id)
    ).all()
    progress_deleted = len(progress_entries)
    for progress in progress_entries:
        session.delete(progress)

    settings_deleted = 0
    user_settings = session.get(UserSettings, user_id)
    if user_settings:
        session.delete(user_settings)
        settings_deleted = 1

    # Children must be gone before the user row
    session.flush()
    session.delete(user)
    session.commit()

    logger.info(
        f"Deleted user {user_id}: "
        f"{settings_deleted} settings, "
        f"{progress_deleted} progress entries"
    )

    return {
        'settings_deleted': settings_deleted,
        'progress_deleted': progress_deleted
    }

from fastapi import APIRouter, Depends
from sqlmodel import Session
from hanzi.core.database import get_session
from hanzi.api.v1.endpoints.utils import get_current_user_id
from hanzi.schemas.settings import SettingsResponse, UpdateSettingsRequest
from hanzi.services.settings_service import get_or_create_settings, update_settings

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=SettingsResponse)
async def get_settings(
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get the caller's settings, creating the defaults on first access."""
    return SettingsResponse.model_validate(get_or_create_settings(session, user_id))


@router.patch("", response_model=SettingsResponse)
async def patch_settings(
    update_data: UpdateSettingsRequest,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Update only the supplied settings fields; numeric values are clamped to their bounds."""
    return SettingsResponse.model_validate(update_settings(session, user_id, update_data))

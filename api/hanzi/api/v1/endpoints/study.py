from fastapi import APIRouter, Depends
from sqlmodel import Session
from hanzi.core.database import get_session
from hanzi.api.v1.endpoints.utils import get_current_user_id, to_character_with_progress
from hanzi.schemas.settings import SettingsResponse
from hanzi.schemas.study import DailyStudyResponse
from hanzi.services.study_service import get_daily_batch

router = APIRouter(prefix="/study", tags=["study"])


@router.get("/daily", response_model=DailyStudyResponse)
async def get_daily(
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Get the characters at the caller's current level, daily_char_count at a time."""
    user_settings, start, rows = get_daily_batch(session, user_id)
    return DailyStudyResponse(
        start=start,
        count=len(rows),
        items=[to_character_with_progress(character, progress) for character, progress in rows],
        settings=SettingsResponse.model_validate(user_settings),
    )

from pydantic import BaseModel
from typing import List
from hanzi.schemas.filter import CharacterWithProgress
from hanzi.schemas.settings import SettingsResponse


class DailyStudyResponse(BaseModel):
    """The caller's current daily study batch."""
    start: int
    count: int  # Number of characters actually returned
    items: List[CharacterWithProgress]
    settings: SettingsResponse

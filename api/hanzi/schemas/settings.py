from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class SettingsResponse(BaseModel):
    """User settings response schema."""
    user_id: int
    current_level: int
    daily_char_count: int
    prefer_traditional: bool
    standard_mode_page_size: int
    updated_at: datetime

    class Config:
        from_attributes = True


class UpdateSettingsRequest(BaseModel):
    """Partial settings update; omitted fields keep their stored values.

    Numeric values are clamped to their allowed range rather than rejected.
    """
    current_level: Optional[int] = Field(None, description="Catalog index to study from")
    daily_char_count: Optional[int] = Field(None, description="Characters per daily study batch (1-50)")
    prefer_traditional: Optional[bool] = Field(None, description="Display traditional glyphs")
    standard_mode_page_size: Optional[int] = Field(None, description="Browse page size (10-100)")

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ProgressResponse(BaseModel):
    """Progress flags for one character."""
    character_index: int
    reading: bool = False
    writing: bool = False
    radical: bool = False
    updated_at: Optional[datetime] = None  # None when no row has been written yet

    class Config:
        from_attributes = True


class UpsertProgressRequest(BaseModel):
    """Full progress triple for one character; every flag is replaced."""
    character_index: int = Field(..., description="Catalog index of the character")
    reading: bool = Field(..., description="Reading/pronunciation mastered")
    writing: bool = Field(..., description="Writing mastered")
    radical: bool = Field(..., description="Radical recognised")


class ProgressSummaryResponse(BaseModel):
    """Mastery counts across the catalog for one user."""
    reading: int
    writing: int
    radical: int
    fully_mastered: int  # All three flags set
    touched: int  # Characters with any progress row

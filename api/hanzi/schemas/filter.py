"""
Filter configuration schema for the browse (standard mode) view.
"""
from pydantic import BaseModel
from typing import Optional, List
from hanzi.schemas.character import CharacterResponse
from hanzi.schemas.progress import ProgressResponse


class FilterConfig(BaseModel):
    """Filter configuration for character queries.

    Skill filters mean "only characters NOT mastered in this skill"; several
    skill filters combine with AND.
    """
    user_id: int
    hsk_levels: Optional[str] = None  # Comma-separated list of HSK levels (1-6) to filter by
    filter_reading: bool = False
    filter_writing: bool = False
    filter_radical: bool = False

    class Config:
        """Pydantic config."""
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "hsk_levels": "1,2",
                "filter_reading": True,
                "filter_writing": False,
                "filter_radical": False,
            }
        }


class CharacterWithProgress(BaseModel):
    """A catalog character joined with the caller's mastery flags."""
    character: CharacterResponse
    progress: ProgressResponse


class FilteredCharactersResponse(BaseModel):
    """One page of filtered characters plus pagination metadata."""
    items: List[CharacterWithProgress]
    total: int  # Matches before pagination
    page: int  # 0-based
    page_size: int
    total_pages: int
    has_next: bool
    has_previous: bool

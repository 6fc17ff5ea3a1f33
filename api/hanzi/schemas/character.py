from pydantic import BaseModel, Field
from typing import Optional, List


class ExampleSentence(BaseModel):
    """Example sentence with its English gloss."""
    chinese: str
    english: str


class CharacterResponse(BaseModel):
    """Character response schema."""
    index: int
    simplified: str
    traditional: str
    traditional_variants: List[str] = []
    pinyin: str
    radical: str
    radical_pinyin: Optional[str] = None
    definition: List[str] = []
    examples: List[ExampleSentence] = []
    hsk_level: int

    class Config:
        from_attributes = True


class HskLevelCount(BaseModel):
    """Number of catalog characters in one HSK level."""
    hsk_level: int
    count: int


class CatalogStatsResponse(BaseModel):
    """Catalog statistics response schema."""
    populated: int = Field(..., description="Number of characters actually seeded")
    catalog_size: int = Field(..., description="Nominal size bound of the catalog")
    by_hsk_level: List[HskLevelCount]

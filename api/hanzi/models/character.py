"""
ChineseCharacter model.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON, event
from typing import Optional, List, Dict
from hanzi.utils.text_utils import normalize_pinyin, definition_search_text


class ChineseCharacter(SQLModel, table=True):
    """ChineseCharacter table - the frequency-ordered catalog.

    Rows are written once by the import pipeline and only read afterwards.
    """
    __tablename__ = "chinese_character"

    index: int = Field(primary_key=True, sa_column_kwargs={"autoincrement": False})  # Frequency rank, 0-based
    simplified: str
    traditional: str
    traditional_variants: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    pinyin: str  # Tone-marked reference pronunciation
    pinyin_plain: str = Field(default="", index=True)  # normalize_pinyin(pinyin), kept in sync by the hooks below
    radical: str
    radical_pinyin: Optional[str] = None
    definition: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    definition_text: str = Field(default="")  # Lowercased glosses, one per line, kept in sync by the hooks below
    examples: List[Dict[str, str]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))  # [{chinese, english}]
    hsk_level: int = Field(default=1, index=True)  # 1-6


@event.listens_for(ChineseCharacter, "before_insert")
@event.listens_for(ChineseCharacter, "before_update")
def _sync_search_columns(mapper, connection, target: ChineseCharacter) -> None:
    target.pinyin_plain = normalize_pinyin(target.pinyin)
    target.definition_text = definition_search_text(target.definition)

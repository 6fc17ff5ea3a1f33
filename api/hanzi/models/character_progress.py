"""
CharacterProgress model.
"""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import UniqueConstraint
from typing import Optional
from datetime import datetime


class CharacterProgress(SQLModel, table=True):
    """CharacterProgress table - per-user mastery flags for one character.

    A missing row means all three flags are False.
    """
    __tablename__ = "character_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "character_index", name="uq_character_progress_user_char"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    character_index: int  # Not a foreign key: progress may be recorded before seeding completes
    reading: bool = Field(default=False)
    writing: bool = Field(default=False)
    radical: bool = Field(default=False)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    # Relationships
    user: "User" = Relationship(back_populates="progress_entries")

"""
UserSettings model.
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional
from datetime import datetime


class UserSettings(SQLModel, table=True):
    """UserSettings table - one row per user, created on first access."""
    __tablename__ = "user_settings"

    user_id: int = Field(primary_key=True, foreign_key="user.id", ondelete="CASCADE")
    current_level: int = Field(default=0)  # Catalog index the learner studies from
    daily_char_count: int = Field(default=5)  # Page size of the daily study view
    prefer_traditional: bool = Field(default=True)
    standard_mode_page_size: int = Field(default=20)  # Page size of the browse view
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    # Relationships
    user: "User" = Relationship(back_populates="settings")

"""
Models module - re-exports all models.

Allows imports like:
    from hanzi.models.models import ChineseCharacter
"""
from hanzi.models.enums import QuizType, Skill
from hanzi.models.user import User
from hanzi.models.character import ChineseCharacter
from hanzi.models.user_settings import UserSettings
from hanzi.models.character_progress import CharacterProgress

__all__ = [
    'QuizType',
    'Skill',
    'User',
    'ChineseCharacter',
    'UserSettings',
    'CharacterProgress',
]

"""
Models package - imports all models so they register with SQLModel.
"""
# Import enums first
from hanzi.models.enums import QuizType, Skill

# Import all models
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

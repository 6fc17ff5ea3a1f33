"""
Model enums.
"""
from enum import Enum


class QuizType(str, Enum):
    """Kinds of self-test quiz a learner can run."""
    PRONUNCIATION = "pronunciation"  # Show character, answer pinyin
    WRITING = "writing"  # Show pinyin, answer character
    RADICAL = "radical"  # Show character, answer radical


class Skill(str, Enum):
    """Mastery flags tracked per character."""
    READING = "reading"
    WRITING = "writing"
    RADICAL = "radical"


# Skill credited when a quiz of the given type is answered correctly
QUIZ_TYPE_SKILL = {
    QuizType.PRONUNCIATION: Skill.READING,
    QuizType.WRITING: Skill.WRITING,
    QuizType.RADICAL: Skill.RADICAL,
}

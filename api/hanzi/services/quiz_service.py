"""
Quiz service for building self-test sessions and grading answers.
"""
import logging
from sqlmodel import Session
from typing import List

from hanzi.core.config import settings
from hanzi.core.exceptions import ValidationError
from hanzi.models.models import ChineseCharacter, QuizType
from hanzi.models.enums import QUIZ_TYPE_SKILL, Skill
from hanzi.schemas.quiz import QuizQuestion, GradeAnswerRequest, GradeAnswerResponse
from hanzi.services.character_service import get_character, get_characters
from hanzi.services.grading_service import grade_answer
from hanzi.services.progress_service import get_progress, upsert_progress
from hanzi.services.settings_service import get_or_create_settings

logger = logging.getLogger(__name__)


def validate_quiz_range(start: int, count: int) -> int:
    """Validate a quiz range and return the count capped at the catalog end."""
    if start < 0 or start >= settings.catalog_size:
        raise ValidationError(f"start must be between 0 and {settings.catalog_size - 1}")
    if count < 1 or count > settings.max_quiz_questions:
        raise ValidationError(f"count must be between 1 and {settings.max_quiz_questions}")
    return min(count, settings.catalog_size - start)


def build_question(character: ChineseCharacter, quiz_type: QuizType, prefer_traditional: bool) -> QuizQuestion:
    """Build the prompt for one character."""
    glyph = character.traditional if prefer_traditional else character.simplified
    first_definition = character.definition[0] if character.definition else ""

    if quiz_type == QuizType.WRITING:
        # Show pinyin, answer the character
        return QuizQuestion(
            character_index=character.index,
            quiz_type=quiz_type,
            prompt=character.pinyin,
            hint=first_definition,
        )
    return QuizQuestion(
        character_index=character.index,
        quiz_type=quiz_type,
        prompt=glyph,
        hint=first_definition if quiz_type == QuizType.RADICAL else "",
    )


def build_quiz_session(
    session: Session,
    user_id: int,
    quiz_type: QuizType,
    start: int,
    count: int
) -> List[QuizQuestion]:
    """
    Build questions for the characters in [start, start + count).

    The displayed script follows the user's prefer_traditional setting.
    """
    user_settings = get_or_create_settings(session, user_id)
    characters = get_characters(session, start, count)
    return [
        build_question(character, quiz_type, user_settings.prefer_traditional)
        for character in characters
    ]


def grade_quiz_answer(session: Session, user_id: int, request: GradeAnswerRequest) -> GradeAnswerResponse:
    """
    Grade one answer and optionally credit the matching skill.

    Progress is recorded with a read-modify-write of the full triple so the
    other two flags keep their values.

    Raises:
        NotFoundError: If the character does not exist
    """
    character = get_character(session, request.character_index)
    user_settings = get_or_create_settings(session, user_id)
    result = grade_answer(request.quiz_type, request.answer, character, user_settings.prefer_traditional)

    progress_recorded = False
    if result.correct and request.record_progress:
        current = get_progress(session, user_id, character.index)
        flags = {
            Skill.READING.value: current.reading,
            Skill.WRITING.value: current.writing,
            Skill.RADICAL.value: current.radical,
        }
        flags[QUIZ_TYPE_SKILL[request.quiz_type].value] = True
        upsert_progress(session, user_id, character.index, **flags)
        progress_recorded = True

    logger.info(
        f"Graded {request.quiz_type.value} answer for user {user_id}, "
        f"character {character.index}: correct={result.correct}"
    )
    return GradeAnswerResponse(
        character_index=character.index,
        quiz_type=result.quiz_type,
        correct=result.correct,
        expected=result.expected,
        progress_recorded=progress_recorded,
    )

"""
Grading service for checking quiz answers against catalog data.
"""
from dataclasses import dataclass
from hanzi.models.models import ChineseCharacter, QuizType
from hanzi.utils.text_utils import normalize_pinyin


@dataclass
class GradeResult:
    """Outcome of grading one answer."""
    correct: bool
    expected: str
    quiz_type: QuizType


def is_pinyin_equivalent(answer: str, reference: str) -> bool:
    """True if both spellings normalize to the same pinyin (xué == xue2 == Xue)."""
    return normalize_pinyin(answer) == normalize_pinyin(reference)


def grade_pronunciation(answer: str, character: ChineseCharacter) -> GradeResult:
    return GradeResult(
        correct=is_pinyin_equivalent(answer, character.pinyin),
        expected=character.pinyin,
        quiz_type=QuizType.PRONUNCIATION,
    )


def grade_writing(answer: str, character: ChineseCharacter, prefer_traditional: bool) -> GradeResult:
    """Exact glyph match; either script (or a traditional variant) is accepted."""
    answer = answer.strip()
    accepted = {character.simplified, character.traditional, *(character.traditional_variants or [])}
    expected = character.traditional if prefer_traditional else character.simplified
    return GradeResult(
        correct=bool(answer) and answer in accepted,
        expected=expected,
        quiz_type=QuizType.WRITING,
    )


def grade_radical(answer: str, character: ChineseCharacter) -> GradeResult:
    """Grade against the radical's pinyin when recorded, else the radical glyph."""
    if character.radical_pinyin:
        return GradeResult(
            correct=is_pinyin_equivalent(answer, character.radical_pinyin),
            expected=character.radical_pinyin,
            quiz_type=QuizType.RADICAL,
        )
    return GradeResult(
        correct=answer.strip() == character.radical,
        expected=character.radical,
        quiz_type=QuizType.RADICAL,
    )


def grade_answer(
    quiz_type: QuizType,
    answer: str,
    character: ChineseCharacter,
    prefer_traditional: bool = True
) -> GradeResult:
    """
    Grade a typed answer for one character.

    Args:
        quiz_type: Which skill is being tested
        answer: Answer as typed by the learner
        character: The character asked about
        prefer_traditional: Script shown as the expected answer in writing quizzes

    Returns:
        GradeResult with the reference answer to display
    """
    if quiz_type == QuizType.PRONUNCIATION:
        return grade_pronunciation(answer, character)
    if quiz_type == QuizType.WRITING:
        return grade_writing(answer, character, prefer_traditional)
    return grade_radical(answer, character)

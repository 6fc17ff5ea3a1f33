from fastapi import APIRouter, Depends
from sqlmodel import Session
from hanzi.core.database import get_session
from hanzi.api.v1.endpoints.utils import get_current_user_id
from hanzi.models.models import QuizType
from hanzi.schemas.quiz import QuizSessionResponse, GradeAnswerRequest, GradeAnswerResponse
from hanzi.services.quiz_service import validate_quiz_range, build_quiz_session, grade_quiz_answer

router = APIRouter(prefix="/quiz", tags=["quiz"])


@router.get("/session", response_model=QuizSessionResponse)
async def get_quiz_session(
    quiz_type: QuizType = QuizType.PRONUNCIATION,
    start: int = 0,
    count: int = 10,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """Build quiz questions for the characters in [start, start + count)."""
    safe_count = validate_quiz_range(start, count)
    questions = build_quiz_session(session, user_id, quiz_type, start, safe_count)
    return QuizSessionResponse(quiz_type=quiz_type, start=start, questions=questions)


@router.post("/grade", response_model=GradeAnswerResponse)
async def grade(
    request: GradeAnswerRequest,
    user_id: int = Depends(get_current_user_id),
    session: Session = Depends(get_session)
):
    """
    Grade an answer.

    Pronunciation answers accept tone marks (xué) or tone numbers (xue2).
    Writing answers must match the glyph exactly. Radical answers are graded
    against the radical's pinyin when known, else its glyph.
    """
    return grade_quiz_answer(session, user_id, request)

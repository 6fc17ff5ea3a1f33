from pydantic import BaseModel, Field
from typing import List
from hanzi.models.enums import QuizType


class QuizQuestion(BaseModel):
    """One question in a quiz session."""
    character_index: int
    quiz_type: QuizType
    prompt: str  # What the learner is shown
    hint: str = ""  # Secondary prompt text (e.g. first definition)


class QuizSessionResponse(BaseModel):
    """Ordered questions for a quiz session."""
    quiz_type: QuizType
    start: int
    questions: List[QuizQuestion]


class GradeAnswerRequest(BaseModel):
    """Answer submitted for one quiz question."""
    character_index: int = Field(..., description="Catalog index of the character asked about")
    quiz_type: QuizType
    answer: str = Field(..., description="Answer as typed by the learner")
    record_progress: bool = Field(False, description="Mark the matching skill as mastered when correct")


class GradeAnswerResponse(BaseModel):
    """Outcome of grading an answer."""
    character_index: int
    quiz_type: QuizType
    correct: bool
    expected: str  # Reference answer shown to the learner
    progress_recorded: bool = False

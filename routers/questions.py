from __future__ import annotations

from fastapi import APIRouter, Query

from bank import clear_recent_questions, generate_question
from models import Difficulty, QuestionType
from schemas.questions import QuestionOut, ResetResponse

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("/next", response_model=QuestionOut)
def next_question(
    type: QuestionType = Query(default="accurate"),
    difficulty: Difficulty = Query(default="easy"),
):
    return generate_question(type, difficulty)


@router.post("/reset", response_model=ResetResponse)
def reset_recent():
    # Only the shared generator behind /questions/next; API sessions keep their own recency.
    clear_recent_questions()
    return {"ok": True}

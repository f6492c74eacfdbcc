from __future__ import annotations

from fastapi import APIRouter

from grading import check_answer, combine, parse_answer_text
from schemas.marking import CombineRequest, CombineResponse, MarkRequest, MarkResponse

router = APIRouter(tags=["marking"])


@router.post("/combine", response_model=CombineResponse)
def combine_value(req: CombineRequest):
    return {"value": combine(req.mantissa, req.suffix)}


@router.post("/mark", response_model=MarkResponse)
def mark(req: MarkRequest):
    try:
        mantissa = parse_answer_text(req.answer)
    except ValueError as e:
        return {
            "ok": False,
            "correct": False,
            "feedback": str(e),
            "expected": req.correct_answer,
        }

    user_answer = combine(mantissa, req.suffix)
    result = check_answer(user_answer, req.correct_answer, req.type)

    feedback = ""
    if req.type == "estimate" and result.error_percent is not None:
        feedback = f"{result.error_percent:.1f}% off"
    elif req.type == "estimate":
        feedback = "Error percentage is undefined for a zero answer."

    return {
        "ok": True,
        "correct": result.is_correct,
        "feedback": feedback,
        "user_answer": user_answer,
        "error_percent": result.error_percent,
        "expected": req.correct_answer,
    }

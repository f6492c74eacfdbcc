# schemas/marking.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from models import QuestionType, Suffix

# ---------- Combine ----------


class CombineRequest(BaseModel):
    mantissa: float = Field(allow_inf_nan=False)
    suffix: Suffix = "none"


class CombineResponse(BaseModel):
    value: float


# ---------- Mark single ----------


class MarkRequest(BaseModel):
    answer: str
    suffix: Suffix = "none"
    correct_answer: float = Field(allow_inf_nan=False)
    type: QuestionType


class MarkResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str
    user_answer: Optional[float] = None
    # estimate questions only
    error_percent: Optional[float] = None
    expected: Optional[float] = None

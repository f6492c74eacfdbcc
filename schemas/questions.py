# schemas/questions.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import Difficulty, QuestionType


class QuestionMetaOut(BaseModel):
    base_value: Optional[float] = None
    percent: Optional[float] = None
    second_value: Optional[float] = None
    operation: Optional[str] = None


class QuestionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    type: QuestionType
    difficulty: Difficulty
    prompt: str
    correct_answer: float = Field(allow_inf_nan=False)
    meta: Optional[QuestionMetaOut] = None


class ResetResponse(BaseModel):
    ok: bool

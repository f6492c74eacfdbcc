from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

QuestionType = Literal["accurate", "estimate"]
Difficulty = Literal["easy", "medium", "tough"]
Suffix = Literal["none", "K", "M", "B"]

QUESTION_TYPES: tuple[str, ...] = ("accurate", "estimate")
DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "tough")
SUFFIXES: tuple[str, ...] = ("none", "K", "M", "B")


class QuestionMeta(BaseModel):
    """Operands and operation tag that produced a question's answer (diagnostic only)."""

    model_config = ConfigDict(frozen=True)
    base_value: Optional[float] = None
    percent: Optional[float] = None
    second_value: Optional[float] = None
    operation: Optional[str] = None


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)
    id: str
    type: QuestionType
    difficulty: Difficulty
    prompt: str
    correct_answer: float
    meta: Optional[QuestionMeta] = None


class GradeResult(BaseModel):
    model_config = ConfigDict(frozen=True)
    is_correct: bool
    # estimate questions only
    error_percent: Optional[float] = None

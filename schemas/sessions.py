# schemas/sessions.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from models import Suffix
from schemas.questions import QuestionOut
from sessions import SessionSettings, SessionSummary


class SessionStartResponse(BaseModel):
    ok: bool
    session_id: str
    settings: SessionSettings
    question: QuestionOut


class SessionNextResponse(BaseModel):
    ok: bool
    session_id: str
    question: QuestionOut


class SessionEndResponse(BaseModel):
    ok: bool


class SummaryItem(BaseModel):
    question: QuestionOut
    # omitted / null answer means the question was skipped
    answer: Optional[str] = None
    suffix: Suffix = "none"


class SummaryRequest(BaseModel):
    items: List[SummaryItem]


class SummaryItemError(BaseModel):
    index: int
    feedback: str


class SummaryResponse(BaseModel):
    ok: bool
    summary: Optional[SessionSummary] = None
    errors: List[SummaryItemError] = []

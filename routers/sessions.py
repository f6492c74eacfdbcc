from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, HTTPException

from models import Question
from schemas.sessions import (
    SessionEndResponse,
    SessionNextResponse,
    SessionStartResponse,
    SummaryRequest,
    SummaryResponse,
)
from sessions import AnswerRecord, PracticeSession, SessionSettings, SessionStore, grade_response, summarize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"])

# Each API session owns its generator, so one client's recency never touches another's.
store = SessionStore()


def _get_session(session_id: str) -> PracticeSession:
    try:
        return store.get(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="session not found") from None


@router.post("/start", response_model=SessionStartResponse)
def start_session(settings: SessionSettings):
    session_id, session = store.create(settings)
    q = session.start()
    return {"ok": True, "session_id": session_id, "settings": settings, "question": q}


@router.get("/{session_id}/next", response_model=SessionNextResponse)
def next_in_session(session_id: str):
    session = _get_session(session_id)
    try:
        q = session.next_question()
    except RuntimeError as e:
        raise HTTPException(status_code=409, detail=str(e)) from None
    return {"ok": True, "session_id": session_id, "question": q}


@router.delete("/{session_id}", response_model=SessionEndResponse)
def end_session(session_id: str):
    _get_session(session_id)
    store.remove(session_id)
    return {"ok": True}


@router.post("/summary", response_model=SummaryResponse)
def session_summary(req: SummaryRequest):
    records: List[AnswerRecord] = []
    errors = []

    for idx, it in enumerate(req.items):
        q = Question.model_validate(it.question.model_dump())
        try:
            records.append(grade_response(q, it.answer, it.suffix))
        except ValueError as e:
            errors.append({"index": idx, "feedback": str(e)})

    if errors:
        return {"ok": False, "summary": None, "errors": errors}
    return {"ok": True, "summary": summarize(records), "errors": []}

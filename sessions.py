from __future__ import annotations

import logging
import threading
import uuid
from collections import OrderedDict
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bank import QuestionGenerator
from config import MAX_SESSIONS
from grading import check_answer, combine, parse_answer_text
from models import Difficulty, Question, QuestionType, Suffix

logger = logging.getLogger(__name__)

SessionMode = Literal["practice", "timed"]

# Options offered by the setup screen; other positive values are accepted too.
TIME_LIMIT_OPTIONS = (60, 120, 180, 300)
DEFAULT_TIME_LIMIT = 120
DEFAULT_NUM_QUESTIONS = 20

# (minimum accuracy %, title, message), checked top-down
PERFORMANCE_BANDS = [
    (95, "Outstanding!", "This level of accuracy will make you shine in any meeting."),
    (85, "Great work!", "Solid performance that would feel confident in most meetings."),
    (70, "Good effort!", "Keep practicing to build more confidence in high-stakes discussions."),
    (50, "Keep going!", "More practice will help. Aim for 85%+ for confident meeting math."),
    (0, "Room to grow", "Try an easier difficulty or slower pace to build your foundation."),
]


class SessionSettings(BaseModel):
    type: QuestionType
    difficulty: Difficulty
    mode: SessionMode = "practice"
    time_limit_seconds: Optional[int] = Field(default=None, gt=0)
    num_questions_target: Optional[int] = Field(default=None, gt=0)

    @model_validator(mode="after")
    def _mode_fields(self) -> "SessionSettings":
        if self.mode == "practice" and self.num_questions_target is None:
            raise ValueError("practice sessions need num_questions_target")
        if self.mode == "timed" and self.time_limit_seconds is None:
            raise ValueError("timed sessions need time_limit_seconds")
        return self


class AnswerRecord(BaseModel):
    model_config = ConfigDict(frozen=True)
    question: Question
    # None means the question was skipped
    user_answer: Optional[float] = None
    suffix: Suffix = "none"
    is_correct: bool
    error_percent: Optional[float] = None
    raw_input: str = ""


class PerformanceBand(BaseModel):
    title: str
    message: str


class SessionSummary(BaseModel):
    total: int
    correct: int
    skipped: int
    accuracy: float
    mean_error_percent: Optional[float] = None
    performance: PerformanceBand
    incorrect: List[AnswerRecord]


def grade_response(question: Question, raw_input: Optional[str], suffix: str = "none") -> AnswerRecord:
    """
    Build the answer record for one response. ``raw_input`` of None (or blank)
    is a skip. Raises ValueError for text that is not a usable number.
    """
    if raw_input is None or not raw_input.strip():
        return AnswerRecord(question=question, is_correct=False, raw_input="")

    mantissa = parse_answer_text(raw_input)
    user_answer = combine(mantissa, suffix)
    result = check_answer(user_answer, question.correct_answer, question.type)
    return AnswerRecord(
        question=question,
        user_answer=user_answer,
        suffix=suffix,
        is_correct=result.is_correct,
        error_percent=result.error_percent,
        raw_input=raw_input,
    )


def performance_band(accuracy: float) -> PerformanceBand:
    # the last band has threshold 0 and catches everything left
    title, message = next((t, m) for threshold, t, m in PERFORMANCE_BANDS if accuracy >= threshold)
    return PerformanceBand(title=title, message=message)


def summarize(records: List[AnswerRecord]) -> SessionSummary:
    total = len(records)
    correct = sum(1 for r in records if r.is_correct)
    skipped = sum(1 for r in records if r.user_answer is None)
    accuracy = correct / total * 100 if total else 0.0

    errors = [r.error_percent for r in records if r.error_percent is not None]
    mean_error = sum(errors) / len(errors) if errors else None

    return SessionSummary(
        total=total,
        correct=correct,
        skipped=skipped,
        accuracy=accuracy,
        mean_error_percent=mean_error,
        performance=performance_band(accuracy),
        incorrect=[r for r in records if not r.is_correct],
    )


class PracticeSession:
    """
    One run of questions with fixed settings.

    Each session owns its generator, so recency never leaks between sessions.
    Timed sessions have no clock here: the caller runs the timer and calls
    ``finish()`` when it expires.

    Public methods hold the session lock, so concurrent requests for one
    session are applied one at a time.
    """

    def __init__(self, settings: SessionSettings, generator: Optional[QuestionGenerator] = None):
        self.settings = settings
        self.generator = generator if generator is not None else QuestionGenerator()
        self.records: List[AnswerRecord] = []
        self.current: Optional[Question] = None
        self.finished = False
        self._lock = threading.RLock()

    def start(self) -> Question:
        with self._lock:
            self.generator.clear_recent()
            self.records = []
            self.finished = False
            self.current = self._next()
        logger.info(
            "session started: %s/%s (%s)",
            self.settings.type,
            self.settings.difficulty,
            self.settings.mode,
        )
        return self.current

    def _next(self) -> Question:
        return self.generator.generate(self.settings.type, self.settings.difficulty)

    def next_question(self) -> Question:
        """Replace the current question without recording a response."""
        with self._lock:
            self._require_question()
            self.current = self._next()
            return self.current

    def _record(self, record: AnswerRecord) -> AnswerRecord:
        self.records.append(record)
        target = self.settings.num_questions_target
        if self.settings.mode == "practice" and target is not None and len(self.records) >= target:
            self.finish()
        else:
            self.current = self._next()
        return record

    def _require_question(self) -> Question:
        if self.finished:
            raise RuntimeError("session is finished")
        if self.current is None:
            raise RuntimeError("session not started")
        return self.current

    def answer(self, raw_input: str, suffix: str = "none") -> AnswerRecord:
        if raw_input is None or not raw_input.strip():
            raise ValueError("Answer required.")
        with self._lock:
            q = self._require_question()
            return self._record(grade_response(q, raw_input, suffix))

    def skip(self) -> AnswerRecord:
        with self._lock:
            q = self._require_question()
            return self._record(grade_response(q, None))

    def finish(self) -> SessionSummary:
        with self._lock:
            self.finished = True
            self.current = None
            return self.summary()

    @property
    def answered_count(self) -> int:
        return len(self.records)

    def summary(self) -> SessionSummary:
        return summarize(self.records)


class SessionStore:
    """
    In-memory registry of open sessions keyed by an opaque id.

    Holds at most ``max_size`` sessions; starting one more drops the oldest.
    Nothing survives a restart.
    """

    def __init__(self, max_size: int = MAX_SESSIONS) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._sessions: "OrderedDict[str, PracticeSession]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self, settings: SessionSettings) -> Tuple[str, PracticeSession]:
        session = PracticeSession(settings)
        session_id = str(uuid.uuid4())
        with self._lock:
            self._sessions[session_id] = session
            while len(self._sessions) > self.max_size:
                dropped, _ = self._sessions.popitem(last=False)
                logger.info("session store full; dropped session %s", dropped)
        return session_id, session

    def get(self, session_id: str) -> PracticeSession:
        """Raises KeyError for an unknown (or dropped) session id."""
        with self._lock:
            return self._sessions[session_id]

    def remove(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

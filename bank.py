# Question generator: picks an eligible template, retries on refusal and falls
# back to a plain percent-of question when every attempt is refused.

from __future__ import annotations

import logging
import random
import threading
import uuid
from typing import Any, Dict, Optional, Sequence

import questions as pools
from config import MAX_ATTEMPTS, MAX_RECENT, RANDOM_SEED
from formatting import format_number, format_percent
from models import DIFFICULTIES, QUESTION_TYPES, Question, QuestionMeta
from recency import RecentSignatures
from templates import candidates

logger = logging.getLogger(__name__)


def _check_kind(qtype: str, difficulty: str) -> None:
    if qtype not in QUESTION_TYPES:
        raise ValueError(f"unknown question type: {qtype!r}")
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"unknown difficulty: {difficulty!r}")


class QuestionGenerator:
    """
    Owns the randomness source and the recency filter used by the templates.

    Pass a seeded ``random.Random`` for deterministic output; pass a
    ``RecentSignatures`` to share (or inspect) the recency state.

    ``generate``, ``fallback`` and ``clear_recent`` hold the instance lock, so one generator
    can serve several request threads.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        recent: Optional[RecentSignatures] = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.rng = rng if rng is not None else random.Random()
        self.recent = recent if recent is not None else RecentSignatures(MAX_RECENT)
        self.max_attempts = max_attempts
        self._lock = threading.RLock()

    # --- template context ---

    def choice(self, seq: Sequence[Any]) -> Any:
        return self.rng.choice(seq)

    def coin(self) -> bool:
        return self.rng.random() > 0.5

    def claim(self, signature: str) -> bool:
        """Record ``signature`` unless it was issued recently; False means refuse."""
        if signature in self.recent:
            logger.debug("refused recent signature %s", signature)
            return False
        self.recent.add(signature)
        return True

    def new_id(self) -> str:
        return str(uuid.UUID(int=self.rng.getrandbits(128), version=4))

    # --- public API ---

    def generate(self, qtype: str, difficulty: str) -> Question:
        _check_kind(qtype, difficulty)
        pool = candidates(qtype, difficulty)

        with self._lock:
            if pool:
                for _ in range(self.max_attempts):
                    q = self.rng.choice(pool).generate(self, qtype, difficulty)
                    if q is not None:
                        return q

            logger.warning(
                "no template produced a %s/%s question in %d attempts; using fallback",
                qtype,
                difficulty,
                self.max_attempts,
            )
            return self.fallback(qtype, difficulty)

    def fallback(self, qtype: str, difficulty: str) -> Question:
        """Plain percent-of question with no recency check. Never refuses."""
        with self._lock:
            base = self.rng.choice(pools.PERCENT_BASES[qtype][difficulty])
            pct = self.rng.choice(pools.PERCENT_RATES[qtype][difficulty])
            qid = self.new_id()
        return Question(
            id=qid,
            type=qtype,
            difficulty=difficulty,
            prompt=f"What is {format_percent(pct)}% of {format_number(base)}?",
            correct_answer=base * pct / 100,
            meta=QuestionMeta(base_value=base, percent=pct, operation="percent"),
        )

    def clear_recent(self) -> None:
        with self._lock:
            self.recent.clear()


def template_counts() -> Dict[str, Dict[str, int]]:
    """Number of distinct eligible templates per type and difficulty."""
    return {
        qtype: {d: len({t.name for t in candidates(qtype, d)}) for d in DIFFICULTIES}
        for qtype in QUESTION_TYPES
    }


_default = QuestionGenerator(
    rng=random.Random(RANDOM_SEED) if RANDOM_SEED is not None else None,
)


# Public API
def get_generator() -> QuestionGenerator:
    return _default


def generate_question(qtype: str, difficulty: str) -> Question:
    return _default.generate(qtype, difficulty)


def clear_recent_questions() -> None:
    _default.clear_recent()


import random

import pytest

from bank import QuestionGenerator, clear_recent_questions
from recency import RecentSignatures


@pytest.fixture
def generator():
    return QuestionGenerator(rng=random.Random(1234), recent=RecentSignatures(max_size=100))


@pytest.fixture(autouse=True)
def _fresh_default_recency():
    clear_recent_questions()
    yield
    clear_recent_questions()

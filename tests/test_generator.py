import math
import random

import pytest

import bank
from bank import QuestionGenerator, generate_question, template_counts
from models import DIFFICULTIES, QUESTION_TYPES
from recency import RecentSignatures


class SaturatedRecency(RecentSignatures):
    """Claims every signature is recent."""

    def __init__(self):
        super().__init__(max_size=1)

    def __contains__(self, signature):
        return True


@pytest.mark.parametrize("qtype", QUESTION_TYPES)
@pytest.mark.parametrize("difficulty", DIFFICULTIES)
def test_always_returns_a_question(generator, qtype, difficulty):
    for _ in range(200):
        q = generator.generate(qtype, difficulty)
        assert q is not None
        assert q.type == qtype and q.difficulty == difficulty
        assert q.prompt
        assert math.isfinite(q.correct_answer)


@pytest.mark.parametrize("qtype", QUESTION_TYPES)
@pytest.mark.parametrize("difficulty", DIFFICULTIES)
def test_fallback_when_every_signature_is_recent(qtype, difficulty):
    gen = QuestionGenerator(rng=random.Random(5), recent=SaturatedRecency(), max_attempts=30)
    q = gen.generate(qtype, difficulty)
    assert q.meta.operation == "percent"
    assert q.prompt.startswith("What is ")
    assert q.correct_answer == pytest.approx(q.meta.base_value * q.meta.percent / 100)
    assert q.type == qtype and q.difficulty == difficulty


def test_fallback_is_logged(caplog):
    gen = QuestionGenerator(rng=random.Random(5), recent=SaturatedRecency(), max_attempts=3)
    with caplog.at_level("WARNING", logger="bank"):
        gen.generate("accurate", "easy")
    assert "fallback" in caplog.text


def test_seeded_generators_are_deterministic():
    a = QuestionGenerator(rng=random.Random(42))
    b = QuestionGenerator(rng=random.Random(42))
    for _ in range(25):
        qa = a.generate("accurate", "medium")
        qb = b.generate("accurate", "medium")
        assert qa == qb


def test_ids_are_unique(generator):
    ids = {generator.generate("estimate", "tough").id for _ in range(300)}
    assert len(ids) == 300


def test_tough_only_template_never_on_easier_tiers(generator):
    for qtype in QUESTION_TYPES:
        for difficulty in ("easy", "medium"):
            for _ in range(300):
                q = generator.generate(qtype, difficulty)
                assert q.meta.operation != "multi_year_growth"


def test_easy_excludes_multi_step_templates(generator):
    gated = {"break_even", "compound_increase_decrease", "compound_growth", "weighted_average"}
    for qtype in QUESTION_TYPES:
        for _ in range(300):
            assert generator.generate(qtype, "easy").meta.operation not in gated


def test_tough_can_produce_multi_year(generator):
    ops = {generator.generate("estimate", "tough").meta.operation for _ in range(400)}
    assert "multi_year_growth" in ops


def test_estimate_easy_end_to_end():
    for _ in range(1000):
        q = generate_question("estimate", "easy")
        assert q.type == "estimate"
        assert q.difficulty == "easy"
        assert math.isfinite(q.correct_answer) and q.correct_answer > 0


def test_clear_recent_questions_resets_default():
    generate_question("accurate", "easy")
    assert len(bank.get_generator().recent) > 0
    bank.clear_recent_questions()
    assert len(bank.get_generator().recent) == 0


def test_recency_is_bounded(generator):
    for _ in range(400):
        generator.generate("accurate", "tough")
    assert len(generator.recent) <= generator.recent.max_size


def test_unknown_kind_rejected(generator):
    with pytest.raises(ValueError):
        generator.generate("rough", "easy")
    with pytest.raises(ValueError):
        generator.generate("accurate", "extreme")


def test_template_counts():
    counts = template_counts()
    assert counts["accurate"]["easy"] == 10
    assert counts["accurate"]["tough"] == 14
    assert counts["estimate"]["easy"] == 6
    assert counts["estimate"]["tough"] == 8

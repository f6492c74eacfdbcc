import pytest

from grading import check_answer, combine, parse_answer_text


def test_combine_suffixes():
    assert combine(4.5, "M") == 4_500_000
    assert combine(3, "none") == 3
    assert combine(2, "B") == 2_000_000_000
    assert combine(12, "K") == 12_000


def test_combine_unknown_suffix():
    with pytest.raises(ValueError):
        combine(1, "T")


@pytest.mark.parametrize("answer", [0.5, 12.0, 1500.0, 3_750_000.0])
def test_accurate_exact_answer_is_correct(answer):
    r = check_answer(answer, answer, "accurate")
    assert r.is_correct is True
    assert r.error_percent is None


def test_accurate_tolerance_floor_and_relative():
    assert check_answer(100.5, 100, "accurate").is_correct
    assert not check_answer(100.6, 100, "accurate").is_correct
    # 0.1% of 1,000,000 is 1,000
    assert check_answer(1_000_900, 1_000_000, "accurate").is_correct
    assert not check_answer(1_001_100, 1_000_000, "accurate").is_correct


def test_accurate_far_off_is_wrong():
    assert not check_answer(1500 * 1.5, 1500, "accurate").is_correct


def test_estimate_band_boundaries():
    r = check_answer(900, 1000, "estimate")
    assert r.is_correct is True
    assert r.error_percent == pytest.approx(10)
    assert check_answer(899, 1000, "estimate").is_correct is False
    assert check_answer(1100, 1000, "estimate").is_correct is True
    assert check_answer(1101, 1000, "estimate").is_correct is False


def test_estimate_reports_error_even_when_wrong():
    r = check_answer(1500, 1000, "estimate")
    assert r.is_correct is False
    assert r.error_percent == pytest.approx(50)


def test_estimate_zero_correct_answer():
    r = check_answer(0, 0, "estimate")
    assert r.is_correct is True and r.error_percent == 0
    r = check_answer(5, 0, "estimate")
    assert r.is_correct is False and r.error_percent is None


def test_unknown_type():
    with pytest.raises(ValueError):
        check_answer(1, 1, "rough")


def test_parse_plain_and_expression():
    assert parse_answer_text("4.5") == 4.5
    assert parse_answer_text(" 1200 ") == 1200
    assert parse_answer_text("3 * 1.5") == pytest.approx(4.5)
    assert parse_answer_text("2^3") == pytest.approx(8)


@pytest.mark.parametrize(
    "raw, fragment",
    [
        ("", "required"),
        ("abc", "allowed"),
        ("1" * 101, "too long"),
        ("1/0", "finite"),
        ("1/(2-2)", "finite"),
        ("2^5000", "complex"),
        ("9^9^9", "complex"),
        ("2^(9^9)", "complex"),
        ("1" * 40 + " + 1", "complex"),
    ],
)
def test_parse_rejects(raw, fragment):
    with pytest.raises(ValueError) as exc:
        parse_answer_text(raw)
    assert fragment in str(exc.value).lower()


def test_parse_allows_bounded_expressions():
    assert parse_answer_text("2^10") == 1024
    assert parse_answer_text("10 / 4") == pytest.approx(2.5)
    assert parse_answer_text("(1 + 2) * 3 - 4") == pytest.approx(5)
    assert parse_answer_text("4^(1/2)") == pytest.approx(2)
    assert parse_answer_text("1" * 15 + " + 1") == pytest.approx(111111111111112)

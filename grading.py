from __future__ import annotations

import logging
import math
import re
from typing import Any, Optional

from sympy import nan, oo, preorder_traversal, zoo
from sympy.core.power import Pow
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

from models import QUESTION_TYPES, SUFFIXES, GradeResult

logger = logging.getLogger(__name__)

# --- Grading policy ---------------------------------------------------------------
# Estimate answers within +/-10% of the correct value are accepted.
TOLERANCE = 0.10

# Accurate answers: absolute floor, else a relative share of the correct value.
ACCURATE_ABS_TOL = 0.5
ACCURATE_REL_TOL = 0.001

SUFFIX_MULTIPLIERS = {
    "none": 1,
    "K": 1_000,
    "M": 1_000_000,
    "B": 1_000_000_000,
}

# --- Answer text validation -------------------------------------------------------
LEN_LIMIT = 100
_REQUIRED_MSG = "Answer required."
_TOO_LONG_MSG = "Answer too long (> 100)."
_INVALID_CHARS_MSG = (
    "Only numeric expressions using digits, spaces, + - * / ^ . and parentheses are allowed."
)
_NON_FINITE_MSG = "Expression is not finite (e.g., division by zero)."
_TOO_COMPLEX_MSG = "Expression is too complex."
_ALLOWED_RE = re.compile(r"^[0-9+\-*/^().\s]{1,100}$")

TRANSFORMS = standard_transformations + (
    convert_xor,
    implicit_multiplication_application,
)

_MAX_OPS = 200
# Well past any realistic answer; answers are capped at LEN_LIMIT characters anyway.
_MAX_INT_DIGITS = 30
_MAX_EXPONENT_ABS = 2000


def combine(mantissa: float, suffix: str = "none") -> float:
    """Scale a typed mantissa by its magnitude suffix: combine(4.5, "M") == 4_500_000."""
    try:
        factor = SUFFIX_MULTIPLIERS[suffix]
    except KeyError:
        raise ValueError(f"unknown suffix: {suffix!r}; expected one of {SUFFIXES}") from None
    return mantissa * factor


def validate_answer_text(s: Any) -> Optional[str]:
    if s is None or not isinstance(s, str) or not s.strip():
        return _REQUIRED_MSG
    if len(s) > LEN_LIMIT:
        return _TOO_LONG_MSG
    if _ALLOWED_RE.fullmatch(s) is None:
        return _INVALID_CHARS_MSG
    return None


def _assert_finite_sym(val: Any) -> None:
    if getattr(val, "is_finite", None) is False:
        raise ValueError(_NON_FINITE_MSG)
    if val in (oo, -oo, zoo, nan):
        raise ValueError(_NON_FINITE_MSG)


def _assert_expr_complexity(sym: Any) -> None:
    """
    Reject expressions that would be expensive to evaluate. Runs on the
    unevaluated tree, so nothing has been computed yet.
    """
    if isinstance(sym, (int, float)):
        return
    if hasattr(sym, "count_ops") and sym.count_ops() > _MAX_OPS:
        raise ValueError(_TOO_COMPLEX_MSG)

    for node in preorder_traversal(sym):
        if getattr(node, "is_Integer", False) and len(str(abs(int(node)))) > _MAX_INT_DIGITS:
            raise ValueError(_TOO_COMPLEX_MSG)
        if isinstance(node, Pow):
            exp = node.exp
            if not getattr(exp, "is_number", False):
                raise ValueError(_TOO_COMPLEX_MSG)
            # evalf is numeric, so a nested tower in the exponent stays cheap
            try:
                e = float(exp.evalf())
            except (TypeError, ValueError, OverflowError):
                raise ValueError(_TOO_COMPLEX_MSG) from None
            if not math.isfinite(e) or abs(e) > _MAX_EXPONENT_ABS:
                raise ValueError(_TOO_COMPLEX_MSG)
            # unevaluated 1/0 is Pow(0, -1); evalf alone would not flag it
            if e < 0 and node.base.evalf() == 0:
                raise ValueError(_NON_FINITE_MSG)


def parse_answer_text(raw: str) -> float:
    """
    Turn the user's typed answer into a number.

    Accepts plain numbers ("4.5") as well as simple arithmetic ("3 * 1.5").
    Raises ValueError with a user-facing message when the text is not usable.
    """
    msg = validate_answer_text(raw)
    if msg:
        raise ValueError(msg)

    s = raw.strip()
    # Fast path: plain number without going through sympy.
    try:
        val = float(s)
    except ValueError:
        try:
            sym = parse_expr(s, transformations=TRANSFORMS, evaluate=False)
        except Exception:
            raise ValueError(_INVALID_CHARS_MSG) from None
        _assert_expr_complexity(sym)
        try:
            evaluated = sym.evalf()
            _assert_finite_sym(evaluated)
            val = float(evaluated)
        except (TypeError, OverflowError):
            raise ValueError(_NON_FINITE_MSG) from None

    if not math.isfinite(val):
        raise ValueError(_NON_FINITE_MSG)
    return val


def check_answer(user_answer: float, correct_answer: float, qtype: str) -> GradeResult:
    """
    Grade a numeric answer.

    accurate: within max(0.5, 0.1% of the answer); no error percentage.
    estimate: within the inclusive +/-10% band; error percentage always reported.
    """
    if qtype not in QUESTION_TYPES:
        raise ValueError(f"unknown question type: {qtype!r}")

    if qtype == "accurate":
        tolerance = max(ACCURATE_ABS_TOL, abs(correct_answer) * ACCURATE_REL_TOL)
        return GradeResult(is_correct=abs(user_answer - correct_answer) <= tolerance)

    if correct_answer == 0:
        logger.warning("estimate question with a zero correct answer (user answered %s)", user_answer)
        if user_answer == 0:
            return GradeResult(is_correct=True, error_percent=0.0)
        return GradeResult(is_correct=False, error_percent=None)

    lower, upper = sorted((correct_answer * (1 - TOLERANCE), correct_answer * (1 + TOLERANCE)))
    is_correct = lower <= user_answer <= upper
    error_percent = abs(user_answer - correct_answer) / abs(correct_answer) * 100
    return GradeResult(is_correct=is_correct, error_percent=error_percent)

"""
Question templates.

Each template covers one business-arithmetic scenario. A template draws its
operands from the difficulty-tiered pools in ``questions.py``, fingerprints
them into a signature, and refuses (returns ``None``) when that signature was
issued recently. Eligibility per question type / difficulty is metadata on the
registry entry, so gated templates never need ad hoc checks in the generator.

The answer of every question is computed through ``apply_operation`` from the
question's ``meta``; that function is the one definition of each formula.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Tuple

import questions as pools
from formatting import format_currency, format_dollars, format_number, format_percent
from models import DIFFICULTIES, QUESTION_TYPES, Question, QuestionMeta


class TemplateContext(Protocol):
    def choice(self, seq: Sequence[Any]) -> Any: ...

    def coin(self) -> bool: ...

    def claim(self, signature: str) -> bool: ...

    def new_id(self) -> str: ...


# --- Operations ------------------------------------------------------------------


def _break_even(m: QuestionMeta) -> float:
    # partial units cannot be sold
    return float(math.ceil(m.base_value / m.second_value))


OPERATIONS: Dict[str, Callable[[QuestionMeta], float]] = {
    "percent": lambda m: m.base_value * m.percent / 100,
    "percent_estimate": lambda m: m.base_value * m.percent / 100,
    "multiplication": lambda m: m.base_value * m.second_value,
    "division": lambda m: m.base_value / m.second_value,
    "margin": lambda m: m.base_value * m.percent / 100,
    "margin_estimate": lambda m: m.base_value * m.percent / 100,
    "per_unit": lambda m: m.base_value / m.second_value,
    "total_from_unit": lambda m: m.base_value * m.second_value,
    "increase": lambda m: m.base_value + m.base_value * m.percent / 100,
    "decrease": lambda m: m.base_value - m.base_value * m.percent / 100,
    "market_share": lambda m: m.base_value * m.percent / 100,
    "growth": lambda m: m.base_value * (1 + m.percent / 100),
    "growth_estimate": lambda m: m.base_value * (1 + m.percent / 100),
    "break_even": _break_even,
    "reverse_percent": lambda m: m.base_value * 100 / m.percent,
    "cost_structure": lambda m: m.base_value * (100 - m.percent) / 100,
    "compound_increase_decrease": lambda m: (
        m.base_value * (1 + m.percent / 100) * (1 - m.second_value / 100)
    ),
    "compound_growth": lambda m: m.base_value * (1 + m.percent / 100) * (1 + m.second_value / 100),
    "addition": lambda m: m.base_value + m.second_value,
    "subtraction": lambda m: m.base_value - m.second_value,
    "rev_per_employee": lambda m: m.base_value / m.second_value,
    "valuation": lambda m: m.base_value * m.second_value,
    "weighted_average": lambda m: (
        (m.percent * m.base_value + (100 - m.percent) * m.second_value) / 100
    ),
    "multi_year_growth": lambda m: m.base_value * (1 + m.percent / 100) ** m.second_value,
}


def apply_operation(meta: QuestionMeta) -> float:
    try:
        op = OPERATIONS[meta.operation]
    except KeyError:
        raise ValueError(f"unknown operation: {meta.operation!r}") from None
    return float(op(meta))


def make_signature(name: str, *operands: Any) -> str:
    return "_".join([name, *(str(o) for o in operands)])


# --- Registry --------------------------------------------------------------------

Builder = Callable[[TemplateContext, str, str], Optional[Question]]


@dataclass(frozen=True)
class Template:
    name: str
    build: Builder
    types: Tuple[str, ...] = QUESTION_TYPES
    difficulties: Tuple[str, ...] = DIFFICULTIES
    weight: int = 1

    def supports(self, qtype: str, difficulty: str) -> bool:
        return qtype in self.types and difficulty in self.difficulties

    def generate(self, ctx: TemplateContext, qtype: str, difficulty: str) -> Optional[Question]:
        if not self.supports(qtype, difficulty):
            return None
        return self.build(ctx, qtype, difficulty)


REGISTRY: List[Template] = []


def template(
    name: str,
    types: Tuple[str, ...] = QUESTION_TYPES,
    difficulties: Tuple[str, ...] = DIFFICULTIES,
    weight: int = 1,
) -> Callable[[Builder], Builder]:
    def register(fn: Builder) -> Builder:
        REGISTRY.append(Template(name, fn, types, difficulties, weight))
        return fn

    return register


def get_template(name: str) -> Template:
    for t in REGISTRY:
        if t.name == name:
            return t
    raise KeyError(name)


def candidates(qtype: str, difficulty: str) -> List[Template]:
    """Eligible templates, each repeated ``weight`` times to bias selection."""
    out: List[Template] = []
    for t in REGISTRY:
        if t.supports(qtype, difficulty):
            out.extend([t] * t.weight)
    return out


def make_question(
    ctx: TemplateContext, qtype: str, difficulty: str, prompt: str, meta: QuestionMeta
) -> Question:
    return Question(
        id=ctx.new_id(),
        type=qtype,
        difficulty=difficulty,
        prompt=prompt,
        correct_answer=apply_operation(meta),
        meta=meta,
    )


# --- Templates -------------------------------------------------------------------


@template("pct", types=("accurate",), weight=2)
def percent_of(ctx, qtype, difficulty):
    base = ctx.choice(pools.PERCENT_BASES[qtype][difficulty])
    pct = ctx.choice(pools.PERCENT_RATES[qtype][difficulty])
    if not ctx.claim(make_signature("pct", pct, base)):
        return None

    prompt = f"What is {format_percent(pct)}% of {format_number(base)}?"
    if difficulty == "easy" and pct in pools.PERCENT_TIPS:
        prompt += f" (Tip: {pools.PERCENT_TIPS[pct]})"
    meta = QuestionMeta(base_value=base, percent=pct, operation="percent")
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("pct_est", types=("estimate",), weight=2)
def large_number_percent(ctx, qtype, difficulty):
    base = ctx.choice(pools.PERCENT_BASES[qtype][difficulty])
    pct = ctx.choice(pools.PERCENT_RATES[qtype][difficulty])
    if not ctx.claim(make_signature("pct_est", pct, base)):
        return None

    context = ctx.choice(pools.ESTIMATE_CONTEXTS)
    prompt = f"{context} is {format_currency(base)}. Estimate {format_percent(pct)}% of that."
    meta = QuestionMeta(base_value=base, percent=pct, operation="percent_estimate")
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("mult", types=("accurate",))
def multiplication(ctx, qtype, difficulty):
    a = ctx.choice(pools.MULTIPLICANDS[difficulty])
    b = ctx.choice(pools.MULTIPLIERS[difficulty])
    if not ctx.claim(make_signature("mult", a, b)):
        return None

    meta = QuestionMeta(base_value=a, second_value=b, operation="multiplication")
    return make_question(ctx, qtype, difficulty, f"{a} × {b} = ?", meta)


@template("div", types=("accurate",))
def division(ctx, qtype, difficulty):
    divisor = ctx.choice(pools.DIVISORS[difficulty])
    quotient = ctx.choice(pools.QUOTIENTS[difficulty])
    dividend = divisor * quotient
    if not ctx.claim(make_signature("div", dividend, divisor)):
        return None

    meta = QuestionMeta(base_value=dividend, second_value=divisor, operation="division")
    return make_question(ctx, qtype, difficulty, f"{format_number(dividend)} ÷ {divisor} = ?", meta)


@template("margin")
def profit_margin(ctx, qtype, difficulty):
    revenue = ctx.choice(pools.MARGIN_REVENUES[qtype][difficulty])
    margin = ctx.choice(pools.MARGIN_RATES[qtype][difficulty])
    if not ctx.claim(make_signature("margin", qtype[0], revenue, margin)):
        return None

    if qtype == "accurate":
        prompt = f"Revenue: {format_dollars(revenue)}. Margin: {margin}%. What is the profit?"
        op = "margin"
    else:
        company = ctx.choice(pools.COMPANY_KINDS)
        prompt = (
            f"A {company} has {format_currency(revenue)} revenue with {margin}% margin. "
            "Estimate profit."
        )
        op = "margin_estimate"
    meta = QuestionMeta(base_value=revenue, percent=margin, operation=op)
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("perunit", types=("accurate",))
def per_unit(ctx, qtype, difficulty):
    units = ctx.choice(pools.UNIT_COUNTS[difficulty])
    unit_price = ctx.choice(pools.UNIT_PRICES[difficulty])
    ask_rate = ctx.coin()
    total = units * unit_price
    if not ctx.claim(make_signature("perunit", total, units, ask_rate)):
        return None

    plural, singular = ctx.choice(pools.UNIT_ITEMS)
    if ask_rate:
        prompt = (
            f"Total revenue: {format_dollars(total)} from {units} {plural}. "
            f"Revenue per {singular}?"
        )
        meta = QuestionMeta(base_value=total, second_value=units, operation="per_unit")
    else:
        prompt = f"{units} {plural} × ${unit_price} each = ?"
        meta = QuestionMeta(base_value=unit_price, second_value=units, operation="total_from_unit")
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("price", types=("accurate",))
def price_change(ctx, qtype, difficulty):
    price = ctx.choice(pools.PRICES[difficulty])
    change = ctx.choice(pools.PRICE_CHANGES[difficulty])
    increase = ctx.coin()
    if not ctx.claim(make_signature("price", price, change, increase)):
        return None

    action = "increases" if increase else "decreases"
    prompt = f"{format_dollars(price)} {action} by {change}%. New price?"
    meta = QuestionMeta(
        base_value=price, percent=change, operation="increase" if increase else "decrease"
    )
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("market", types=("estimate",))
def market_share(ctx, qtype, difficulty):
    size = ctx.choice(pools.MARKET_SIZES[difficulty])
    share = ctx.choice(pools.MARKET_SHARES[difficulty])
    if not ctx.claim(make_signature("market", size, share)):
        return None

    industry = ctx.choice(pools.INDUSTRIES)
    prompt = (
        f"The {industry} market is {format_currency(size)}. "
        f"Estimate revenue for a {format_percent(share)}% share."
    )
    meta = QuestionMeta(base_value=size, percent=share, operation="market_share")
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("growth")
def growth(ctx, qtype, difficulty):
    base = ctx.choice(pools.GROWTH_BASES[qtype][difficulty])
    rate = ctx.choice(pools.GROWTH_RATES[qtype][difficulty])
    if not ctx.claim(make_signature("growth", qtype[0], base, rate)):
        return None

    if qtype == "accurate":
        prompt = f"Last year: {format_dollars(base)}. After {rate}% growth, this year = ?"
        op = "growth"
    else:
        metric = ctx.choice(pools.GROWTH_METRICS)
        prompt = (
            f"{metric.upper()} was {format_currency(base)}. "
            f"After {rate}% growth, estimate the new value."
        )
        op = "growth_estimate"
    meta = QuestionMeta(base_value=base, percent=rate, operation=op)
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("multiyear", difficulties=("tough",))
def multi_year_growth(ctx, qtype, difficulty):
    base = ctx.choice(pools.MULTI_YEAR_BASES[qtype])
    rate = ctx.choice(pools.MULTI_YEAR_RATES[qtype])
    years = ctx.choice(pools.MULTI_YEAR_SPANS[qtype])
    if not ctx.claim(make_signature("multiyear", qtype[0], base, rate, years)):
        return None

    if qtype == "accurate":
        prompt = (
            f"{format_dollars(base)} grows {rate}% a year, compounded. "
            f"Value after {years} years?"
        )
    else:
        metric = ctx.choice(pools.GROWTH_METRICS)
        prompt = (
            f"{metric.upper()} is {format_currency(base)} and compounds at {rate}% a year. "
            f"Estimate it after {years} years."
        )
    meta = QuestionMeta(
        base_value=base, percent=rate, second_value=years, operation="multi_year_growth"
    )
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("breakeven", types=("accurate",), difficulties=("medium", "tough"))
def break_even(ctx, qtype, difficulty):
    fixed = ctx.choice(pools.FIXED_COSTS[difficulty])
    price = ctx.choice(pools.UNIT_SALE_PRICES[difficulty])
    variable = round(price * pools.VARIABLE_COST_SHARE[difficulty] / 100)
    if not ctx.claim(make_signature("breakeven", fixed, price, variable)):
        return None

    prompt = (
        f"Fixed costs: {format_dollars(fixed)}. Price: ${price}. "
        f"Variable cost: ${variable}. Break-even units?"
    )
    meta = QuestionMeta(base_value=fixed, second_value=price - variable, operation="break_even")
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("revpct", types=("accurate",))
def reverse_percent(ctx, qtype, difficulty):
    whole = ctx.choice(pools.REVERSE_WHOLES[difficulty])
    pct = ctx.choice(pools.REVERSE_RATES[difficulty])
    part = whole * pct / 100
    if not ctx.claim(make_signature("revpct", part, pct)):
        return None

    meta = QuestionMeta(base_value=part, percent=pct, operation="reverse_percent")
    question = make_question(
        ctx, qtype, difficulty, f"{format_number(part)} is {pct}% of what total?", meta
    )
    # part * 100 / pct can drift by an ulp; the whole is the exact answer
    return question.model_copy(update={"correct_answer": float(whole)})


@template("cost", types=("accurate",))
def cost_structure(ctx, qtype, difficulty):
    revenue = ctx.choice(pools.COST_REVENUES[difficulty])
    cost_pct = ctx.choice(pools.COST_RATES[difficulty])
    if not ctx.claim(make_signature("cost", revenue, cost_pct)):
        return None

    prompt = f"Revenue: {format_dollars(revenue)}. Costs: {cost_pct}% of revenue. Profit?"
    meta = QuestionMeta(base_value=revenue, percent=cost_pct, operation="cost_structure")
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("compound", types=("accurate",), difficulties=("medium", "tough"))
def compound_change(ctx, qtype, difficulty):
    base = ctx.choice(pools.COMPOUND_BASES[difficulty])
    first = ctx.choice(pools.COMPOUND_FIRST_RATES[difficulty])
    second = ctx.choice(pools.COMPOUND_SECOND_RATES[difficulty])
    down = ctx.coin()
    if not ctx.claim(make_signature("compound", base, first, second, down)):
        return None

    if down:
        prompt = f"{format_dollars(base)} increases {first}%, then decreases {second}%. Final value?"
        op = "compound_increase_decrease"
    else:
        prompt = f"{format_dollars(base)} grows {first}%, then another {second}%. Final value?"
        op = "compound_growth"
    meta = QuestionMeta(base_value=base, percent=first, second_value=second, operation=op)
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("addsub", types=("accurate",))
def add_subtract(ctx, qtype, difficulty):
    a = ctx.choice(pools.ADD_FIRST[difficulty])
    b = ctx.choice(pools.ADD_SECOND[difficulty])
    add = ctx.coin() or a == b
    if not add and a < b:
        a, b = b, a
    if not ctx.claim(make_signature("addsub", a, b, add)):
        return None

    sign = "+" if add else "-"
    meta = QuestionMeta(base_value=a, second_value=b, operation="addition" if add else "subtraction")
    return make_question(
        ctx, qtype, difficulty, f"{format_number(a)} {sign} {format_number(b)} = ?", meta
    )


@template("revemp", types=("estimate",))
def revenue_per_employee(ctx, qtype, difficulty):
    revenue = ctx.choice(pools.HEADCOUNT_REVENUES[difficulty])
    employees = ctx.choice(pools.HEADCOUNTS[difficulty])
    if not ctx.claim(make_signature("revemp", revenue, employees)):
        return None

    prompt = (
        f"Company revenue: {format_currency(revenue)}. Employees: {format_number(employees)}. "
        "Estimate revenue per employee."
    )
    meta = QuestionMeta(base_value=revenue, second_value=employees, operation="rev_per_employee")
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("valuation", types=("estimate",))
def valuation_multiple(ctx, qtype, difficulty):
    revenue = ctx.choice(pools.VALUATION_REVENUES[difficulty])
    multiple = ctx.choice(pools.VALUATION_MULTIPLES[difficulty])
    if not ctx.claim(make_signature("valuation", revenue, multiple)):
        return None

    prompt = (
        f"Revenue: {format_currency(revenue)}. At {format_percent(multiple)}x revenue multiple, "
        "estimate company value."
    )
    meta = QuestionMeta(base_value=revenue, second_value=multiple, operation="valuation")
    return make_question(ctx, qtype, difficulty, prompt, meta)


@template("blend", difficulties=("medium", "tough"))
def weighted_average(ctx, qtype, difficulty):
    weight = ctx.choice(pools.BLEND_WEIGHTS[qtype][difficulty])
    first = ctx.choice(pools.BLEND_FIRST_RATES[qtype][difficulty])
    second = ctx.choice(pools.BLEND_SECOND_RATES[qtype][difficulty])
    if not ctx.claim(make_signature("blend", qtype[0], weight, first, second)):
        return None

    if qtype == "accurate":
        prompt = (
            f"Segment A is {weight}% of revenue at a {first}% margin; the rest earns "
            f"{format_percent(second)}%. Blended margin (%)?"
        )
    else:
        company = ctx.choice(pools.COMPANY_KINDS)
        prompt = (
            f"A {company} makes {weight}% of sales at {first}% margin and the remainder at "
            f"{format_percent(second)}%. Estimate the blended margin (%)."
        )
    meta = QuestionMeta(
        base_value=first, percent=weight, second_value=second, operation="weighted_average"
    )
    return make_question(ctx, qtype, difficulty, prompt, meta)

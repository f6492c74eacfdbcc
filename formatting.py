# Display helpers for prompt text. Purely cosmetic: nothing here feeds back
# into a question's correct answer.

from __future__ import annotations

from typing import Union

Number = Union[int, float]


def format_number(num: Number) -> str:
    """1234567 -> '1,234,567'; 1234.5 -> '1,234.5' (at most 2 decimals)."""
    if isinstance(num, float) and num.is_integer():
        num = int(num)
    if isinstance(num, int):
        return f"{num:,}"
    s = f"{num:,.2f}"
    return s.rstrip("0").rstrip(".")


def format_percent(pct: Number) -> str:
    """15 -> '15', 2.5 -> '2.5'."""
    return f"{pct:g}"


def format_currency(num: Number) -> str:
    """Abbreviated dollar amounts for large figures, e.g. 4_560_000 -> '$4.6M'."""
    if num >= 1_000_000_000_000:
        return f"${num / 1_000_000_000_000:.1f}T"
    if num >= 1_000_000_000:
        return f"${num / 1_000_000_000:.1f}B"
    if num >= 1_000_000:
        return f"${num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"${num / 1_000:.0f}K"
    return f"${format_number(num)}"


def format_dollars(num: Number) -> str:
    """Full dollar amount with separators, e.g. '$125,000'."""
    return f"${format_number(num)}"

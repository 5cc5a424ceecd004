"""
Utility functions for SplitLedger application
"""
from __future__ import annotations
import os
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from fractions import Fraction
from typing import Union

CENT = Decimal("0.01")


def exact_value(value) -> Fraction:
    """Exact rational for a split value, read from its decimal text"""
    # 33.33 stays 3333/100 rather than its binary float
    return Fraction(str(value))


def parse_date(s: str) -> date:
    """Parse YYYY-MM-DD date string, ignoring any time part of an ISO timestamp"""
    return datetime.strptime(s.strip()[:10], "%Y-%m-%d").date()


def dollars_to_cents(value: Union[str, int, float, Decimal]) -> int:
    """
    Convert a display amount in dollars to integer cents.
    Half cents round away from zero.
    """
    try:
        d = Decimal(str(value).strip().replace(",", "").lstrip("$"))
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}") from None
    if not d.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    return int((d.quantize(CENT, rounding=ROUND_HALF_UP) * 100).to_integral_value())


def format_cents(cents: int) -> str:
    """Format integer cents as a dollar string, e.g. -505 -> '-$5.05'"""
    sign = "-" if cents < 0 else ""
    whole, frac = divmod(abs(cents), 100)
    return f"{sign}${whole}.{frac:02d}"


def cents_to_dollars(cents: int) -> float:
    return cents / 100


def app_dir() -> str:
    """
    Get application data directory: $SPLIT_LEDGER_HOME or ~/.split_ledger
    Creates directory if it doesn't exist.
    """
    path = os.environ.get("SPLIT_LEDGER_HOME") or os.path.expanduser("~/.split_ledger")
    os.makedirs(path, exist_ok=True)
    return path

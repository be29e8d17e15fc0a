"""Number formatting helpers shared by the content formatters."""
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from core.models.content import KPI, Metric


def is_set(value: Any) -> bool:
    """
    Presence test for payload fields.
    
    Lists and mappings count as set even when empty; missing values, zero,
    false and the empty string do not.
    """
    if value is None:
        return False
    if isinstance(value, (list, tuple, dict)):
        return True
    return bool(value)


def num(value: Any) -> str:
    """Render a number the way the dashboard prints it (14.7, 2, -0.4)."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def fixed(value: float, digits: int) -> str:
    """Fixed-point rendering with half-up rounding."""
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def pct(value: Any) -> str:
    """14.7 -> '14.7%'."""
    return f"{num(value)}%"


def pct_or_na(value: Any) -> str:
    return pct(value) if value is not None else "N/A"


def signed_pct(value: Any) -> str:
    """Prefix positive values with '+': 3.2 -> '+3.2%', -0.4 -> '-0.4%'."""
    return f"{'+' if value > 0 else ''}{num(value)}%"


def plus_pct(value: Any) -> str:
    """Always prefix '+', for figures that are positive by construction."""
    return f"+{num(value)}%"


def thousands(amount: float, digits: int = 0) -> str:
    """42300 -> '$42K'; with digits=1, 7100 -> '$7.1K'."""
    return f"${fixed(amount / 1000, digits)}K"


def millions(amount: float, digits: int = 1) -> str:
    """2800000 -> '$2.8M'."""
    return f"${fixed(amount / 1000000, digits)}M"


def grouped(amount: Any) -> str:
    """1847 -> '1,847'."""
    if isinstance(amount, float) and not amount.is_integer():
        return f"{amount:,}"
    return f"{int(amount):,}"


def short_date(iso_date: str) -> str:
    """'2024-08-15' -> '8/15/2024'."""
    parsed = date.fromisoformat(iso_date)
    return f"{parsed.month}/{parsed.day}/{parsed.year}"


def kpi(label: str, value: str, change: str, is_positive: bool) -> KPI:
    return KPI(label=label, value=value, change=change, is_positive=bool(is_positive))


def metric(label: str, value: str, subtext: Optional[str] = None) -> Metric:
    return Metric(label=label, value=value, subtext=subtext)


def gt(value: Optional[float], other: Optional[float]) -> bool:
    """value > other, False when either side is missing."""
    if value is None or other is None:
        return False
    return value > other


def lt(value: Optional[float], other: Optional[float]) -> bool:
    """value < other, False when either side is missing."""
    if value is None or other is None:
        return False
    return value < other


def text_or_na(value: Any) -> str:
    return num(value) if value is not None else "N/A"


def ordinal(value: int) -> str:
    """82 -> '82nd', 11 -> '11th'."""
    number = int(value)
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"

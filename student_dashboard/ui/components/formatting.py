"""
Utility helpers for formatting numbers, dates, and contact details.
"""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd

MISSING = "–"


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if value is None:
        return MISSING
    try:
        return f"{value:,.{decimals}f}"
    except (TypeError, ValueError):
        return MISSING


def format_score(value: Optional[float]) -> str:
    """Whole scores without decimals, fractional ones with up to two."""
    if value is None:
        return MISSING
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return MISSING
    if numeric.is_integer():
        return format_number(numeric, 0)
    return f"{numeric:,.2f}".rstrip("0").rstrip(".")


def _parse_timestamp(value: Any) -> Optional[pd.Timestamp]:
    if value is None or value == "":
        return None
    try:
        parsed = pd.to_datetime(value, utc=True)
    except (TypeError, ValueError):
        return None
    if pd.isna(parsed):
        return None
    return parsed


def format_joined_date(value: Any, long_month: bool = False, fallback: str = "N/A") -> str:
    """Render a creation timestamp as 'Oct 5, 2024' (or 'October 5, 2024')."""
    parsed = _parse_timestamp(value)
    if parsed is None:
        return fallback
    month = parsed.strftime("%B" if long_month else "%b")
    return f"{month} {parsed.day}, {parsed.year}"


def format_phone(phone: Optional[str], fallback: str = "No phone number") -> str:
    if phone is None or not str(phone).strip():
        return fallback
    return str(phone)


def avatar_initial(name: Optional[str]) -> str:
    if not name or not name.strip():
        return "?"
    return name.strip()[0].upper()

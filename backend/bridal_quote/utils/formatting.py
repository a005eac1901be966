from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any


def format_date_for_display(value: Any) -> str:
    """Render an ISO date (or datetime) as ``DD/MM/YYYY``.

    Unparseable strings are returned unchanged so a typo in a date never
    hides the line it annotates.
    """
    if not value:
        return ""
    if isinstance(value, datetime):
        return value.strftime("%d/%m/%Y")
    if isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text[:10]).strftime("%d/%m/%Y")
    except ValueError:
        return text


def format_quantity(value: Decimal | int | float) -> str:
    """``Decimal("2.0")`` -> ``"2"``, ``Decimal("1.50")`` -> ``"1.5"``."""
    dec = value if isinstance(value, Decimal) else Decimal(str(value))
    if dec == dec.to_integral_value():
        return str(int(dec))
    return f"{dec.normalize():f}"

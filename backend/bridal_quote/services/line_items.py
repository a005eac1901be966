"""Helpers shared by the per-unit and flat-rate engines.

Both engines produce the same :class:`CalculationResult` shape, so the
pre-wedding lines, the per-day breakdown, the flattened display lines and
the final packaging live here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List, Optional

from ..schemas.quote import (
    CalculationLine,
    CalculationResult,
    DayBreakdown,
    DayDetails,
    ServiceForm,
    ServiceType,
)
from ..utils.formatting import format_date_for_display

TRIAL_TRAVEL_LABEL = "Trial travel fee"


def sum_totals(lines: Iterable[CalculationLine]) -> Decimal:
    return sum((line.total for line in lines), Decimal("0"))


def trial_travel_line(form: ServiceForm) -> Optional[CalculationLine]:
    if form.trial_travel_enabled and form.trial_travel_fee > 0:
        return CalculationLine(
            label=TRIAL_TRAVEL_LABEL,
            meta=form.trial_venue,
            total=form.trial_travel_fee,
        )
    return None


def make_day_breakdown(date: str, lines: List[CalculationLine], day: DayDetails) -> DayBreakdown:
    return DayBreakdown(
        date=date,
        lines=list(lines),
        subtotal=sum_totals(lines),
        venue=day.beauty_venue or None,
    )


def _dated_meta(date: str, meta: Optional[str]) -> Optional[str]:
    shown = format_date_for_display(date)
    if meta:
        return f"{shown or 'Day'} • {meta}"
    return shown or None


def flatten_lines(
    global_lines: List[CalculationLine],
    day_breakdowns: List[DayBreakdown],
) -> List[CalculationLine]:
    """Globals first, then every day's lines in date order, tagged with the date."""
    flat = list(global_lines)
    for breakdown in day_breakdowns:
        for line in breakdown.lines:
            flat.append(line.model_copy(update={"meta": _dated_meta(breakdown.date, line.meta)}))
    return flat


def package_result(
    form: ServiceForm,
    service_type: ServiceType,
    global_lines: List[CalculationLine],
    day_breakdowns: List[DayBreakdown],
    wedding_dates: List[str],
) -> CalculationResult:
    subtotal = sum((d.subtotal for d in day_breakdowns), Decimal("0")) + sum_totals(global_lines)
    return CalculationResult(
        artist_name=form.artist,
        service_type=service_type,
        lines=flatten_lines(global_lines, day_breakdowns),
        subtotal=subtotal,
        payments=[],
        total_paid=Decimal("0"),
        due=subtotal,
        wedding_dates=list(wedding_dates),
        venue_notes=form.trial_venue or "",
        day_breakdowns=day_breakdowns,
    )

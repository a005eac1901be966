from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, List

from bridal_quote.schemas.quote import (
    CalculationLine,
    CalculationResult,
    DayBreakdown,
    DayDetails,
    ServiceForm,
    ServicePricing,
    ServiceType,
)
from bridal_quote.services.line_items import (
    make_day_breakdown,
    package_result,
    trial_travel_line,
)
from bridal_quote.services.travel_fees import travel_fee_lines
from bridal_quote.utils.formatting import format_quantity

logger = logging.getLogger(__name__)

BRIDAL_LABELS: Dict[ServiceType, str] = {
    ServiceType.MAKEUP: "Bridal MU",
    ServiceType.HAIR: "Bridal H",
}


def scheduled_return_allowed(day: DayDetails) -> bool:
    """A scheduled return only happens on days without a travel fee."""
    return day.travel_fee == 0 and day.scheduled_return


def build_global_lines(form: ServiceForm, pricing: ServicePricing) -> List[CalculationLine]:
    lines: List[CalculationLine] = []
    if form.trials > 0:
        lines.append(
            CalculationLine(
                label="Trials",
                qty=Decimal(form.trials),
                unit=pricing.trial_unit,
                total=form.trials * pricing.trial_unit,
            )
        )
    travel = trial_travel_line(form)
    if travel is not None:
        lines.append(travel)
    return lines


def build_day_lines(
    day: DayDetails,
    pricing: ServicePricing,
    service_type: ServiceType,
) -> List[CalculationLine]:
    lines: List[CalculationLine] = []

    if day.guests > 0:
        lines.append(
            CalculationLine(
                label="Guests",
                qty=Decimal(day.guests),
                unit=pricing.guest_unit,
                total=day.guests * pricing.guest_unit,
            )
        )

    # Charged every day, whatever else is toggled
    lines.append(
        CalculationLine(
            label=BRIDAL_LABELS[service_type],
            qty=Decimal(1),
            unit=pricing.bridal_unit,
            total=pricing.bridal_unit,
        )
    )

    allowed = scheduled_return_allowed(day)
    if allowed and day.scheduled_return_bride:
        lines.append(
            CalculationLine(
                label="scheduled return (bride)",
                qty=Decimal(1),
                unit=pricing.scheduled_return_bride,
                total=pricing.scheduled_return_bride,
            )
        )
    # Guests only return together with the bride
    if allowed and day.scheduled_return_bride and day.scheduled_return_guests > 0:
        lines.append(
            CalculationLine(
                label="scheduled return (guests)",
                qty=Decimal(day.scheduled_return_guests),
                unit=pricing.scheduled_return_guest_unit,
                total=day.scheduled_return_guests * pricing.scheduled_return_guest_unit,
            )
        )

    lines.extend(travel_fee_lines(day.travel_fee, day.num_people, day.num_cars))

    if day.exclusivity:
        lines.append(CalculationLine(label="Exclusivity fee", total=pricing.exclusivity_fee))

    if day.touchup_hours > 0:
        lines.append(
            CalculationLine(
                label="Touch-ups",
                meta=f"{format_quantity(day.touchup_hours)}h",
                qty=day.touchup_hours,
                unit=pricing.touchup_hourly,
                total=day.touchup_hours * pricing.touchup_hourly,
            )
        )

    return lines


def calculate_service(
    form: ServiceForm,
    pricing: ServicePricing,
    wedding_dates: List[str],
    service_type: ServiceType,
) -> CalculationResult:
    """Price one service (makeup or hair) against its per-unit rate card."""
    global_lines = build_global_lines(form, pricing)

    day_breakdowns: List[DayBreakdown] = []
    for idx, date in enumerate(wedding_dates):
        day = form.day(idx)
        day_breakdowns.append(make_day_breakdown(date, build_day_lines(day, pricing, service_type), day))

    result = package_result(form, service_type, global_lines, day_breakdowns, wedding_dates)
    logger.debug(
        "Per-unit service priced",
        extra={
            "service_type": service_type.value,
            "artist": form.artist,
            "days": len(day_breakdowns),
            "subtotal": float(result.subtotal),
        },
    )
    return result

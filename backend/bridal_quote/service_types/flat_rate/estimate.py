from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from bridal_quote.schemas.quote import (
    CalculationLine,
    CalculationResult,
    DayBreakdown,
    ServiceForm,
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


@dataclass(frozen=True)
class FlatRateCard:
    """Bundled package: the first day's base price covers the inclusions."""

    base: Decimal
    included_trials: int
    included_guests: int
    included_hours: int
    extra_trial: Decimal
    extra_day: Decimal
    extra_guest: Decimal
    extra_hour: Decimal
    # Deposit per artist beyond the main one; noted on the quote, not charged
    additional_artist_deposit: Decimal


AGNE_FLAT_RATE = FlatRateCard(
    base=Decimal("1400"),
    included_trials=1,
    included_guests=3,
    included_hours=8,
    extra_trial=Decimal("175"),
    extra_day=Decimal("250"),
    extra_guest=Decimal("100"),
    extra_hour=Decimal("50"),
    additional_artist_deposit=Decimal("100"),
)


def flat_rate_trial_lines(trials: int, rates: FlatRateCard) -> List[CalculationLine]:
    extra = max(0, int(trials) - rates.included_trials)
    if extra <= 0:
        return []
    return [
        CalculationLine(
            label="Extra trials",
            qty=Decimal(extra),
            unit=rates.extra_trial,
            total=extra * rates.extra_trial,
        )
    ]


def additional_artist_note(num_people: int, rates: FlatRateCard) -> Optional[str]:
    extra = max(0, int(num_people) - 1)
    if extra <= 0:
        return None
    return f"{extra} additional artist(s) require €{format_quantity(rates.additional_artist_deposit)} deposit each"


def flat_rate_day_lines(
    trials: int,
    day_index: int,
    guests: int,
    touchup_hours: Decimal,
    rates: FlatRateCard,
    num_people: int = 1,
) -> List[CalculationLine]:
    """Lines for one wedding date under the flat rate.

    ``touchup_hours`` counts hours beyond the package allowance; on later
    days nothing is included, so every guest is extra. ``trials`` only
    feeds the package description on the first day, extra trials are
    charged once per quote by :func:`flat_rate_trial_lines`. Artists beyond
    the main one are noted on the day's first line with their deposit.
    """
    lines: List[CalculationLine] = []
    deposit = additional_artist_note(num_people, rates)

    if day_index == 0:
        covered = [f"bridal + up to {rates.included_guests} guests", f"{rates.included_hours}h"]
        included_trials = min(max(0, int(trials)), rates.included_trials)
        if included_trials:
            covered.append(f"{included_trials} trial")
        lines.append(
            CalculationLine(
                label="Flat rate package",
                qty=Decimal(1),
                unit=rates.base,
                total=rates.base,
                meta="; ".join(filter(None, [", ".join(covered), deposit])),
            )
        )
        extra_guests = max(0, int(guests) - rates.included_guests)
    else:
        lines.append(
            CalculationLine(
                label="Extra day (bride)",
                qty=Decimal(1),
                unit=rates.extra_day,
                total=rates.extra_day,
                meta=deposit,
            )
        )
        extra_guests = max(0, int(guests))

    if extra_guests > 0:
        lines.append(
            CalculationLine(
                label="Extra guests",
                qty=Decimal(extra_guests),
                unit=rates.extra_guest,
                total=extra_guests * rates.extra_guest,
            )
        )

    hours = Decimal(str(touchup_hours or 0))
    if hours > 0:
        lines.append(
            CalculationLine(
                label="Extra hours",
                meta=f"{format_quantity(hours)}h",
                qty=hours,
                unit=rates.extra_hour,
                total=hours * rates.extra_hour,
            )
        )

    return lines


def calculate_flat_rate_service(
    form: ServiceForm,
    wedding_dates: List[str],
    rates: FlatRateCard,
    service_type: ServiceType = ServiceType.HAIR,
) -> CalculationResult:
    """Price a flat-rate artist; same result shape as the per-unit engine."""
    global_lines = flat_rate_trial_lines(form.trials, rates)
    travel = trial_travel_line(form)
    if travel is not None:
        global_lines.append(travel)

    day_breakdowns: List[DayBreakdown] = []
    for idx, date in enumerate(wedding_dates):
        day = form.day(idx)
        lines = flat_rate_day_lines(
            form.trials, idx, day.guests, day.touchup_hours, rates, num_people=day.num_people
        )
        lines.extend(travel_fee_lines(day.travel_fee, day.num_people, day.num_cars))
        day_breakdowns.append(make_day_breakdown(date, lines, day))

    result = package_result(form, service_type, global_lines, day_breakdowns, wedding_dates)
    logger.debug(
        "Flat-rate service priced",
        extra={
            "service_type": service_type.value,
            "artist": form.artist,
            "days": len(day_breakdowns),
            "subtotal": float(result.subtotal),
        },
    )
    return result

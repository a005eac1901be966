"""Quote calculator.

Pure function from (service selection, forms, rate cards, wedding dates) to
per-service calculation results plus a grand summary. Makeup and hair share
one per-unit engine (:mod:`bridal_quote.service_types.per_unit`); this module
only decides which services run and sums them up.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ..schemas.quote import (
    CalculationResult,
    DayTotal,
    DefaultPrices,
    GrandSummary,
    QuoteCalculation,
    ServiceChoice,
    ServiceForm,
    ServiceType,
)
from ..service_types.per_unit import calculate_service


def calculate_grand_summary(calculations: Iterable[CalculationResult]) -> GrandSummary:
    calcs = list(calculations)
    grand_total = sum((c.subtotal for c in calcs), Decimal("0"))
    total_paid = sum((c.total_paid for c in calcs), Decimal("0"))
    return GrandSummary(
        grand_total=grand_total,
        total_paid=total_paid,
        total_due=max(Decimal("0"), grand_total - total_paid),
    )


def calculate_quote(
    service_choice: ServiceChoice,
    makeup_form: Optional[ServiceForm],
    hair_form: Optional[ServiceForm],
    prices: DefaultPrices,
    wedding_dates: List[str],
) -> QuoteCalculation:
    """Price every selected service that has a form, makeup first."""
    calculations: List[CalculationResult] = []

    if service_choice.makeup and makeup_form is not None:
        calculations.append(
            calculate_service(makeup_form, prices.makeup, wedding_dates, ServiceType.MAKEUP)
        )

    if service_choice.hair and hair_form is not None:
        calculations.append(
            calculate_service(hair_form, prices.hair, wedding_dates, ServiceType.HAIR)
        )

    return QuoteCalculation(
        calculations=calculations,
        grand_summary=calculate_grand_summary(calculations),
    )


def compute_per_day_totals(calculations: Iterable[CalculationResult]) -> List[DayTotal]:
    """Sum each date's subtotal across services, in first-seen date order."""
    totals: Dict[str, Decimal] = {}
    for calc in calculations:
        for breakdown in calc.day_breakdowns:
            totals[breakdown.date] = totals.get(breakdown.date, Decimal("0")) + breakdown.subtotal
    return [DayTotal(date=date, total=total) for date, total in totals.items()]

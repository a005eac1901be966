"""Build a full quote from form state.

Resolves the rate cards, dispatches every selected service to the per-unit
or flat-rate engine depending on the artist, re-attaches payments recorded
against the previous calculation and derives the per-day totals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..schemas.quote import (
    CalculationResult,
    DayTotal,
    DefaultPrices,
    GrandSummary,
    PriceMode,
    ServiceChoice,
    ServiceForm,
    ServiceType,
)
from ..service_types.flat_rate import calculate_flat_rate_service
from ..service_types.per_unit import calculate_service
from .artist_pricing import FlatRatePricing, resolve_artist_pricing, resolve_prices
from .payments import preserve_payments
from .quote_calculator import calculate_grand_summary, compute_per_day_totals

logger = logging.getLogger(__name__)


@dataclass
class BuiltQuote:
    calculations: List[CalculationResult]
    grand_summary: GrandSummary
    per_day_totals: List[DayTotal]
    prices: DefaultPrices
    price_mode: PriceMode


def price_service(
    service_type: ServiceType,
    form: ServiceForm,
    prices: DefaultPrices,
    wedding_dates: List[str],
) -> CalculationResult:
    pricing = resolve_artist_pricing(service_type, form.artist, prices)
    if isinstance(pricing, FlatRatePricing):
        return calculate_flat_rate_service(form, wedding_dates, pricing.card, service_type)
    return calculate_service(form, pricing.card, wedding_dates, service_type)


def build_quote(
    service_choice: ServiceChoice,
    wedding_dates: List[str],
    makeup_form: Optional[ServiceForm] = None,
    hair_form: Optional[ServiceForm] = None,
    price_mode: PriceMode = PriceMode.DEFAULT,
    custom_prices: Optional[DefaultPrices] = None,
    previous: Iterable[CalculationResult] = (),
) -> BuiltQuote:
    prices = resolve_prices(
        price_mode,
        makeup_artist=makeup_form.artist if makeup_form else None,
        hair_artist=hair_form.artist if hair_form else None,
        custom_prices=custom_prices,
    )

    calculations: List[CalculationResult] = []
    forms = {ServiceType.MAKEUP: makeup_form, ServiceType.HAIR: hair_form}
    for service_type in service_choice.selected():
        form = forms[service_type]
        if form is None:
            continue
        calculations.append(price_service(service_type, form, prices, wedding_dates))

    calculations = preserve_payments(previous, calculations)
    summary = calculate_grand_summary(calculations)
    logger.info(
        "Quote built: services=%s days=%d grand_total=%s",
        [c.service_type.value for c in calculations],
        len(wedding_dates),
        summary.grand_total,
    )
    return BuiltQuote(
        calculations=calculations,
        grand_summary=summary,
        per_day_totals=compute_per_day_totals(calculations),
        prices=prices,
        price_mode=price_mode,
    )

from fastapi import APIRouter, status
import logging

from ..core.config import settings
from ..schemas.quote import DefaultPrices, ServiceType
from ..schemas.quote_request import (
    ArtistRead,
    ArtistRoster,
    PaymentsSummaryRequest,
    PaymentsSummaryResponse,
    QuoteCalculationRequest,
    QuoteCalculationResponse,
    QuoteValidationRequest,
    QuoteValidationResponse,
)
from ..services.artist_pricing import DEFAULT_PRICES, pricing_scheme_for, roster
from ..services.payments import summarize
from ..services.quote_builder import build_quote
from ..services.validation import validate_quote_form
from ..utils import error_response

router = APIRouter(tags=["quotes"])
logger = logging.getLogger(__name__)


@router.get("/pricing/defaults", response_model=DefaultPrices)
def read_default_prices():
    return DEFAULT_PRICES


@router.get("/artists", response_model=ArtistRoster)
def list_artists():
    def _entries(service_type: ServiceType) -> list[ArtistRead]:
        return [
            ArtistRead(
                name=name,
                service_type=service_type,
                pricing_scheme=pricing_scheme_for(service_type, name),
            )
            for name in roster(service_type)
        ]

    return ArtistRoster(makeup=_entries(ServiceType.MAKEUP), hair=_entries(ServiceType.HAIR))


@router.post("/quotes/calculate", response_model=QuoteCalculationResponse)
def calculate_quote(payload: QuoteCalculationRequest):
    """Price the form state and return itemised results per service.

    Payments present on ``previous_calculations`` are carried over to the
    matching artist/service so recalculating never loses recorded payments.
    """
    if not payload.wedding_dates:
        raise error_response(
            "At least one wedding date is required",
            {"wedding_dates": "required"},
            status.HTTP_422_UNPROCESSABLE_ENTITY,
        )
    built = build_quote(
        payload.service_choice,
        payload.wedding_dates,
        makeup_form=payload.makeup_form,
        hair_form=payload.hair_form,
        price_mode=payload.price_mode,
        custom_prices=payload.custom_prices,
        previous=payload.previous_calculations,
    )
    logger.info(
        "Calculated quote for %d service(s) over %d day(s)",
        len(built.calculations),
        len(payload.wedding_dates),
    )
    return QuoteCalculationResponse(
        calculations=built.calculations,
        grand_summary=built.grand_summary,
        per_day_totals=built.per_day_totals,
        prices=built.prices,
        price_mode=built.price_mode,
        currency=settings.DEFAULT_CURRENCY,
    )


@router.post("/quotes/validate", response_model=QuoteValidationResponse)
def validate_quote(payload: QuoteValidationRequest):
    issues = validate_quote_form(
        payload.service_choice,
        payload.wedding_dates,
        makeup_form=payload.makeup_form,
        hair_form=payload.hair_form,
    )
    return QuoteValidationResponse(valid=not issues, issues=issues)


@router.post("/quotes/payments", response_model=PaymentsSummaryResponse)
def summarize_payments(payload: PaymentsSummaryRequest):
    """Recompute paid/due per service and the grand summary after payment edits."""
    calculations, summary = summarize(payload.calculations)
    return PaymentsSummaryResponse(
        calculations=calculations,
        grand_summary=summary,
        currency=settings.DEFAULT_CURRENCY,
    )

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .quote import (
    CalculationResult,
    DayTotal,
    DefaultPrices,
    GrandSummary,
    PriceMode,
    PricingScheme,
    ServiceChoice,
    ServiceForm,
    ServiceType,
)


class QuoteCalculationRequest(BaseModel):
    service_choice: ServiceChoice
    wedding_dates: List[str]
    makeup_form: Optional[ServiceForm] = None
    hair_form: Optional[ServiceForm] = None
    price_mode: PriceMode = PriceMode.DEFAULT
    custom_prices: Optional[DefaultPrices] = None
    # Results from the previous calculation; their payments are carried over
    previous_calculations: List[CalculationResult] = Field(default_factory=list)


class QuoteCalculationResponse(BaseModel):
    calculations: List[CalculationResult]
    grand_summary: GrandSummary
    per_day_totals: List[DayTotal]
    prices: DefaultPrices
    price_mode: PriceMode
    currency: str


class QuoteValidationRequest(BaseModel):
    service_choice: ServiceChoice
    wedding_dates: List[str] = Field(default_factory=list)
    makeup_form: Optional[ServiceForm] = None
    hair_form: Optional[ServiceForm] = None


class ValidationIssue(BaseModel):
    field: str
    message: str
    service_type: Optional[ServiceType] = None
    day_index: Optional[int] = None


class QuoteValidationResponse(BaseModel):
    valid: bool
    issues: List[ValidationIssue]


class PaymentsSummaryRequest(BaseModel):
    calculations: List[CalculationResult]


class PaymentsSummaryResponse(BaseModel):
    calculations: List[CalculationResult]
    grand_summary: GrandSummary
    currency: str


class ArtistRead(BaseModel):
    name: str
    service_type: ServiceType
    pricing_scheme: PricingScheme


class ArtistRoster(BaseModel):
    makeup: List[ArtistRead]
    hair: List[ArtistRead]

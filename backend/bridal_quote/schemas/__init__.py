from .quote import (
    CalculationLine,
    CalculationResult,
    DayBreakdown,
    DayDetails,
    DayTotal,
    DefaultPrices,
    GrandSummary,
    HairArtist,
    MakeupArtist,
    Payment,
    PriceMode,
    PricingScheme,
    QuoteCalculation,
    ServiceChoice,
    ServiceForm,
    ServicePricing,
    ServiceType,
    day_defaults,
)
from .quote_request import (
    ArtistRead,
    ArtistRoster,
    PaymentsSummaryRequest,
    PaymentsSummaryResponse,
    QuoteCalculationRequest,
    QuoteCalculationResponse,
    QuoteValidationRequest,
    QuoteValidationResponse,
    ValidationIssue,
)

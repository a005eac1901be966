from __future__ import annotations

import enum
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class ServiceType(str, enum.Enum):
    MAKEUP = "makeup"
    HAIR = "hair"


class MakeupArtist(str, enum.Enum):
    LOLA = "Lola"
    INES = "Inês"
    TERESA = "Teresa"
    MIGUEL = "Miguel"
    ANA_ROMA = "Ana Roma"
    ANA_NEVES = "Ana Neves"
    RITA = "Rita"
    SARA = "Sara"
    SOFIA = "Sofia"
    FILIPA = "Filipa"


class HairArtist(str, enum.Enum):
    AGNE = "Agne"
    LILIA = "Lília"
    ANDREIA = "Andreia"
    ERIC = "Eric"
    OKSANA = "Oksana"
    JOANA = "Joana"
    OLGA_H = "Olga H"


class PriceMode(str, enum.Enum):
    DEFAULT = "default"
    CUSTOM = "custom"


class PricingScheme(str, enum.Enum):
    PER_UNIT = "per_unit"
    FLAT_RATE = "flat_rate"


class ServiceChoice(BaseModel):
    makeup: bool = False
    hair: bool = False

    def selected(self) -> List[ServiceType]:
        out: List[ServiceType] = []
        if self.makeup:
            out.append(ServiceType.MAKEUP)
        if self.hair:
            out.append(ServiceType.HAIR)
        return out


class ServicePricing(BaseModel):
    """Rate card for one service; never mutated during a calculation."""

    trial_unit: Decimal = Field(ge=0)
    bridal_unit: Decimal = Field(ge=0)
    guest_unit: Decimal = Field(ge=0)
    scheduled_return_bride: Decimal = Field(ge=0)
    scheduled_return_guest_unit: Decimal = Field(ge=0)
    touchup_hourly: Decimal = Field(ge=0)
    exclusivity_fee: Decimal = Field(ge=0)

    model_config = {"frozen": True}


class DefaultPrices(BaseModel):
    makeup: ServicePricing
    hair: ServicePricing

    model_config = {"frozen": True}

    def for_service(self, service_type: ServiceType) -> ServicePricing:
        return self.makeup if service_type == ServiceType.MAKEUP else self.hair


class DayDetails(BaseModel):
    scheduled_return: bool = False
    scheduled_return_bride: bool = False
    scheduled_return_guests: int = Field(0, ge=0)
    guests: int = Field(0, ge=0)
    travel_fee: Decimal = Field(Decimal("0"), ge=0)
    # Total people travelling, main artist included
    num_people: int = Field(1, ge=0)
    num_cars: int = Field(1, ge=0)
    exclusivity: bool = False
    touchup_hours: Decimal = Field(Decimal("0"), ge=0)
    beauty_venue: str = ""


def day_defaults() -> DayDetails:
    """Details assumed for a wedding date the form has no entry for."""
    return DayDetails(
        scheduled_return=False,
        scheduled_return_bride=False,
        scheduled_return_guests=0,
        guests=0,
        travel_fee=Decimal("0"),
        num_people=1,
        num_cars=1,
        exclusivity=False,
        touchup_hours=Decimal("0"),
        beauty_venue="",
    )


class ServiceForm(BaseModel):
    artist: str = ""
    trials: int = Field(0, ge=0)
    trial_travel_enabled: bool = False
    trial_venue: str = ""
    trial_travel_fee: Decimal = Field(Decimal("0"), ge=0)
    per_day: List[DayDetails] = Field(default_factory=list)

    def day(self, index: int) -> DayDetails:
        if 0 <= index < len(self.per_day):
            return self.per_day[index]
        return day_defaults()


class CalculationLine(BaseModel):
    label: str
    qty: Optional[Decimal] = None
    unit: Optional[Decimal] = None
    total: Decimal
    meta: Optional[str] = None

    model_config = {"frozen": True}


class DayBreakdown(BaseModel):
    date: str
    lines: List[CalculationLine] = Field(default_factory=list)
    subtotal: Decimal
    venue: Optional[str] = None


class Payment(BaseModel):
    id: str
    date: str
    occasion: str = ""
    amount: Decimal = Field(Decimal("0"), ge=0)


class CalculationResult(BaseModel):
    artist_name: str
    service_type: ServiceType
    # All days flattened (globals first) for table/export rendering
    lines: List[CalculationLine] = Field(default_factory=list)
    subtotal: Decimal
    payments: List[Payment] = Field(default_factory=list)
    total_paid: Decimal = Decimal("0")
    due: Decimal
    wedding_dates: List[str] = Field(default_factory=list)
    venue_notes: str = ""
    day_breakdowns: List[DayBreakdown] = Field(default_factory=list)


class GrandSummary(BaseModel):
    grand_total: Decimal
    total_paid: Decimal
    total_due: Decimal


class QuoteCalculation(BaseModel):
    calculations: List[CalculationResult] = Field(default_factory=list)
    grand_summary: GrandSummary


class DayTotal(BaseModel):
    date: str
    total: Decimal

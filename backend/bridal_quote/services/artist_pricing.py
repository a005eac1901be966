"""Rate cards and the per-artist choice of pricing scheme.

Pricing is resolved once, before any engine runs: the caller picks the
default, artist-specific or user-edited card for each service, and the
artist identity decides whether the per-unit engine or a flat-rate
package prices the service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..core.config import settings
from ..schemas.quote import (
    DefaultPrices,
    HairArtist,
    MakeupArtist,
    PriceMode,
    PricingScheme,
    ServicePricing,
    ServiceType,
)
from ..service_types.flat_rate import AGNE_FLAT_RATE, FlatRateCard

logger = logging.getLogger(__name__)


DEFAULT_PRICES = DefaultPrices(
    makeup=ServicePricing(
        trial_unit=80,
        bridal_unit=120,
        guest_unit=60,
        scheduled_return_bride=80,
        scheduled_return_guest_unit=40,
        touchup_hourly=50,
        exclusivity_fee=200,
    ),
    hair=ServicePricing(
        trial_unit=70,
        bridal_unit=100,
        guest_unit=50,
        scheduled_return_bride=70,
        scheduled_return_guest_unit=35,
        touchup_hourly=45,
        exclusivity_fee=150,
    ),
)

DEFAULT_ARTISTS: Dict[ServiceType, str] = {
    ServiceType.MAKEUP: MakeupArtist.LOLA.value,
    ServiceType.HAIR: HairArtist.AGNE.value,
}

FLAT_RATE_ARTISTS: Dict[Tuple[ServiceType, str], FlatRateCard] = {
    (ServiceType.HAIR, HairArtist.AGNE.value): AGNE_FLAT_RATE,
}


@dataclass(frozen=True)
class PerUnitPricing:
    card: ServicePricing
    scheme: PricingScheme = PricingScheme.PER_UNIT


@dataclass(frozen=True)
class FlatRatePricing:
    card: FlatRateCard
    scheme: PricingScheme = PricingScheme.FLAT_RATE


ArtistPricing = Union[PerUnitPricing, FlatRatePricing]


def roster(service_type: ServiceType) -> List[str]:
    enum_cls = MakeupArtist if service_type == ServiceType.MAKEUP else HairArtist
    return [a.value for a in enum_cls]


def pricing_scheme_for(service_type: ServiceType, artist: Optional[str]) -> PricingScheme:
    if (service_type, artist or "") in FLAT_RATE_ARTISTS:
        return PricingScheme.FLAT_RATE
    return PricingScheme.PER_UNIT


def artist_rate_card(
    service_type: ServiceType,
    artist: Optional[str],
    defaults: DefaultPrices = DEFAULT_PRICES,
    overrides: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> ServicePricing:
    """Return the artist's card: the service default with configured fields replaced."""
    base = defaults.for_service(service_type)
    table = settings.ARTIST_RATE_CARDS if overrides is None else overrides
    patch = table.get(f"{service_type.value}:{artist}") if artist else None
    if not patch:
        return base
    logger.debug(
        "Artist rate card override",
        extra={"service_type": service_type.value, "artist": artist, "fields": sorted(patch)},
    )
    return ServicePricing.model_validate({**base.model_dump(), **dict(patch)})


def resolve_prices(
    price_mode: PriceMode = PriceMode.DEFAULT,
    makeup_artist: Optional[str] = None,
    hair_artist: Optional[str] = None,
    custom_prices: Optional[DefaultPrices] = None,
    overrides: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> DefaultPrices:
    """Pick the rate cards a quote is computed with.

    Custom prices win outright when the user switched to custom mode;
    otherwise each service gets its artist's card.
    """
    if price_mode == PriceMode.CUSTOM and custom_prices is not None:
        return custom_prices
    return DefaultPrices(
        makeup=artist_rate_card(ServiceType.MAKEUP, makeup_artist, overrides=overrides),
        hair=artist_rate_card(ServiceType.HAIR, hair_artist, overrides=overrides),
    )


def resolve_artist_pricing(
    service_type: ServiceType,
    artist: Optional[str],
    prices: DefaultPrices,
) -> ArtistPricing:
    flat = FLAT_RATE_ARTISTS.get((service_type, artist or ""))
    if flat is not None:
        return FlatRatePricing(card=flat)
    return PerUnitPricing(card=prices.for_service(service_type))

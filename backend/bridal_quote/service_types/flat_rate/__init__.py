from .estimate import (
    AGNE_FLAT_RATE,
    FlatRateCard,
    additional_artist_note,
    calculate_flat_rate_service,
    flat_rate_day_lines,
    flat_rate_trial_lines,
)

__all__ = [
    "AGNE_FLAT_RATE",
    "FlatRateCard",
    "additional_artist_note",
    "calculate_flat_rate_service",
    "flat_rate_day_lines",
    "flat_rate_trial_lines",
]

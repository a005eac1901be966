from .estimate import (
    BRIDAL_LABELS,
    build_day_lines,
    build_global_lines,
    calculate_service,
    scheduled_return_allowed,
)

__all__ = [
    "BRIDAL_LABELS",
    "build_day_lines",
    "build_global_lines",
    "calculate_service",
    "scheduled_return_allowed",
]

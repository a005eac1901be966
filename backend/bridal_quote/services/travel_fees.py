"""Split a day's travel fee between cars and assistants.

The travel fee entered on a day is the cost of one car making the trip. Each
car is charged the full fee (never more cars than people travelling); every
person travelling without a car of their own is charged a reduced assistant
fee of 35% of the car fee. Scheduled returns are void whenever this fee is
positive, which the per-unit engine enforces on its side.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from ..schemas.quote import CalculationLine

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")

ASSISTANT_TRAVEL_RATE = Decimal("0.35")
ASSISTANT_TRAVEL_META = "35% × (people − cars)"

CARS_LABEL = "Travelling fee (cars)"
ASSISTANTS_LABEL = "Assistant travel fee"


@dataclass(frozen=True)
class TravelSplit:
    people: int
    cars: int
    car_count: int
    assistants: int


def split_travel(num_people: int, num_cars: int) -> TravelSplit:
    people = max(1, int(num_people or 1))
    cars = max(0, int(num_cars or 0))
    return TravelSplit(
        people=people,
        cars=cars,
        car_count=min(cars, people),
        assistants=max(0, people - cars),
    )


def travel_fee_lines(travel_fee: Decimal, num_people: int, num_cars: int) -> List[CalculationLine]:
    """Return the cars line and, when assistants travel, the assistant line."""
    if travel_fee <= 0:
        return []

    split = split_travel(num_people, num_cars)
    lines: List[CalculationLine] = []

    cars_total = travel_fee * split.car_count
    if cars_total > 0:
        lines.append(
            CalculationLine(
                label=CARS_LABEL,
                qty=Decimal(split.car_count),
                unit=travel_fee,
                total=cars_total,
            )
        )

    # Total comes from the unrounded unit; only the shown values are rounded
    assistant_unit = ASSISTANT_TRAVEL_RATE * travel_fee
    assistant_total = assistant_unit * split.assistants
    if assistant_total > 0:
        lines.append(
            CalculationLine(
                label=ASSISTANTS_LABEL,
                meta=ASSISTANT_TRAVEL_META,
                qty=Decimal(split.assistants),
                unit=assistant_unit.quantize(_CENT, rounding=ROUND_HALF_UP),
                total=assistant_total.quantize(_CENT, rounding=ROUND_HALF_UP),
            )
        )

    logger.debug(
        "Travel fee split",
        extra={
            "travel_fee": float(travel_fee),
            "car_count": split.car_count,
            "assistants": split.assistants,
        },
    )
    return lines

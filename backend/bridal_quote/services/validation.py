"""Submission checks for the quote form.

These block a quote from being submitted; the calculator itself never
rejects input and simply prices a disallowed combination as if the gated
feature were off.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from ..schemas.quote import ServiceChoice, ServiceForm, ServiceType
from ..schemas.quote_request import ValidationIssue
from ..utils.formatting import format_date_for_display

logger = logging.getLogger(__name__)

SERVICE_LABELS = {
    ServiceType.MAKEUP: "Make-up",
    ServiceType.HAIR: "Hairstyling",
}


def _day_tag(wedding_dates: List[str], idx: int) -> str:
    if idx < len(wedding_dates) and wedding_dates[idx]:
        return format_date_for_display(wedding_dates[idx])
    return f"Day {idx + 1}"


def _day_issues(
    service_type: ServiceType,
    form: ServiceForm,
    wedding_dates: List[str],
) -> List[ValidationIssue]:
    label = SERVICE_LABELS[service_type]
    issues: List[ValidationIssue] = []

    def add(field: str, text: str, idx: int) -> None:
        issues.append(
            ValidationIssue(
                field=field,
                message=f"{label} - {text} ({_day_tag(wedding_dates, idx)})",
                service_type=service_type,
                day_index=idx,
            )
        )

    for idx, day in enumerate(form.per_day):
        if day.travel_fee > 0 and day.scheduled_return:
            add("travel_fee", "Scheduled returns are not allowed when travel fee > 0", idx)
        if day.scheduled_return_guests > 0 and not day.scheduled_return_bride:
            add(
                "scheduled_return_bride",
                "Guest scheduled return requires bride scheduled return",
                idx,
            )
        if day.num_people > 1 and day.num_cars == 1 and day.touchup_hours > Decimal("0"):
            add(
                "num_cars",
                "With assistants and only 1 car, add another car so assistants can return. "
                "Note: traveling fee is charged per car.",
                idx,
            )
        if day.num_people < 1:
            add("num_people", "At least 1 person is required", idx)
        if day.num_cars < 1:
            add("num_cars", "At least 1 car is required", idx)
        if day.num_cars > day.num_people:
            add("num_cars", "You have more cars than people - please check.", idx)

    return issues


def validate_quote_form(
    service_choice: ServiceChoice,
    wedding_dates: List[str],
    makeup_form: Optional[ServiceForm] = None,
    hair_form: Optional[ServiceForm] = None,
) -> List[ValidationIssue]:
    """Return every reason the form cannot be submitted yet (empty when valid)."""
    issues: List[ValidationIssue] = []

    if not wedding_dates or not wedding_dates[0]:
        issues.append(ValidationIssue(field="wedding_dates", message="Please select a wedding date"))
    elif not service_choice.makeup and not service_choice.hair:
        issues.append(ValidationIssue(field="service_choice", message="Please select at least one service"))

    forms = {ServiceType.MAKEUP: makeup_form, ServiceType.HAIR: hair_form}
    for service_type in service_choice.selected():
        form = forms[service_type]
        if form is None or not form.artist:
            issues.append(
                ValidationIssue(
                    field="artist",
                    message=f"Please choose a {service_type.value} artist",
                    service_type=service_type,
                )
            )

    if any(not d for d in wedding_dates[1:]):
        issues.append(ValidationIssue(field="wedding_dates", message="Please fill in all celebration dates"))

    for service_type in service_choice.selected():
        form = forms[service_type]
        if form is not None:
            issues.extend(_day_issues(service_type, form, wedding_dates))

    if issues:
        logger.debug("Quote form invalid", extra={"issues": len(issues)})
    return issues

from __future__ import annotations

import logging
import uuid
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..schemas.quote import CalculationResult, GrandSummary, Payment, ServiceType
from ..utils.errors import PaymentNotFoundError
from .quote_calculator import calculate_grand_summary

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = ("date", "occasion", "amount")


def new_payment_id() -> str:
    return f"payment_{uuid.uuid4().hex}"


def apply_payments(result: CalculationResult, payments: Iterable[Payment]) -> CalculationResult:
    """Attach ``payments`` to ``result`` and recompute what is paid and due."""
    items = list(payments)
    total_paid = sum((p.amount for p in items), Decimal("0"))
    return result.model_copy(
        update={
            "payments": items,
            "total_paid": total_paid,
            "due": max(Decimal("0"), result.subtotal - total_paid),
        }
    )


def add_payment(result: CalculationResult, payment: Optional[Payment] = None) -> CalculationResult:
    if payment is None:
        payment = Payment(
            id=new_payment_id(),
            date=date.today().isoformat(),
            occasion="",
            amount=Decimal("0"),
        )
    return apply_payments(result, [*result.payments, payment])


def update_payment(result: CalculationResult, payment_id: str, **changes: Any) -> CalculationResult:
    unknown = set(changes) - set(_EDITABLE_FIELDS)
    if unknown:
        raise ValueError(f"Cannot update payment fields: {', '.join(sorted(unknown))}")
    if not any(p.id == payment_id for p in result.payments):
        raise PaymentNotFoundError(payment_id)
    updated = [
        Payment.model_validate({**p.model_dump(), **changes}) if p.id == payment_id else p
        for p in result.payments
    ]
    return apply_payments(result, updated)


def remove_payment(result: CalculationResult, payment_id: str) -> CalculationResult:
    remaining = [p for p in result.payments if p.id != payment_id]
    if len(remaining) == len(result.payments):
        raise PaymentNotFoundError(payment_id)
    return apply_payments(result, remaining)


def preserve_payments(
    previous: Iterable[CalculationResult],
    fresh: Iterable[CalculationResult],
) -> List[CalculationResult]:
    """Carry payments over to recomputed results of the same artist and service."""
    by_key: Dict[Tuple[str, ServiceType], List[Payment]] = {
        (calc.artist_name, calc.service_type): calc.payments for calc in previous
    }
    out: List[CalculationResult] = []
    for calc in fresh:
        payments = by_key.get((calc.artist_name, calc.service_type))
        if payments:
            calc = apply_payments(calc, payments)
        out.append(calc)
    dropped = {key for key, payments in by_key.items() if payments} - {(c.artist_name, c.service_type) for c in out}
    if dropped:
        logger.info("Payments dropped for services no longer quoted: %s", sorted(dropped))
    return out


def summarize(calculations: Iterable[CalculationResult]) -> Tuple[List[CalculationResult], GrandSummary]:
    """Re-derive paid/due on every result, then the grand summary."""
    refreshed = [apply_payments(calc, calc.payments) for calc in calculations]
    return refreshed, calculate_grand_summary(refreshed)

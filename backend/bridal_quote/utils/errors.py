from typing import Dict
from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)


class PaymentNotFoundError(KeyError):
    """Raised when a payment id is not attached to a calculation result."""

    def __init__(self, payment_id: str):
        super().__init__(payment_id)
        self.payment_id = payment_id

    def __str__(self) -> str:
        return f"Payment '{self.payment_id}' not found"


def error_response(
    message: str,
    field_errors: Dict[str, str],
    code: int = status.HTTP_422_UNPROCESSABLE_ENTITY,
) -> HTTPException:
    """Return an HTTPException with a consistent structure and log details."""
    logger.error("%s %s", message, field_errors)
    detail = {"message": message, "field_errors": field_errors}
    return HTTPException(status_code=code, detail=detail)

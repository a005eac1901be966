from .errors import error_response, PaymentNotFoundError
from .formatting import format_date_for_display, format_quantity

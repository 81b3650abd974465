from purchases.domain.errors import DomainError, ErrorCategory, ErrorCode
from purchases.domain.models import PurchaseSummary
from purchases.domain.pricing import MAX_TICKETS_ALLOWED, PRICE_TABLE, price_of
from purchases.domain.value_objects import TicketType, TicketTypeRequest

__all__ = [
    "DomainError",
    "ErrorCategory",
    "ErrorCode",
    "PurchaseSummary",
    "MAX_TICKETS_ALLOWED",
    "PRICE_TABLE",
    "price_of",
    "TicketType",
    "TicketTypeRequest",
]

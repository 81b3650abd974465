from collections.abc import Sequence

from purchases.domain.models import PurchaseSummary
from purchases.domain.pricing import price_of
from purchases.domain.value_objects import TicketTypeRequest


class PurchaseCalculator:
    """Prices a purchase and counts the seats it needs."""

    def calculate(self, requests: Sequence[TicketTypeRequest]) -> PurchaseSummary:
        amount = sum(price_of(r.ticket_type) * r.count for r in requests)
        seats = sum(r.count for r in requests if r.ticket_type.occupies_seat)
        return PurchaseSummary(amount=amount, seats=seats)

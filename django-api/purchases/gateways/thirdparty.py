"""Default adapters standing in for the third-party payment and booking providers.

They only check argument types; neither provider ever declines a request.
"""

import logging

from purchases.gateways.interfaces import PaymentGateway, SeatReservation

logger = logging.getLogger(__name__)


def _require_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")


class TicketPaymentService(PaymentGateway):
    """Payment provider adapter."""

    def make_payment(self, account_id: int, amount: int) -> None:
        _require_int("account_id", account_id)
        _require_int("amount", amount)
        logger.info("Charged %s to account %s", amount, account_id)


class SeatReservationService(SeatReservation):
    """Seat booking provider adapter."""

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        _require_int("account_id", account_id)
        _require_int("seat_count", seat_count)
        logger.info("Reserved %s seats for account %s", seat_count, account_id)

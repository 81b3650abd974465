"""Ticket service - all purchase business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return nothing or raise domain errors

A purchase runs validate -> price -> pay -> reserve. Payment always happens
before reservation, and a failed payment means no reservation is attempted.
Nothing is retried here; retry policy belongs to the caller.
"""

import logging
from collections.abc import Iterable

from purchases.domain import errors
from purchases.domain.value_objects import TicketTypeRequest
from purchases.gateways.interfaces import PaymentGateway, SeatReservation
from purchases.metrics import PurchaseMetrics, purchase_metrics
from purchases.services.calculator import PurchaseCalculator
from purchases.services.validator import Validator

logger = logging.getLogger(__name__)


class TicketService:
    """Service for cinema ticket purchases."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation: SeatReservation,
        validator: Validator | None = None,
        calculator: PurchaseCalculator | None = None,
        metrics: PurchaseMetrics = purchase_metrics,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation = seat_reservation
        self._validator = validator or Validator(metrics)
        self._calculator = calculator or PurchaseCalculator()
        self._metrics = metrics

    def purchase_tickets(
        self, account_id: int, requests: Iterable[TicketTypeRequest]
    ) -> None:
        """Purchase tickets for an account.

        Raises:
            DomainError: A business rule was broken, or the payment or seat
                reservation collaborator failed.
        """
        requests = tuple(requests)

        logger.debug("Validating requests for account %s", account_id)
        self._validator.validate(account_id, requests)

        summary = self._calculator.calculate(requests)

        logger.debug("Taking payment of %s for account %s", summary.amount, account_id)
        try:
            self._payment_gateway.make_payment(account_id, summary.amount)
        except Exception as exc:
            logger.error("Payment failed for account %s", account_id, exc_info=True)
            self._metrics.record_downstream_failure("payment")
            raise errors.payment_failed(account_id, exc) from exc

        logger.debug("Reserving %s seats for account %s", summary.seats, account_id)
        try:
            self._seat_reservation.reserve_seat(account_id, summary.seats)
        except Exception as exc:
            logger.error(
                "Seat reservation failed for account %s", account_id, exc_info=True
            )
            self._metrics.record_downstream_failure("seat_reservation")
            raise errors.reservation_failed(account_id, exc) from exc

        self._metrics.record_success()
        logger.info(
            "Purchase complete for account %s: amount=%s seats=%s",
            account_id,
            summary.amount,
            summary.seats,
        )

"""Business validation for a purchase request.

Rules run in a fixed order and the first violation wins:

1. The account id must be a positive integer.
2. At most ``MAX_TICKETS_ALLOWED`` seated (non-infant) tickets.
3. At least one adult ticket.
4. No more infants than adults.
"""

import logging
from collections.abc import Sequence

from purchases.domain import errors
from purchases.domain.errors import DomainError
from purchases.domain.pricing import MAX_TICKETS_ALLOWED
from purchases.domain.value_objects import TicketType, TicketTypeRequest
from purchases.metrics import PurchaseMetrics, purchase_metrics

logger = logging.getLogger(__name__)


def is_valid_account(account_id) -> bool:
    if isinstance(account_id, bool) or not isinstance(account_id, int):
        return False
    return account_id > 0


def count_of(requests: Sequence[TicketTypeRequest], ticket_type: TicketType) -> int:
    return sum(r.count for r in requests if r.ticket_type is ticket_type)


def seated_ticket_count(requests: Sequence[TicketTypeRequest]) -> int:
    return sum(r.count for r in requests if r.ticket_type.occupies_seat)


def exceeds_ticket_limit(requests: Sequence[TicketTypeRequest]) -> bool:
    return seated_ticket_count(requests) > MAX_TICKETS_ALLOWED


def has_adult(requests: Sequence[TicketTypeRequest]) -> bool:
    return any(r.ticket_type is TicketType.ADULT for r in requests)


def has_too_many_infants(requests: Sequence[TicketTypeRequest]) -> bool:
    return count_of(requests, TicketType.INFANT) > count_of(requests, TicketType.ADULT)


class Validator:
    """Applies the purchase rules to an account and its ticket requests."""

    def __init__(self, metrics: PurchaseMetrics = purchase_metrics) -> None:
        self._metrics = metrics

    def validate(self, account_id, requests: Sequence[TicketTypeRequest]) -> None:
        """Raise on the first broken rule.

        Raises:
            DomainError: INVALID_ACCOUNT, TOO_MANY_TICKETS, NO_ADULT or
                TOO_MANY_INFANTS.
        """
        if not is_valid_account(account_id):
            self._reject(errors.invalid_account(account_id))
        if exceeds_ticket_limit(requests):
            self._reject(errors.too_many_tickets(account_id, MAX_TICKETS_ALLOWED))
        if not has_adult(requests):
            self._reject(errors.no_adult(account_id))
        if has_too_many_infants(requests):
            self._reject(errors.too_many_infants(account_id))

    def _reject(self, error: DomainError) -> None:
        logger.error("Purchase rejected: %s", error)
        self._metrics.record_validation_failure(error.code)
        raise error

"""Collaborator interfaces (ports).

Gateways must be swappable; the ticket service only sees these.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` to the account. Raise on failure."""
        ...


class SeatReservation(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account. Raise on failure."""
        ...

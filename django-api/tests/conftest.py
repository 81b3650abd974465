"""Pytest configuration and shared fixtures."""

import pytest
from prometheus_client import CollectorRegistry
from rest_framework.test import APIClient

from purchases.gateways import PaymentGateway, SeatReservation
from purchases.metrics import PurchaseMetrics
from purchases.services import TicketService


class RecordingPaymentGateway(PaymentGateway):
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[int, int]] = []
        self.error = error

    def make_payment(self, account_id: int, amount: int) -> None:
        self.calls.append((account_id, amount))
        if self.error is not None:
            raise self.error


class RecordingSeatReservation(SeatReservation):
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[int, int]] = []
        self.error = error

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        self.calls.append((account_id, seat_count))
        if self.error is not None:
            raise self.error


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def metrics(registry: CollectorRegistry) -> PurchaseMetrics:
    return PurchaseMetrics(registry=registry)


@pytest.fixture
def payment_gateway() -> RecordingPaymentGateway:
    return RecordingPaymentGateway()


@pytest.fixture
def seat_reservation() -> RecordingSeatReservation:
    return RecordingSeatReservation()


@pytest.fixture
def ticket_service(
    payment_gateway: RecordingPaymentGateway,
    seat_reservation: RecordingSeatReservation,
    metrics: PurchaseMetrics,
) -> TicketService:
    return TicketService(payment_gateway, seat_reservation, metrics=metrics)


@pytest.fixture
def declining_payment_gateway() -> RecordingPaymentGateway:
    return RecordingPaymentGateway(error=RuntimeError("card declined"))


@pytest.fixture
def failing_seat_reservation() -> RecordingSeatReservation:
    return RecordingSeatReservation(error=ConnectionError("booking system down"))

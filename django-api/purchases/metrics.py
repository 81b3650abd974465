"""Prometheus counters for ticket purchases.

Counters live on the default registry so they are exposed by the
``/metrics`` endpoint.
"""

import logging

from prometheus_client import Counter

from purchases.domain.errors import ErrorCode

logger = logging.getLogger(__name__)


class PurchaseMetrics:
    """Failure and outcome counters for the ticket service."""

    def __init__(self, registry=None):
        kwargs = {} if registry is None else {"registry": registry}

        self.validation_failures = Counter(
            "ticket_purchase_validation_failures",
            "Purchases rejected by business validation",
            ["code"],
            **kwargs,
        )

        self.downstream_failures = Counter(
            "ticket_purchase_downstream_failures",
            "Purchases failed by a payment or seat reservation collaborator",
            ["collaborator"],
            **kwargs,
        )

        self.purchases = Counter(
            "ticket_purchases",
            "Completed purchase attempts",
            ["result"],  # result: success/failed
            **kwargs,
        )

    def record_validation_failure(self, code: ErrorCode) -> None:
        self._increment(self.validation_failures, code=code.value)
        self._increment(self.purchases, result="failed")

    def record_downstream_failure(self, collaborator: str) -> None:
        self._increment(self.downstream_failures, collaborator=collaborator)
        self._increment(self.purchases, result="failed")

    def record_success(self) -> None:
        self._increment(self.purchases, result="success")

    @staticmethod
    def _increment(counter: Counter, **labels) -> None:
        # Recording must never replace the error being raised by the caller.
        try:
            counter.labels(**labels).inc()
        except Exception:
            logger.warning("Failed to record purchase metric", exc_info=True)


purchase_metrics = PurchaseMetrics()

"""Domain models produced while pricing a purchase.

Nothing here is persisted; a summary lives for a single purchase call.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PurchaseSummary:
    """Totals for one purchase: amount to charge and seats to reserve."""

    amount: int
    seats: int

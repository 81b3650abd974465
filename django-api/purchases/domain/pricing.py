"""Process-wide pricing constants and limits."""

from types import MappingProxyType

from purchases.domain.value_objects import TicketType

MAX_TICKETS_ALLOWED = 20

PRICE_TABLE = MappingProxyType(
    {
        TicketType.ADULT: 20,
        TicketType.CHILD: 10,
        TicketType.INFANT: 0,
    }
)


def price_of(ticket_type: TicketType) -> int:
    """Return the whole-number unit price of a ticket type."""
    return PRICE_TABLE[ticket_type]

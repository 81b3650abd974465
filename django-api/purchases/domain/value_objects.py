"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class TicketType(Enum):
    """Closed set of ticket types sold at the box office."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def occupies_seat(self) -> bool:
        # Infants sit on an adult's lap.
        return self is not TicketType.INFANT


@dataclass(frozen=True)
class TicketTypeRequest:
    """A single purchase line: a ticket type and how many of it."""

    ticket_type: TicketType
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise TypeError("ticket_type must be ADULT, CHILD or INFANT")
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError("count must be an integer")
        if self.count <= 0:
            raise ValueError("count must be greater than zero")

    @classmethod
    def from_string(cls, ticket_type: str, count: int) -> Self:
        try:
            parsed = TicketType(ticket_type)
        except ValueError:
            raise TypeError("ticket_type must be ADULT, CHILD or INFANT") from None
        return cls(ticket_type=parsed, count=count)

"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self, assert_never

from tickets.domain.errors import InvalidAccountError

MAX_TICKETS_PER_PURCHASE = 25

ADULT_TICKET_PRICE = 25
CHILD_TICKET_PRICE = 15
INFANT_TICKET_PRICE = 0


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class TicketType(Enum):
    """Ticket categories sold at the box office."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def price(self) -> int:
        match self:
            case TicketType.ADULT:
                return ADULT_TICKET_PRICE
            case TicketType.CHILD:
                return CHILD_TICKET_PRICE
            case TicketType.INFANT:
                return INFANT_TICKET_PRICE
            case _:
                assert_never(self)

    @property
    def occupies_seat(self) -> bool:
        # Infants sit on an adult's lap.
        match self:
            case TicketType.ADULT | TicketType.CHILD:
                return True
            case TicketType.INFANT:
                return False
            case _:
                assert_never(self)


@dataclass(frozen=True)
class AccountId:
    """Positive integer identifying the paying account."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value <= 0:
            raise InvalidAccountError(self.value)

    @classmethod
    def parse(cls, value: object) -> Self:
        return cls(value=value)  # type: ignore[arg-type]


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets of a single type."""

    ticket_type: TicketType
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise TypeError("ticket_type must be a TicketType")
        if not _is_int(self.count):
            raise TypeError("count must be an integer")
        if self.count < 0:
            raise ValueError("Ticket count cannot be negative")

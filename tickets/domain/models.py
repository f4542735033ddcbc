"""Domain models for a ticket purchase.

Nothing here is persisted. A purchase is tallied, checked against the
box office rules and priced in one pass; side effects live in the service.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self, assert_never

from tickets.domain.errors import (
    InvalidTicketRequestError,
    MissingAdultError,
    TooManyInfantsError,
    TooManyTicketsError,
)
from tickets.domain.value_objects import (
    MAX_TICKETS_PER_PURCHASE,
    AccountId,
    TicketType,
    TicketTypeRequest,
)


@dataclass(frozen=True)
class TicketTally:
    """Ticket counts per type, summed over every request in a purchase."""

    adults: int = 0
    children: int = 0
    infants: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        """Sum the requested counts per ticket type.

        Raises:
            InvalidTicketRequestError: If an item is not a TicketTypeRequest.
        """
        counts = dict.fromkeys(TicketType, 0)
        for request in requests:
            if not isinstance(request, TicketTypeRequest):
                raise InvalidTicketRequestError(request)
            counts[request.ticket_type] += request.count
        return cls(
            adults=counts[TicketType.ADULT],
            children=counts[TicketType.CHILD],
            infants=counts[TicketType.INFANT],
        )

    @property
    def total_tickets(self) -> int:
        return self.adults + self.children + self.infants

    def count(self, ticket_type: TicketType) -> int:
        match ticket_type:
            case TicketType.ADULT:
                return self.adults
            case TicketType.CHILD:
                return self.children
            case TicketType.INFANT:
                return self.infants
            case _:
                assert_never(ticket_type)

    def validate(self) -> None:
        """Check the box office rules, first failure wins.

        Raises:
            TooManyTicketsError: If more than MAX_TICKETS_PER_PURCHASE are requested.
            MissingAdultError: If child or infant tickets come without an adult.
            TooManyInfantsError: If infants outnumber adults.
        """
        if self.total_tickets > MAX_TICKETS_PER_PURCHASE:
            raise TooManyTicketsError(self.total_tickets, MAX_TICKETS_PER_PURCHASE)
        if (self.children > 0 or self.infants > 0) and self.adults == 0:
            raise MissingAdultError()
        if self.infants > self.adults:
            raise TooManyInfantsError(self.infants, self.adults)


@dataclass(frozen=True)
class PurchaseOutcome:
    """What a valid purchase costs and how many seats it takes."""

    account_id: int
    total_cost: int
    total_seats: int
    total_tickets: int


def calculate_purchase(
    account_id: object, requests: Iterable[TicketTypeRequest]
) -> PurchaseOutcome:
    """Validate a purchase and work out its cost and seat count.

    Pure function: no collaborator is touched.

    Raises:
        InvalidPurchaseError: If any box office rule is broken.
    """
    account = AccountId.parse(account_id)
    tally = TicketTally.from_requests(requests)
    tally.validate()

    total_cost = 0
    total_seats = 0
    for ticket_type in TicketType:
        count = tally.count(ticket_type)
        total_cost += count * ticket_type.price
        if ticket_type.occupies_seat:
            total_seats += count

    return PurchaseOutcome(
        account_id=account.value,
        total_cost=total_cost,
        total_seats=total_seats,
        total_tickets=tally.total_tickets,
    )

"""Ticket service - all purchase logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants before any side effect
- Perform orchestration and error mapping
- Return nothing or raise domain errors
"""

from collections.abc import Iterable

from tickets.core.logging import get_logger
from tickets.domain import (
    InvalidPurchaseError,
    TicketTypeRequest,
    calculate_purchase,
)
from tickets.gateways.interfaces import PaymentProcessor, SeatAllocator

logger = get_logger(__name__)


class TicketService:
    """Service for cinema ticket purchases.

    Holds no state between calls besides its gateways.
    """

    def __init__(
        self, payment_processor: PaymentProcessor, seat_allocator: SeatAllocator
    ) -> None:
        self._payment_processor = payment_processor
        self._seat_allocator = seat_allocator

    @property
    def payment_processor(self) -> PaymentProcessor:
        return self._payment_processor

    @property
    def seat_allocator(self) -> SeatAllocator:
        return self._seat_allocator

    def purchase_tickets(
        self, account_id: int, *ticket_type_requests: TicketTypeRequest
    ) -> None:
        """Charge the account and reserve seats for the requested tickets.

        Raises:
            InvalidAccountError: If account_id is not a positive integer.
            TooManyTicketsError: If more than 25 tickets are requested.
            MissingAdultError: If child or infant tickets come without an adult.
            TooManyInfantsError: If infants outnumber adults.
        """
        self.purchase(account_id, ticket_type_requests)

    def purchase(
        self, account_id: int, ticket_type_requests: Iterable[TicketTypeRequest]
    ) -> None:
        """Same as purchase_tickets, for requests already held in a sequence."""
        try:
            outcome = calculate_purchase(account_id, ticket_type_requests)
        except InvalidPurchaseError as exc:
            logger.warning(
                "purchase_rejected",
                account_id=account_id,
                code=exc.code.value,
            )
            raise

        if outcome.total_tickets == 0:
            logger.warning("empty_purchase", account_id=outcome.account_id)

        # Gateway errors propagate untouched.
        self._payment_processor.charge(outcome.account_id, outcome.total_cost)
        self._seat_allocator.reserve(outcome.account_id, outcome.total_seats)

        logger.info(
            "purchase_completed",
            account_id=outcome.account_id,
            tickets=outcome.total_tickets,
            cost=outcome.total_cost,
            seats=outcome.total_seats,
        )


def get_ticket_service() -> TicketService:
    """Build a TicketService from the gateways named in Django settings."""
    from django.conf import settings
    from django.utils.module_loading import import_string

    payment_processor = import_string(settings.TICKETS_PAYMENT_PROCESSOR)()
    seat_allocator = import_string(settings.TICKETS_SEAT_ALLOCATOR)()
    return TicketService(payment_processor, seat_allocator)

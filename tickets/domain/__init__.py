from tickets.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidAccountError,
    InvalidPurchaseError,
    InvalidTicketRequestError,
    MissingAdultError,
    TooManyInfantsError,
    TooManyTicketsError,
)
from tickets.domain.models import PurchaseOutcome, TicketTally, calculate_purchase
from tickets.domain.value_objects import (
    MAX_TICKETS_PER_PURCHASE,
    AccountId,
    TicketType,
    TicketTypeRequest,
)

__all__ = [
    "AccountId",
    "TicketType",
    "TicketTypeRequest",
    "TicketTally",
    "PurchaseOutcome",
    "calculate_purchase",
    "MAX_TICKETS_PER_PURCHASE",
    "DomainError",
    "ErrorCode",
    "InvalidPurchaseError",
    "InvalidAccountError",
    "InvalidTicketRequestError",
    "TooManyTicketsError",
    "MissingAdultError",
    "TooManyInfantsError",
]

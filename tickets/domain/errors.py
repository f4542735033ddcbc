"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    MISSING_ADULT = "MISSING_ADULT"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks a business rule.

    Nothing has been charged or reserved when this is raised.
    """


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account ID is not a positive integer."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="accountId must be a positive integer",
        )
        self.account_id = account_id


class InvalidTicketRequestError(InvalidPurchaseError):
    """Raised when a purchase contains something other than a ticket request."""

    def __init__(self, request: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_REQUEST,
            message="Purchases only accept ticket type requests",
        )
        self.request = request


class TooManyTicketsError(InvalidPurchaseError):
    """Raised when more tickets are requested than one purchase allows."""

    def __init__(self, requested: int, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_TICKETS,
            message=f"Tickets are limited to a maximum of {limit}",
        )
        self.requested = requested
        self.limit = limit


class MissingAdultError(InvalidPurchaseError):
    """Raised when child or infant tickets are requested without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_ADULT,
            message="Cannot purchase tickets without at least 1 adult",
        )


class TooManyInfantsError(InvalidPurchaseError):
    """Raised when there are more infants than adult laps to sit on."""

    def __init__(self, infants: int, adults: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_INFANTS,
            message="Cannot have more infants than adults",
        )
        self.infants = infants
        self.adults = adults

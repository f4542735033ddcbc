"""In-process stand-ins for the payment and seat reservation providers.

The real providers are owned by third parties and assumed to always succeed.
These only check their arguments and log the call.
"""

from tickets.core.logging import get_logger
from tickets.gateways.interfaces import PaymentProcessor, SeatAllocator

logger = get_logger(__name__)


def _require_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")


class LoggingPaymentProcessor(PaymentProcessor):
    """Payment gateway stub."""

    def charge(self, account_id: int, amount: int) -> None:
        _require_int("account_id", account_id)
        _require_int("amount", amount)
        logger.info("payment_charged", account_id=account_id, amount=amount)


class LoggingSeatAllocator(SeatAllocator):
    """Seat reservation stub."""

    def reserve(self, account_id: int, seat_count: int) -> None:
        _require_int("account_id", account_id)
        _require_int("seat_count", seat_count)
        logger.info("seats_reserved", account_id=account_id, seats=seat_count)

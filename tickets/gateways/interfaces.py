"""Gateway interfaces for the third-party services a purchase calls out to.

Gateways must be swappable; the service never knows which one it holds.
"""

from abc import ABC, abstractmethod


class PaymentProcessor(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def charge(self, account_id: int, amount: int) -> None:
        """Take `amount` from the account. Failures propagate to the caller."""
        ...


class SeatAllocator(ABC):
    """Interface for reserving seats in the auditorium."""

    @abstractmethod
    def reserve(self, account_id: int, seat_count: int) -> None:
        """Hold `seat_count` seats against the account."""
        ...

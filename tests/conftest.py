"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tickets.gateways.interfaces import PaymentProcessor, SeatAllocator
from tickets.services import TicketService


class RecordingPaymentProcessor(PaymentProcessor):
    def __init__(self) -> None:
        self.charges: list[tuple[int, int]] = []

    def charge(self, account_id: int, amount: int) -> None:
        self.charges.append((account_id, amount))


class RecordingSeatAllocator(SeatAllocator):
    def __init__(self) -> None:
        self.reservations: list[tuple[int, int]] = []

    def reserve(self, account_id: int, seat_count: int) -> None:
        self.reservations.append((account_id, seat_count))


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def payment_processor() -> RecordingPaymentProcessor:
    return RecordingPaymentProcessor()


@pytest.fixture
def seat_allocator() -> RecordingSeatAllocator:
    return RecordingSeatAllocator()


@pytest.fixture
def ticket_service(
    payment_processor: RecordingPaymentProcessor,
    seat_allocator: RecordingSeatAllocator,
) -> TicketService:
    return TicketService(payment_processor, seat_allocator)

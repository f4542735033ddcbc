from tickets.gateways.interfaces import PaymentProcessor, SeatAllocator

__all__ = ["PaymentProcessor", "SeatAllocator"]

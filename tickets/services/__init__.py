from tickets.services.ticket_service import TicketService, get_ticket_service

__all__ = ["TicketService", "get_ticket_service"]

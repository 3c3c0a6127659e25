"""Application layer - purchase orchestration and collaborator contracts."""

from ticket_service.application.gateways import PaymentGateway, SeatReservationGateway
from ticket_service.application.services import TicketService


__all__ = [
    "PaymentGateway",
    "SeatReservationGateway",
    "TicketService",
]

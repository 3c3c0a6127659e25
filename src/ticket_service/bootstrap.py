import structlog

from ticket_service.application.services import TicketService
from ticket_service.config import Settings, settings
from ticket_service.infrastructure.payment_gateway import TicketPaymentService
from ticket_service.infrastructure.seat_reservation import SeatReservationService
from ticket_service.logging import configure_logging


logger = structlog.get_logger()


def build_ticket_service(config: Settings | None = None) -> TicketService:
    """Configure logging and wire a TicketService to the in-process gateways."""
    config = config or settings

    configure_logging(
        level=config.log_level,
        log_format=config.log_format,
    )

    logger.info(
        "ticket_service_configured",
        log_level=config.log_level,
        payment_service_online=config.payment_service_online,
        seat_reservation_service_online=config.seat_reservation_service_online,
    )

    return TicketService(
        payment_gateway=TicketPaymentService(online=config.payment_service_online),
        seat_reservation_gateway=SeatReservationService(online=config.seat_reservation_service_online),
    )

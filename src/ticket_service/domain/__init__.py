"""Domain layer - ticket types, pricing and purchase rules."""

from ticket_service.domain.exceptions import DomainError, InvalidPurchaseError
from ticket_service.domain.models import (
    PurchaseResult,
    PurchaseStage,
    RequestTotals,
    TicketCategory,
    TicketTypeRequest,
)
from ticket_service.domain.pricing import TICKET_PRICES, price_and_seats, total_for, unit_price
from ticket_service.domain.validation import (
    MAX_TICKETS_PER_REQUEST,
    validate_account_id,
    validate_request,
)


__all__ = [
    "MAX_TICKETS_PER_REQUEST",
    "TICKET_PRICES",
    "DomainError",
    "InvalidPurchaseError",
    "PurchaseResult",
    "PurchaseStage",
    "RequestTotals",
    "TicketCategory",
    "TicketTypeRequest",
    "price_and_seats",
    "total_for",
    "unit_price",
    "validate_account_id",
    "validate_request",
]

"""Business rules for ticket purchase requests.

Rules are checked in a fixed order and the first failing rule wins.
Nothing here logs; callers decide how failures are reported.
"""

from typing import Any

from ticket_service.domain.exceptions import InvalidPurchaseError
from ticket_service.domain.models import TicketTypeRequest


MAX_TICKETS_PER_REQUEST = 20

TICKET_LIMIT_EXCEEDED = (
    f"Total number of tickets exceeds the maximum limit of {MAX_TICKETS_PER_REQUEST} tickets"
)
NO_TICKETS = "At least one ticket must be purchased"
NO_ADULT_TICKETS = "At least one adult ticket must be purchased"
TOO_MANY_INFANTS = "Number of infant tickets must not exceed number of adult tickets"
INVALID_ACCOUNT_ID = "Invalid ticket id"


def validate_account_id(account_id: Any) -> None:
    if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id < 0:
        raise InvalidPurchaseError(INVALID_ACCOUNT_ID)


def validate_request(request: TicketTypeRequest) -> None:
    total = request.total

    if total > MAX_TICKETS_PER_REQUEST:
        raise InvalidPurchaseError(TICKET_LIMIT_EXCEEDED)

    if total <= 0:
        raise InvalidPurchaseError(NO_TICKETS)
    elif request.adult <= 0:
        raise InvalidPurchaseError(NO_ADULT_TICKETS)

    if request.infant > request.adult:
        raise InvalidPurchaseError(TOO_MANY_INFANTS)

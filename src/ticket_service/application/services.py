from collections.abc import Awaitable, Callable, Sequence
from typing import Any

import structlog
from ulid import ULID

from ticket_service.application.gateways import PaymentGateway, SeatReservationGateway
from ticket_service.domain.exceptions import InvalidPurchaseError
from ticket_service.domain.models import (
    PurchaseResult,
    PurchaseStage,
    RequestTotals,
    TicketCategory,
    TicketTypeRequest,
)
from ticket_service.domain.pricing import price_and_seats
from ticket_service.domain.validation import NO_TICKETS, validate_account_id, validate_request
from ticket_service.infrastructure.metrics import (
    DOWNSTREAM_FAILURES_TOTAL,
    TICKET_PURCHASES_TOTAL,
    TICKETS_SOLD_TOTAL,
    track_purchase_duration,
)


OUTAGE_SIGNAL = "Service Offline"

PAYMENT_OFFLINE = "Payment service is currently offline. Please try again later."
SEAT_RESERVATION_OFFLINE = "Seat reservation service is currently offline. Please try again later."
DOWNSTREAM_ERROR = "An error occured, please try again"
UNKNOWN_ERROR = "An Error Occurred"


def is_outage(exc: BaseException) -> bool:
    # Collaborators expose no structured failure kind, only the message.
    return OUTAGE_SIGNAL in str(exc)


class TicketService:
    """Validates, prices and books ticket purchases for a single account.

    Payment is taken before seats are reserved. A reservation failure after a
    successful payment is reported to the caller but not compensated.
    """

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
        logger: Any = None,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway
        self._logger = logger if logger is not None else structlog.get_logger()

    @track_purchase_duration
    async def purchase_tickets(
        self,
        account_id: int,
        requests: Sequence[TicketTypeRequest],
    ) -> PurchaseResult:
        """Purchase every request in ``requests`` for ``account_id``.

        Raises:
            InvalidPurchaseError: For any failure. Validation failures keep
                their rule message; service failures are translated first.
        """
        log = self._logger.bind(purchase_id=str(ULID()), account_id=account_id)
        stage = PurchaseStage.STARTED

        try:
            validate_account_id(account_id)
            stage = PurchaseStage.ACCOUNT_VALIDATED

            totals = self._validate_and_total(requests)
            stage = PurchaseStage.REQUESTS_VALIDATED
            log.info(
                "purchase_validated",
                step="1/3",
                requests=len(requests),
                total_amount=totals.amount,
                total_seats=totals.seats,
            )

            await self._make_payment(account_id, totals.amount, log)
            stage = PurchaseStage.PAYMENT_CONFIRMED
            log.info("payment_confirmed", step="2/3", total_amount=totals.amount)

            await self._reserve_seats(account_id, totals.seats, log)
            stage = PurchaseStage.SEATS_RESERVED
            log.info("seats_reserved", step="3/3", total_seats=totals.seats)
        except Exception as e:
            log.error("purchase_failed", stage=stage.value, error=str(e))
            TICKET_PURCHASES_TOTAL.labels(status=PurchaseStage.FAILED.value, stage=stage.value).inc()
            raise InvalidPurchaseError(str(e) or UNKNOWN_ERROR) from e

        TICKET_PURCHASES_TOTAL.labels(status=PurchaseStage.DONE.value, stage=stage.value).inc()
        self._record_tickets_sold(requests)

        return PurchaseResult(total_amount=totals.amount, total_seats=totals.seats)

    def _validate_and_total(self, requests: Sequence[TicketTypeRequest]) -> RequestTotals:
        if not requests:
            raise InvalidPurchaseError(NO_TICKETS)

        totals = RequestTotals()
        for request in requests:
            validate_request(request)
            totals += price_and_seats(request)
        return totals

    async def _make_payment(self, account_id: int, total_amount: int, log: Any) -> None:
        await self._call_service(
            "payment",
            lambda: self._payment_gateway.make_payment(account_id, total_amount),
            offline_reason=PAYMENT_OFFLINE,
            log=log,
        )

    async def _reserve_seats(self, account_id: int, total_seats: int, log: Any) -> None:
        await self._call_service(
            "seat_reservation",
            lambda: self._seat_reservation_gateway.reserve_seat(account_id, total_seats),
            offline_reason=SEAT_RESERVATION_OFFLINE,
            log=log,
        )

    async def _call_service(
        self,
        service: str,
        call: Callable[[], Awaitable[None]],
        offline_reason: str,
        log: Any,
    ) -> None:
        try:
            await call()
        except Exception as e:
            log.error(f"{service}_failed", error=str(e), error_type=type(e).__name__)
            if is_outage(e):
                DOWNSTREAM_FAILURES_TOTAL.labels(service=service, kind="offline").inc()
                raise InvalidPurchaseError(offline_reason) from e
            DOWNSTREAM_FAILURES_TOTAL.labels(service=service, kind="error").inc()
            raise InvalidPurchaseError(DOWNSTREAM_ERROR) from e

    def _record_tickets_sold(self, requests: Sequence[TicketTypeRequest]) -> None:
        for category in TicketCategory:
            count = sum(request.count_for(category) for request in requests)
            if count:
                TICKETS_SOLD_TOTAL.labels(category=category.value).inc(count)

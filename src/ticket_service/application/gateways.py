"""Contracts for the external services a purchase depends on.

Both collaborators signal failure by raising. A failure whose message
contains ``"Service Offline"`` is treated as an outage.
"""

from typing import Protocol


class PaymentGateway(Protocol):
    async def make_payment(self, account_id: int, total_amount: int) -> None: ...


class SeatReservationGateway(Protocol):
    async def reserve_seat(self, account_id: int, total_seats: int) -> None: ...

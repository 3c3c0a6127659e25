import structlog


logger = structlog.get_logger()


class SeatReservationService:
    """In-process seat reservation gateway."""

    def __init__(self, online: bool = True) -> None:
        self._online = online

    @property
    def online(self) -> bool:
        return self._online

    async def reserve_seat(self, account_id: int, total_seats: int) -> None:
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise TypeError("account_id must be an integer")
        if isinstance(total_seats, bool) or not isinstance(total_seats, int):
            raise TypeError("total_seats must be an integer")
        if total_seats < 0:
            raise ValueError("total_seats cannot be negative")

        if not self._online:
            raise ConnectionError("Seat Reservation Service Offline")

        logger.info("seats_allocated", account_id=account_id, total_seats=total_seats)

import structlog


logger = structlog.get_logger()


class TicketPaymentService:
    """In-process payment gateway.

    Accepts every well-formed payment. When ``online`` is false every call
    fails with a ``Service Offline`` error, the same signal a real outage gives.
    """

    def __init__(self, online: bool = True) -> None:
        self._online = online

    @property
    def online(self) -> bool:
        return self._online

    async def make_payment(self, account_id: int, total_amount: int) -> None:
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise TypeError("account_id must be an integer")
        if isinstance(total_amount, bool) or not isinstance(total_amount, int):
            raise TypeError("total_amount must be an integer")
        if total_amount < 0:
            raise ValueError("total_amount cannot be negative")

        if not self._online:
            raise ConnectionError("Payment Service Offline")

        logger.info("payment_taken", account_id=account_id, total_amount=total_amount)

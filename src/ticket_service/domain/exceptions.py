class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidPurchaseError(DomainError):
    """Raised when a ticket purchase cannot be completed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)

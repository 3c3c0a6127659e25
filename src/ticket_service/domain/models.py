from dataclasses import dataclass
from enum import Enum


class TicketCategory(Enum):
    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"


class PurchaseStage(Enum):
    STARTED = "STARTED"
    ACCOUNT_VALIDATED = "ACCOUNT_VALIDATED"
    REQUESTS_VALIDATED = "REQUESTS_VALIDATED"
    PAYMENT_CONFIRMED = "PAYMENT_CONFIRMED"
    SEATS_RESERVED = "SEATS_RESERVED"
    DONE = "DONE"
    FAILED = "FAILED"


@dataclass(frozen=True)
class TicketTypeRequest:
    """Number of tickets wanted per category for one line of a purchase."""

    infant: int = 0
    child: int = 0
    adult: int = 0

    def __post_init__(self) -> None:
        for name in ("infant", "child", "adult"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer")
            if value < 0:
                raise ValueError(f"{name} cannot be negative")

    @property
    def total(self) -> int:
        return self.infant + self.child + self.adult

    def count_for(self, category: TicketCategory) -> int:
        return getattr(self, category.value.lower())


@dataclass(frozen=True)
class RequestTotals:
    amount: int = 0
    seats: int = 0

    def __add__(self, other: "RequestTotals") -> "RequestTotals":
        return RequestTotals(amount=self.amount + other.amount, seats=self.seats + other.seats)


@dataclass(frozen=True)
class PurchaseResult:
    total_amount: int
    total_seats: int

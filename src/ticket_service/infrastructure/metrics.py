import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from prometheus_client import Counter, Histogram


TICKET_PURCHASES_TOTAL = Counter(
    "ticket_purchases_total",
    "Total number of ticket purchase attempts",
    ["status", "stage"],
)

TICKETS_SOLD_TOTAL = Counter(
    "tickets_sold_total",
    "Total number of tickets sold",
    ["category"],
)

DOWNSTREAM_FAILURES_TOTAL = Counter(
    "downstream_failures_total",
    "Total number of failed calls to external services",
    ["service", "kind"],
)

PURCHASE_DURATION_SECONDS = Histogram(
    "purchase_duration_seconds",
    "Ticket purchase processing duration",
    buckets=[0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


P = ParamSpec("P")
R = TypeVar("R")


def track_purchase_duration(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    @wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        start = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            duration = time.perf_counter() - start
            PURCHASE_DURATION_SECONDS.observe(duration)

    return wrapper

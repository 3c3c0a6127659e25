from collections.abc import Iterable

from ticket_service.domain.models import RequestTotals, TicketCategory, TicketTypeRequest


TICKET_PRICES: dict[TicketCategory, int] = {
    TicketCategory.INFANT: 0,
    TicketCategory.CHILD: 10,
    TicketCategory.ADULT: 20,
}


def unit_price(category: TicketCategory) -> int:
    return TICKET_PRICES[category]


def occupies_seat(category: TicketCategory) -> bool:
    # Infants sit on an adult's lap.
    return category is not TicketCategory.INFANT


def price_and_seats(request: TicketTypeRequest) -> RequestTotals:
    """Price a request and count the seats it needs.

    Only call this on requests that already passed validation.
    """
    amount = 0
    seats = 0
    for category in TicketCategory:
        count = request.count_for(category)
        amount += count * unit_price(category)
        if occupies_seat(category):
            seats += count
    return RequestTotals(amount=amount, seats=seats)


def total_for(requests: Iterable[TicketTypeRequest]) -> RequestTotals:
    totals = RequestTotals()
    for request in requests:
        totals += price_and_seats(request)
    return totals

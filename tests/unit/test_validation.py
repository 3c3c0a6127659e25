"""Unit tests for account id and request validation rules."""

import pytest

from ticket_service.domain.exceptions import InvalidPurchaseError
from ticket_service.domain.models import TicketTypeRequest
from ticket_service.domain.validation import (
    INVALID_ACCOUNT_ID,
    MAX_TICKETS_PER_REQUEST,
    NO_ADULT_TICKETS,
    NO_TICKETS,
    TICKET_LIMIT_EXCEEDED,
    TOO_MANY_INFANTS,
    validate_account_id,
    validate_request,
)


class TestValidateAccountId:
    """Tests for validate_account_id."""

    @pytest.mark.parametrize("account_id", [0, 1, 42, 10**12])
    def test_valid_account_ids(self, account_id: int) -> None:
        """Non-negative integers are accepted."""
        validate_account_id(account_id)

    @pytest.mark.parametrize("account_id", ["w", "1", -1, 1.0, None, True])
    def test_invalid_account_ids(self, account_id: object) -> None:
        """Anything other than a non-negative int is rejected."""
        with pytest.raises(InvalidPurchaseError, match=INVALID_ACCOUNT_ID):
            validate_account_id(account_id)


class TestValidateRequest:
    """Tests for validate_request."""

    def test_error_messages(self) -> None:
        """Rule messages match the published wording."""
        assert TICKET_LIMIT_EXCEEDED == "Total number of tickets exceeds the maximum limit of 20 tickets"
        assert NO_TICKETS == "At least one ticket must be purchased"
        assert NO_ADULT_TICKETS == "At least one adult ticket must be purchased"
        assert TOO_MANY_INFANTS == "Number of infant tickets must not exceed number of adult tickets"

    @pytest.mark.parametrize(
        ("infant", "child", "adult"),
        [(0, 0, 1), (1, 0, 1), (2, 3, 2), (0, 19, 1), (10, 0, 10), (0, 0, 20)],
    )
    def test_valid_requests(self, infant: int, child: int, adult: int) -> None:
        """At least one adult, infants within adults and 1..20 tickets passes."""
        validate_request(TicketTypeRequest(infant=infant, child=child, adult=adult))

    def test_max_tickets(self) -> None:
        """The per-request limit is 20."""
        assert MAX_TICKETS_PER_REQUEST == 20

    @pytest.mark.parametrize(
        ("infant", "child", "adult"),
        [(0, 0, 21), (0, 21, 0), (21, 0, 0), (15, 5, 1), (7, 7, 7)],
    )
    def test_limit_exceeded_regardless_of_distribution(self, infant: int, child: int, adult: int) -> None:
        """More than 20 tickets always fails on the limit rule first."""
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validate_request(TicketTypeRequest(infant=infant, child=child, adult=adult))
        assert exc_info.value.reason == TICKET_LIMIT_EXCEEDED

    def test_zero_tickets(self) -> None:
        """An empty request fails."""
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validate_request(TicketTypeRequest())
        assert exc_info.value.reason == NO_TICKETS

    @pytest.mark.parametrize(("infant", "child"), [(0, 1), (1, 0), (2, 5)])
    def test_no_adult(self, infant: int, child: int) -> None:
        """Tickets without an adult fail on the adult rule."""
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validate_request(TicketTypeRequest(infant=infant, child=child, adult=0))
        assert exc_info.value.reason == NO_ADULT_TICKETS

    def test_more_infants_than_adults(self) -> None:
        """Each infant needs an adult lap."""
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validate_request(TicketTypeRequest(infant=4, child=1, adult=3))
        assert exc_info.value.reason == TOO_MANY_INFANTS

    def test_validation_is_repeatable(self) -> None:
        """Validating the same request twice gives the same verdict."""
        request = TicketTypeRequest(infant=4, child=1, adult=3)
        reasons = []
        for _ in range(2):
            with pytest.raises(InvalidPurchaseError) as exc_info:
                validate_request(request)
            reasons.append(exc_info.value.reason)
        assert reasons[0] == reasons[1]

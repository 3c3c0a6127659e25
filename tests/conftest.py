"""Shared pytest fixtures for ticket service tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ticket_service.domain.models import TicketTypeRequest


@pytest.fixture
def mock_payment_gateway() -> AsyncMock:
    """Create mock PaymentGateway that accepts every payment."""
    gateway = AsyncMock()
    gateway.make_payment = AsyncMock(return_value=None)
    return gateway


@pytest.fixture
def mock_seat_reservation_gateway() -> AsyncMock:
    """Create mock SeatReservationGateway that accepts every reservation."""
    gateway = AsyncMock()
    gateway.reserve_seat = AsyncMock(return_value=None)
    return gateway


@pytest.fixture
def mock_logger() -> MagicMock:
    """Create capturing logger; bind() returns the same mock so calls can be counted."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def family_request() -> TicketTypeRequest:
    """Two adults, three children and two infants: 70 total, 5 seats."""
    return TicketTypeRequest(infant=2, child=3, adult=2)


@pytest.fixture
def single_of_each_request() -> TicketTypeRequest:
    """One ticket of each category."""
    return TicketTypeRequest(infant=1, child=1, adult=1)

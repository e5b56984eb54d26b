"""
Test Configuration and Fixtures

Environment setup MUST happen before importing cinema_tickets: the logging
config reads TEST_LOG_DIR and settings at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from unittest.mock import Mock, create_autospec  # noqa: E402

import pytest  # noqa: E402

from cinema_tickets.service.ticketing.app.interface.i_seat_reservation_service import (  # noqa: E402
    ISeatReservationService,
)
from cinema_tickets.service.ticketing.app.interface.i_ticket_payment_service import (  # noqa: E402
    ITicketPaymentService,
)
from cinema_tickets.service.ticketing.app.ticket_service import TicketService  # noqa: E402
from cinema_tickets.service.ticketing.domain.ticket_service_config import (  # noqa: E402
    TicketServiceConfig,
)


@pytest.fixture
def default_config() -> TicketServiceConfig:
    return TicketServiceConfig.default()


@pytest.fixture
def mock_payment_service() -> Mock:
    return create_autospec(ITicketPaymentService, instance=True)


@pytest.fixture
def mock_reservation_service() -> Mock:
    return create_autospec(ISeatReservationService, instance=True)


@pytest.fixture
def collaborator_calls(mock_payment_service: Mock, mock_reservation_service: Mock) -> Mock:
    """Parent mock recording payment and reservation calls in one ordered list"""
    manager = Mock()
    manager.attach_mock(mock_payment_service.make_payment, 'make_payment')
    manager.attach_mock(mock_reservation_service.reserve_seat, 'reserve_seat')
    return manager


@pytest.fixture
def ticket_service(
    mock_payment_service: Mock, mock_reservation_service: Mock, default_config: TicketServiceConfig
) -> TicketService:
    return TicketService(
        payment_service=mock_payment_service,
        reservation_service=mock_reservation_service,
        config=default_config,
    )

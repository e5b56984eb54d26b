"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from cinema_tickets.platform.config.core_setting import Settings
from cinema_tickets.service.ticketing.app.ticket_service import TicketService
from cinema_tickets.service.ticketing.driven_adapter.mock_seat_reservation_service import (
    MockSeatReservationService,
)
from cinema_tickets.service.ticketing.driven_adapter.mock_ticket_payment_service import (
    MockTicketPaymentService,
)
from cinema_tickets.service.ticketing.driven_adapter.ticket_config_file_loader import (
    build_ticket_service_config,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Prices and limit are loaded once and shared read-only
    ticket_service_config = providers.Singleton(
        build_ticket_service_config, settings=config_service
    )

    # External collaborators. The mocks keep every call in memory, so they are for
    # local runs and tests only; override both with real gateways in deployment.
    payment_service = providers.Singleton(MockTicketPaymentService)
    reservation_service = providers.Singleton(MockSeatReservationService)

    ticket_service = providers.Factory(
        TicketService,
        payment_service=payment_service,
        reservation_service=reservation_service,
        config=ticket_service_config,
    )

"""Mock seat booking service for local runs - records reservations only.

The reservations list grows with every call; not for long-running processes.
"""

from typing import List, Tuple

from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)


class MockSeatReservationService(ISeatReservationService):
    def __init__(self) -> None:
        self.reservations: List[Tuple[int, int]] = []  # (account_id, seats)

    @Logger.io
    def reserve_seat(self, *, account_id: int, seats: int) -> None:
        self.reservations.append((account_id, seats))
        Logger.base.info(f'💺 [MOCK RESERVATION] account={account_id} seats={seats}')

"""Mock payment gateway for local runs - records charges instead of taking money.

The payments list grows with every call; not for long-running processes.
"""

from typing import List, Tuple

from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


class MockTicketPaymentService(ITicketPaymentService):
    def __init__(self) -> None:
        self.payments: List[Tuple[int, int]] = []  # (account_id, amount), for testing

    @Logger.io
    def make_payment(self, *, account_id: int, amount: int) -> None:
        self.payments.append((account_id, amount))
        Logger.base.info(f'💳 [MOCK PAYMENT] account={account_id} amount=£{amount}')

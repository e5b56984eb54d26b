"""
Ticket purchase coordinator.

Flow for purchase_tickets:
1. Account ID precondition (Fail Fast, nothing dispatched)
2. Aggregate the batch with configured prices
3. Business rules (nothing dispatched on failure)
4. Payment, then seat reservation, once each

No retry, rollback or refund: a failed payment skips the reservation, and a
failed reservation leaves the payment in place.
"""

import sys
from typing import Optional, TextIO

from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from cinema_tickets.service.ticketing.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from cinema_tickets.service.ticketing.app.interface.i_ticket_service import ITicketService
from cinema_tickets.service.ticketing.domain.purchase_receipt import format_purchase_receipt
from cinema_tickets.service.ticketing.domain.purchase_summary import PurchaseSummary
from cinema_tickets.service.ticketing.domain.purchase_validator import (
    PurchaseValidator,
    validate_account_id,
)
from cinema_tickets.service.ticketing.domain.ticket_service_config import TicketServiceConfig
from cinema_tickets.service.ticketing.domain.ticket_type_request import TicketTypeRequest


class TicketService(ITicketService):
    def __init__(
        self,
        payment_service: ITicketPaymentService,
        reservation_service: ISeatReservationService,
        config: Optional[TicketServiceConfig] = None,
    ) -> None:
        self.payment_service = payment_service
        self.reservation_service = reservation_service
        self.config = config if config is not None else TicketServiceConfig.default()
        self.validator = PurchaseValidator(self.config.ticket_purchase_limit)

    @Logger.io
    def purchase_tickets(
        self, account_id: int, *ticket_type_requests: TicketTypeRequest
    ) -> PurchaseSummary:
        validate_account_id(account_id)

        summary = PurchaseSummary.from_requests(ticket_type_requests, config=self.config)
        self.validator.validate(summary)

        self.payment_service.make_payment(account_id=account_id, amount=summary.total_cost)
        self.reservation_service.reserve_seat(account_id=account_id, seats=summary.total_seats)

        Logger.base.info(
            f'[TICKET] account={account_id} paid={summary.total_cost} seats={summary.total_seats}'
        )
        return summary

    @Logger.io
    def print_tickets_purchase(
        self,
        account_id: int,
        *ticket_type_requests: TicketTypeRequest,
        stream: Optional[TextIO] = None,
    ) -> None:
        validate_account_id(account_id)

        summary = PurchaseSummary.from_requests(ticket_type_requests, config=self.config)
        out = stream if stream is not None else sys.stdout
        for line in format_purchase_receipt(account_id, summary, self.config):
            print(line, file=out)

import io
from unittest.mock import Mock

import pytest

from cinema_tickets.platform.exception.exceptions import InvalidAccountError
from cinema_tickets.service.ticketing.app.ticket_service import TicketService
from cinema_tickets.service.ticketing.domain.ticket_service_config import TicketServiceConfig
from cinema_tickets.service.ticketing.domain.ticket_type_request import (
    TicketCategory,
    TicketTypeRequest,
)


@pytest.mark.unit
class TestPrintTicketsPurchase:
    def test_prints_receipt_lines_in_order(self, ticket_service: TicketService) -> None:
        stream = io.StringIO()

        ticket_service.print_tickets_purchase(
            1,
            TicketTypeRequest(TicketCategory.ADULT, 2),
            TicketTypeRequest(TicketCategory.CHILD, 3),
            TicketTypeRequest(TicketCategory.INFANT, 1),
            stream=stream,
        )

        assert stream.getvalue().splitlines() == [
            'Ticket Purchase Summary:',
            'Account ID: [1]',
            'Total Tickets: 6',
            'Ticket Type: ADULT, Quantity: 2, Price per ticket: £25',
            'Ticket Type: CHILD, Quantity: 3, Price per ticket: £15',
            'Ticket Type: INFANT, Quantity: 1, Price per ticket: £0',
            'Total Seats Reserved: 5',
            'Total Cost: £95',
        ]

    def test_defaults_to_stdout(
        self, ticket_service: TicketService, capsys: pytest.CaptureFixture[str]
    ) -> None:
        ticket_service.print_tickets_purchase(42, TicketTypeRequest(TicketCategory.ADULT, 1))

        out = capsys.readouterr().out
        assert 'Account ID: [42]' in out
        assert 'Total Cost: £25' in out

    def test_infant_price_shown_but_not_charged(
        self, mock_payment_service: Mock, mock_reservation_service: Mock
    ) -> None:
        config = TicketServiceConfig(
            ticket_prices={
                TicketCategory.ADULT: 25,
                TicketCategory.CHILD: 15,
                TicketCategory.INFANT: 5,
            }
        )
        service = TicketService(mock_payment_service, mock_reservation_service, config)
        stream = io.StringIO()

        service.print_tickets_purchase(
            1,
            TicketTypeRequest(TicketCategory.ADULT, 1),
            TicketTypeRequest(TicketCategory.INFANT, 2),
            stream=stream,
        )

        lines = stream.getvalue().splitlines()
        assert 'Ticket Type: INFANT, Quantity: 2, Price per ticket: £5' in lines
        assert lines[-1] == 'Total Cost: £25'

    def test_reports_batches_that_would_be_rejected(
        self,
        ticket_service: TicketService,
        mock_payment_service: Mock,
        mock_reservation_service: Mock,
    ) -> None:
        stream = io.StringIO()

        ticket_service.print_tickets_purchase(
            1, TicketTypeRequest(TicketCategory.CHILD, 30), stream=stream
        )

        lines = stream.getvalue().splitlines()
        assert 'Total Tickets: 30' in lines
        assert 'Total Cost: £450' in lines
        mock_payment_service.make_payment.assert_not_called()
        mock_reservation_service.reserve_seat.assert_not_called()

    @pytest.mark.parametrize('account_id', [0, -5, None])
    def test_invalid_account__raises_and_prints_nothing(
        self, ticket_service: TicketService, account_id: object
    ) -> None:
        stream = io.StringIO()

        with pytest.raises(InvalidAccountError):
            ticket_service.print_tickets_purchase(account_id, stream=stream)  # type: ignore[arg-type]

        assert stream.getvalue() == ''

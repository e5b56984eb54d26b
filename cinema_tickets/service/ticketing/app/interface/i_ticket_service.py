from abc import ABC, abstractmethod
from typing import Optional, TextIO

from cinema_tickets.service.ticketing.domain.purchase_summary import PurchaseSummary
from cinema_tickets.service.ticketing.domain.ticket_type_request import TicketTypeRequest


class ITicketService(ABC):
    @abstractmethod
    def purchase_tickets(
        self, account_id: int, *ticket_type_requests: TicketTypeRequest
    ) -> PurchaseSummary:
        """
        Validate a batch, take payment, then reserve seats.

        Raises:
            InvalidAccountError: If account_id is not a positive integer
            InvalidPurchaseError: If the batch breaks a business rule
        """
        pass

    @abstractmethod
    def print_tickets_purchase(
        self,
        account_id: int,
        *ticket_type_requests: TicketTypeRequest,
        stream: Optional[TextIO] = None,
    ) -> None:
        """
        Write a receipt for the batch without dispatching it.

        Validates only the account id; business rules are not applied, so a batch
        that purchase_tickets would reject is still reported.

        Raises:
            InvalidAccountError: If account_id is not a positive integer
            UnknownTicketCategoryError: If a request carries an unknown ticket type
        """
        pass

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    """Port to the external payment gateway."""

    @abstractmethod
    def make_payment(self, *, account_id: int, amount: int) -> None:
        """
        Charge the account.

        Args:
            account_id: Positive account identifier
            amount: Non-negative total to charge

        Raises:
            Any error from the gateway; the ticket service propagates it unchanged
            and does not attempt the seat reservation.
        """
        pass

"""Business rules a batch of ticket requests must satisfy before payment."""

from enum import StrEnum
from typing import Any

from cinema_tickets.platform.exception.exceptions import (
    InvalidAccountError,
    InvalidPurchaseError,
)
from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.domain.purchase_summary import PurchaseSummary
from cinema_tickets.service.ticketing.domain.ticket_type_request import TicketCategory


class PurchaseRule(StrEnum):
    NEGATIVE_TOTAL = 'negative_total'
    PURCHASE_LIMIT = 'purchase_limit'
    NEGATIVE_QUANTITY = 'negative_quantity'
    ADULT_REQUIRED = 'adult_required'


def validate_account_id(account_id: Any) -> None:
    if (
        not isinstance(account_id, int)
        or isinstance(account_id, bool)
        or account_id <= 0
    ):
        raise InvalidAccountError(f'Invalid account ID ({account_id})')


class PurchaseValidator:
    def __init__(self, ticket_purchase_limit: int) -> None:
        self.ticket_purchase_limit = ticket_purchase_limit

    @Logger.io
    def validate(self, summary: PurchaseSummary) -> None:
        """Check the batch against each rule in turn.

        Raises:
            InvalidPurchaseError: On the first failing rule; ``rule`` says which.
        """
        total_tickets = summary.total_tickets
        if total_tickets < 0:
            raise InvalidPurchaseError(
                f'Purchase tickets ({total_tickets}) cannot be less than 0 tickets',
                PurchaseRule.NEGATIVE_TOTAL,
            )

        if total_tickets > self.ticket_purchase_limit:
            raise InvalidPurchaseError(
                f'Purchase tickets ({total_tickets}) cannot be more than '
                f'({self.ticket_purchase_limit}) tickets',
                PurchaseRule.PURCHASE_LIMIT,
            )

        for category in TicketCategory:
            quantity = summary.count(category)
            if quantity < 0:
                raise InvalidPurchaseError(
                    f'Purchase {category.lower()} tickets ({quantity}) cannot be less than 0 tickets',
                    PurchaseRule.NEGATIVE_QUANTITY,
                )

        adult = summary.count(TicketCategory.ADULT)
        child = summary.count(TicketCategory.CHILD)
        infant = summary.count(TicketCategory.INFANT)
        if (child > 0 or infant > 0) and adult <= 0:
            raise InvalidPurchaseError(
                f'Child tickets ({child}) or Infant tickets ({infant}) cannot be purchased '
                f'without any Adult ticket ({adult}).',
                PurchaseRule.ADULT_REQUIRED,
            )

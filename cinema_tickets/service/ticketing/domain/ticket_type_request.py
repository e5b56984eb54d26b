from enum import StrEnum

import attrs


class TicketCategory(StrEnum):
    ADULT = 'ADULT'
    CHILD = 'CHILD'
    INFANT = 'INFANT'


@attrs.define(frozen=True)
class TicketTypeRequest:
    """One line item of a purchase: a ticket type and how many of it.

    Quantities are not checked here; PurchaseValidator is the single authority
    on what a batch may contain.
    """

    ticket_type: TicketCategory
    quantity: int

from collections.abc import Iterable, Mapping
from types import MappingProxyType

import attrs

from cinema_tickets.platform.exception.exceptions import UnknownTicketCategoryError
from cinema_tickets.service.ticketing.domain.ticket_service_config import TicketServiceConfig
from cinema_tickets.service.ticketing.domain.ticket_type_request import (
    TicketCategory,
    TicketTypeRequest,
)


def _to_category(ticket_type: object) -> TicketCategory:
    try:
        return TicketCategory(ticket_type)
    except ValueError as e:
        raise UnknownTicketCategoryError(ticket_type) from e


def _freeze_counts(counts: Mapping[TicketCategory, int]) -> Mapping[TicketCategory, int]:
    return MappingProxyType(dict(counts))


@attrs.define(frozen=True)
class PurchaseSummary:
    """Totals for one batch of ticket requests.

    Infants are counted in total_tickets but never add to total_cost or
    total_seats, whatever price is configured for them.
    """

    ticket_counts: Mapping[TicketCategory, int] = attrs.field(converter=_freeze_counts)
    total_tickets: int
    total_cost: int
    total_seats: int

    @classmethod
    def from_requests(
        cls, ticket_type_requests: Iterable[TicketTypeRequest], *, config: TicketServiceConfig
    ) -> 'PurchaseSummary':
        ticket_counts = dict.fromkeys(TicketCategory, 0)
        total_tickets = total_cost = total_seats = 0

        for request in ticket_type_requests:
            category = _to_category(request.ticket_type)
            quantity = request.quantity
            ticket_counts[category] += quantity
            total_tickets += quantity

            match category:
                case TicketCategory.ADULT | TicketCategory.CHILD:
                    total_cost += config.get_price(category) * quantity
                    total_seats += quantity
                case TicketCategory.INFANT:
                    pass

        return cls(
            ticket_counts=ticket_counts,
            total_tickets=total_tickets,
            total_cost=total_cost,
            total_seats=total_seats,
        )

    def count(self, ticket_type: TicketCategory) -> int:
        return self.ticket_counts.get(ticket_type, 0)

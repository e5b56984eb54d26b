"""Ticket prices and purchase limit.

Built once at service start and never mutated afterwards. Parsing of the
backing file lives in driven_adapter/ticket_config_file_loader.py.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Final, Optional

import attrs

from cinema_tickets.platform.exception.exceptions import TicketConfigError
from cinema_tickets.service.ticketing.domain.ticket_type_request import TicketCategory


PROP_INFANT_PRICE: Final[str] = 'INFANT_PRICE'
PROP_CHILD_PRICE: Final[str] = 'CHILD_PRICE'
PROP_ADULT_PRICE: Final[str] = 'ADULT_PRICE'

DEFAULT_INFANT_TICKET_PRICE: Final[int] = 0
DEFAULT_CHILD_TICKET_PRICE: Final[int] = 15
DEFAULT_ADULT_TICKET_PRICE: Final[int] = 25
DEFAULT_MAX_TICKETS: Final[int] = 25

PRICE_PROPERTIES: Final[tuple[tuple[str, TicketCategory, int], ...]] = (
    (PROP_INFANT_PRICE, TicketCategory.INFANT, DEFAULT_INFANT_TICKET_PRICE),
    (PROP_CHILD_PRICE, TicketCategory.CHILD, DEFAULT_CHILD_TICKET_PRICE),
    (PROP_ADULT_PRICE, TicketCategory.ADULT, DEFAULT_ADULT_TICKET_PRICE),
)


def _is_non_negative_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _freeze_prices(prices: Mapping[Any, int]) -> Mapping[TicketCategory, int]:
    try:
        return MappingProxyType(
            {TicketCategory(category): price for category, price in prices.items()}
        )
    except ValueError as e:
        raise TicketConfigError(f'Unknown ticket type in ticket prices: {e}') from e


def _freeze_options(options: Optional[Mapping[str, Optional[str]]]) -> Optional[Mapping[str, Optional[str]]]:
    return None if options is None else MappingProxyType(dict(options))


def _validate_prices(_instance: Any, _attribute: Any, value: Mapping[TicketCategory, int]) -> None:
    for category, price in value.items():
        if not _is_non_negative_int(price):
            raise TicketConfigError(f'{category} ticket price ({price}) must be a non-negative integer')


def _validate_purchase_limit(_instance: Any, _attribute: Any, value: int) -> None:
    if not _is_non_negative_int(value):
        raise TicketConfigError(f'Ticket purchase limit ({value}) must be a non-negative integer')


def _parse_price(key: str, raw_value: Optional[str]) -> int:
    try:
        price = int((raw_value or '').strip())
    except ValueError as e:
        raise TicketConfigError(f'{key} ({raw_value!r}) is not an integer') from e
    if price < 0:
        raise TicketConfigError(f'{key} ({price}) cannot be less than 0')
    return price


@attrs.define(frozen=True)
class TicketServiceConfig:
    ticket_prices: Mapping[TicketCategory, int] = attrs.field(
        converter=_freeze_prices, validator=_validate_prices
    )
    ticket_purchase_limit: int = attrs.field(
        default=DEFAULT_MAX_TICKETS, validator=_validate_purchase_limit
    )
    raw_options: Optional[Mapping[str, Optional[str]]] = attrs.field(
        default=None, converter=_freeze_options, repr=False
    )

    @classmethod
    def default(cls) -> 'TicketServiceConfig':
        return cls(
            ticket_prices={
                TicketCategory.INFANT: DEFAULT_INFANT_TICKET_PRICE,
                TicketCategory.CHILD: DEFAULT_CHILD_TICKET_PRICE,
                TicketCategory.ADULT: DEFAULT_ADULT_TICKET_PRICE,
            },
            ticket_purchase_limit=DEFAULT_MAX_TICKETS,
        )

    @classmethod
    def from_options(cls, options: Mapping[str, Optional[str]]) -> 'TicketServiceConfig':
        """Build a config from parsed KEY=value options.

        Only INFANT_PRICE, CHILD_PRICE and ADULT_PRICE affect pricing; missing
        keys take the defaults. Every option stays readable through
        get_config_value. The purchase limit is always DEFAULT_MAX_TICKETS.

        Raises:
            TicketConfigError: If a price is empty, not an integer, or negative.
        """
        ticket_prices = {
            category: _parse_price(key, options[key]) if key in options else default
            for key, category, default in PRICE_PROPERTIES
        }
        return cls(
            ticket_prices=ticket_prices,
            ticket_purchase_limit=DEFAULT_MAX_TICKETS,
            raw_options=options,
        )

    def get_price(self, ticket_type: TicketCategory) -> int:
        return self.ticket_prices.get(ticket_type, 0)

    def get_config_value(self, config_key: Optional[str]) -> Optional[str]:
        if config_key is None or self.raw_options is None:
            return None
        return self.raw_options.get(config_key)

"""Load ticket prices from a KEY=value file.

Example file:

    # prices in whole pounds
    INFANT_PRICE=0
    CHILD_PRICE=15
    ADULT_PRICE=25
"""

import os
from typing import Union

from dotenv import dotenv_values

from cinema_tickets.platform.config.core_setting import Settings
from cinema_tickets.platform.exception.exceptions import TicketConfigError
from cinema_tickets.platform.logging.loguru_io import Logger
from cinema_tickets.service.ticketing.domain.ticket_service_config import TicketServiceConfig


@Logger.io
def load_ticket_service_config(config_file_path: Union[str, os.PathLike]) -> TicketServiceConfig:
    """
    Raises:
        TicketConfigError: If the file is missing or unreadable, or a price is not
            a non-negative integer.
    """
    try:
        with open(config_file_path, encoding='utf-8') as stream:
            options = dotenv_values(stream=stream, interpolate=False)
    except (OSError, UnicodeDecodeError) as e:
        raise TicketConfigError(f'Unable to read ticket config ({config_file_path}): {e}') from e

    Logger.base.info(f'📄 [CONFIG] Loaded {len(options)} option(s) from {config_file_path}')
    return TicketServiceConfig.from_options(options)


def build_ticket_service_config(settings: Settings) -> TicketServiceConfig:
    if settings.TICKET_CONFIG_PATH:
        return load_ticket_service_config(settings.TICKET_CONFIG_PATH)
    return TicketServiceConfig.default()

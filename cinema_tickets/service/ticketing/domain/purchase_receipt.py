from cinema_tickets.service.ticketing.domain.purchase_summary import PurchaseSummary
from cinema_tickets.service.ticketing.domain.ticket_service_config import TicketServiceConfig
from cinema_tickets.service.ticketing.domain.ticket_type_request import TicketCategory


def format_purchase_receipt(
    account_id: int, summary: PurchaseSummary, config: TicketServiceConfig
) -> list[str]:
    """Receipt lines for a batch. Infant prices are shown even though infants pay nothing."""
    lines = [
        'Ticket Purchase Summary:',
        f'Account ID: [{account_id}]',
        f'Total Tickets: {summary.total_tickets}',
    ]
    lines.extend(
        f'Ticket Type: {category}, Quantity: {summary.count(category)}, '
        f'Price per ticket: £{config.get_price(category)}'
        for category in TicketCategory
    )
    lines.append(f'Total Seats Reserved: {summary.total_seats}')
    lines.append(f'Total Cost: £{summary.total_cost}')
    return lines

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_ACCOUNT = 'INVALID_ACCOUNT'
    INVALID_PURCHASE = 'INVALID_PURCHASE'
    INVALID_CONFIG = 'INVALID_CONFIG'
    UNKNOWN_TICKET_TYPE = 'UNKNOWN_TICKET_TYPE'
    COLLABORATOR_FAILURE = 'COLLABORATOR_FAILURE'


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, code: ErrorCode) -> None:
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidAccountError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_ACCOUNT)


class InvalidPurchaseError(CustomBaseError):
    def __init__(self, message: str, rule: str) -> None:
        super().__init__(message, ErrorCode.INVALID_PURCHASE)
        self.rule = rule


class TicketConfigError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_CONFIG)


class UnknownTicketCategoryError(CustomBaseError):
    def __init__(self, ticket_type: object) -> None:
        super().__init__(f'Unknown ticket type: {ticket_type}', ErrorCode.UNKNOWN_TICKET_TYPE)
        self.ticket_type = ticket_type


class CollaboratorError(CustomBaseError):
    """For payment/reservation adapters to raise; the ticket service never wraps into this."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.COLLABORATOR_FAILURE)

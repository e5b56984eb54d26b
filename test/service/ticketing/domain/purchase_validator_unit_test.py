import pytest

from cinema_tickets.platform.exception.exceptions import InvalidAccountError, InvalidPurchaseError
from cinema_tickets.service.ticketing.domain.purchase_summary import PurchaseSummary
from cinema_tickets.service.ticketing.domain.purchase_validator import (
    PurchaseRule,
    PurchaseValidator,
    validate_account_id,
)
from cinema_tickets.service.ticketing.domain.ticket_type_request import TicketCategory


def _summary(adult: int = 0, child: int = 0, infant: int = 0) -> PurchaseSummary:
    """Build a summary directly so each rule can be hit in isolation"""
    return PurchaseSummary(
        ticket_counts={
            TicketCategory.ADULT: adult,
            TicketCategory.CHILD: child,
            TicketCategory.INFANT: infant,
        },
        total_tickets=adult + child + infant,
        total_cost=0,
        total_seats=adult + child,
    )


@pytest.fixture
def validator() -> PurchaseValidator:
    return PurchaseValidator(ticket_purchase_limit=25)


@pytest.mark.unit
class TestPurchaseValidator:
    @pytest.mark.parametrize(
        'counts',
        [
            {},
            {'adult': 1},
            {'adult': 1, 'child': 10, 'infant': 14},
            {'adult': 25},
        ],
    )
    def test_valid_batches_pass(self, validator: PurchaseValidator, counts: dict[str, int]) -> None:
        assert validator.validate(_summary(**counts)) is None

    def test_negative_total(self, validator: PurchaseValidator) -> None:
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validator.validate(_summary(adult=1, child=-3))

        assert exc_info.value.rule == PurchaseRule.NEGATIVE_TOTAL
        assert '(-2)' in exc_info.value.message

    def test_limit_is_inclusive(self, validator: PurchaseValidator) -> None:
        validator.validate(_summary(adult=25))

        with pytest.raises(InvalidPurchaseError) as exc_info:
            validator.validate(_summary(adult=26))

        assert exc_info.value.rule == PurchaseRule.PURCHASE_LIMIT
        assert exc_info.value.message == 'Purchase tickets (26) cannot be more than (25) tickets'

    def test_zero_limit_only_allows_empty_batches(self) -> None:
        validator = PurchaseValidator(ticket_purchase_limit=0)

        validator.validate(_summary())
        with pytest.raises(InvalidPurchaseError):
            validator.validate(_summary(adult=1))

    @pytest.mark.parametrize(
        ('counts', 'expected_message'),
        [
            ({'adult': -1, 'child': 2}, 'Purchase adult tickets (-1) cannot be less than 0 tickets'),
            ({'adult': 3, 'child': -1}, 'Purchase child tickets (-1) cannot be less than 0 tickets'),
            ({'adult': 3, 'infant': -2}, 'Purchase infant tickets (-2) cannot be less than 0 tickets'),
            # adult is reported before child when both are negative
            (
                {'adult': -1, 'child': -1, 'infant': 5},
                'Purchase adult tickets (-1) cannot be less than 0 tickets',
            ),
        ],
    )
    def test_negative_quantity_reports_first_category(
        self, validator: PurchaseValidator, counts: dict[str, int], expected_message: str
    ) -> None:
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validator.validate(_summary(**counts))

        assert exc_info.value.rule == PurchaseRule.NEGATIVE_QUANTITY
        assert exc_info.value.message == expected_message

    @pytest.mark.parametrize('counts', [{'child': 1}, {'infant': 1}, {'child': 2, 'infant': 3}])
    def test_children_and_infants_need_an_adult(
        self, validator: PurchaseValidator, counts: dict[str, int]
    ) -> None:
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validator.validate(_summary(**counts))

        assert exc_info.value.rule == PurchaseRule.ADULT_REQUIRED
        child, infant = counts.get('child', 0), counts.get('infant', 0)
        assert exc_info.value.message == (
            f'Child tickets ({child}) or Infant tickets ({infant}) cannot be purchased '
            'without any Adult ticket (0).'
        )

    def test_limit_checked_before_adult_rule(self, validator: PurchaseValidator) -> None:
        with pytest.raises(InvalidPurchaseError) as exc_info:
            validator.validate(_summary(child=30))

        assert exc_info.value.rule == PurchaseRule.PURCHASE_LIMIT


@pytest.mark.unit
class TestValidateAccountId:
    @pytest.mark.parametrize('account_id', [1, 2**40])
    def test_positive_ids_pass(self, account_id: int) -> None:
        validate_account_id(account_id)

    @pytest.mark.parametrize('account_id', [0, -1, None, '5', 2.5, False, True])
    def test_invalid_ids(self, account_id: object) -> None:
        with pytest.raises(InvalidAccountError) as exc_info:
            validate_account_id(account_id)

        assert exc_info.value.message == f'Invalid account ID ({account_id})'

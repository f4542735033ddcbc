"""Unit tests for domain primitives and purchase calculation.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from tickets.domain import (
    AccountId,
    ErrorCode,
    InvalidAccountError,
    InvalidTicketRequestError,
    MissingAdultError,
    PurchaseOutcome,
    TicketTally,
    TicketType,
    TicketTypeRequest,
    TooManyInfantsError,
    TooManyTicketsError,
    calculate_purchase,
)


def adults(count: int) -> TicketTypeRequest:
    return TicketTypeRequest(TicketType.ADULT, count)


def children(count: int) -> TicketTypeRequest:
    return TicketTypeRequest(TicketType.CHILD, count)


def infants(count: int) -> TicketTypeRequest:
    return TicketTypeRequest(TicketType.INFANT, count)


class TestTicketType:
    """Tests for TicketType prices and seating."""

    def test_prices(self):
        assert TicketType.ADULT.price == 25
        assert TicketType.CHILD.price == 15
        assert TicketType.INFANT.price == 0

    def test_infants_do_not_occupy_seats(self):
        assert TicketType.ADULT.occupies_seat
        assert TicketType.CHILD.occupies_seat
        assert not TicketType.INFANT.occupies_seat


class TestTicketTypeRequest:
    """Tests for TicketTypeRequest value object."""

    def test_accepts_zero(self):
        """A request can be created with zero tickets."""
        assert adults(0).count == 0

    def test_rejects_negative_count(self):
        """TicketTypeRequest raises ValueError for a negative count."""
        with pytest.raises(ValueError):
            adults(-1)

    def test_rejects_non_integer_count(self):
        with pytest.raises(TypeError):
            TicketTypeRequest(TicketType.ADULT, 1.5)
        with pytest.raises(TypeError):
            TicketTypeRequest(TicketType.ADULT, True)

    def test_rejects_unknown_ticket_type(self):
        """Plain strings are not accepted in place of the enum."""
        with pytest.raises(TypeError):
            TicketTypeRequest("ADULT", 1)

    def test_is_immutable(self):
        request = adults(1)
        with pytest.raises(AttributeError):
            request.count = 2


class TestAccountId:
    """Tests for AccountId value object."""

    def test_accepts_positive_integer(self):
        assert AccountId.parse(1).value == 1

    @pytest.mark.parametrize("value", [0, -1, 1.0, "1", None, True])
    def test_rejects_invalid_value(self, value):
        """AccountId raises InvalidAccountError for anything but a positive int."""
        with pytest.raises(InvalidAccountError) as exc_info:
            AccountId.parse(value)
        assert exc_info.value.code is ErrorCode.INVALID_ACCOUNT
        assert exc_info.value.account_id == value


class TestTicketTally:
    """Tests for summing requests per ticket type."""

    def test_sums_requests_of_the_same_type(self):
        tally = TicketTally.from_requests([adults(1), children(2), adults(3)])
        assert tally == TicketTally(adults=4, children=2, infants=0)
        assert tally.total_tickets == 6

    def test_empty_requests(self):
        assert TicketTally.from_requests([]).total_tickets == 0

    def test_rejects_foreign_items(self):
        with pytest.raises(InvalidTicketRequestError):
            TicketTally.from_requests([adults(1), ("CHILD", 1)])


class TestCalculatePurchase:
    """Tests for the box office rules and pricing."""

    def test_mixed_purchase(self):
        outcome = calculate_purchase(1, [adults(2), children(3), infants(1)])
        assert outcome == PurchaseOutcome(
            account_id=1, total_cost=95, total_seats=5, total_tickets=6
        )

    def test_request_order_does_not_matter(self):
        forward = calculate_purchase(7, [adults(2), children(3), infants(1)])
        backward = calculate_purchase(7, [infants(1), children(3), adults(2)])
        assert forward == backward

    def test_twenty_five_tickets_allowed(self):
        outcome = calculate_purchase(1, [adults(20), children(3), infants(2)])
        assert outcome.total_tickets == 25
        assert outcome.total_cost == 20 * 25 + 3 * 15
        assert outcome.total_seats == 23

    @pytest.mark.parametrize(
        "requests",
        [
            [adults(26)],
            [adults(24), children(2)],
            [adults(24), children(1), infants(1)],
            [adults(13), adults(13)],
        ],
    )
    def test_more_than_twenty_five_tickets_rejected(self, requests):
        with pytest.raises(TooManyTicketsError) as exc_info:
            calculate_purchase(1, requests)
        assert exc_info.value.limit == 25

    @pytest.mark.parametrize(
        "requests",
        [
            [adults(0), children(1)],
            [adults(0), infants(1)],
            [adults(0), children(3), infants(1)],
        ],
    )
    def test_child_or_infant_without_adult_rejected(self, requests):
        with pytest.raises(MissingAdultError):
            calculate_purchase(1, requests)

    def test_more_infants_than_adults_rejected(self):
        with pytest.raises(TooManyInfantsError) as exc_info:
            calculate_purchase(1, [adults(1), infants(2)])
        assert (exc_info.value.infants, exc_info.value.adults) == (2, 1)

    def test_one_infant_per_adult_allowed(self):
        outcome = calculate_purchase(1, [adults(1), infants(1)])
        assert outcome.total_cost == 25
        assert outcome.total_seats == 1

    def test_account_checked_before_tickets(self):
        """An invalid account wins over every ticket rule."""
        with pytest.raises(InvalidAccountError):
            calculate_purchase(0, [adults(30)])

    def test_ticket_limit_checked_before_adult_rule(self):
        with pytest.raises(TooManyTicketsError):
            calculate_purchase(1, [children(26)])

    def test_zero_tickets_is_a_free_purchase(self):
        outcome = calculate_purchase(1, [])
        assert (outcome.total_cost, outcome.total_seats) == (0, 0)

    def test_error_str_includes_code(self):
        with pytest.raises(MissingAdultError) as exc_info:
            calculate_purchase(1, [children(1)])
        assert str(exc_info.value).startswith("MISSING_ADULT: ")

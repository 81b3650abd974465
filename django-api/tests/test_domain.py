"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import dataclasses

import pytest

from purchases.domain import (
    MAX_TICKETS_ALLOWED,
    PRICE_TABLE,
    DomainError,
    ErrorCategory,
    ErrorCode,
    TicketType,
    TicketTypeRequest,
    price_of,
)
from purchases.domain import errors


class TestTicketTypeRequest:
    """Tests for TicketTypeRequest value object."""

    def test_accepts_positive_count(self):
        """A request can be created with a positive count."""
        request = TicketTypeRequest(TicketType.ADULT, 3)
        assert request.ticket_type is TicketType.ADULT
        assert request.count == 3

    def test_rejects_zero_count(self):
        """A zero count raises ValueError."""
        with pytest.raises(ValueError):
            TicketTypeRequest(TicketType.CHILD, 0)

    def test_rejects_negative_count(self):
        """A negative count raises ValueError."""
        with pytest.raises(ValueError):
            TicketTypeRequest(TicketType.CHILD, -2)

    def test_rejects_non_integer_count(self):
        """A non-integer count raises TypeError."""
        with pytest.raises(TypeError):
            TicketTypeRequest(TicketType.ADULT, 2.5)

    def test_rejects_bool_count(self):
        """True is not a ticket count."""
        with pytest.raises(TypeError):
            TicketTypeRequest(TicketType.ADULT, True)

    def test_rejects_unknown_ticket_type(self):
        """A plain string is not a ticket type."""
        with pytest.raises(TypeError):
            TicketTypeRequest("SENIOR", 1)

    def test_is_immutable(self):
        """Requests cannot be changed after creation."""
        request = TicketTypeRequest(TicketType.ADULT, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.count = 5

    def test_from_string_parses_type(self):
        """from_string maps the type name onto the enum."""
        request = TicketTypeRequest.from_string("INFANT", 2)
        assert request == TicketTypeRequest(TicketType.INFANT, 2)

    def test_from_string_rejects_unknown_type(self):
        """from_string raises TypeError for an unknown type name."""
        with pytest.raises(TypeError):
            TicketTypeRequest.from_string("SENIOR", 2)


class TestPricing:
    """Tests for the price table and limits."""

    def test_unit_prices(self):
        """Adults cost 20, children 10, infants nothing."""
        assert price_of(TicketType.ADULT) == 20
        assert price_of(TicketType.CHILD) == 10
        assert price_of(TicketType.INFANT) == 0

    def test_every_ticket_type_is_priced(self):
        """The price table covers the whole enum."""
        assert set(PRICE_TABLE) == set(TicketType)

    def test_price_table_is_read_only(self):
        """The price table cannot be mutated."""
        with pytest.raises(TypeError):
            PRICE_TABLE[TicketType.ADULT] = 1

    def test_ticket_limit(self):
        """At most twenty tickets per purchase."""
        assert MAX_TICKETS_ALLOWED == 20

    def test_only_infants_do_not_occupy_seats(self):
        """Infants sit on a lap; everyone else takes a seat."""
        assert TicketType.ADULT.occupies_seat
        assert TicketType.CHILD.occupies_seat
        assert not TicketType.INFANT.occupies_seat


class TestDomainError:
    """Tests for DomainError and its codes."""

    @pytest.mark.parametrize(
        "code",
        [
            ErrorCode.INVALID_ACCOUNT,
            ErrorCode.TOO_MANY_TICKETS,
            ErrorCode.NO_ADULT,
            ErrorCode.TOO_MANY_INFANTS,
        ],
    )
    def test_business_rule_codes_are_invalid_purchases(self, code):
        """Rule violations fall in the INVALID_PURCHASE category."""
        assert code.category is ErrorCategory.INVALID_PURCHASE

    @pytest.mark.parametrize(
        "code", [ErrorCode.PAYMENT_FAILED, ErrorCode.RESERVATION_FAILED]
    )
    def test_collaborator_codes_are_downstream(self, code):
        """Collaborator failures fall in the DOWNSTREAM category."""
        assert code.category is ErrorCategory.DOWNSTREAM

    def test_str_includes_code_and_message(self):
        """String form is 'CODE: message'."""
        error = errors.no_adult(account_id=7)
        assert str(error) == "NO_ADULT: At least one adult ticket is required"

    def test_downstream_error_carries_cause_and_account(self):
        """Wrapped collaborator errors keep the original exception."""
        cause = RuntimeError("gateway timeout")
        error = errors.payment_failed(42, cause)
        assert error.code is ErrorCode.PAYMENT_FAILED
        assert error.account_id == 42
        assert error.cause is cause
        assert error.code.category is ErrorCategory.DOWNSTREAM

    def test_validation_error_has_no_cause(self):
        """Rule violations are not wrappers."""
        error = errors.too_many_infants(account_id=3)
        assert error.cause is None
        assert error.code.category is ErrorCategory.INVALID_PURCHASE

    def test_is_an_exception(self):
        """DomainError can be raised and caught."""
        with pytest.raises(DomainError) as exc_info:
            raise errors.invalid_account(0)
        assert exc_info.value.code is ErrorCode.INVALID_ACCOUNT

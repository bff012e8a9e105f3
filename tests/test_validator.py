"""Tests for ExpenseValidator."""

import pytest

from expense_tracker.models.expense import Expense
from expense_tracker.validation import (
    UNKNOWN_ERROR_MESSAGE,
    ExpenseValidator,
    ValidationOutcome,
)


def make_expense(**overrides):
    fields = {
        "title": "Coffee",
        "amount": 4.5,
        "category": "Food",
        "date": "2024-01-01",
    }
    fields.update(overrides)
    return Expense(**fields)


@pytest.fixture
def validator():
    return ExpenseValidator()


class TestValidationOutcomes:
    """Tests for each individual check."""

    def test_valid_expense(self, validator):
        assert validator.validate(make_expense()) == ValidationOutcome.SUCCESS

    def test_empty_title(self, validator):
        assert validator.validate(make_expense(title="")) == ValidationOutcome.EMPTY_TITLE

    @pytest.mark.parametrize("amount", [
        0, 0.0, -0.01, -100, float("nan"), float("inf"), float("-inf"),
    ])
    def test_invalid_amount(self, validator, amount):
        """Test that zero, negative and non-finite amounts are rejected."""
        outcome = validator.validate(make_expense(amount=amount))
        assert outcome == ValidationOutcome.INVALID_AMOUNT

    def test_smallest_positive_amount_is_valid(self, validator):
        assert validator.validate(make_expense(amount=0.01)) == ValidationOutcome.SUCCESS

    def test_empty_category(self, validator):
        """Test that an empty category is rejected, not defaulted."""
        assert validator.validate(make_expense(category="")) == ValidationOutcome.EMPTY_CATEGORY

    def test_empty_date(self, validator):
        """Test the date check (only reachable when building expenses directly)."""
        assert validator.validate(make_expense(date="")) == ValidationOutcome.EMPTY_DATE

    def test_whitespace_title_is_not_empty(self, validator):
        """Test that the title check is for emptiness only."""
        assert validator.validate(make_expense(title=" ")) == ValidationOutcome.SUCCESS


class TestValidationOrder:
    """Tests that the first failing check wins."""

    def test_title_before_amount(self, validator):
        outcome = validator.validate(make_expense(title="", amount=0))
        assert outcome == ValidationOutcome.EMPTY_TITLE

    def test_amount_before_category(self, validator):
        outcome = validator.validate(make_expense(amount=-1, category=""))
        assert outcome == ValidationOutcome.INVALID_AMOUNT

    def test_category_before_date(self, validator):
        outcome = validator.validate(make_expense(category="", date=""))
        assert outcome == ValidationOutcome.EMPTY_CATEGORY

    def test_everything_invalid(self, validator):
        outcome = validator.validate(make_expense(title="", amount=0, category="", date=""))
        assert outcome == ValidationOutcome.EMPTY_TITLE


class TestErrorMessages:
    """Tests for the outcome -> message table."""

    @pytest.mark.parametrize("outcome,message", [
        (ValidationOutcome.SUCCESS, "Valid expense"),
        (ValidationOutcome.EMPTY_TITLE, "Title cannot be empty"),
        (ValidationOutcome.INVALID_AMOUNT, "Amount must be greater than 0"),
        (ValidationOutcome.EMPTY_CATEGORY, "Category cannot be empty"),
        (ValidationOutcome.EMPTY_DATE, "Date cannot be empty"),
    ])
    def test_known_outcomes(self, validator, outcome, message):
        assert validator.get_error_message(outcome) == message

    @pytest.mark.parametrize("outcome", ["bogus", None, 42])
    def test_unknown_outcome_falls_back(self, validator, outcome):
        """Test the fallback for values outside the closed set."""
        assert validator.get_error_message(outcome) == UNKNOWN_ERROR_MESSAGE
        assert UNKNOWN_ERROR_MESSAGE == "Unknown error"

    def test_every_outcome_has_a_message(self, validator):
        for outcome in ValidationOutcome:
            assert validator.get_error_message(outcome) != UNKNOWN_ERROR_MESSAGE

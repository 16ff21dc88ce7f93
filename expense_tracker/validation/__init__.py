"""Input validation package."""

from expense_tracker.validation.validator import (
    AMOUNT_NOT_POSITIVE,
    parse_amount,
    validate_amount,
    validate_category,
)

__all__ = [
    "AMOUNT_NOT_POSITIVE",
    "parse_amount",
    "validate_amount",
    "validate_category",
]

"""
Prompt-Boundary Validation

DESIGN DECISION: User input is validated where it is typed.
Invalid answers are rejected with a message and the question is asked
again, so nothing invalid ever reaches the data layer.

Validators follow the prompt provider's contract: return True to accept
the answer, or a message string to reject it.
"""

import math
from typing import Union

from expense_tracker.models.expense import ExpenseCategory


AMOUNT_NOT_POSITIVE = "The value must be positive"


def parse_amount(raw: str) -> float:
    """
    Convert a typed amount to a float.

    Raises:
        ValueError: If the text is not a number
    """
    text = raw.strip()
    # float() would read "1_000" as 1000
    if "_" in text:
        raise ValueError(f"Not a number: {raw!r}")
    return float(text)


def validate_amount(raw: str) -> Union[bool, str]:
    """Accept finite numbers strictly greater than zero."""
    try:
        value = parse_amount(raw)
    except ValueError:
        return AMOUNT_NOT_POSITIVE
    if not math.isfinite(value) or value <= 0:
        return AMOUNT_NOT_POSITIVE
    return True


def validate_category(value: Union[ExpenseCategory, str]) -> ExpenseCategory:
    """
    Only the fixed category labels are accepted.

    Raises:
        ValueError: For anything else
    """
    try:
        return ExpenseCategory(value)
    except ValueError:
        allowed = [category.value for category in ExpenseCategory]
        raise ValueError(f"Unsupported category: {value}. Allowed: {allowed}")

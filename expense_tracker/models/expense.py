"""
Core Data Models for Expense Tracker

These models define the schemas for all data flowing through the system.
They are designed to:
1. Normalize persisted values once, at deserialization time
2. Be serializable back to the JSON storage format
3. Keep the fixed menus (categories, actions) as explicit enums

DESIGN DECISION: Strict checks (positive amount, known category) happen
when an expense is CREATED. Loading is lenient: whatever was written to
disk before is read back as-is, apart from coercing numeric amounts
to floats and numeric ids or dates to text.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class ExpenseCategory(str, Enum):
    """
    Supported expense categories.

    DESIGN DECISION: Using explicit categories rather than free text ensures
    consistent categorization. The values are the labels shown and stored.
    """
    FOOD = "Food"
    TRANSPORT = "Transport"
    LEISURE = "Leisure"
    HEALTH = "Health"
    OTHERS = "Others"


class MenuAction(str, Enum):
    """Top-level menu entries, in display order."""
    ADD = "Add expense"
    LIST = "List expenses"
    REMOVE = "Remove expense"
    SUMMARY = "Summary expenses"
    EXIT = "Exit"


def generate_expense_id() -> str:
    return str(uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_timestamp() -> str:
    """Current instant as ISO-8601 text, e.g. '2026-10-17T10:00:00.123456Z'."""
    return utc_now().isoformat().replace("+00:00", "Z")


# =============================================================================
# CORE EXPENSE MODEL
# =============================================================================

class Expense(BaseModel):
    """
    A single recorded expenditure.

    `amount` accepts numbers or numeric strings on input (older files store
    amounts as text) and is always a float afterwards. `id` and `date` are
    kept as the stored text; keys this model does not know are carried
    through unchanged so a load-then-save never drops them.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(
        default_factory=generate_expense_id,
        description="Opaque unique identifier"
    )
    description: str = Field(
        default="",
        description="Free-text description, may be empty"
    )
    amount: float = Field(
        ...,
        description="Amount spent"
    )
    category: str = Field(
        ...,
        description="Category label (see ExpenseCategory)"
    )
    date: str = Field(
        default_factory=utc_timestamp,
        description="When the expense was recorded (ISO-8601 for new entries)"
    )

    @field_validator('id', 'date', mode='before')
    @classmethod
    def numbers_as_text(cls, v: Any) -> Any:
        """Hand-edited files may hold numeric ids or dates."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def recorded_at(self) -> Optional[datetime]:
        """`date` parsed as an instant, or None if it is not ISO-8601."""
        try:
            return datetime.fromisoformat(self.date.replace("Z", "+00:00"))
        except ValueError:
            return None

    @classmethod
    def create(
        cls,
        description: str,
        amount: float,
        category: Union[ExpenseCategory, str],
    ) -> "Expense":
        """
        Build a new expense with a fresh id and the current instant.

        Raises:
            ValueError: If amount is not strictly positive or the
                        category is not one of ExpenseCategory
        """
        if not amount > 0:
            raise ValueError("The value must be positive")
        category = ExpenseCategory(category)
        return cls(
            description=description,
            amount=amount,
            category=category.value,
        )

    def formatted_amount(self, currency_symbol: str = "R$") -> str:
        return format_money(self.amount, currency_symbol)

    def to_storage_dict(self) -> dict:
        """Convert to the JSON object written to the storage file."""
        return self.model_dump(mode="json")


def format_money(amount: float, currency_symbol: str = "R$") -> str:
    """Render an amount with exactly two decimals, e.g. 'R$ 12.50'."""
    return f"{currency_symbol} {amount:.2f}"


def total_amount(expenses: list[Expense]) -> float:
    """Sum of all amounts; 0.0 for an empty collection."""
    return sum((expense.amount for expense in expenses), 0.0)

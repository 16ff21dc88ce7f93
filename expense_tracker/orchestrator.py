"""
Main Orchestrator for Expense Tracker

This module ties together all the components and defines the four
user operations:
1. Add    (ask → load → append → save)
2. List   (load → print)
3. Summary (load → sum → print)
4. Remove (load → pick by position → remove → save)

DESIGN DECISION: Each operation owns a fresh copy of the collection.
It loads from storage at the start and, for mutations, saves the whole
collection at the end. Nothing is cached between operations.

Removal is by position in the freshly loaded list. Load, selection and
save happen within one synchronous call, so the positions cannot shift
in between.
"""

from typing import Optional

from expense_tracker.audit import AuditLogger
from expense_tracker.config import Settings, get_settings
from expense_tracker.interface import (
    OutputRenderer,
    PromptProvider,
    RichConsoleRenderer,
    RichPromptProvider,
    Tone,
)
from expense_tracker.models.expense import (
    Expense,
    ExpenseCategory,
    format_money,
    total_amount,
)
from expense_tracker.services.storage import (
    ExpenseStorageInterface,
    JsonFileExpenseStorage,
)
from expense_tracker.validation import (
    parse_amount,
    validate_amount,
    validate_category,
)


MSG_ADDED = "Expenses added successfully!"
MSG_NOT_FOUND = "Expenses not found"
MSG_NOTHING_TO_REMOVE = "No expenses to remove"
MSG_REMOVED = "Expenses removed"


class ExpenseOperations:
    """
    The four top-level user operations.

    Collaborators are injected so tests can substitute storage,
    scripted prompts and a recording renderer.
    """

    def __init__(
        self,
        storage: ExpenseStorageInterface,
        prompts: PromptProvider,
        renderer: OutputRenderer,
        audit_logger: Optional[AuditLogger] = None,
        currency_symbol: str = "R$",
    ):
        self._storage = storage
        self._prompts = prompts
        self._renderer = renderer
        self._audit_logger = audit_logger or AuditLogger()
        self._currency_symbol = currency_symbol

    @property
    def prompts(self) -> PromptProvider:
        return self._prompts

    def _money(self, amount: float) -> str:
        return format_money(amount, self._currency_symbol)

    def add_expense(self) -> Expense:
        """
        Ask for the three fields, then append and save.

        A failed save propagates; nothing is rolled back.
        """
        description = self._prompts.text("Description of expenditure")
        raw_amount = self._prompts.text(
            "Value of expenditure",
            validate=validate_amount,
        )
        category = validate_category(self._prompts.select(
            "Category",
            [(category.value, category) for category in ExpenseCategory],
        ))

        expense = Expense.create(
            description=description,
            amount=parse_amount(raw_amount),
            category=category,
        )

        expenses = self._storage.load()
        expenses.append(expense)
        self._storage.save(expenses)

        self._audit_logger.log_expense_added(
            expense_id=expense.id,
            category=expense.category,
            amount=expense.amount,
        )
        self._renderer.show(MSG_ADDED, Tone.SUCCESS)
        return expense

    def list_expenses(self) -> list[Expense]:
        """Print every expense in stored order. Read only."""
        expenses = self._storage.load()
        if not expenses:
            self._renderer.show(MSG_NOT_FOUND, Tone.WARNING)
            return expenses

        self._renderer.show("\n Expenses List:", Tone.INFO)
        for position, expense in enumerate(expenses, start=1):
            self._renderer.show(
                f"{position}. {expense.description} - "
                f"{self._money(expense.amount)} - {expense.category}"
            )

        self._audit_logger.log_expenses_listed(count=len(expenses))
        return expenses

    def show_summary(self) -> Optional[float]:
        """Print the total of all amounts. Read only."""
        expenses = self._storage.load()
        if not expenses:
            self._renderer.show(MSG_NOT_FOUND, Tone.WARNING)
            return None

        total = total_amount(expenses)
        self._renderer.show(f"\n Total expenses: {self._money(total)}", Tone.SUCCESS)

        self._audit_logger.log_summary_computed(count=len(expenses), total=total)
        return total

    def delete_expense(self) -> Optional[Expense]:
        """Let the user pick one expense by position, remove it and save."""
        expenses = self._storage.load()
        if not expenses:
            self._renderer.show(MSG_NOTHING_TO_REMOVE, Tone.WARNING)
            return None

        index = self._prompts.select(
            "Select the expense to remove",
            [
                (f"{expense.description} - {self._money(expense.amount)}", position)
                for position, expense in enumerate(expenses)
            ],
        )
        removed = expenses.pop(index)
        self._storage.save(expenses)

        self._audit_logger.log_expense_deleted(
            expense_id=removed.id,
            position=index,
            remaining=len(expenses),
        )
        self._renderer.show(MSG_REMOVED, Tone.ERROR)
        return removed


def create_app_components(
    settings: Optional[Settings] = None,
) -> ExpenseOperations:
    """
    Factory function to create all application components.

    Args:
        settings: Settings to use. Defaults to get_settings().

    Returns:
        ExpenseOperations wired to the configured JSON file and the
        rich console.
    """
    settings = settings or get_settings()

    audit_logger = AuditLogger()
    storage = JsonFileExpenseStorage(
        settings.storage.path,
        audit_logger=audit_logger,
    )
    renderer = RichConsoleRenderer()
    prompts = RichPromptProvider(renderer.console)

    return ExpenseOperations(
        storage=storage,
        prompts=prompts,
        renderer=renderer,
        audit_logger=audit_logger,
        currency_symbol=settings.display.currency_symbol,
    )

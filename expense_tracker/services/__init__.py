"""Services package."""

from expense_tracker.services.storage import (
    ExpenseStorageInterface,
    JsonFileExpenseStorage,
    StorageError,
)

__all__ = [
    # Storage services
    "ExpenseStorageInterface",
    "JsonFileExpenseStorage",
    "StorageError",
]

"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Swap the JSON file for another backend later
2. Use in-memory storage for testing
3. Keep the operations decoupled from the file format

The interface is intentionally tiny: the whole collection is read and
written as one unit. There is no incremental update path.
"""

from abc import ABC, abstractmethod

from expense_tracker.models.expense import Expense


class ExpenseStorageInterface(ABC):
    """
    Abstract interface for expense storage.

    Any storage implementation must implement these methods.
    """

    @abstractmethod
    def load(self) -> list[Expense]:
        """
        Read the full expense collection.

        Returns:
            Expenses in stored order, with numeric amounts.
            An empty list if nothing usable is stored.

        Never raises: unreadable storage is treated as empty.
        """
        pass

    @abstractmethod
    def save(self, expenses: list[Expense]) -> None:
        """
        Replace the stored collection with `expenses`.

        Args:
            expenses: The full collection, in display order

        Raises:
            StorageError: If the write fails
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass

"""
Storage Services Package

Provides the abstract storage interface and the concrete implementation.
Currently implements a local JSON file as the backend, but designed to be
swappable.
"""

from expense_tracker.services.storage.interface import (
    ExpenseStorageInterface,
    StorageError,
)
from expense_tracker.services.storage.json_file import JsonFileExpenseStorage

__all__ = [
    # Interfaces
    "ExpenseStorageInterface",
    # Exceptions
    "StorageError",
    # JSON file implementation
    "JsonFileExpenseStorage",
]

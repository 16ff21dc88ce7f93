"""
JSON File Storage Implementation

DESIGN DECISION: A single local JSON file is the storage backend because:
1. The user can read and hand-edit their data
2. No database setup required
3. One user, one process: no locking needed

TRADEOFFS:
- Every save rewrites the whole file; a crash mid-write can truncate it
- No protection against another program editing the file between
  load and save

The file holds a JSON array of objects with the keys
id, description, amount, category and date, pretty-printed with
2-space indentation.
"""

import json
from pathlib import Path
from typing import Optional, Union

import structlog
from pydantic import TypeAdapter

from expense_tracker.audit import AuditLogger
from expense_tracker.models.expense import Expense
from expense_tracker.services.storage.interface import (
    ExpenseStorageInterface,
    StorageError,
)


logger = structlog.get_logger(__name__)

_collection_adapter = TypeAdapter(list[Expense])


class JsonFileExpenseStorage(ExpenseStorageInterface):
    """
    JSON file implementation of expense storage.

    Amounts stored as numeric strings (e.g. "12.50") are coerced to
    floats here, once, while deserializing. Nothing downstream needs
    to re-check them.
    """

    def __init__(
        self,
        path: Union[str, Path],
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._path = Path(path)
        self._audit_logger = audit_logger or AuditLogger()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Expense]:
        """Load all expenses; any read or parse failure yields []."""
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
            return _collection_adapter.validate_python(raw)
        except FileNotFoundError:
            # First run: nothing saved yet
            logger.info("expense_file_missing", path=str(self._path))
            return []
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError, UnicodeDecodeError
            # and pydantic's ValidationError
            self._audit_logger.log_storage_read_failed(
                path=str(self._path),
                error=str(e),
            )
            return []

    def save(self, expenses: list[Expense]) -> None:
        """Overwrite the file with the full collection."""
        payload = json.dumps(
            [expense.to_storage_dict() for expense in expenses],
            indent=2,
            ensure_ascii=False,
        )
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to save expenses to {self._path}: {e}") from e

        self._audit_logger.log_storage_saved(
            path=str(self._path),
            count=len(expenses),
        )

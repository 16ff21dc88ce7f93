"""
Audit Logger

DESIGN DECISION: Every change to the expense file is logged.
This provides:
1. Traceability of adds and removals
2. Debugging capability when the file turns out unreadable

The audit logger writes structured JSON through the standard logging
tree, so where it ends up (stderr, a file, nowhere) is decided by
configure_logging() at startup.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

from expense_tracker.models.audit import AuditEvent, AuditEventBuilder


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(level: str = "ERROR", log_file: Optional[Path] = None) -> None:
    """
    Route stdlib logging (and therefore structlog) to stderr or a file.

    Called once by the console entry point. Tests leave logging alone
    and rely on pytest's capture.
    """
    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)


class AuditLogger:
    """
    Central audit logging service.

    Every event goes to the structured local log at the level matching
    its severity.
    """

    def __init__(self, logger_name: str = "expense_tracker.audit"):
        self._logger = structlog.get_logger(logger_name)

    def log(self, event: AuditEvent) -> None:
        """Log an audit event."""
        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_expense_added(
        self,
        expense_id: str,
        category: str,
        amount: float,
    ) -> None:
        """Log a new expense."""
        self.log(AuditEventBuilder.expense_added(
            expense_id=expense_id,
            category=category,
            amount=amount,
        ))

    def log_expense_deleted(
        self,
        expense_id: str,
        position: int,
        remaining: int,
    ) -> None:
        """Log removal of an expense."""
        self.log(AuditEventBuilder.expense_deleted(
            expense_id=expense_id,
            position=position,
            remaining=remaining,
        ))

    def log_expenses_listed(self, count: int) -> None:
        self.log(AuditEventBuilder.expenses_listed(count=count))

    def log_summary_computed(self, count: int, total: float) -> None:
        self.log(AuditEventBuilder.summary_computed(count=count, total=total))

    def log_storage_saved(self, path: str, count: int) -> None:
        self.log(AuditEventBuilder.storage_saved(path=path, count=count))

    def log_storage_read_failed(self, path: str, error: str) -> None:
        """Log an unreadable expense file."""
        self.log(AuditEventBuilder.storage_read_failed(path=path, error=error))

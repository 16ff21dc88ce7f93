"""
Interaction Loop

One state, "awaiting selection". Every menu choice except Exit runs its
operation to completion and comes back to the same state; Exit ends
the loop.

DESIGN DECISION: Dispatch goes through a table keyed by MenuAction.
The table is checked against the enum when the loop is built, so a new
menu entry without a handler fails at startup instead of being
silently ignored.
"""

from typing import Callable, Optional

import structlog

from expense_tracker.audit import configure_logging
from expense_tracker.config import get_settings
from expense_tracker.interface import PromptProvider
from expense_tracker.models.expense import MenuAction
from expense_tracker.orchestrator import ExpenseOperations, create_app_components


logger = structlog.get_logger(__name__)


class InteractionLoop:
    """Presents the main menu until the user picks Exit."""

    def __init__(
        self,
        operations: ExpenseOperations,
        prompts: Optional[PromptProvider] = None,
    ):
        self._operations = operations
        self._prompts = prompts or operations.prompts
        self._handlers = self._build_handlers()

        missing = [
            action for action in MenuAction
            if action is not MenuAction.EXIT and action not in self._handlers
        ]
        if missing:
            raise NotImplementedError(
                f"No handler for menu actions: {[action.value for action in missing]}"
            )

    def _build_handlers(self) -> dict[MenuAction, Callable[[], object]]:
        return {
            MenuAction.ADD: self._operations.add_expense,
            MenuAction.LIST: self._operations.list_expenses,
            MenuAction.REMOVE: self._operations.delete_expense,
            MenuAction.SUMMARY: self._operations.show_summary,
        }

    def ask(self) -> MenuAction:
        return self._prompts.select(
            "What do you want to do?",
            [(action.value, action) for action in MenuAction],
        )

    def dispatch(self, action: MenuAction) -> bool:
        """
        Run the operation for `action`.

        Returns:
            False once the loop should stop (Exit), True otherwise
        """
        if action is MenuAction.EXIT:
            return False
        logger.debug("menu_action", action=action.value)
        self._handlers[action]()
        return True

    def run(self) -> None:
        while self.dispatch(self.ask()):
            pass


def main() -> int:
    """Console entry point. Takes no arguments."""
    settings = get_settings()
    configure_logging(settings.app.log_level, settings.app.log_file)

    loop = InteractionLoop(create_app_components(settings))
    try:
        loop.run()
    except KeyboardInterrupt:
        return 130
    except EOFError:
        # stdin closed at a prompt
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

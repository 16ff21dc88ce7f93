"""
Shared fixtures for the Expense Tracker tests.

No test touches the user's real expense file: storage always points
at a pytest tmp_path, prompts are scripted and output is recorded.
"""

from typing import Any, Optional, Sequence

import pytest

from expense_tracker.interface import OutputRenderer, PromptProvider, Tone
from expense_tracker.models.expense import Expense
from expense_tracker.orchestrator import ExpenseOperations
from expense_tracker.services.storage import JsonFileExpenseStorage


class ScriptedPrompts(PromptProvider):
    """
    Answers questions from a fixed script.

    text() consumes answers until the validator accepts one, recording
    every rejection message. select() matches the answer against the
    option labels.
    """

    def __init__(self, answers: Sequence[Any]):
        self._answers = list(answers)
        self.questions: list[str] = []
        self.rejections: list[str] = []
        self.offered: list[list[tuple[str, Any]]] = []

    def _next(self) -> Any:
        if not self._answers:
            raise AssertionError("Prompt script exhausted")
        return self._answers.pop(0)

    def text(self, message, validate=None):
        self.questions.append(message)
        while True:
            answer = self._next()
            if validate is None:
                return answer
            result = validate(answer)
            if result is True:
                return answer
            self.rejections.append(result)

    def select(self, message, choices):
        self.questions.append(message)
        self.offered.append(list(choices))
        answer = self._next()
        for label, value in choices:
            if label == answer:
                return value
        raise AssertionError(f"No option labelled {answer!r}")

    @property
    def remaining(self) -> int:
        return len(self._answers)


class RecordingRenderer(OutputRenderer):
    """Keeps every message instead of printing it."""

    def __init__(self):
        self.messages: list[tuple[str, Optional[Tone]]] = []

    def show(self, message, tone=None):
        self.messages.append((message, tone))

    @property
    def lines(self) -> list[str]:
        return [message for message, _ in self.messages]


class CountingStorage(JsonFileExpenseStorage):
    """JSON file storage that counts writes."""

    def __init__(self, path):
        super().__init__(path)
        self.save_calls = 0

    def save(self, expenses):
        self.save_calls += 1
        super().save(expenses)


@pytest.fixture
def storage_path(tmp_path):
    return tmp_path / "expenses.json"


@pytest.fixture
def storage(storage_path):
    return CountingStorage(storage_path)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def make_operations(storage, renderer):
    """Build ExpenseOperations around a prompt script."""
    def _make(*answers) -> tuple[ExpenseOperations, ScriptedPrompts]:
        prompts = ScriptedPrompts(answers)
        operations = ExpenseOperations(
            storage=storage,
            prompts=prompts,
            renderer=renderer,
        )
        return operations, prompts
    return _make


@pytest.fixture
def three_expenses() -> list[Expense]:
    return [
        Expense.create("Lunch", 10.00, "Food"),
        Expense.create("Bus ticket", 5.25, "Transport"),
        Expense.create("Pharmacy", 2.75, "Health"),
    ]

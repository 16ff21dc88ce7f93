"""Tests for the interaction loop and the console entry point."""

import json
import logging

import pytest

from expense_tracker.config import get_settings
from expense_tracker.menu import InteractionLoop, main
from expense_tracker.models.expense import MenuAction
from expense_tracker.orchestrator import MSG_ADDED, MSG_NOT_FOUND, MSG_REMOVED


class TestInteractionLoop:
    """Tests for menu dispatch."""

    def test_exit_ends_loop_immediately(self, make_operations, renderer):
        """Test Exit is the only way out and runs no operation."""
        operations, prompts = make_operations("Exit")

        InteractionLoop(operations).run()

        assert renderer.messages == []
        assert prompts.questions == ["What do you want to do?"]

    def test_menu_offers_all_actions(self, make_operations):
        operations, prompts = make_operations("Exit")

        InteractionLoop(operations).run()

        assert [value for _, value in prompts.offered[0]] == list(MenuAction)

    def test_full_session(self, make_operations, renderer, storage_path):
        """Test add, list, summarize, remove, then exit, in one session."""
        operations, prompts = make_operations(
            "Add expense", "Coffee", "4.5", "Food",
            "Add expense", "Taxi", "-1", "20", "Transport",
            "List expenses",
            "Summary expenses",
            "Remove expense", "Coffee - R$ 4.50",
            "Exit",
        )

        InteractionLoop(operations).run()

        assert prompts.remaining == 0
        assert renderer.lines == [
            MSG_ADDED,
            MSG_ADDED,
            "\n Expenses List:",
            "1. Coffee - R$ 4.50 - Food",
            "2. Taxi - R$ 20.00 - Transport",
            "\n Total expenses: R$ 24.50",
            MSG_REMOVED,
        ]
        raw = json.loads(storage_path.read_text(encoding="utf-8"))
        assert [entry["description"] for entry in raw] == ["Taxi"]

    def test_operations_return_to_menu(self, make_operations, renderer):
        """Test that after an operation the menu is asked again."""
        operations, prompts = make_operations("List expenses", "List expenses", "Exit")

        InteractionLoop(operations).run()

        assert renderer.lines == [MSG_NOT_FOUND, MSG_NOT_FOUND]
        assert prompts.questions.count("What do you want to do?") == 3

    def test_dispatch_reports_whether_to_continue(self, make_operations):
        operations, _ = make_operations()
        loop = InteractionLoop(operations)

        assert loop.dispatch(MenuAction.EXIT) is False
        assert loop.dispatch(MenuAction.SUMMARY) is True

    def test_missing_handler_fails_at_construction(self, make_operations):
        """Test that every menu action except Exit must have a handler."""
        class IncompleteLoop(InteractionLoop):
            def _build_handlers(self):
                handlers = super()._build_handlers()
                del handlers[MenuAction.SUMMARY]
                return handlers

        operations, _ = make_operations()

        with pytest.raises(NotImplementedError, match="Summary expenses"):
            IncompleteLoop(operations)


class TestMain:
    """Tests for the console entry point."""

    @pytest.fixture(autouse=True)
    def isolated_settings(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("EXPENSE_STORAGE_PATH", str(tmp_path / "main.json"))
        monkeypatch.setenv("LOG_FILE", str(tmp_path / "tracker.log"))
        get_settings.cache_clear()

        # main() reconfigures the root logger
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)
        get_settings.cache_clear()

    def test_main_exits_zero_on_exit(self, monkeypatch, tmp_path):
        """Test a session that picks Exit (option 5) returns 0."""
        monkeypatch.setattr("builtins.input", lambda *args: "5")

        assert main() == 0
        assert not (tmp_path / "main.json").exists()

    def test_main_adds_to_configured_file(self, monkeypatch, tmp_path):
        """Test that the storage path comes from configuration."""
        answers = iter(["1", "Bread", "7.5", "1", "5"])
        monkeypatch.setattr("builtins.input", lambda *args: next(answers))

        assert main() == 0

        raw = json.loads((tmp_path / "main.json").read_text(encoding="utf-8"))
        assert raw[0]["description"] == "Bread"
        assert raw[0]["amount"] == 7.5
        assert raw[0]["category"] == "Food"

    def test_main_returns_130_on_interrupt(self, monkeypatch):
        def interrupt(*args):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupt)

        assert main() == 130

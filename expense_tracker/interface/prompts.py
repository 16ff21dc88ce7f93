"""
Interactive Prompts

The operations ask questions through a PromptProvider so the console
library stays at the edge and tests can script the answers.

Two question kinds exist:
- text:   free text, optionally re-asked until a validator accepts it
- select: pick exactly one option from a fixed list
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence, Union

from rich.console import Console
from rich.prompt import Prompt


# Returns True to accept, or a message explaining the rejection
Validator = Callable[[str], Union[bool, str]]


class PromptProvider(ABC):
    """Asks the user a question and returns a validated answer."""

    @abstractmethod
    def text(self, message: str, validate: Optional[Validator] = None) -> str:
        """
        Ask for free text.

        If `validate` is given, the question is repeated until it
        returns True; any message it returns is shown to the user.
        """
        pass

    @abstractmethod
    def select(self, message: str, choices: Sequence[tuple[str, Any]]) -> Any:
        """
        Ask the user to pick one option.

        Args:
            message: The question
            choices: (label, value) pairs in display order

        Returns:
            The value of the chosen option
        """
        pass


class RichPromptProvider(PromptProvider):
    """PromptProvider built on the rich console and rich.prompt."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    def text(self, message: str, validate: Optional[Validator] = None) -> str:
        while True:
            # Console.input keeps the answer exactly as typed; Prompt.ask strips it
            answer = self._console.input(f"{message}: ", markup=False)
            if validate is None:
                return answer
            result = validate(answer)
            if result is True:
                return answer
            self._console.print(
                result or "Invalid value",
                style="red",
                markup=False,
                highlight=False,
            )

    def select(self, message: str, choices: Sequence[tuple[str, Any]]) -> Any:
        if not choices:
            raise ValueError("select() needs at least one choice")

        self._console.print(message, style="bold", markup=False, highlight=False)
        for number, (label, _) in enumerate(choices, start=1):
            self._console.print(f"  {number}) {label}", markup=False, highlight=False)

        picked = Prompt.ask(
            "Choose an option",
            console=self._console,
            choices=[str(number) for number in range(1, len(choices) + 1)],
            show_choices=False,
        )
        _, value = choices[int(picked) - 1]
        return value

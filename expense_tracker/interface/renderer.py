"""
Console Output

Operations report to the user through an OutputRenderer. The tone of a
message only picks its color; it never changes what the program does.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from rich.console import Console


class Tone(str, Enum):
    """Semantic color tag for a console message."""
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


TONE_STYLES = {
    Tone.SUCCESS: "green",
    Tone.ERROR: "red",
    Tone.INFO: "blue",
    Tone.WARNING: "yellow",
}


class OutputRenderer(ABC):
    """Prints one message to the user-visible console."""

    @abstractmethod
    def show(self, message: str, tone: Optional[Tone] = None) -> None:
        pass


class RichConsoleRenderer(OutputRenderer):
    """OutputRenderer backed by a rich Console."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    @property
    def console(self) -> Console:
        return self._console

    def show(self, message: str, tone: Optional[Tone] = None) -> None:
        # User text (descriptions) may contain square brackets,
        # so markup is never interpreted.
        self._console.print(
            message,
            style=TONE_STYLES.get(tone) if tone else None,
            markup=False,
            highlight=False,
        )

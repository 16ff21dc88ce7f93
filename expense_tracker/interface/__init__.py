"""Console interface package: prompts in, messages out."""

from expense_tracker.interface.prompts import (
    PromptProvider,
    RichPromptProvider,
    Validator,
)
from expense_tracker.interface.renderer import (
    OutputRenderer,
    RichConsoleRenderer,
    Tone,
)

__all__ = [
    "OutputRenderer",
    "PromptProvider",
    "RichConsoleRenderer",
    "RichPromptProvider",
    "Tone",
    "Validator",
]

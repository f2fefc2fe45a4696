"""Interactive questions: free text with a default, and yes/no confirmation."""

import sys
from dataclasses import dataclass, field
from typing import Callable, TextIO

from tskata.errors import CancelledByOperator

_YES = ("y", "yes")
_NO = ("n", "no")


@dataclass
class PrompterConfig:
    """I/O configuration for prompt display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def required(value):
    """Validator rejecting empty answers."""
    if not value.strip():
        return "Value is required!"
    return None


class Prompter:
    """Asks the operator questions until a valid answer or a cancellation."""

    def __init__(self, config=None):
        self._config = config or PrompterConfig()

    def _open_question(self):
        print("", file=self._config.output)

    def _read(self, prompt_text):
        try:
            return self._config.input_fn(prompt_text)
        except (EOFError, KeyboardInterrupt):
            print("", file=self._config.output)
            raise CancelledByOperator("User cancelled.") from None

    def ask(self, question, default=None, validator=None):
        """Ask a free-text question.

        Empty input takes ``default``. ``validator`` returns an error message
        for a rejected answer, which is shown before asking again.

        Raises:
            CancelledByOperator: Input was closed or interrupted.
        """
        prompt_text = f"{question} [{default}]: " if default else f"{question}: "
        self._open_question()
        while True:
            answer = self._read(prompt_text).strip() or (default or "")
            error = validator(answer) if validator else None
            if error is None:
                return answer
            print(error, file=self._config.output)

    def confirm(self, question, default=False):
        """Ask a yes/no question and return the answer as a bool."""
        suffix = "[Y/n]" if default else "[y/N]"
        self._open_question()
        while True:
            answer = self._read(f"{question} {suffix}: ").strip().lower()
            if answer == "":
                return default
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            print("Please answer y or n.", file=self._config.output)

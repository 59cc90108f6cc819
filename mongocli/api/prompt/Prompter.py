"""Abstract prompt source."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)

Validator = Callable[[str], "str | None"]


class Prompter(ABC):
    """Source of operator answers.

    Subclasses supply raw lines and yes/no answers; validation loops and
    menu selection are shared here so the terminal and scripted sources
    behave identically.
    """

    @abstractmethod
    def _read(self, message: str, default: str | None = None) -> str:
        """Return one raw answer. Must raise OperationCancelled when input ends."""
        pass

    @abstractmethod
    def confirm(self, message: str, default: bool = False) -> bool:
        """Yes/no question. An empty answer returns ``default``."""
        pass

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a message that is not a question (menus, validation problems)."""
        pass

    def text(self, message: str, default: str | None = None, validate: Validator | None = None) -> str:
        """Ask until ``validate`` returns None for the answer."""
        while True:
            value = self._read(message, default)
            problem = validate(value) if validate else None
            if problem is None:
                return value
            self.notify(problem)

    def exact(self, message: str) -> str:
        """Ask once and return the answer untouched (no validation, no default)."""
        return self._read(message, "")

    def choose(self, message: str, choices: Sequence[E]) -> E:
        """Numbered menu over enum members. Accepts the number or the member value."""
        for index, choice in enumerate(choices, start=1):
            self.notify(f"  {index}. {getattr(choice, 'label', choice.value)}")

        def _lookup(answer: str) -> E | None:
            answer = answer.strip()
            if answer.isdecimal() and 1 <= int(answer) <= len(choices):
                return choices[int(answer) - 1]
            for choice in choices:
                if answer == choice.value:
                    return choice
            return None

        answer = self.text(
            message,
            validate=lambda a: None if _lookup(a) is not None else f"Please choose 1-{len(choices)}",
        )
        return _lookup(answer)  # type: ignore[return-value]


def required(label: str) -> Validator:
    """Validator rejecting blank answers."""
    return lambda value: None if value.strip() else f"{label} is required"

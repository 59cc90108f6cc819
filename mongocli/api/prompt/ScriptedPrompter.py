"""Prompt source that replays prepared answers."""

from collections import deque
from collections.abc import Iterable

from ..OperationCancelled import OperationCancelled
from .Prompter import Prompter


class ScriptedPrompter(Prompter):
    """Answers come from a list; running out behaves like end of input.

    Every question asked is kept in ``asked`` and every notice in ``notices``.
    """

    def __init__(self, answers: Iterable[str] = ()):
        self._answers = deque(answers)
        self.asked: list[str] = []
        self.notices: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._answers)

    def _next(self, message: str) -> str:
        self.asked.append(message)
        if not self._answers:
            raise OperationCancelled(f"No answer for prompt: {message}")
        return self._answers.popleft()

    def _read(self, message: str, default: str | None = None) -> str:
        answer = self._next(message)
        if answer == "" and default is not None:
            return default
        return answer

    def confirm(self, message: str, default: bool = False) -> bool:
        answer = self._next(message).strip().lower()
        if not answer:
            return default
        return answer in ("y", "yes")

    def notify(self, message: str) -> None:
        self.notices.append(message)

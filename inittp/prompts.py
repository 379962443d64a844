"""Interactive question/answer surface.

Questions are plain data; a ``Prompter`` turns one question into one answer.
``ConsolePrompter`` asks on the terminal through ``rich.prompt``.  Tests
substitute a prompter that answers from a dict.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from inittp.utils import console as default_console


class QuestionKind(str, Enum):
    TEXT = "text"
    SELECT = "select"
    CONFIRM = "confirm"


Validator = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class Question:
    """A single question asked of the user.

    ``validate`` returns ``None`` when the answer is accepted, or the message
    to show before asking again.
    """

    name: str
    kind: QuestionKind
    message: str
    choices: tuple[str, ...] = field(default_factory=tuple)
    default: Any = None
    validate: Optional[Validator] = None


class Prompter(Protocol):
    def ask(self, question: Question) -> Any: ...


class ConsolePrompter:
    """Asks questions on the terminal using ``rich.prompt``."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask(self, question: Question) -> Any:
        if question.kind is QuestionKind.CONFIRM:
            return Confirm.ask(
                question.message,
                default=bool(question.default),
                console=self.console,
            )
        if question.kind is QuestionKind.SELECT:
            return Prompt.ask(
                question.message,
                choices=list(question.choices),
                default=question.default,
                console=self.console,
            )
        return self._ask_text(question)

    def _ask_text(self, question: Question) -> str:
        while True:
            if question.default is None:
                answer = Prompt.ask(question.message, console=self.console)
            else:
                answer = Prompt.ask(
                    question.message, default=question.default, console=self.console
                )
            error = question.validate(answer) if question.validate else None
            if error is None:
                return answer
            self.console.print(f"[red]{error}[/red]")

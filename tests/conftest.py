"""Shared pytest fixtures for the init-tp test suite.

Provides reusable fixtures for:
- Scripted prompters that answer from a dict and record what was asked
- Fake install runners that never start a real package manager
- Sample project configurations
"""

from __future__ import annotations

from typing import Any

import pytest

from inittp.models import Compiler, PackageManager, ProjectConfig
from inittp.prompts import Question


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------

class ScriptedPrompter:
    """Answers questions by name and records every question asked."""

    def __init__(self, answers: dict[str, Any] | None = None) -> None:
        self.answers = dict(answers or {})
        self.asked: list[Question] = []

    @property
    def asked_names(self) -> list[str]:
        return [q.name for q in self.asked]

    def ask(self, question: Question) -> Any:
        self.asked.append(question)
        if question.name not in self.answers:
            raise AssertionError(f"Unexpected question: {question.name}")
        answer = self.answers[question.name]
        if isinstance(answer, BaseException):
            raise answer
        return answer


class InterruptingPrompter:
    """Simulates the user pressing Ctrl+C at the first question."""

    def ask(self, question: Question) -> Any:
        raise KeyboardInterrupt


@pytest.fixture
def scripted_prompter():
    """Factory for ``ScriptedPrompter`` instances.

    Usage:
        def test_resolve(scripted_prompter):
            prompter = scripted_prompter(project_name="demo", compiler="tsc")
    """
    def factory(**answers: Any) -> ScriptedPrompter:
        return ScriptedPrompter(answers)

    return factory


@pytest.fixture
def interrupting_prompter() -> InterruptingPrompter:
    return InterruptingPrompter()


# ---------------------------------------------------------------------------
# Install runner
# ---------------------------------------------------------------------------

class FakeRunner:
    """Stands in for ``inittp.utils.run_command``."""

    def __init__(self, returncode: int = 0, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.calls: list[dict[str, Any]] = []

    async def __call__(self, cmd: list[str], **kwargs: Any) -> tuple[int, str, str]:
        self.calls.append({"cmd": list(cmd), **kwargs})
        return (self.returncode, "", self.stderr)


@pytest.fixture
def fake_runner():
    """Factory for ``FakeRunner`` instances with a configurable exit code."""
    def factory(returncode: int = 0, stderr: str = "") -> FakeRunner:
        return FakeRunner(returncode=returncode, stderr=stderr)

    return factory


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def demo_config() -> ProjectConfig:
    """The canonical ``demo`` project: tsc, npm, no install."""
    return ProjectConfig(
        project_name="demo",
        compiler=Compiler.TSC,
        package_manager=PackageManager.NPM,
        run_install=False,
    )

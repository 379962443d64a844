"""Merge command-line options with interactive answers.

Flags always win.  Every missing field costs one question, except the
install confirmation, which is never asked in scripted mode.
"""

from __future__ import annotations

from typing import Any, Optional

from inittp.models import (
    Compiler,
    InputMode,
    InvalidInputError,
    PackageManager,
    PartialConfig,
    ProjectConfig,
    validate_project_name,
)
from inittp.prompts import Prompter, Question, QuestionKind


def project_name_question() -> Question:
    return Question(
        name="project_name",
        kind=QuestionKind.TEXT,
        message="Enter your project name",
        validate=validate_project_name,
    )


def compiler_question() -> Question:
    return Question(
        name="compiler",
        kind=QuestionKind.SELECT,
        message="Choose a TypeScript compiler",
        choices=tuple(c.value for c in Compiler),
        default=Compiler.TSC.value,
    )


def package_manager_question() -> Question:
    return Question(
        name="package_manager",
        kind=QuestionKind.SELECT,
        message="Choose a package manager",
        choices=tuple(pm.value for pm in PackageManager),
        default=PackageManager.NPM.value,
    )


def run_install_question(package_manager: PackageManager) -> Question:
    return Question(
        name="run_install",
        kind=QuestionKind.CONFIRM,
        message=f"Run {package_manager.value} install?",
        default=True,
    )


def check_options(options: PartialConfig) -> None:
    """Reject supplied values that can never be accepted.

    Raises:
        InvalidInputError: If the supplied project name is malformed.
    """
    if options.project_name is not None:
        error = validate_project_name(options.project_name)
        if error:
            raise InvalidInputError(f"{error} Got '{options.project_name}'.")


def resolve_config(
    options: PartialConfig,
    prompter: Prompter,
    mode: Optional[InputMode] = None,
) -> ProjectConfig:
    """Build a complete ``ProjectConfig`` from *options* plus answers.

    Args:
        options: Values supplied on the command line.
        prompter: Asks the questions for missing values.
        mode: Input mode; derived from *options* when omitted.

    Returns:
        The resolved, immutable configuration.

    Raises:
        InvalidInputError: If a supplied value is invalid.  Raised before
            any question is asked.
    """
    check_options(options)
    mode = mode or options.input_mode

    answers: dict[str, Any] = {}

    if options.project_name is None:
        answers["project_name"] = prompter.ask(project_name_question())
    else:
        answers["project_name"] = options.project_name

    if options.compiler is None:
        answers["compiler"] = Compiler(prompter.ask(compiler_question()))
    else:
        answers["compiler"] = options.compiler

    if options.package_manager is None:
        answers["package_manager"] = PackageManager(prompter.ask(package_manager_question()))
    else:
        answers["package_manager"] = options.package_manager

    if options.run_install is not None:
        answers["run_install"] = options.run_install
    elif mode is InputMode.SCRIPTED:
        answers["run_install"] = False
    else:
        answers["run_install"] = bool(
            prompter.ask(run_install_question(answers["package_manager"]))
        )

    return ProjectConfig(**answers)

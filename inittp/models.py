"""Pydantic v2 models for init-tp.

``ProjectConfig`` is the single, immutable record of user choices that drives
rendering, writing and installing.  ``PartialConfig`` holds whatever the
command line supplied before the missing answers are asked for.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class InvalidInputError(ValueError):
    """Raised when a user-supplied value is rejected at the boundary."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Compiler(str, Enum):
    """TypeScript compiler used by the generated project."""
    TSC = "tsc"
    ESBUILD = "esbuild"
    SWC = "swc"


class PackageManager(str, Enum):
    """Package manager used to install the generated project."""
    NPM = "npm"
    PNPM = "pnpm"


class InputMode(str, Enum):
    """How the answers are being collected.

    ``scripted`` means the project name and compiler were both given on the
    command line, so the install confirmation is never asked.
    """
    INTERACTIVE = "interactive"
    SCRIPTED = "scripted"


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def validate_project_name(value: str) -> Optional[str]:
    """Return ``None`` if *value* is an acceptable project name, else a message."""
    if not value.strip():
        return "Project name cannot be empty."
    if not PROJECT_NAME_PATTERN.fullmatch(value):
        return "Project name must be lowercase, alphanumeric, and may include hyphens."
    return None


def _parse_choice(enum_cls: type[Enum], value: str, label: str) -> Enum:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidInputError(
            f"Invalid {label} '{value}'. Choose one of: {allowed}."
        ) from None


def parse_compiler(value: str) -> Compiler:
    """Convert a command-line string into a ``Compiler``."""
    return _parse_choice(Compiler, value, "compiler")


def parse_package_manager(value: str) -> PackageManager:
    """Convert a command-line string into a ``PackageManager``."""
    return _parse_choice(PackageManager, value, "package manager")


# ---------------------------------------------------------------------------
# Configuration records
# ---------------------------------------------------------------------------


class PartialConfig(BaseModel):
    """Answers supplied non-interactively; ``None`` means not given."""

    project_name: Optional[str] = None
    compiler: Optional[Compiler] = None
    package_manager: Optional[PackageManager] = None
    run_install: Optional[bool] = None

    @property
    def input_mode(self) -> InputMode:
        """Resolve the input mode once from which fields were supplied."""
        if self.project_name is not None and self.compiler is not None:
            return InputMode.SCRIPTED
        return InputMode.INTERACTIVE


class ProjectConfig(BaseModel):
    """Resolved, complete set of choices driving generation."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory and package name")
    compiler: Compiler = Field(default=Compiler.TSC)
    package_manager: PackageManager = Field(default=PackageManager.NPM)
    run_install: bool = Field(default=False)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        error = validate_project_name(value)
        if error:
            raise ValueError(error)
        return value

"""init-tp runtime settings.

Settings that are not user answers: where projects are written, which
generator version is stamped into generated manifests, and how long the
install step may run.  Built once by the CLI entry point and passed down.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from inittp import __version__
from inittp.models import InvalidInputError


class Settings(BaseModel):
    """Global init-tp settings."""

    output_dir: Path = Field(default=Path("."), description="Parent of the generated project")
    generator_version: str = Field(default=__version__)
    install_timeout: Optional[int] = Field(
        default=None, ge=1, description="Install timeout in seconds; None waits forever"
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            INIT_TP_OUTPUT_DIR, INIT_TP_INSTALL_TIMEOUT.

        Raises:
            InvalidInputError: If a variable holds an unusable value.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("INIT_TP_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["INIT_TP_OUTPUT_DIR"])
        if os.environ.get("INIT_TP_INSTALL_TIMEOUT"):
            raw = os.environ["INIT_TP_INSTALL_TIMEOUT"]
            try:
                kwargs["install_timeout"] = int(raw)
            except ValueError:
                raise InvalidInputError(
                    f"INIT_TP_INSTALL_TIMEOUT must be a whole number of seconds, got '{raw}'."
                ) from None
        try:
            return cls(**kwargs)
        except ValidationError as exc:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise InvalidInputError(f"Invalid settings from environment: {errors}") from None

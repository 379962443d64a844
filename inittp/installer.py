"""Run the package manager's install command in a generated project.

The child process inherits the terminal so the user sees the package
manager's own output live.  The runner is injectable; it only has to accept
the command, a working directory and ``capture=False`` and return
``(returncode, stdout, stderr)``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Awaitable, Callable, Optional

from inittp import utils
from inittp.models import PackageManager, ProjectConfig
from inittp.scaffolder.presets import PACKAGE_MANAGER_PRESETS

CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]


class InstallError(Exception):
    """Raised when the install subprocess cannot be started or exits non-zero."""

    def __init__(self, package_manager: PackageManager, returncode: int, detail: str = "") -> None:
        self.package_manager = package_manager
        self.returncode = returncode
        message = f"{package_manager.value} install failed with exit code {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


async def install_dependencies(
    config: ProjectConfig,
    project_root: Path,
    runner: Optional[CommandRunner] = None,
    timeout: Optional[int] = None,
) -> bool:
    """Install the project's dependencies when ``config.run_install`` is set.

    Returns:
        ``True`` if the install ran, ``False`` if it was not requested.

    Raises:
        InstallError: If the package manager is missing or exits non-zero.
    """
    if not config.run_install:
        return False

    runner = runner or utils.run_command
    command = list(PACKAGE_MANAGER_PRESETS[config.package_manager].install_command)

    utils.console.print(f"Running {' '.join(command)}...")
    try:
        returncode, _, stderr = await runner(
            command, cwd=project_root, timeout=timeout, capture=False
        )
    except FileNotFoundError as exc:
        raise InstallError(config.package_manager, 127, str(exc)) from exc

    if returncode != 0:
        raise InstallError(config.package_manager, returncode, stderr)
    return True

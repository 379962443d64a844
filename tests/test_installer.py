"""Unit tests for the installer invoker (inittp.installer)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from inittp.installer import InstallError, install_dependencies
from inittp.models import PackageManager, ProjectConfig


pytestmark = pytest.mark.unit


def _config(package_manager: str = "npm", run_install: bool = True) -> ProjectConfig:
    return ProjectConfig(
        project_name="demo", package_manager=package_manager, run_install=run_install
    )


class TestInstallDependencies:
    async def test_skipped_when_not_requested(self, tmp_path: Path, fake_runner):
        runner = fake_runner()
        ran = await install_dependencies(_config(run_install=False), tmp_path, runner=runner)
        assert ran is False
        assert runner.calls == []

    @pytest.mark.parametrize(
        ("package_manager", "command"),
        [("npm", ["npm", "install"]), ("pnpm", ["pnpm", "install"])],
    )
    async def test_runs_install_in_project(self, tmp_path: Path, fake_runner, package_manager, command):
        runner = fake_runner()
        ran = await install_dependencies(_config(package_manager), tmp_path, runner=runner)

        assert ran is True
        assert len(runner.calls) == 1
        call = runner.calls[0]
        assert call["cmd"] == command
        assert call["cwd"] == tmp_path
        assert call["capture"] is False

    async def test_timeout_forwarded(self, tmp_path: Path, fake_runner):
        runner = fake_runner()
        await install_dependencies(_config(), tmp_path, runner=runner, timeout=30)
        assert runner.calls[0]["timeout"] == 30

    async def test_nonzero_exit_raises(self, tmp_path: Path, fake_runner):
        runner = fake_runner(returncode=1)
        with pytest.raises(InstallError) as exc_info:
            await install_dependencies(_config("pnpm"), tmp_path, runner=runner)

        assert exc_info.value.package_manager is PackageManager.PNPM
        assert exc_info.value.returncode == 1
        assert "pnpm install failed" in str(exc_info.value)

    async def test_no_retry(self, tmp_path: Path, fake_runner):
        runner = fake_runner(returncode=2)
        with pytest.raises(InstallError):
            await install_dependencies(_config(), tmp_path, runner=runner)
        assert len(runner.calls) == 1

    async def test_missing_executable_raises(self, tmp_path: Path):
        runner = AsyncMock(side_effect=FileNotFoundError("No such file: 'pnpm'"))
        with pytest.raises(InstallError) as exc_info:
            await install_dependencies(_config("pnpm"), tmp_path, runner=runner)
        assert exc_info.value.returncode == 127
        assert "pnpm" in str(exc_info.value)

    async def test_default_runner_is_run_command(self, tmp_path: Path):
        with patch("inittp.utils.run_command", AsyncMock(return_value=(0, "", ""))) as run:
            await install_dependencies(_config(), tmp_path)
        run.assert_awaited_once()
        assert run.call_args.args[0] == ["npm", "install"]

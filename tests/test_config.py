"""Unit tests for Settings (inittp.config)."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from inittp import __version__
from inittp.config import Settings
from inittp.models import InvalidInputError


pytestmark = pytest.mark.unit


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.output_dir == Path(".")
        assert settings.generator_version == __version__
        assert settings.install_timeout is None

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(install_timeout=0)

    def test_from_env_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings.from_env()
        assert settings.output_dir == Path(".")
        assert settings.install_timeout is None

    def test_from_env_overrides(self, tmp_path: Path):
        env = {
            "INIT_TP_OUTPUT_DIR": str(tmp_path),
            "INIT_TP_INSTALL_TIMEOUT": "300",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings.from_env()
        assert settings.output_dir == tmp_path
        assert settings.install_timeout == 300

    @pytest.mark.parametrize("raw", ["abc", "1.5", "ten"])
    def test_from_env_rejects_non_integer_timeout(self, raw: str):
        with patch.dict(os.environ, {"INIT_TP_INSTALL_TIMEOUT": raw}, clear=True):
            with pytest.raises(InvalidInputError, match="INIT_TP_INSTALL_TIMEOUT"):
                Settings.from_env()

    def test_from_env_rejects_zero_timeout(self):
        with patch.dict(os.environ, {"INIT_TP_INSTALL_TIMEOUT": "0"}, clear=True):
            with pytest.raises(InvalidInputError, match="install_timeout"):
                Settings.from_env()

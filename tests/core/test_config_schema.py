"""Tests for logkeeper.core.config_schema and Config.validated()."""

from datetime import timedelta
from pathlib import Path

import pytest
from pydantic import ValidationError

from logkeeper.core.config import Config, reset_config
from logkeeper.core.config_schema import LogKeeperConfig, RegistryConfig
from logkeeper.levels import ConsoleMode


@pytest.fixture(autouse=True)
def _reset_singleton():
    reset_config()
    yield
    reset_config()


@pytest.mark.smoke
class TestConfigSchema:
    def test_valid_config_roundtrip(self):
        data = {
            "registry": {
                "directory": "/tmp/app-logs",
                "expiration_days": 14,
                "max_file_size_bytes": 250_000,
                "console": "success,warn-and-above",
                "create_default": True,
            },
            "format": {"include_caller_path": False},
        }
        cfg = LogKeeperConfig.model_validate(data)
        assert cfg.registry.directory == Path("/tmp/app-logs")
        assert cfg.registry.expiration == timedelta(days=14)
        assert cfg.registry.max_file_size_bytes == 250_000
        assert cfg.registry.console_mode == ConsoleMode.SUCCESS_WARN_AND_ABOVE
        assert cfg.registry.create_default is True
        assert cfg.format.include_caller_path is False
        assert cfg.format.include_timestamp is True

    def test_defaults_populate(self):
        cfg = LogKeeperConfig()
        assert cfg.registry.directory == Path("logs")
        assert cfg.registry.expiration == timedelta(days=30)
        assert cfg.registry.max_file_size_bytes == 5_000_000
        assert cfg.registry.console_mode == ConsoleMode.ALL

    def test_path_expansion(self):
        cfg = RegistryConfig.model_validate({"directory": "~/logs"})
        assert "~" not in str(cfg.directory)

    def test_console_bool(self):
        assert RegistryConfig.model_validate({"console": False}).console_mode == ConsoleMode.NONE

    def test_fractional_expiration(self):
        cfg = RegistryConfig.model_validate({"expiration_days": 0.5})
        assert cfg.expiration == timedelta(hours=12)

    @pytest.mark.parametrize(
        "registry",
        [{"max_file_size_bytes": -1}, {"expiration_days": -1}, {"console": "everything"}],
    )
    def test_rejects_invalid(self, registry):
        with pytest.raises(ValidationError):
            LogKeeperConfig.model_validate({"registry": registry})

    def test_zero_size_budget_allowed(self):
        cfg = RegistryConfig.model_validate({"max_file_size_bytes": 0})
        assert cfg.max_file_size_bytes == 0

    def test_extra_sections_allowed(self):
        cfg = LogKeeperConfig.model_validate({"myapp": {"key": "value"}})
        assert cfg.model_extra["myapp"] == {"key": "value"}


class TestConfigValidated:
    def test_from_config(self, tmp_config_file):
        cfg = Config(config_file=tmp_config_file, env_prefix="").validated()
        assert isinstance(cfg, LogKeeperConfig)
        assert cfg.registry.console_mode == ConsoleMode.NONE
        assert cfg.registry.expiration == timedelta(days=7)

"""Tests for bitspace configuration."""

import logging

import pytest
import yaml

from bitspace.config import (
    BitSpaceConfig,
    ConfigManager,
    get_config,
    get_config_manager,
    reset_config,
    set_config,
)


class TestBitSpaceConfig:
    """Test BitSpaceConfig dataclass."""

    def test_default_config_creation(self):
        config = BitSpaceConfig()

        assert config.constant_seed == 23
        assert config.probe_budget_factor == 64
        assert config.log_level == "INFO"

    def test_log_level_normalized(self):
        assert BitSpaceConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("kwargs", [
        {"probe_budget_factor": 0},
        {"log_level": "LOUD"},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            BitSpaceConfig(**kwargs)

    def test_dict_round_trip(self):
        config = BitSpaceConfig(constant_seed=7, probe_budget_factor=16)
        data = config.to_dict()
        assert data["constant_seed"] == 7
        assert BitSpaceConfig.from_dict(data) == config

    def test_from_partial_dict(self):
        config = BitSpaceConfig.from_dict({"constant_seed": 5})
        assert config.constant_seed == 5
        assert config.probe_budget_factor == 64

    def test_file_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "bitspace.yml"
        config = BitSpaceConfig(constant_seed=42, log_level="WARNING")
        config.save_to_file(path)

        with open(path) as f:
            assert yaml.safe_load(f)["constant_seed"] == 42
        assert BitSpaceConfig.load_from_file(path) == config

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            BitSpaceConfig.load_from_file(tmp_path / "missing.yml")

    def test_load_or_default_missing(self, tmp_path):
        assert BitSpaceConfig.load_or_default(tmp_path / "missing.yml") == BitSpaceConfig()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert BitSpaceConfig.load_from_file(path) == BitSpaceConfig()


class TestConfigManager:
    """Test loading and environment overrides."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "config.yml"
        BitSpaceConfig(constant_seed=3).save_to_file(path)
        assert ConfigManager(path).config.constant_seed == 3

    def test_env_config_path(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yml"
        BitSpaceConfig(constant_seed=11).save_to_file(path)
        monkeypatch.setenv("BITSPACE_CONFIG", str(path))
        assert ConfigManager().config.constant_seed == 11

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("BITSPACE_SEED", "99")
        monkeypatch.setenv("BITSPACE_PROBE_BUDGET", "8")
        monkeypatch.setenv("BITSPACE_LOG_LEVEL", "debug")

        manager = ConfigManager()
        config = manager.apply_environment_overrides(BitSpaceConfig())

        assert config.constant_seed == 99
        assert config.probe_budget_factor == 8
        assert config.log_level == "DEBUG"

    def test_log_level_applied_to_package_logger(self, monkeypatch):
        monkeypatch.setenv("BITSPACE_LOG_LEVEL", "DEBUG")

        config = ConfigManager().config

        assert config.log_level == "DEBUG"
        assert logging.getLogger("bitspace").level == logging.DEBUG
        assert logging.getLogger("bitspace.algebra.adjuster").getEffectiveLevel() == logging.DEBUG

    def test_acceptance_threshold_is_not_configurable(self, monkeypatch):
        monkeypatch.setenv("BITSPACE_ACCEPTANCE_THRESHOLD", "0.99")
        config = ConfigManager().apply_environment_overrides(BitSpaceConfig())
        assert not hasattr(config, "acceptance_threshold")
        assert config == BitSpaceConfig()

    def test_invalid_environment_value(self, monkeypatch):
        monkeypatch.setenv("BITSPACE_SEED", "not-a-number")
        with pytest.raises(ValueError, match="BITSPACE_SEED"):
            ConfigManager().get_environment_overrides()

    def test_save_config(self, tmp_path):
        path = tmp_path / "saved.yml"
        manager = ConfigManager(path)
        manager.save_config(BitSpaceConfig(constant_seed=5))
        assert path.exists()
        assert manager.config.constant_seed == 5

    def test_validate_config_warnings(self):
        manager = ConfigManager()
        assert manager.validate_config(BitSpaceConfig()) == []
        issues = manager.validate_config(BitSpaceConfig(probe_budget_factor=2))
        assert any("probe_budget_factor" in issue for issue in issues)


class TestGlobalConfig:

    def test_set_and_reset(self):
        set_config(BitSpaceConfig(constant_seed=1))
        assert get_config().constant_seed == 1
        reset_config()
        set_config(BitSpaceConfig())
        assert get_config().constant_seed == 23

    def test_set_config_applies_log_level(self):
        set_config(BitSpaceConfig(log_level="WARNING"))
        assert logging.getLogger("bitspace").level == logging.WARNING

        set_config(BitSpaceConfig(log_level="debug"))
        assert logging.getLogger("bitspace").level == logging.DEBUG

    def test_manager_is_shared(self):
        assert get_config_manager() is get_config_manager()

"""
Configuration for bitspace operations.

Defines the tunable parameters of the randomized bit algorithms (constant
seed and probe budget) and the package log level, along with YAML loading
and environment variable overrides.
"""

import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Union, Any

import yaml

from .utils.logging_setup import configure_logging


DEFAULT_CONFIG_FILENAME = ".bitspace.yml"

# A candidate flip is accepted when its uniform draw exceeds this value
ACCEPTANCE_THRESHOLD = 0.5

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class BitSpaceConfig:
    """
    Parameters shared by the randomized bit operations.

    constant_seed seeds every constant-seed generator; probe_budget_factor
    caps the adjuster scan at ``factor * dimension`` draws; log_level is
    applied to the ``bitspace`` logger whenever the configuration is loaded
    or replaced.
    """

    constant_seed: int = 23
    probe_budget_factor: int = 64
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.probe_budget_factor <= 0:
            raise ValueError(
                f"probe_budget_factor must be positive, got {self.probe_budget_factor}"
            )

        if str(self.log_level).upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}, got {self.log_level}")
        self.log_level = str(self.log_level).upper()

    def to_dict(self) -> Dict[str, Union[int, str]]:
        """Convert to dictionary representation."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BitSpaceConfig":
        """Create from dictionary representation."""
        return cls(
            constant_seed=int(data.get("constant_seed", 23)),
            probe_budget_factor=int(data.get("probe_budget_factor", 64)),
            log_level=data.get("log_level", "INFO"),
        )

    def save_to_file(self, file_path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> "BitSpaceConfig":
        """Load configuration from YAML file."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Current directory config if present, otherwise the home directory one."""
        current_dir_config = Path(DEFAULT_CONFIG_FILENAME)
        if current_dir_config.exists():
            return current_dir_config

        return Path.home() / DEFAULT_CONFIG_FILENAME

    @classmethod
    def load_or_default(
        cls, config_path: Optional[Union[str, Path]] = None
    ) -> "BitSpaceConfig":
        """
        Load configuration from file or return default if not found.

        Args:
            config_path: Optional path to configuration file

        Returns:
            BitSpaceConfig instance
        """
        if config_path:
            config_path = Path(config_path)
            if config_path.exists():
                return cls.load_from_file(config_path)
        else:
            default_path = cls.get_default_config_path()
            if default_path.exists():
                return cls.load_from_file(default_path)

        return cls()


class ConfigManager:
    """
    Loads configuration from an explicit path, the BITSPACE_CONFIG
    environment variable or the default locations, then applies
    environment overrides.
    """

    ENV_MAPPINGS = {
        "BITSPACE_SEED": ("constant_seed", int),
        "BITSPACE_PROBE_BUDGET": ("probe_budget_factor", int),
        "BITSPACE_LOG_LEVEL": ("log_level", str),
    }

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else None
        self._config: Optional[BitSpaceConfig] = None

    @property
    def config(self) -> BitSpaceConfig:
        """Get the current configuration, loading if necessary."""
        if self._config is None:
            self._config = self.apply_environment_overrides(self.load_config())
            configure_logging(self._config.log_level)
        return self._config

    def load_config(self) -> BitSpaceConfig:
        """Load configuration from file or environment."""
        env_config_path = os.getenv("BITSPACE_CONFIG")
        if env_config_path:
            config_path = Path(env_config_path)
            if config_path.exists():
                return BitSpaceConfig.load_from_file(config_path)

        if self.config_path and self.config_path.exists():
            return BitSpaceConfig.load_from_file(self.config_path)

        return BitSpaceConfig.load_or_default()

    def save_config(
        self, config: BitSpaceConfig, path: Optional[Union[str, Path]] = None
    ) -> None:
        """Save configuration to file."""
        save_path = (
            Path(path)
            if path
            else (self.config_path or BitSpaceConfig.get_default_config_path())
        )
        config.save_to_file(save_path)
        self._config = config
        configure_logging(config.log_level)

    def get_environment_overrides(self) -> Dict[str, Union[int, str]]:
        """Get configuration overrides from environment variables."""
        overrides = {}

        for env_var, (config_key, config_type) in self.ENV_MAPPINGS.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                try:
                    overrides[config_key] = config_type(env_value)
                except ValueError as e:
                    raise ValueError(
                        f"Invalid environment variable {env_var}={env_value}: {e}"
                    )

        return overrides

    def apply_environment_overrides(self, config: BitSpaceConfig) -> BitSpaceConfig:
        """Apply environment variable overrides to configuration."""
        overrides = self.get_environment_overrides()

        if not overrides:
            return config

        config_dict = config.to_dict()
        config_dict.update(overrides)
        return BitSpaceConfig.from_dict(config_dict)

    def validate_config(self, config: BitSpaceConfig) -> List[str]:
        """Validate configuration and return list of issues."""
        issues = []

        try:
            config.__post_init__()
        except ValueError as e:
            issues.append(str(e))

        if config.probe_budget_factor < 8:
            issues.append(
                "Warning: probe_budget_factor below 8 may abort legitimate adjustments"
            )

        return issues


_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_path: Optional[Union[str, Path]] = None) -> ConfigManager:
    """Get the global configuration manager."""
    global _config_manager
    if _config_manager is None or config_path is not None:
        _config_manager = ConfigManager(config_path)
    return _config_manager


def get_config() -> BitSpaceConfig:
    """Get the current global configuration."""
    return get_config_manager().config


def set_config(config: BitSpaceConfig) -> None:
    """Replace the global configuration without touching any file."""
    get_config_manager()._config = config
    configure_logging(config.log_level)


def reset_config() -> None:
    """Drop the global configuration so the next access reloads it."""
    global _config_manager
    _config_manager = None

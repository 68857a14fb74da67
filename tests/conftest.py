"""
Shared fixtures for bitspace tests.

Every test runs against a default configuration so a stray ~/.bitspace.yml
or BITSPACE_* environment variable cannot change the outcome.
"""

import numpy as np
import pytest

from bitspace.config import BitSpaceConfig, ConfigManager, reset_config, set_config
from bitspace.vectors.binary import BinaryVector


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Pin the global configuration to defaults."""
    for env_var in ConfigManager.ENV_MAPPINGS:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv("BITSPACE_CONFIG", raising=False)
    set_config(BitSpaceConfig())
    yield
    reset_config()


@pytest.fixture
def rng():
    """Seeded generator for building inputs."""
    return np.random.default_rng(1234)


@pytest.fixture
def dimension():
    return 512


def random_bits(rng, dimension, density=0.5):
    """Independent bits, each set with probability ``density``."""
    return rng.random(dimension) < density


@pytest.fixture
def make_vector(rng):
    """Factory for random binary vectors."""
    def _make(dimension, density=0.5):
        return BinaryVector.from_bits(random_bits(rng, dimension, density))
    return _make

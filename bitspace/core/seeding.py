"""
Seeding strategies for the randomized bit operations.

Every randomized operation obtains its generator from a strategy:

- ``ConstantSeed`` builds a fresh generator from a fixed seed on each call,
  so independent calls make identical random choices.
- ``DerivedSeed`` seeds from a hash of one operand's bits, so the same
  operand always produces the same draw sequence.
- ``SuppliedRng`` hands back a caller-owned generator whose state advances
  across calls.

Reusing a constant seed across calls correlates those calls' random choices.
Strategies never reseed from fresh entropy.
"""

import hashlib
from typing import Optional, Protocol, runtime_checkable, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..config import BitSpaceConfig

DEFAULT_SEED = 23


def seed_from_string(text: str) -> int:
    """Derive a 64-bit seed from the SHA-256 digest of ``text``."""
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "little")


@runtime_checkable
class SeedStrategy(Protocol):
    """Source of generators for randomized operations."""

    def rng_for(self, source: Optional[object] = None) -> np.random.Generator:
        ...


class ConstantSeed:
    """Fresh generator from the same seed on every call."""

    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = seed

    def rng_for(self, source: Optional[object] = None) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    def __repr__(self) -> str:
        return f"ConstantSeed(seed={self.seed})"


class DerivedSeed:
    """Fresh generator seeded from ``source.to_seed_string()``."""

    def rng_for(self, source: Optional[object] = None) -> np.random.Generator:
        if source is None:
            raise ValueError("DerivedSeed needs a source vector to derive a seed from")
        return np.random.default_rng(seed_from_string(source.to_seed_string()))

    def __repr__(self) -> str:
        return "DerivedSeed()"


class SuppliedRng:
    """Returns the caller's generator unchanged; its state carries over."""

    def __init__(self, rng: np.random.Generator):
        self.rng = rng

    def rng_for(self, source: Optional[object] = None) -> np.random.Generator:
        return self.rng

    def __repr__(self) -> str:
        return f"SuppliedRng({self.rng!r})"


def constant_seed_strategy(config: Optional["BitSpaceConfig"] = None) -> ConstantSeed:
    """Constant-seed strategy using the configured seed."""
    if config is None:
        from ..config import get_config
        config = get_config()
    return ConstantSeed(config.constant_seed)


def resolve_rng(rng: Optional[np.random.Generator],
                config: Optional["BitSpaceConfig"] = None) -> np.random.Generator:
    """Return ``rng`` if given, otherwise a constant-seed generator."""
    if rng is not None:
        return rng
    return constant_seed_strategy(config).rng_for()

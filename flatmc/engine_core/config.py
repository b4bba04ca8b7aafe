"""
Search configuration.

All knobs are fixed when the engine is constructed; none of them can be
changed per call. Defaults can be overridden from the environment:

    FLATMC_MAX_ACTIONS        action buffer capacity
    FLATMC_BASE_ITERATIONS    rollout budget at difficulty 50
    FLATMC_MAX_PLAYOUT_DEPTH  rollout cutoff
    FLATMC_SEED               64-bit mixing constant (decimal or 0x hex)
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import os

from .stream import MASK64


DEFAULT_MAX_ACTIONS = 128
DEFAULT_BASE_ITERATIONS = 200
DEFAULT_MAX_PLAYOUT_DEPTH = 32
DEFAULT_SEED = 0xDEAD_BEEF_CAFE_BABE


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class SearchConfig:
    """Construction-time engine parameters."""
    max_actions: int = DEFAULT_MAX_ACTIONS
    base_iterations: int = DEFAULT_BASE_ITERATIONS
    max_playout_depth: int = DEFAULT_MAX_PLAYOUT_DEPTH
    seed: int = DEFAULT_SEED

    def __post_init__(self):
        if self.max_actions < 1:
            raise ValueError(f"max_actions must be positive, got {self.max_actions}")
        if self.base_iterations < 1:
            raise ValueError(f"base_iterations must be positive, got {self.base_iterations}")
        if self.max_playout_depth < 1:
            raise ValueError(
                f"max_playout_depth must be positive, got {self.max_playout_depth}"
            )
        if not 0 <= self.seed <= MASK64:
            raise ValueError(f"seed must fit in 64 bits, got {self.seed:#x}")

    @classmethod
    def from_env(cls) -> SearchConfig:
        """Build a config from FLATMC_* environment variables."""
        return cls(
            max_actions=_env_int("FLATMC_MAX_ACTIONS", DEFAULT_MAX_ACTIONS),
            base_iterations=_env_int("FLATMC_BASE_ITERATIONS", DEFAULT_BASE_ITERATIONS),
            max_playout_depth=_env_int("FLATMC_MAX_PLAYOUT_DEPTH", DEFAULT_MAX_PLAYOUT_DEPTH),
            seed=_env_int("FLATMC_SEED", DEFAULT_SEED),
        )

    def with_overrides(self, **overrides: int | None) -> SearchConfig:
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

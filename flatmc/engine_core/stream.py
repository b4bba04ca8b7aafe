"""
Deterministic value stream.

Every pseudo-random value the engine needs comes from a StreamContext:
a fixed 64-bit seed plus a monotonically increasing nonce. Each draw
mixes seed, nonce and a caller salt, runs the SplitMix64 finalizer and
advances the nonce by one. Same seed, same nonce, same salts in the same
order -> same values, on every machine.

The nonce is shared mutable state. A StreamContext is not thread-safe;
whoever owns it must impose a total order on draws.
"""

from __future__ import annotations


MASK64 = 0xFFFF_FFFF_FFFF_FFFF

GOLDEN_GAMMA = 0x9E37_79B9_7F4A_7C15
MIX_MULT_1 = 0xBF58_476D_1CE4_E5B9
MIX_MULT_2 = 0x94D0_49BB_1331_11EB


def splitmix64(value: int) -> int:
    """SplitMix64 avalanche of a 64-bit value."""
    z = (value + GOLDEN_GAMMA) & MASK64
    z = ((z ^ (z >> 30)) * MIX_MULT_1) & MASK64
    z = ((z ^ (z >> 27)) * MIX_MULT_2) & MASK64
    return z ^ (z >> 31)


class StreamContext:
    """
    Owner of the nonce counter.

    Usage:
        stream = StreamContext(seed=0xDEADBEEFCAFEBABE)
        value = stream.draw(salt=(i << 32) | j)

        # tests and genesis only
        stream.reset()
    """

    def __init__(self, seed: int, nonce: int = 0, record: bool = False):
        self.seed = seed & MASK64
        self.nonce = nonce & MASK64
        self.history: list[int] | None = [] if record else None

    def draw(self, salt: int = 0) -> int:
        """Produce the next value and advance the nonce."""
        value = splitmix64(self.seed ^ self.nonce ^ (salt & MASK64))
        self.nonce = (self.nonce + 1) & MASK64
        if self.history is not None:
            self.history.append(value)
        return value

    def reset(self, nonce: int = 0) -> None:
        """Rewind the counter. Clears recorded history."""
        self.nonce = nonce & MASK64
        if self.history is not None:
            self.history.clear()

    def __repr__(self) -> str:
        return f"StreamContext(seed={self.seed:#018x}, nonce={self.nonce})"

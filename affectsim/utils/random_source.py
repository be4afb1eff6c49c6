"""
Seedable pseudo-random source for the decision engine.

All randomness used by the agent (tie-breaking, exploration draws, outcome
sampling) flows through a single 64-bit linear congruential generator so
that a seeded run produces the same sequence on every platform. The
operating system entropy pool is consulted only to pick a seed when none
is given.
"""

from __future__ import annotations

import secrets
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

# LCG recurrence constants: state = state * MULTIPLIER + INCREMENT (mod 2^64)
LCG_MULTIPLIER = 2862933555777941757
LCG_INCREMENT = 3037000493

# A zero seed would start the orbit at 0; substitute this instead
ZERO_SEED_REPLACEMENT = 0x4D595DF4D0F33173

UINT64_MASK = (1 << 64) - 1
# Divisor for unit floats (UINT64_MAX rounds to 2^64 as a double)
UINT64_SPAN = float(UINT64_MASK)


class RandomSource:
    """
    Deterministic 64-bit LCG.

    Attributes:
        seed: The seed the generator was constructed from (after entropy
            fallback, before zero substitution)
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the generator.

        Args:
            seed: Unsigned seed. None draws one from system entropy.
        """
        if seed is None:
            seed = secrets.randbits(64)
        self.seed = seed & UINT64_MASK
        self._state = ZERO_SEED_REPLACEMENT if self.seed == 0 else self.seed

    @property
    def state(self) -> int:
        """Current internal state (the last value returned by next())."""
        return self._state

    def next(self) -> int:
        """Advance the recurrence and return the new 64-bit state."""
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) & UINT64_MASK
        return self._state

    def next_float(self) -> float:
        """Return a uniform float in [0, 1)."""
        return self.next() / UINT64_SPAN

    def choose_uniform(self, n: int) -> int:
        """
        Pick an index uniformly from range(n).

        Raises:
            ValueError: If n is not positive
        """
        if n <= 0:
            raise ValueError(f"Cannot choose from an empty range (n={n})")
        return self.next() % n

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        return items[self.choose_uniform(len(items))]

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"

"""
Seedable pseudo-random source (mulberry32).

A single 32-bit state advanced by a fixed odd increment, then mixed with two
xorshift/multiply rounds. Same seed, same sequence, on every platform:

    >>> rng = create_rng(42)
    >>> rng.next()
    0.6011037519201636
"""
import numbers

from eurojackpot.config import ConfigurationError

MASK32 = 0xFFFFFFFF
INCREMENT = 0x6D2B79F5
TWO_POW_32 = 4294967296.0


def _imul(a, b):
    """Low 32 bits of a * b (unsigned)."""
    return (a * b) & MASK32


class Mulberry32:
    """Stateful generator; each instance owns its own state."""

    def __init__(self, seed):
        if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
            raise ConfigurationError(f"seed must be an integer, got {seed!r}")
        self.seed = int(seed) & MASK32
        self.state = self.seed

    def next(self):
        """Advance the state and return a float in [0, 1)."""
        self.state = (self.state + INCREMENT) & MASK32
        t = self.state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return ((t ^ (t >> 14)) & MASK32) / TWO_POW_32

    def randint(self, low, high):
        """Uniform integer in [low, high] drawn from one next() call."""
        return low + int(self.next() * (high - low + 1))

    def __repr__(self):
        return f"Mulberry32(seed={self.seed}, state={self.state})"


def create_rng(seed):
    """Create an independent generator for *seed* (taken modulo 2**32)."""
    return Mulberry32(seed)

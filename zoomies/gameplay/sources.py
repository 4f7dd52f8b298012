"""
Injected sources of time and randomness.
NO UI DEPENDENCIES.

The simulation never reads the wall clock or the global random module
directly. Tests hand in fakes; the front end hands in the real thing.
"""
import random
import time
from typing import Optional, Protocol, runtime_checkable

from .grid import Direction, ALL_DIRECTIONS


@runtime_checkable
class Clock(Protocol):
    """A monotonic millisecond clock."""

    def now(self) -> int:
        ...


@runtime_checkable
class RandomSource(Protocol):
    """Uniform random draws used by the simulation."""

    def random_int(self, n: int) -> int:
        """Return an integer in [0, n)."""
        ...

    def random_direction(self) -> Direction:
        """Return one of the four cardinal directions."""
        ...


class MonotonicClock:
    """Milliseconds from time.monotonic_ns()."""

    def now(self) -> int:
        return time.monotonic_ns() // 1_000_000


class SeededRandom:
    """RandomSource backed by a private random.Random instance."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def random_int(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"random_int needs a positive bound, got {n}")
        return self._rng.randrange(n)

    def random_direction(self) -> Direction:
        return self._rng.choice(ALL_DIRECTIONS)


def random_between(rng: RandomSource, low: int, high: int) -> int:
    """Uniform integer in [low, high] drawn from a RandomSource."""
    return low + rng.random_int(high - low + 1)

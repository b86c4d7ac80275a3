"""Random sources - immutable snapshots that yield a new source per draw."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar

from tracegen.errors import UnsupportedSampleType

T = TypeVar("T")

_INT_BITS = 64


class RandomSource(Protocol):
    """Protocol for pure random sources.

    Implementations must never mutate themselves: every draw returns the
    sampled value together with the source to use for the next draw.
    """

    def draw(self, kind: type[T]) -> tuple[T, RandomSource]:
        """Draw an unconstrained sample of the given kind."""
        ...

    def draw_range(self, low: T, high: T) -> tuple[T, RandomSource]:
        """Draw a sample from the inclusive range [low, high]."""
        ...


def _sample_int(rng: random.Random) -> int:
    return rng.getrandbits(_INT_BITS) - (1 << (_INT_BITS - 1))


_SAMPLERS: dict[type, Callable[[random.Random], Any]] = {
    bool: lambda rng: rng.getrandbits(1) == 1,
    int: _sample_int,
    float: lambda rng: rng.random(),
}


def entropy_seed() -> int:
    """Obtain a fresh seed from the operating system."""
    return random.SystemRandom().getrandbits(_INT_BITS)


@dataclass(frozen=True)
class StdRandom:
    """Random source backed by a snapshot of a ``random.Random`` state.

    Each draw restores the snapshot into a private generator, samples,
    and captures the post-draw state in a new ``StdRandom``. Equal
    snapshots always produce equal draws.
    """

    snapshot: tuple[Any, ...] = field(repr=False)

    @classmethod
    def from_seed(cls, seed: int) -> StdRandom:
        return cls(random.Random(seed).getstate())

    @classmethod
    def from_entropy(cls) -> StdRandom:
        return cls.from_seed(entropy_seed())

    def _restore(self) -> random.Random:
        rng = random.Random()
        rng.setstate(self.snapshot)
        return rng

    def draw(self, kind: type[T]) -> tuple[T, StdRandom]:
        """Draw a ``bool``, a signed 64-bit ``int`` or a ``float`` in [0, 1).

        Raises:
            UnsupportedSampleType: If ``kind`` has no sampler
        """
        sampler = _SAMPLERS.get(kind)
        if sampler is None:
            raise UnsupportedSampleType(f"Cannot sample values of kind {kind!r}", kind)
        rng = self._restore()
        value = sampler(rng)
        return value, StdRandom(rng.getstate())

    def draw_range(self, low: T, high: T) -> tuple[T, StdRandom]:
        """Draw from [low, high].

        Bounds are passed to ``random`` as given; ``low > high`` is not
        checked here (``randint`` rejects it, ``uniform`` does not).

        Raises:
            UnsupportedSampleType: If the bounds are not both bools, ints or numbers
        """
        rng = self._restore()
        value: Any
        if isinstance(low, bool) and isinstance(high, bool):
            value = rng.randint(int(low), int(high)) == 1
        elif isinstance(low, int) and isinstance(high, int):
            value = rng.randint(low, high)
        elif isinstance(low, (int, float)) and isinstance(high, (int, float)):
            value = rng.uniform(low, high)
        else:
            raise UnsupportedSampleType(
                f"Cannot sample a range between {type(low).__name__} and {type(high).__name__}",
                (type(low), type(high)),
            )
        return value, StdRandom(rng.getstate())

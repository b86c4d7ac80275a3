"""Generation state threaded through every generator step."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Self

from tracegen.config import GenSettings
from tracegen.kernel.source import RandomSource


@dataclass(frozen=True)
class GenState:
    """State for input generation.

    Attributes:
        random: Random source, replaced wholesale after each draw.
        clock: The current logical time.
        clock_delta: Time between two generated values.
    """

    random: RandomSource
    clock: float
    clock_delta: float

    def with_random(self, source: RandomSource) -> Self:
        return replace(self, random=source)

    def with_clock(self, clock: float) -> Self:
        return replace(self, clock=clock)

    def with_clock_delta(self, clock_delta: float) -> Self:
        return replace(self, clock_delta=clock_delta)

    def stepped(self) -> Self:
        """Return the state with the clock advanced by ``clock_delta``."""
        return replace(self, clock=self.clock + self.clock_delta)


def default_gen_state(source: RandomSource, settings: GenSettings | None = None) -> GenState:
    """Construct the initial state for a run using the given random source."""
    settings = settings or GenSettings()
    return GenState(random=source, clock=settings.clock, clock_delta=settings.clock_delta)

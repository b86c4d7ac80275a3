"""Generation settings."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CLOCK = 0.0
DEFAULT_CLOCK_DELTA = 0.1


class GenSettings(BaseModel):
    """Initial values for a generator run.

    Attributes:
        clock: Time point of the first inserted value.
        clock_delta: Time span added to the clock after each timed insertion.
        seed: Seed for the default random source. ``None`` draws one from
            the operating system at run time.
    """

    model_config = ConfigDict(frozen=True)

    clock: float = Field(default=DEFAULT_CLOCK)
    clock_delta: float = Field(default=DEFAULT_CLOCK_DELTA)
    seed: int | None = None

    @field_validator("clock", "clock_delta")
    @classmethod
    def _require_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value

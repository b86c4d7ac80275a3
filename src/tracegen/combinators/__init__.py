"""Combinators - primitives and derived generators."""

from .branching import branch, branch_forget_rand, branches
from .ops import (
    for_each,
    get,
    get_clock,
    insert_random_value,
    insert_random_value_in_range,
    insert_raw_value,
    insert_timed_value,
    insert_timed_values,
    modify,
    put,
    repeat,
    sequence,
    set_clock,
    set_clock_delta,
    step_clock,
    with_state,
)

__all__ = [
    # Sequencing
    "sequence",
    "for_each",
    "repeat",
    # State
    "get",
    "put",
    "modify",
    "with_state",
    "get_clock",
    "set_clock",
    "step_clock",
    "set_clock_delta",
    # Values
    "insert_raw_value",
    "insert_timed_value",
    "insert_timed_values",
    "insert_random_value",
    "insert_random_value_in_range",
    # Branching
    "branch",
    "branch_forget_rand",
    "branches",
]

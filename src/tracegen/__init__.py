from .combinators import (
    branch,
    branch_forget_rand,
    branches,
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
from .config import GenSettings
from .errors import TraceGenError, UnsupportedSampleType
from .kernel import Forest, Gen, GenState, Result, StdRandom, Tree, Value, composite
from .runtime import print_generated_tree, render_forest, run, run_, run_with_state

__all__ = [
    # Core
    "Gen",
    "Result",
    "GenState",
    "composite",
    # Trees
    "Tree",
    "Value",
    "Forest",
    # Randomness
    "StdRandom",
    # Combinators
    "sequence",
    "for_each",
    "repeat",
    "get",
    "put",
    "modify",
    "with_state",
    "get_clock",
    "set_clock",
    "step_clock",
    "set_clock_delta",
    "insert_raw_value",
    "insert_timed_value",
    "insert_timed_values",
    "insert_random_value",
    "insert_random_value_in_range",
    "branch",
    "branch_forget_rand",
    "branches",
    # Running
    "run",
    "run_",
    "run_with_state",
    "render_forest",
    "print_generated_tree",
    # Configuration & errors
    "GenSettings",
    "TraceGenError",
    "UnsupportedSampleType",
]

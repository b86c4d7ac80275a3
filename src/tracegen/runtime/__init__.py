"""Runtime module - running generators and inspecting their output."""

from tracegen.runtime.runner import (
    initial_state,
    print_generated_tree,
    render_forest,
    run,
    run_,
    run_with_state,
)

__all__ = [
    "run",
    "run_",
    "run_with_state",
    "initial_state",
    "render_forest",
    "print_generated_tree",
]

"""Kernel layer - pure abstractions for tracegen."""

from tracegen.kernel.gen import Extend, Gen, Result, chain, compose, composite, identity
from tracegen.kernel.source import RandomSource, StdRandom
from tracegen.kernel.state import GenState, default_gen_state
from tracegen.kernel.tree import Forest, Tree, Value

__all__ = [
    "Gen",
    "Result",
    "composite",
    # Extensions
    "Extend",
    "identity",
    "compose",
    "chain",
    # State
    "GenState",
    "default_gen_state",
    "RandomSource",
    "StdRandom",
    # Trees
    "Tree",
    "Value",
    "Forest",
]

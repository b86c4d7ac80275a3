"""Branching combinators - splice alternative histories at the current position."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from tracegen.kernel.gen import Extend, Gen, Result
from tracegen.kernel.state import GenState
from tracegen.kernel.tree import Forest

from .ops import sequence

A = TypeVar("A")
V = TypeVar("V")

logger = logging.getLogger(__name__)


def _splice(trees: Forest[A]) -> Extend:
    def extend(future: Forest[A]) -> Forest[A]:
        return trees + future

    return extend


def branch(gen: Gen[A, V]) -> Gen[A, V]:
    """Branch the program tree at the current position.

    Semantics:
        - Run ``gen`` to completion on the current state
        - Close its tree with an empty future
        - Place those trees as leading siblings of whatever follows
        - Keep the random source ``gen`` left behind, so later draws
          do not repeat the branch's draws
        - Discard the clock and clock delta ``gen`` left behind

    Args:
        gen: Generator producing the alternative history.

    Returns:
        Gen[A, V]: A generator yielding the branch's value.
    """

    def _run(state: GenState) -> Result[A, V]:
        result = gen.run(state)
        trees = result.finalize()
        logger.debug("branch spliced %d tree(s)", len(trees))
        return Result(
            value=result.value,
            extend=_splice(trees),
            state=state.with_random(result.state.random),
        )

    return Gen(_run)


def branch_forget_rand(gen: Gen[A, V]) -> Gen[A, V]:
    """Same as ``branch`` but discard the whole state the branch left behind.

    The main line continues with the random source it had before the
    branch, so its draws are the same as if the branch had never run.
    """

    def _run(state: GenState) -> Result[A, V]:
        result = gen.run(state)
        trees = result.finalize()
        logger.debug("branch spliced %d tree(s), random source restored", len(trees))
        return Result(value=result.value, extend=_splice(trees), state=state)

    return Gen(_run)


def branches(gens: Iterable[Gen[A, Any]], forget_rand: bool = False) -> Gen[A, list[Any]]:
    """Splice several alternative histories at the current position, in order.

    Args:
        gens: Generators producing the alternatives.
        forget_rand: Use ``branch_forget_rand`` instead of ``branch``.

    Returns:
        Gen[A, list[Any]]: A generator yielding the value of every branch.
    """
    wrap = branch_forget_rand if forget_rand else branch
    return sequence([wrap(gen) for gen in gens])

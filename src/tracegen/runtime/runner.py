"""Execution entry points for generators."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from tracegen.config import GenSettings
from tracegen.kernel.gen import Gen
from tracegen.kernel.source import RandomSource, StdRandom, entropy_seed
from tracegen.kernel.state import GenState, default_gen_state
from tracegen.kernel.tree import Forest

A = TypeVar("A")
V = TypeVar("V")

logger = logging.getLogger(__name__)


def run_with_state(gen: Gen[A, V], state: GenState) -> tuple[V, Forest[A]]:
    """Run a generator once on ``state`` and close its tree with an empty future."""
    result = gen.run(state)
    return result.value, result.finalize()


def initial_state(source: RandomSource | None = None, settings: GenSettings | None = None) -> GenState:
    """Build the state a run starts from.

    Uses ``source`` when given, else a ``StdRandom`` seeded from
    ``settings.seed``, else one seeded from the operating system.
    """
    settings = settings or GenSettings()
    if source is None:
        seed = settings.seed
        if seed is None:
            seed = entropy_seed()
            logger.debug("Seeding run from entropy seed=%d", seed)
        else:
            logger.debug("Seeding run from settings seed=%d", seed)
        source = StdRandom.from_seed(seed)
    return default_gen_state(source, settings)


def run(
    gen: Gen[A, V],
    source: RandomSource | None = None,
    settings: GenSettings | None = None,
) -> tuple[V, Forest[A]]:
    """Run a generator and return its value and the generated forest.

    Args:
        gen: The generator to run
        source: Random source to start from
        settings: Initial clock, clock delta and seed

    Returns:
        The generator's value and the list of root trees
    """
    return run_with_state(gen, initial_state(source, settings))


def run_(
    gen: Gen[A, Any],
    source: RandomSource | None = None,
    settings: GenSettings | None = None,
) -> Forest[A]:
    """Run the generator as per ``run``, but ignore its value."""
    _, forest = run(gen, source, settings)
    return forest


def render_forest(forest: Forest[Any], show: Callable[[Any], str] = str) -> str:
    """Render every root tree of a forest as text, one after the other."""
    return "\n".join(tree.as_tree(show) for tree in forest)


def print_generated_tree(
    gen: Gen[Any, Any],
    source: RandomSource | None = None,
    settings: GenSettings | None = None,
) -> None:
    """Run the generator as per ``run_``, then print it. Useful for debugging."""
    print(render_forest(run_(gen, source, settings)))

"""Combinator primitives: state access, clock control, value insertion, sequencing."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from tracegen.kernel.gen import Gen, Result, chain, identity
from tracegen.kernel.state import GenState
from tracegen.kernel.tree import Forest, Tree, Value

A = TypeVar("A")
V = TypeVar("V")
T = TypeVar("T")


# -- sequencing ---------------------------------------------------------------


def sequence(gens: Iterable[Gen[A, V]]) -> Gen[A, list[V]]:
    """Run generators in order and collect their values.

    Semantics:
        - Each generator runs on the state the previous one left behind
        - Extensions are composed in the same order
    """
    steps = tuple(gens)

    def _run(state: GenState) -> Result[A, list[V]]:
        values: list[V] = []
        extends = []
        for gen in steps:
            result = gen.run(state)
            values.append(result.value)
            extends.append(result.extend)
            state = result.state
        return Result(value=values, extend=chain(extends), state=state)

    return Gen(_run)


def for_each(items: Iterable[T], func: Callable[[T], Gen[A, Any]]) -> Gen[A, None]:
    """Run ``func(item)`` for each item in order, discarding the values."""
    return sequence([func(item) for item in items]).map(lambda _: None)


def repeat(gen: Gen[A, V], times: int) -> Gen[A, list[V]]:
    """Run a generator ``times`` times in a row.

    Args:
        gen: The generator to repeat
        times: Number of repetitions (must be >= 0)

    Returns:
        New generator collecting the value of every repetition
    """
    if times < 0:
        raise ValueError("times must not be negative")
    return sequence([gen] * times)


# -- state --------------------------------------------------------------------


def get() -> Gen[Any, GenState]:
    """Return the current generator state."""
    return Gen(lambda state: Result(value=state, extend=identity, state=state))


def put(new_state: GenState) -> Gen[Any, None]:
    """Replace the generator state."""
    return Gen(lambda _: Result(value=None, extend=identity, state=new_state))


def modify(func: Callable[[GenState], GenState]) -> Gen[Any, None]:
    """Transform the generator state using ``func``."""
    return Gen(lambda state: Result(value=None, extend=identity, state=func(state)))


def with_state(func: Callable[[GenState], tuple[V, GenState]]) -> Gen[Any, V]:
    """Transform the generator state using ``func``, which also returns a value."""

    def _run(state: GenState) -> Result[Any, V]:
        value, new_state = func(state)
        return Result(value=value, extend=identity, state=new_state)

    return Gen(_run)


def get_clock() -> Gen[Any, float]:
    return with_state(lambda s: (s.clock, s))


def set_clock(time_point: float) -> Gen[Any, None]:
    return modify(lambda s: s.with_clock(time_point))


def step_clock() -> Gen[Any, None]:
    """Advance the clock by the current clock delta."""
    return modify(lambda s: s.stepped())


def set_clock_delta(time_span: float) -> Gen[Any, None]:
    return modify(lambda s: s.with_clock_delta(time_span))


# -- values -------------------------------------------------------------------


def insert_raw_value(value: A) -> Gen[A, None]:
    """Insert a value into the program tree at the current position.

    Whatever the following steps produce becomes the children of the new
    node, so consecutive insertions nest instead of becoming siblings.
    """

    def add_value(future: Forest[A]) -> Forest[A]:
        if not future:
            return (Tree.leaf(value),)
        return (Tree.node(value, future),)

    return Gen(lambda state: Result(value=None, extend=add_value, state=state))


def insert_timed_value(payload: A) -> Gen[Value[A], None]:
    """Insert ``payload`` stamped with the current time, then step the clock."""
    return (
        get_clock()
        .then(lambda time_point: insert_raw_value(Value(payload, time_point)))
        .and_then(step_clock())
    )


def insert_timed_values(payloads: Iterable[A]) -> Gen[Value[A], None]:
    """Insert each payload in order as per ``insert_timed_value``."""
    return for_each(payloads, insert_timed_value)


def _draw(kind: type[V]) -> Gen[Any, V]:
    def sample(state: GenState) -> tuple[V, GenState]:
        value, source = state.random.draw(kind)
        return value, state.with_random(source)

    return with_state(sample)


def _draw_range(low: V, high: V) -> Gen[Any, V]:
    def sample(state: GenState) -> tuple[V, GenState]:
        value, source = state.random.draw_range(low, high)
        return value, state.with_random(source)

    return with_state(sample)


def insert_random_value(kind: type[V] = float) -> Gen[Value[V], V]:  # type: ignore[assignment]
    """Insert a random value of ``kind`` at the current position and time, then step the clock.

    Returns:
        Generator yielding the drawn value
    """
    return _draw(kind).then(lambda x: insert_timed_value(x).map(lambda _: x))


def insert_random_value_in_range(low: V, high: V) -> Gen[Value[V], V]:
    """Insert a random value from [low, high] as per ``insert_random_value``.

    ``low > high`` is passed through to the random source unchecked.
    """
    return _draw_range(low, high).then(lambda x: insert_timed_value(x).map(lambda _: x))

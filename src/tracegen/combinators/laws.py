"""Combinator laws and algebra checks."""

# Generators satisfy the following algebraic laws:
#
# 1. Left identity: Gen.pure(x).then(f) == f(x)
#
# 2. Right identity: gen.then(Gen.pure) == gen
#
# 3. Associativity: gen.then(f).then(g) == gen.then(lambda x: f(x).then(g))
#    Chaining steps is associative
#
# 4. Map consistency: gen.map(fn) == gen.then(lambda x: Gen.pure(fn(x)))
#
# 5. Apply consistency: fs.apply(xs) == fs.then(lambda f: xs.map(f))
#
# Extensions are functions, so generators are compared by what they
# produce: the value, the forest built against a given future, and the
# final state.

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from tracegen.kernel.gen import Gen
from tracegen.kernel.state import GenState
from tracegen.kernel.tree import Forest

Observation = tuple[Any, Forest[Any], GenState]


def observe(gen: Gen[Any, Any], state: GenState, future: Forest[Any] = ()) -> Observation:
    """Run ``gen`` on ``state`` and close its extension with ``future``."""
    result = gen.run(state)
    return result.value, result.extend(future), result.state


def equivalent(
    left: Gen[Any, Any],
    right: Gen[Any, Any],
    state: GenState,
    future: Forest[Any] = (),
) -> bool:
    return observe(left, state, future) == observe(right, state, future)


def left_identity(
    value: Any,
    func: Callable[[Any], Gen[Any, Any]],
    state: GenState,
    future: Forest[Any] = (),
) -> bool:
    return equivalent(Gen.pure(value).then(func), func(value), state, future)


def right_identity(gen: Gen[Any, Any], state: GenState, future: Forest[Any] = ()) -> bool:
    return equivalent(gen.then(Gen.pure), gen, state, future)


def associativity(
    gen: Gen[Any, Any],
    f: Callable[[Any], Gen[Any, Any]],
    g: Callable[[Any], Gen[Any, Any]],
    state: GenState,
    future: Forest[Any] = (),
) -> bool:
    return equivalent(
        gen.then(f).then(g),
        gen.then(lambda x: f(x).then(g)),
        state,
        future,
    )


def map_consistency(
    gen: Gen[Any, Any],
    fn: Callable[[Any], Any],
    state: GenState,
    future: Forest[Any] = (),
) -> bool:
    return equivalent(gen.map(fn), gen.then(lambda x: Gen.pure(fn(x))), state, future)


def apply_consistency(
    fs: Gen[Any, Callable[[Any], Any]],
    xs: Gen[Any, Any],
    state: GenState,
    future: Forest[Any] = (),
) -> bool:
    return equivalent(fs.apply(xs), fs.then(lambda f: xs.map(f)), state, future)

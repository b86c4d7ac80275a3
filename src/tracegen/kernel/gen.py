"""Generator monad - threads generation state and defers tree construction."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import wraps
from typing import Any, Generic, TypeVar

from tracegen.errors import TraceGenError
from tracegen.kernel.state import GenState
from tracegen.kernel.tree import Forest

A = TypeVar("A")
V = TypeVar("V")
R = TypeVar("R")

# Receives the trees that follow a step and returns the trees from that step onward.
Extend = Callable[[Forest[Any]], Forest[Any]]


def identity(future: Forest[A]) -> Forest[A]:
    """Extension of a step that adds nothing to the tree."""
    return future


def compose(first: Extend, second: Extend) -> Extend:
    """Extension for ``first`` followed by ``second``.

    The later step's output is handed to the earlier one as its future,
    so earlier values end up above later ones.
    """
    if first is identity:
        return second
    if second is identity:
        return first

    def extend(future: Forest[Any]) -> Forest[Any]:
        return first(second(future))

    return extend


def chain(extends: Sequence[Extend]) -> Extend:
    """Compose extensions in temporal order without nesting closures."""
    steps = [step for step in extends if step is not identity]
    if not steps:
        return identity
    if len(steps) == 1:
        return steps[0]

    def extend(future: Forest[Any]) -> Forest[Any]:
        for step in reversed(steps):
            future = step(future)
        return future

    return extend


@dataclass(frozen=True)
class Result(Generic[A, V]):
    """
    Outcome of running a generator once.

    Attributes:
        value: Result value of the generator
        extend: Pending tree extension for the values it inserted
        state: State to hand to the next step
    """

    value: V
    extend: Extend
    state: GenState

    def finalize(self) -> Forest[A]:
        """Close the pending extension with an empty future."""
        return self.extend(())


@dataclass(frozen=True)
class Gen(Generic[A, V]):
    """Generator of program trees with payloads of type ``A`` and a result of type ``V``.

    A generator is a function from a generation state to a value, an
    extension of the tree built by the following steps, and a new state.
    """

    _run: Callable[[GenState], Result[A, V]]

    def run(self, state: GenState) -> Result[A, V]:
        """Run the generator once on ``state``."""
        return self._run(state)

    def map(self, func: Callable[[V], R]) -> Gen[A, R]:
        def new_run(state: GenState) -> Result[A, R]:
            result = self.run(state)
            return Result(value=func(result.value), extend=result.extend, state=result.state)

        return Gen(new_run)

    def then(self, func: Callable[[V], Gen[A, R]]) -> Gen[A, R]:
        """Chain a generator chosen by this generator's value.

        Args:
            func: Function from this generator's value to the next generator

        Returns:
            New generator running this one, then the chosen one on the resulting state

        Note: each link adds a Python stack frame when the chain runs, so a
        chain built by calling ``then``/``and_then`` in a loop hits the
        recursion limit after about a thousand links. Build long programs
        with ``sequence``, ``for_each`` or ``composite`` instead.
        """

        def new_run(state: GenState) -> Result[A, R]:
            first = self.run(state)
            second = func(first.value).run(first.state)
            return Result(
                value=second.value,
                extend=compose(first.extend, second.extend),
                state=second.state,
            )

        return Gen(new_run)

    def and_then(self, other: Gen[A, R]) -> Gen[A, R]:
        """Run ``other`` after this generator, discarding this value."""
        return self.then(lambda _: other)

    def apply(self: Gen[A, Callable[[Any], R]], arg: Gen[A, Any]) -> Gen[A, R]:
        """Apply the function this generator yields to the value ``arg`` yields.

        This generator runs first; ``arg`` runs on the state it leaves behind.
        """

        def new_run(state: GenState) -> Result[A, R]:
            fs = self.run(state)
            xs = arg.run(fs.state)
            return Result(
                value=fs.value(xs.value),
                extend=compose(fs.extend, xs.extend),
                state=xs.state,
            )

        return Gen(new_run)

    @staticmethod
    def pure(value: V) -> Gen[Any, V]:
        """Create a generator that yields ``value`` and changes nothing."""

        def run_func(state: GenState) -> Result[Any, V]:
            return Result(value=value, extend=identity, state=state)

        return Gen(run_func)


def composite(body: Callable[..., V]) -> Callable[..., Gen[Any, V]]:
    """Turn a drawing function into a generator factory.

    The decorated function receives ``draw`` as its first argument and
    calls ``draw(gen)`` to run sub-generators in order; ``draw`` returns
    each sub-generator's value. The function's return value becomes the
    generator's value. The body runs again on every run of the generator,
    so it must not keep ``draw`` around.

        @composite
        def ping_pong(draw, rounds):
            for _ in range(rounds):
                draw(insert_timed_values(["ping", "pong"]))
            return draw(get_clock())
    """

    @wraps(body)
    def factory(*args: Any, **kwargs: Any) -> Gen[Any, V]:
        def new_run(state: GenState) -> Result[Any, V]:
            current = state
            extends: list[Extend] = []
            finished = False

            def draw(gen: Gen[Any, R]) -> R:
                nonlocal current
                if finished:
                    raise TraceGenError(f"draw called after {body.__name__} returned")
                result = gen.run(current)
                extends.append(result.extend)
                current = result.state
                return result.value

            try:
                value = body(draw, *args, **kwargs)
            finally:
                finished = True
            return Result(value=value, extend=chain(extends), state=current)

        return Gen(new_run)

    return factory

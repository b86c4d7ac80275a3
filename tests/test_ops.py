from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tracegen import (
    StdRandom,
    Tree,
    Value,
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
    run_with_state,
    set_clock,
    set_clock_delta,
    step_clock,
    with_state,
)

from fakes import CountingRandom, make_state, payloads

start_times = st.floats(min_value=0.0, max_value=1000.0, allow_nan=False, allow_infinity=False)
positive_deltas = st.floats(min_value=0.001, max_value=100.0, allow_nan=False, allow_infinity=False)
payload_lists = st.lists(st.integers(), min_size=1, max_size=20)


def timestamps(tree: Tree) -> list[float]:
    return [value.time for value in tree.flatten()]


# =============================================================================
# State primitives
# =============================================================================


def test_get_returns_current_state() -> None:
    state = make_state(clock=2.0)
    result = get().run(state)
    assert result.value is state
    assert result.state is state
    assert result.finalize() == ()


def test_put_replaces_state() -> None:
    replacement = make_state(clock=9.0, clock_delta=3.0)
    result = put(replacement).run(make_state())
    assert result.state is replacement
    assert result.finalize() == ()


def test_modify_and_with_state() -> None:
    state = make_state(clock=1.0)
    assert modify(lambda s: s.with_clock(5.0)).run(state).state.clock == 5.0

    result = with_state(lambda s: ("seen", s.with_clock_delta(0.25))).run(state)
    assert result.value == "seen"
    assert result.state.clock_delta == 0.25
    assert result.finalize() == ()


def test_clock_primitives_touch_only_their_field() -> None:
    source = CountingRandom(7)
    state = make_state(clock=1.0, clock_delta=0.5, source=source)

    assert get_clock().run(state).value == 1.0

    stepped = step_clock().run(state).state
    assert (stepped.clock, stepped.clock_delta, stepped.random) == (1.5, 0.5, source)

    moved = set_clock(10.0).run(state).state
    assert (moved.clock, moved.clock_delta, moved.random) == (10.0, 0.5, source)

    widened = set_clock_delta(2.0).run(state).state
    assert (widened.clock, widened.clock_delta, widened.random) == (1.0, 2.0, source)


# =============================================================================
# Value insertion
# =============================================================================


def test_insert_raw_value_without_future_is_a_leaf() -> None:
    result = insert_raw_value("x").run(make_state())
    assert result.extend(()) == (Tree.leaf("x"),)
    assert result.state.clock == 0.0


def test_insert_raw_value_adopts_future_as_children() -> None:
    future = (Tree.leaf("y"), Tree.leaf("z"))
    result = insert_raw_value("x").run(make_state())
    assert result.extend(future) == (Tree("x", future),)


def test_insert_timed_values_nest_as_a_chain() -> None:
    _, forest = run_with_state(insert_timed_values(["a", "b", "c"]), make_state(clock=2.0, clock_delta=0.5))
    assert forest == (
        Tree(Value("a", 2.0), (Tree(Value("b", 2.5), (Tree.leaf(Value("c", 3.0)),)),)),
    )


def test_insert_timed_value_steps_clock() -> None:
    result = insert_timed_value("a").run(make_state(clock=1.0, clock_delta=0.5))
    assert result.state.clock == 1.5
    assert result.finalize() == (Tree.leaf(Value("a", 1.0)),)


def test_set_clock_intervenes_between_insertions() -> None:
    gen = insert_timed_value("a").and_then(set_clock(10.0)).and_then(insert_timed_values(["b", "c"]))
    _, forest = run_with_state(gen, make_state())
    assert timestamps(forest[0]) == [0.0, 10.0, 11.0]


@given(start=start_times, delta=positive_deltas, items=payload_lists)
@settings(max_examples=100)
def test_timestamps_increase_by_clock_delta(start: float, delta: float, items: list[int]) -> None:
    gen = set_clock_delta(delta).and_then(insert_timed_values(items))
    _, forest = run_with_state(gen, make_state(clock=start))

    assert len(forest) == 1
    times = timestamps(forest[0])
    assert times[0] == start
    for earlier, later in zip(times, times[1:]):
        assert later == earlier + delta
        assert later > earlier
    assert payloads(forest[0]) == items


def test_insert_random_value_consumes_source() -> None:
    gen = repeat(insert_random_value(int), 3)
    result = insert_random_value(int).and_then(gen).run(make_state())
    assert result.value == [1, 2, 3]
    assert result.state.random == CountingRandom(4)
    assert payloads(result.finalize()[0]) == [0, 1, 2, 3]


def test_insert_random_value_in_range_uses_bounds() -> None:
    value, forest = run_with_state(insert_random_value_in_range(10, 12), make_state(source=CountingRandom(4)))
    assert value == 11
    assert forest == (Tree.leaf(Value(11, 0.0)),)


def test_insert_random_value_in_range_reversed_bounds_surface_source_error() -> None:
    with pytest.raises(ValueError):
        run_with_state(insert_random_value_in_range(5, 1), make_state(source=StdRandom.from_seed(1)))


# =============================================================================
# Sequencing helpers
# =============================================================================


def test_for_each_discards_values() -> None:
    value, forest = run_with_state(for_each([1, 2], lambda x: insert_timed_value(x * 10)), make_state())
    assert value is None
    assert payloads(forest[0]) == [10, 20]


def test_repeat_zero_times_is_empty() -> None:
    value, forest = run_with_state(repeat(insert_timed_value("a"), 0), make_state())
    assert value == []
    assert forest == ()


def test_repeat_rejects_negative_count() -> None:
    with pytest.raises(ValueError, match="must not be negative"):
        repeat(insert_timed_value("a"), -1)

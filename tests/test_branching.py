from __future__ import annotations

from tracegen import (
    Gen,
    StdRandom,
    Tree,
    Value,
    branch,
    branch_forget_rand,
    branches,
    insert_random_value,
    insert_timed_value,
    insert_timed_values,
    run_with_state,
    set_clock_delta,
)
from tracegen.combinators import laws

from fakes import CountingRandom, make_state, payloads


def test_branch_splices_siblings_before_future() -> None:
    gen = (
        insert_timed_value("x")
        .and_then(branch(insert_timed_value("y")))
        .and_then(insert_timed_value("z"))
    )
    _, forest = run_with_state(gen, make_state())
    assert forest == (
        Tree(Value("x", 0.0), (Tree.leaf(Value("y", 1.0)), Tree.leaf(Value("z", 1.0)))),
    )


def test_branch_keeps_its_own_sequence_nested() -> None:
    gen = branch(insert_timed_values(["a", "b"])).and_then(insert_timed_value("c"))
    _, forest = run_with_state(gen, make_state())
    assert len(forest) == 2
    assert forest[0] == Tree(Value("a", 0.0), (Tree.leaf(Value("b", 1.0)),))
    assert forest[1] == Tree.leaf(Value("c", 0.0))


def test_branch_discards_clock_and_delta() -> None:
    sub = set_clock_delta(5.0).and_then(insert_timed_values(["a", "b"]))
    result = branch(sub).run(make_state(clock=1.0, clock_delta=0.5))
    assert result.state.clock == 1.0
    assert result.state.clock_delta == 0.5


def test_branch_returns_sub_generator_value() -> None:
    result = branch(insert_timed_value("a").map(lambda _: "done")).run(make_state())
    assert result.value == "done"


def test_branch_carries_random_source_forward() -> None:
    gen = (
        insert_random_value(int)
        .and_then(branch(insert_random_value(int)))
        .and_then(insert_random_value(int))
    )
    value, forest = run_with_state(gen, make_state())
    assert value == 2
    assert forest == (
        Tree(Value(0, 0.0), (Tree.leaf(Value(1, 1.0)), Tree.leaf(Value(2, 1.0)))),
    )


def test_branch_forget_rand_restores_random_source() -> None:
    gen = (
        insert_random_value(int)
        .and_then(branch_forget_rand(insert_random_value(int)))
        .and_then(insert_random_value(int))
    )
    value, forest = run_with_state(gen, make_state())
    assert value == 1
    assert forest == (
        Tree(Value(0, 0.0), (Tree.leaf(Value(1, 1.0)), Tree.leaf(Value(1, 1.0)))),
    )


def test_branch_draws_never_repeat_in_main_line() -> None:
    state = make_state(source=StdRandom.from_seed(1234))
    gen = (
        insert_random_value(int)
        .and_then(branch(insert_random_value(int)))
        .and_then(insert_random_value(int))
    )
    _, forest = run_with_state(gen, state)
    first, spliced, after = payloads(forest[0])

    _, straight = run_with_state(
        insert_random_value(int).and_then(insert_random_value(int)).and_then(insert_random_value(int)),
        state,
    )
    assert [first, spliced, after] == payloads(straight[0])
    assert after != spliced


def test_branch_forget_rand_matches_run_without_branch() -> None:
    state = make_state(source=StdRandom.from_seed(99))
    with_branch = branch_forget_rand(insert_random_value(float)).and_then(insert_random_value(float))
    without = insert_random_value(float)

    after_branch = with_branch.run(state)
    plain = without.run(state)
    assert after_branch.value == plain.value
    assert after_branch.state == plain.state


def test_empty_branch_leaves_forest_unchanged() -> None:
    state = make_state()
    main = insert_timed_value("a").and_then(insert_timed_value("b"))
    with_empty = insert_timed_value("a").and_then(branch(Gen.pure(None))).and_then(insert_timed_value("b"))

    assert laws.equivalent(with_empty, main, state)
    assert laws.equivalent(branch_forget_rand(Gen.pure(None)), Gen.pure(None), state)


def test_branches_splice_alternatives_in_order() -> None:
    gen = insert_timed_value("start").and_then(
        branches([insert_timed_value("left"), insert_timed_value("right")])
    ).and_then(insert_timed_value("main"))
    _, forest = run_with_state(gen, make_state())
    root = forest[0]
    assert root.value == Value("start", 0.0)
    assert [child.value.payload for child in root.children] == ["left", "right", "main"]
    assert root.paths() == [
        [Value("start", 0.0), Value("left", 1.0)],
        [Value("start", 0.0), Value("right", 1.0)],
        [Value("start", 0.0), Value("main", 1.0)],
    ]


def test_branches_forget_rand_reuses_source_for_each_alternative() -> None:
    result = branches([insert_random_value(int), insert_random_value(int)], forget_rand=True).run(
        make_state(source=CountingRandom(3))
    )
    assert result.value == [3, 3]
    assert result.state.random == CountingRandom(3)

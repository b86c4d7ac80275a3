from __future__ import annotations

from tracegen import Gen, StdRandom, branch, insert_timed_value, insert_timed_values, render_forest, run


def button_presses() -> Gen:
    return (
        insert_timed_value("press")
        .and_then(branch(insert_timed_values(["release", "press"])))
        .and_then(insert_timed_value("hold"))
    )


if __name__ == "__main__":
    _, forest = run(button_presses(), source=StdRandom.from_seed(0))
    print(render_forest(forest))

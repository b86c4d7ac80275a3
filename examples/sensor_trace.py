"""
Sensor trace example.

A thermostat-under-test receives temperature readings every 0.5s.
After a couple of readings the history forks: in one future the sensor
drops out (reports None), in the other readings keep coming.
"""

from __future__ import annotations

import logging

from tracegen import (
    GenSettings,
    branch,
    composite,
    insert_random_value_in_range,
    insert_timed_value,
    insert_timed_values,
    print_generated_tree,
    repeat,
    set_clock_delta,
)


@composite
def readings(draw, count: int):
    draw(set_clock_delta(0.5))
    return draw(repeat(insert_random_value_in_range(15.0, 25.0), count))


@composite
def thermostat_inputs(draw):
    draw(insert_timed_values([18.0, 18.5]))
    draw(branch(insert_timed_value(None)))
    return draw(readings(3))


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    print_generated_tree(thermostat_inputs(), settings=GenSettings(seed=7))

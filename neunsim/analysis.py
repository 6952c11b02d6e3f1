"""Helpers that drive a neuron until one of its variables crosses a threshold."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Protocol


class SteppableNeuron(Protocol):
    def step(self, h: float) -> None: ...

    def get(self, key: IntEnum) -> float: ...

    def add_synaptic_input(self, value: float) -> None: ...


def _is_upward_crossing(x: float, last: float, threshold: float) -> bool:
    return x >= threshold and last < threshold


def _run_until_crossing(
    neuron: SteppableNeuron,
    variable: IntEnum,
    h: float,
    threshold: float,
    initial: float,
    current: float | None = None,
) -> int:
    x = initial
    steps = 0
    while True:
        if current is not None:
            neuron.add_synaptic_input(current)
        neuron.step(h)
        steps += 1
        last, x = x, neuron.get(variable)
        if _is_upward_crossing(x, last, threshold):
            return steps


def advance_until_crossing_threshold(
    neuron: SteppableNeuron, variable: IntEnum, h: float, threshold: float
) -> None:
    """Step ``neuron`` until ``variable`` rises through ``threshold``.

    The value before the first step is taken to be zero.
    """
    _run_until_crossing(neuron, variable, h, threshold, initial=0.0)


def advance_until_crossing_threshold_adding_input(
    neuron: SteppableNeuron,
    variable: IntEnum,
    h: float,
    current: float,
    threshold: float,
) -> None:
    """Like ``advance_until_crossing_threshold``, injecting ``current`` before every step."""
    _run_until_crossing(neuron, variable, h, threshold, initial=0.0, current=current)


def get_period(
    neuron: SteppableNeuron, variable: IntEnum, h: float, threshold: float
) -> int:
    """Return the number of steps until ``variable`` rises through ``threshold``.

    The first step can never count as a crossing, since there is no earlier value.
    """
    return _run_until_crossing(neuron, variable, h, threshold, initial=math.nan)


def get_period_adding_input(
    neuron: SteppableNeuron,
    variable: IntEnum,
    h: float,
    current: float,
    threshold: float,
) -> int:
    """Like ``get_period``, injecting ``current`` before every step."""
    return _run_until_crossing(
        neuron, variable, h, threshold, initial=math.nan, current=current
    )
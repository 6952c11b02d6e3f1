"""Discrete-time neuron maps of the Rulkov family."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Sequence

from ..system import DynamicalSystem


def _rulkov_fast(alpha: float, x: float, y: float) -> float:
    """Piecewise fast map shared by the Rulkov-type models."""
    if x <= 0:
        return alpha / (1 - x) + y
    if x < alpha + y:
        return alpha + y
    return -1.0


class RulkovMapModel(DynamicalSystem):
    """Two-variable chaotic spiking map (Rulkov, 2002).

    Typical values: alpha = 3, mu = 0.001, sigma = 0.1, betae = 1, sigmae = 1.
    ``eval`` returns the next state of the map rather than a derivative.
    """

    class Variable(IntEnum):
        x = 0
        y = 1

    class Parameter(IntEnum):
        alpha = 0
        mu = 1
        sigma = 2
        betae = 3
        sigmae = 4

    def eval(self, variables: Sequence[float], parameters: list[float]) -> list[float]:
        """Return the next ``(x, y)`` given the current state and synaptic input."""
        V, P = self.Variable, self.Parameter
        current = self.synaptic_input
        x, y = variables[V.x], variables[V.y]
        return [
            _rulkov_fast(parameters[P.alpha], x, y + parameters[P.betae] * current),
            y
            + parameters[P.mu]
            * (-(x + 1) + parameters[P.sigma] + parameters[P.sigmae] * current),
        ]


class BistableRulkovMapModel(DynamicalSystem):
    """Rulkov map whose slow drive ``sigma`` is itself a bistable variable."""

    class Variable(IntEnum):
        x = 0
        y = 1
        sigma = 2

    class Parameter(IntEnum):
        alpha = 0
        mu = 1
        sigmae = 2
        betae = 3
        point = 4

    def eval(self, variables: Sequence[float], parameters: list[float]) -> list[float]:
        """Return the next ``(x, y, sigma)`` of the map."""
        V, P = self.Variable, self.Parameter
        current = self.synaptic_input
        x, y, sigma = variables[V.x], variables[V.y], variables[V.sigma]
        return [
            _rulkov_fast(parameters[P.alpha], x, y + parameters[P.betae] * current),
            y + parameters[P.mu] * (-(x + 1) + sigma + parameters[P.sigmae] * current),
            parameters[P.point] * (math.tanh(2 * sigma) + current),
        ]


class FerdoMapModel(DynamicalSystem):
    """Rulkov-type map with an extra adaptation variable ``z``.

    Typical values: alpha = 3, mu = 0.001, sigma = 0.1, betae = 1, sigmae = 1.
    The map updates its own state on ``step``; the step size is ignored.
    """

    class Variable(IntEnum):
        x = 0
        y = 1
        z = 2

    class Parameter(IntEnum):
        alpha = 0
        mu = 1
        sigma = 2
        betae = 3
        sigmae = 4
        lambda_ = 5
        gammae = 6

    @staticmethod
    def _gate(x: float) -> float:
        return 1.0 if x <= -1.1 else 0.0

    def step(self, h: float) -> None:
        """Iterate the map once, each variable using the freshly updated ones."""
        V, P = self.Variable, self.Parameter
        p = self.parameters
        state = self.variables
        current = self.synaptic_input

        state[V.x] = _rulkov_fast(
            p[P.alpha], state[V.x], state[V.y] + p[P.betae] * current
        )
        state[V.y] = (
            state[V.y]
            + p[P.mu] * (-(state[V.x] + 1) + p[P.sigma] + p[P.sigmae] * current)
            + self._gate(state[V.x]) * state[V.z]
        )
        state[V.z] = state[V.z] - p[P.lambda_] * state[V.z] + p[P.gammae] * current

        self.synaptic_input = 0.0

    def add_synaptic_input(self, value: float) -> None:
        """Accumulate input current for the next iteration."""
        self.synaptic_input += value
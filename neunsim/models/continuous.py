"""Continuous-time neuron models described by their derivatives."""

from __future__ import annotations

from enum import IntEnum
from typing import Sequence

from ..system import DynamicalSystem


class HindmarshRoseModel(DynamicalSystem):
    """Three-variable bursting neuron (Hindmarsh and Rose, 1984).

    Typical values: e = 3.0, mu = 0.0021, S = 4.
    """

    class Variable(IntEnum):
        x = 0
        y = 1
        z = 2

    class Parameter(IntEnum):
        e = 0
        mu = 1
        S = 2

    def eval(self, variables: Sequence[float], parameters: list[float]) -> list[float]:
        """Return ``(dx, dy, dz)`` at the given state."""
        V, P = self.Variable, self.Parameter
        x, y, z = variables[V.x], variables[V.y], variables[V.z]
        return [
            y + 3.0 * x * x - x * x * x - z + parameters[P.e] + self.synaptic_input,
            1 - 5.0 * x * x - y,
            parameters[P.mu] * (-z + parameters[P.S] * (x + 1.6)),
        ]


class IzhikevichModel(DynamicalSystem):
    """Two-variable spiking neuron with reset (Izhikevich, 2006)."""

    RESTING_POTENTIAL = -65.0

    class Variable(IntEnum):
        v = 0
        u = 1

    class Parameter(IntEnum):
        a = 0
        b = 1
        c = 2
        d = 3
        threshold = 4

    def __init__(self, parameters: Sequence[float]) -> None:
        super().__init__(parameters)
        self.restart()

    def restart(self) -> None:
        """Put the neuron back at rest: ``v = -65`` and ``u = b * v``."""
        V, P = self.Variable, self.Parameter
        self.variables[V.v] = self.RESTING_POTENTIAL
        self.variables[V.u] = self.parameters[P.b] * self.variables[V.v]

    def pre_step(self, h: float) -> None:
        """Nothing to prepare before integration."""

    def eval(self, variables: Sequence[float], parameters: list[float]) -> list[float]:
        """Return ``(dv, du)`` at the given state."""
        V, P = self.Variable, self.Parameter
        v, u = variables[V.v], variables[V.u]
        return [
            0.04 * v * v + 5 * v + 140 - u + self.synaptic_input,
            parameters[P.a] * (parameters[P.b] * v - u),
        ]

    def post_step(self, h: float) -> None:
        """Reset after a spike: ``v`` jumps to ``c`` and ``u`` grows by ``d``."""
        V, P = self.Variable, self.Parameter
        if self.variables[V.v] > self.parameters[P.threshold]:
            self.variables[V.v] = self.parameters[P.c]
            self.variables[V.u] += self.parameters[P.d]


class SimpleOscillatorModel(DynamicalSystem):
    """Cubic relaxation oscillator."""

    class Variable(IntEnum):
        x = 0
        y = 1

    class Parameter(IntEnum):
        a = 0
        m = 1
        x0 = 2
        A = 3

    def eval(self, variables: Sequence[float], parameters: list[float]) -> list[float]:
        """Return ``(dx, dy)`` at the given state."""
        V, P = self.Variable, self.Parameter
        x, y = variables[V.x], variables[V.y]
        return [
            parameters[P.A] * (x - parameters[P.a]) ** 2 * x - y + self.synaptic_input,
            parameters[P.m] * (x - parameters[P.x0]),
        ]
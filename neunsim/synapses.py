"""Simple couplings that inject current into a neuron."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol


class _InputTarget(Protocol):
    def add_synaptic_input(self, value: float) -> None: ...


class _Readable(Protocol):
    def get(self, key: IntEnum) -> float: ...


class CurrentPulse:
    """Injects a constant current into a neuron during a time window."""

    class Variable(IntEnum):
        i = 0

    def __init__(
        self,
        neuron: _InputTarget,
        activation_time: float,
        length: float,
        amplitude: float,
    ) -> None:
        self.neuron = neuron
        self.activation_time = activation_time
        self.length = length
        self.amplitude = amplitude
        self.local_time = 0.0
        self.variables = [0.0] * len(self.Variable)

    def step(self, h: float) -> None:
        """Advance local time by ``h``; inject the pulse while strictly inside the window."""
        self.local_time += h
        start = self.activation_time
        if start < self.local_time < start + self.length:
            self.neuron.add_synaptic_input(self.amplitude)
            self.variables[self.Variable.i] = self.amplitude
        else:
            self.variables[self.Variable.i] = 0.0

    def get(self, variable: IntEnum) -> float:
        """Return the current delivered on the last step."""
        return self.variables[self.Variable(variable)]

    def set(self, variable: IntEnum, value: float) -> None:
        self.variables[self.Variable(variable)] = float(value)


class DirectSynapsis:
    """Feeds ``g`` times a presynaptic variable to a neuron when it exceeds ``t``."""

    def __init__(
        self,
        n1: _Readable,
        variable: IntEnum,
        n2: _InputTarget,
        g: float = 1.0,
        t: float = 0.0,
    ) -> None:
        self.n1 = n1
        self.variable = variable
        self.n2 = n2
        self.g = g
        self.t = t

    def step(self, h: float) -> None:
        value = self.n1.get(self.variable)
        if value > self.t:
            self.n2.add_synaptic_input(self.g * value)
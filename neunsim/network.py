"""A network of neurons joined by synapses, with external input functions."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, TextIO

InputFunction = Callable[[float, "NeuronNetwork"], float]


def _member_named(enum_type: type[IntEnum], name: str) -> IntEnum:
    for member in enum_type:
        if member.name.lower() == name:
            return member
    raise LookupError(f"{enum_type.__name__} has no member named {name!r}")


class NeuronNetwork:
    """Neurons and synapses stepped together.

    ``voltage`` and ``current`` select what ``simulate`` records for each
    neuron and synapse; by default the members named ``v`` and ``i1``.
    """

    def __init__(
        self, voltage: IntEnum | None = None, current: IntEnum | None = None
    ) -> None:
        self.voltage = voltage
        self.current = current
        self.neurons: list[Any] = []
        self.synapses: list[Any] = []
        self._inputs: list[list[InputFunction]] = []

    def add_neuron(self, neuron: Any) -> int:
        """Add a neuron and return its identifier."""
        self.neurons.append(neuron)
        self._inputs.append([])
        return len(self.neurons) - 1

    def add_synapsis(self, synapsis: Any) -> int:
        """Add a synapse; returns the identifier of the last neuron added."""
        self.synapses.append(synapsis)
        return len(self.neurons) - 1

    def add_synaptic_input(self, neuron_id: int, source: InputFunction) -> int:
        """Attach an input function ``source(step, network)`` to a neuron.

        Returns the identifier of the last neuron in the network.
        """
        self._inputs[neuron_id].append(source)
        return len(self._inputs) - 1

    def inputs(self, neuron_id: int) -> list[InputFunction]:
        """Return the input functions attached to a neuron."""
        return list(self._inputs[neuron_id])

    def step(self, step: float) -> None:
        """Advance all synapses, then feed inputs to and advance every neuron."""
        for synapsis in self.synapses:
            synapsis.step(step)
        for neuron, sources in zip(self.neurons, self._inputs):
            for source in sources:
                neuron.add_synaptic_input(source(step, self))
            neuron.step(step)

    def _voltage_of(self, neuron: Any) -> float:
        key = self.voltage or _member_named(neuron.Variable, "v")
        return neuron.get(key)

    def _current_of(self, synapsis: Any) -> float:
        key = self.current or _member_named(synapsis.Variable, "i1")
        return synapsis.get(key)

    def simulate(self, simulation_time: float, step: float, out: TextIO) -> None:
        """Run for ``simulation_time``, writing one line of state per step to ``out``."""
        time = 0.0
        while time < simulation_time:
            self.step(step)
            fields = [time]
            fields.extend(self._voltage_of(n) for n in self.neurons)
            fields.extend(self._current_of(s) for s in self.synapses)
            out.write("".join(f"{value:g} " for value in fields) + "\n")
            time += step
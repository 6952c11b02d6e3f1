"""Dynamical systems, neuron wrappers and sub-stepping helpers."""

from __future__ import annotations

from enum import IntEnum
from itertools import islice
from typing import IO, Iterator, Protocol, Sequence


class Integrator(Protocol):
    """Something that advances a system's variables in place by one step."""

    def step(
        self,
        system: object,
        h: float,
        variables: list[float],
        parameters: list[float],
    ) -> None: ...


def _read_tokens(stream: IO[str]) -> Iterator[str]:
    """Yield whitespace-separated tokens, reading no further than needed."""
    token: list[str] = []
    while True:
        char = stream.read(1)
        if not char:
            break
        if char.isspace():
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(char)
    if token:
        yield "".join(token)


class DynamicalSystem:
    """A set of variables and parameters addressed by enum members.

    Subclasses define the nested ``Variable`` and ``Parameter`` IntEnum types;
    ``get`` and ``set`` pick the variable or parameter store by the key's type.
    """

    Variable: type[IntEnum]
    Parameter: type[IntEnum]

    def __init__(
        self,
        parameters: Sequence[float],
        variables: Sequence[float] | None = None,
    ) -> None:
        n_parameters = len(self.Parameter)
        n_variables = len(self.Variable)
        if len(parameters) != n_parameters:
            raise ValueError(
                f"expected {n_parameters} parameters, got {len(parameters)}"
            )
        if variables is None:
            variables = [0.0] * n_variables
        elif len(variables) != n_variables:
            raise ValueError(
                f"expected {n_variables} variables, got {len(variables)}"
            )
        self.parameters: list[float] = [float(p) for p in parameters]
        self.variables: list[float] = [float(v) for v in variables]
        self.synaptic_input = 0.0

    def _store(self, key: IntEnum) -> list[float]:
        if isinstance(key, self.Variable):
            return self.variables
        if isinstance(key, self.Parameter):
            return self.parameters
        raise TypeError(
            f"{key!r} is neither a {self.Variable.__name__} "
            f"nor a {self.Parameter.__name__} of {type(self).__name__}"
        )

    def get(self, key: IntEnum) -> float:
        """Return the value of a variable or parameter."""
        return self._store(key)[key]

    def set(self, key: IntEnum, value: float) -> None:
        """Assign a variable or parameter."""
        self._store(key)[key] = float(value)

    def save(self, stream: IO[str]) -> None:
        """Write every variable to a text stream, each followed by a space."""
        stream.write("".join(f"{value:g} " for value in self.variables))

    def load(self, stream: IO[str]) -> None:
        """Read every variable back from a text stream written by ``save``."""
        n_variables = len(self.variables)
        tokens = list(islice(_read_tokens(stream), n_variables))
        if len(tokens) < n_variables:
            raise ValueError(
                f"expected {n_variables} values, found {len(tokens)}"
            )
        self.variables[:] = [float(token) for token in tokens]


class DifferentialNeuron:
    """A continuous neuron model advanced by a numerical integrator.

    The synaptic input accumulated between steps is fed to the model and
    cleared after each step.
    """

    def __init__(self, model: DynamicalSystem, integrator: Integrator) -> None:
        self.model = model
        self.integrator = integrator

    @property
    def Variable(self) -> type[IntEnum]:  # noqa: N802
        return self.model.Variable

    @property
    def Parameter(self) -> type[IntEnum]:  # noqa: N802
        return self.model.Parameter

    @property
    def variables(self) -> list[float]:
        return self.model.variables

    @property
    def parameters(self) -> list[float]:
        return self.model.parameters

    @property
    def synaptic_input(self) -> float:
        return self.model.synaptic_input

    def eval(self, variables: Sequence[float], parameters: list[float]) -> list[float]:
        """Return the model's derivatives at the given state."""
        return self.model.eval(variables, parameters)

    def step(self, h: float) -> None:
        """Integrate the model over ``h`` and clear the synaptic input."""
        self.integrator.step(self, h, self.model.variables, self.model.parameters)
        self.model.synaptic_input = 0.0

    def add_synaptic_input(self, value: float) -> None:
        """Accumulate input current for the next step."""
        self.model.synaptic_input += value

    def get(self, key: IntEnum) -> float:
        """Return the value of a variable or parameter of the model."""
        return self.model.get(key)

    def set(self, key: IntEnum, value: float) -> None:
        """Assign a variable or parameter of the model."""
        self.model.set(key, value)


class TimeWrapper:
    """Runs several integration steps of a system for every step requested."""

    def __init__(self, system: object, substeps_per_cycle: int = 1) -> None:
        self.system = system
        self.substeps_per_cycle = substeps_per_cycle

    def step(self, h: float) -> None:
        """Step the wrapped system ``substeps_per_cycle`` times by ``h``."""
        for _ in range(self.substeps_per_cycle):
            self.system.step(h)
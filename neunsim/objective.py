"""Fitness of a network by the amplitude and count of its spikes."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Any, Sequence

from .peaks import detect_peaks


def _voltage_key(neuron: Any) -> IntEnum:
    for member in neuron.Variable:
        if member.name.lower() == "v":
            return member
    raise LookupError(f"{type(neuron).__name__} has no variable named 'v'")


class AmplitudeObjective:
    """Scores a network by how close its spike heights and counts are to targets.

    The score lies in [0, 1]: for each neuron, a Gaussian reward on spike
    amplitude plus a capped ratio of spikes found to spikes wanted, averaged.
    """

    def __init__(
        self,
        step: float,
        time: float,
        peak_tolerance: float,
        amplitude: float,
        amp_tolerance: float,
        n_peaks: float,
        voltage: IntEnum | None = None,
    ) -> None:
        self.step = step
        self.time = time
        self.peak_tolerance = peak_tolerance
        self.amplitude = amplitude
        self.amp_tolerance = amp_tolerance
        self.n_peaks = n_peaks
        self.voltage = voltage

    def quality_score(self, peaks: Sequence[int], voltages: Sequence[float]) -> float:
        """Mean Gaussian reward of the peak heights around the target amplitude."""
        if not peaks:
            return 0.0
        sigma = self.amplitude * self.amp_tolerance
        rewards = (
            math.exp(-0.5 * ((voltages[p] - self.amplitude) / sigma) ** 2)
            for p in peaks
        )
        return sum(rewards) / len(peaks)

    def count_score(self, peaks: Sequence[int]) -> float:
        """Ratio of peaks found to peaks wanted, capped at one."""
        return min(1.0, len(peaks) / self.n_peaks)

    def evaluate(self, network: Any) -> float:
        """Simulate ``network`` for the configured time and return its fitness."""
        neurons = list(network.neurons)
        if not neurons:
            raise ValueError("cannot evaluate a network without neurons")
        keys = [self.voltage or _voltage_key(n) for n in neurons]
        n_samples = int(self.time / self.step)

        traces: list[list[float]] = [[] for _ in neurons]
        for _ in range(n_samples):
            network.step(self.step)
            for trace, neuron, key in zip(traces, neurons, keys):
                trace.append(neuron.get(key))

        fitness = 0.0
        for trace in traces:
            peaks = detect_peaks(trace, self.peak_tolerance)
            fitness += self.quality_score(peaks, trace) + self.count_score(peaks)
        return fitness / (len(neurons) * 2)
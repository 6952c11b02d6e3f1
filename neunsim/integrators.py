"""Explicit Runge-Kutta integrators."""

from __future__ import annotations

from typing import Protocol, Sequence


class Evaluable(Protocol):
    def eval(self, variables: Sequence[float], parameters: list[float]) -> list[float]: ...


_STAGES: tuple[tuple[float, ...], ...] = (
    (0.2,),
    (0.075, 0.225),
    (0.3, -0.9, 1.2),
    (0.075, 0.675, -0.6, 0.75),
    (
        0.660493827160493,
        2.5,
        -5.185185185185185,
        3.888888888888889,
        -0.864197530864197,
    ),
)

_WEIGHTS: tuple[float, ...] = (
    0.098765432098765,
    0.0,
    0.396825396825396,
    0.231481481481481,
    0.308641975308641,
    -0.035714285714285,
)


def _combine(
    base: Sequence[float],
    coefficients: Sequence[float],
    slopes: Sequence[Sequence[float]],
) -> list[float]:
    return [
        x + sum(c * k for c, k in zip(coefficients, ks))
        for x, *ks in zip(base, *slopes)
    ]


class RungeKutta6:
    """Six-stage explicit Runge-Kutta method."""

    @staticmethod
    def step(
        system: Evaluable,
        h: float,
        variables: list[float],
        parameters: list[float],
    ) -> None:
        """Advance ``variables`` in place by one step of size ``h``."""
        slopes = [[h * r for r in system.eval(list(variables), parameters)]]
        for coefficients in _STAGES:
            stage = _combine(variables, coefficients, slopes)
            slopes.append([h * r for r in system.eval(stage, parameters)])
        variables[:] = _combine(variables, _WEIGHTS, slopes)
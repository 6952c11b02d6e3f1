"""Conductance-based neuron with temperature-dependent (Q10) kinetics."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import NamedTuple, Sequence

from ..system import DynamicalSystem

_VARIABLE_NAMES: tuple[str, ...] = ("v", "h", "r", "a", "b", "n", "e", "f")

_PARAMETER_NAMES: tuple[str, ...] = (
    "cm", "gamma_T",
    "vna", "vk", "vca",
    "Gnat", "Gnap", "Ga", "Gd", "Glva", "Ghva",
    "Q10_Gnat", "Q10_Gnap", "Q10_Ga", "Q10_Gd", "Q10_Glva", "Q10_Ghva",
    "vh_h", "vs_h", "tau0_h", "delta_h", "Q10_h",
    "vh_r", "vs_r", "tau0_r", "delta_r", "Q10_r",
    "vh_a", "vs_a", "tau0_a", "delta_a", "Q10_a",
    "vh_b", "vs_b", "tau0_b", "delta_b", "Q10_b",
    "vh_n", "vs_n", "tau0_n", "delta_n", "Q10_n",
    "vh_e", "vs_e", "tau0_e", "delta_e", "Q10_e",
    "vh_f", "vs_f", "tau0_f", "delta_f", "Q10_f",
    "Vh_m", "Vs_m",
    "Vh_c", "Vs_c", "Vh_d", "Vs_d",
    "dv",
    "Inat", "Inap", "Ia", "Id", "Ilva", "Ihva",
    "diff_T",
)

_GATE_NAMES: tuple[str, ...] = ("h", "r", "a", "b", "n", "e", "f")


def _exp(value: float) -> float:
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def _steady_state(v: float, vh: float, vs: float) -> float:
    return 1 / (1 + _exp((vh - v) / vs))


def _gate_rate(
    phi: float, x: float, v: float, vh: float, vs: float, tau0: float, delta: float
) -> float:
    x_inf = _steady_state(v, vh, vs)
    tau = tau0 * _exp(delta * (vh - v) / vs) * x_inf
    return phi * (x_inf - x) / tau


def _phi_q10(q10: float, diff_t: float) -> float:
    return q10 ** (diff_t / 10) if q10 > 0 else 1.0


def _g_q10(q10: float, g: float, diff_t: float) -> float:
    return g * _phi_q10(q10, diff_t)


def _capacitance(cm: float, gamma_t: float, diff_t: float) -> float:
    return cm + cm * gamma_t * diff_t


class _GateKeys(NamedTuple):
    variable: IntEnum
    q10: IntEnum
    vh: IntEnum
    vs: IntEnum
    tau0: IntEnum
    delta: IntEnum


class VavoulisCGCModelQ10(DynamicalSystem):
    """Cerebral giant cell model with Q10 scaling of conductances and gate rates.

    ``eval`` also records each ionic current and the voltage derivative in the
    ``Inat`` ... ``Ihva`` and ``dv`` parameters it is given.
    """

    Variable = IntEnum(
        "Variable",
        list(_VARIABLE_NAMES),
        start=0,
        module=__name__,
        qualname="VavoulisCGCModelQ10.Variable",
    )
    Parameter = IntEnum(
        "Parameter",
        list(_PARAMETER_NAMES),
        start=0,
        module=__name__,
        qualname="VavoulisCGCModelQ10.Parameter",
    )

    @staticmethod
    def var_names() -> list[str]:
        """Names of the variables, in index order."""
        return list(_VARIABLE_NAMES)

    @staticmethod
    def param_names() -> list[str]:
        """Names of the parameters, in index order."""
        return list(_PARAMETER_NAMES)

    def eval(self, variables: Sequence[float], parameters: list[float]) -> list[float]:
        """Return the derivatives of all variables and store the currents in ``parameters``."""
        V, P = self.Variable, self.Parameter
        p = parameters
        v = variables[V.v]
        diff_t = p[P.diff_T]

        incs = [0.0] * len(V)
        for keys in _GATES:
            incs[keys.variable] = _gate_rate(
                _phi_q10(p[keys.q10], diff_t),
                variables[keys.variable],
                v,
                p[keys.vh],
                p[keys.vs],
                p[keys.tau0],
                p[keys.delta],
            )

        m_inf = _steady_state(v, p[P.Vh_m], p[P.Vs_m])
        c_inf = _steady_state(v, p[P.Vh_c], p[P.Vs_c])
        d_inf = _steady_state(v, p[P.Vh_d], p[P.Vs_d])

        p[P.Inat] = (
            _g_q10(p[P.Q10_Gnat], p[P.Gnat], diff_t)
            * m_inf**3
            * variables[V.h]
            * (v - p[P.vna])
        )
        p[P.Inap] = (
            _g_q10(p[P.Q10_Gnap], p[P.Gnap], diff_t)
            * variables[V.r] ** 3
            * (v - p[P.vna])
        )
        p[P.Ia] = (
            _g_q10(p[P.Q10_Ga], p[P.Ga], diff_t)
            * variables[V.a] ** 4
            * variables[V.b]
            * (v - p[P.vk])
        )
        p[P.Id] = (
            _g_q10(p[P.Q10_Gd], p[P.Gd], diff_t)
            * variables[V.n] ** 4
            * (v - p[P.vk])
        )
        p[P.Ilva] = (
            _g_q10(p[P.Q10_Glva], p[P.Glva], diff_t)
            * c_inf**3
            * d_inf
            * (v - p[P.vca])
        )
        p[P.Ihva] = (
            _g_q10(p[P.Q10_Ghva], p[P.Ghva], diff_t)
            * variables[V.e] ** 3
            * variables[V.f]
            * (v - p[P.vca])
        )

        total = (
            p[P.Inat] + p[P.Inap] + p[P.Ia] + p[P.Id] + p[P.Ilva] + p[P.Ihva]
        )
        incs[V.v] = (self.synaptic_input - total) / _capacitance(
            p[P.cm], p[P.gamma_T], diff_t
        )
        p[P.dv] = incs[V.v]
        return incs


def _gate_keys(model: type[VavoulisCGCModelQ10]) -> tuple[_GateKeys, ...]:
    V, P = model.Variable, model.Parameter
    return tuple(
        _GateKeys(
            V[gate],
            P[f"Q10_{gate}"],
            P[f"vh_{gate}"],
            P[f"vs_{gate}"],
            P[f"tau0_{gate}"],
            P[f"delta_{gate}"],
        )
        for gate in _GATE_NAMES
    )


_GATES = _gate_keys(VavoulisCGCModelQ10)
import pytest

from neunsim.integrators import RungeKutta6
from neunsim.models.vavoulis import VavoulisCGCModelQ10
from neunsim.system import DifferentialNeuron

V = VavoulisCGCModelQ10.Variable
P = VavoulisCGCModelQ10.Parameter
GATES = ("h", "r", "a", "b", "n", "e", "f")


def make_params(**overrides):
    values = {name: 0.0 for name in VavoulisCGCModelQ10.param_names()}
    values["cm"] = 1.0
    for gate in GATES:
        values[f"vs_{gate}"] = 1.0
        values[f"tau0_{gate}"] = 1.0
    for key in ("Vs_m", "Vs_c", "Vs_d"):
        values[key] = 1.0
    values.update(overrides)
    return [values[name] for name in VavoulisCGCModelQ10.param_names()]


def resting_variables(v=0.0, gate=0.5):
    return [v] + [gate] * (len(V) - 1)


def test_var_names_follow_enum():
    assert VavoulisCGCModelQ10.var_names() == [m.name for m in V]
    assert VavoulisCGCModelQ10.var_names()[0] == "v"


def test_param_names_follow_enum():
    names = VavoulisCGCModelQ10.param_names()
    assert names == [m.name for m in P]
    assert names[0] == "cm"
    assert names[-1] == "diff_T"


def test_gates_at_half_activation_do_not_move():
    model = VavoulisCGCModelQ10(make_params())
    params = list(model.parameters)
    incs = model.eval(resting_variables(), params)
    assert incs[1:] == pytest.approx([0.0] * (len(V) - 1))


def test_gate_relaxes_toward_steady_state():
    model = VavoulisCGCModelQ10(make_params())
    state = resting_variables()
    state[V.h] = 0.0
    state[V.n] = 1.0
    incs = model.eval(state, list(model.parameters))
    assert incs[V.h] > 0
    assert incs[V.n] < 0


def test_synaptic_input_drives_voltage_and_is_recorded():
    model = VavoulisCGCModelQ10(make_params())
    model.synaptic_input = 2.5
    params = list(model.parameters)
    incs = model.eval(resting_variables(), params)
    assert incs[V.v] == pytest.approx(2.5)
    assert params[P.dv] == pytest.approx(2.5)


def test_capacitance_grows_with_temperature():
    cold = VavoulisCGCModelQ10(make_params())
    warm = VavoulisCGCModelQ10(make_params(gamma_T=0.1, diff_T=10.0))
    for model in (cold, warm):
        model.synaptic_input = 1.0
    dv_cold = cold.eval(resting_variables(), list(cold.parameters))[V.v]
    dv_warm = warm.eval(resting_variables(), list(warm.parameters))[V.v]
    assert dv_warm == pytest.approx(dv_cold / 2)


def test_q10_scales_gate_rate():
    state = resting_variables()
    state[V.h] = 0.0
    base = VavoulisCGCModelQ10(make_params(Q10_h=3.0))
    warm = VavoulisCGCModelQ10(make_params(Q10_h=3.0, diff_T=10.0))
    rate_base = base.eval(state, list(base.parameters))[V.h]
    rate_warm = warm.eval(state, list(warm.parameters))[V.h]
    assert rate_warm == pytest.approx(3 * rate_base)


def test_non_positive_q10_leaves_conductance_unscaled():
    state = resting_variables(v=10.0, gate=1.0)
    plain = VavoulisCGCModelQ10(make_params(Gd=2.0, diff_T=10.0))
    scaled = VavoulisCGCModelQ10(make_params(Gd=2.0, Q10_Gd=2.0, diff_T=10.0))
    p_plain = list(plain.parameters)
    p_scaled = list(scaled.parameters)
    plain.eval(state, p_plain)
    scaled.eval(state, p_scaled)
    assert p_plain[P.Id] == pytest.approx(20.0)
    assert p_scaled[P.Id] == pytest.approx(2 * p_plain[P.Id])


def test_sodium_current_vanishes_at_reversal_potential():
    model = VavoulisCGCModelQ10(make_params(Gnat=5.0, Gnap=5.0, vna=40.0))
    params = list(model.parameters)
    model.eval(resting_variables(v=40.0), params)
    assert params[P.Inat] == pytest.approx(0.0)
    assert params[P.Inap] == pytest.approx(0.0)


def test_currents_oppose_voltage_change():
    model = VavoulisCGCModelQ10(make_params(Gd=1.0, vk=-80.0))
    params = list(model.parameters)
    incs = model.eval(resting_variables(v=0.0, gate=1.0), params)
    assert params[P.Id] > 0
    assert incs[V.v] == pytest.approx(-params[P.Id])


def test_integrated_rest_state_is_preserved():
    model = VavoulisCGCModelQ10(make_params(), resting_variables())
    neuron = DifferentialNeuron(model, RungeKutta6)
    for _ in range(10):
        neuron.step(0.01)
    assert neuron.variables == pytest.approx(resting_variables())


def test_integrated_input_raises_voltage_and_is_cleared():
    model = VavoulisCGCModelQ10(make_params(), resting_variables())
    neuron = DifferentialNeuron(model, RungeKutta6)
    neuron.add_synaptic_input(1.0)
    neuron.step(0.1)
    assert neuron.get(V.v) > 0
    assert neuron.synaptic_input == 0.0


def test_get_and_set_by_name():
    model = VavoulisCGCModelQ10(make_params())
    model.set(P.vk, -77.0)
    model.set(V.v, -60.0)
    assert model.get(P.vk) == -77.0
    assert model.get(V.v) == -60.0


def test_wrong_parameter_count_is_rejected():
    with pytest.raises(ValueError):
        VavoulisCGCModelQ10([0.0] * 3)
from enum import IntEnum

import pytest

from neunsim.synapses import CurrentPulse, DirectSynapsis


class Var(IntEnum):
    v = 0


class Recorder:
    def __init__(self, value=0.0):
        self.value = value
        self.received = []

    def get(self, key):
        return self.value

    def add_synaptic_input(self, value):
        self.received.append(value)


def test_pulse_active_only_strictly_inside_window():
    target = Recorder()
    pulse = CurrentPulse(target, 1.0, 2.0, 0.7)
    observed = []
    for _ in range(4):
        pulse.step(1.0)
        observed.append(pulse.get(CurrentPulse.Variable.i))
    assert observed == [0.0, 0.7, 0.0, 0.0]
    assert target.received == [0.7]


def test_pulse_set_and_get_round_trip():
    pulse = CurrentPulse(Recorder(), 0.0, 1.0, 1.0)
    pulse.set(CurrentPulse.Variable.i, 4.5)
    assert pulse.get(CurrentPulse.Variable.i) == 4.5


def test_pulse_rejects_unknown_variable():
    pulse = CurrentPulse(Recorder(), 0.0, 1.0, 1.0)
    with pytest.raises(ValueError):
        pulse.get(7)


def test_direct_synapsis_above_threshold_injects_scaled_value():
    pre = Recorder(value=2.0)
    post = Recorder()
    syn = DirectSynapsis(pre, Var.v, post, g=3.0, t=1.0)
    syn.step(0.1)
    assert post.received == [6.0]


def test_direct_synapsis_at_threshold_is_silent():
    pre = Recorder(value=1.0)
    post = Recorder()
    DirectSynapsis(pre, Var.v, post, g=3.0, t=1.0).step(0.1)
    assert post.received == []


def test_direct_synapsis_defaults():
    pre = Recorder(value=0.25)
    post = Recorder()
    DirectSynapsis(pre, Var.v, post).step(0.1)
    assert post.received == [0.25]
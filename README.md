# neunsim

A small library for simulating single neurons, simple synapses and small
networks of neurons. Continuous neuron models are written as derivatives and
advanced by a six-stage Runge-Kutta integrator. Discrete map models compute
their next state directly.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Contents

- `neunsim.system`
  - `DynamicalSystem` is the base class of every model. A subclass defines
    nested `Variable` and `Parameter` `IntEnum` types. The constructor takes
    the parameter values and, optionally, the variable values; it raises
    `ValueError` if the counts are wrong. `get` and `set` choose variables or
    parameters by the type of the key. `save` writes the variables to a text
    stream and `load` reads them back.
  - `DifferentialNeuron(model, integrator)` integrates a model over each
    `step(h)` and then clears the synaptic input collected by
    `add_synaptic_input`.
  - `TimeWrapper(system, substeps_per_cycle=1)` steps a system several times
    for each call to `step`.
- `neunsim.integrators`: `RungeKutta6.step(system, h, variables, parameters)`
  updates `variables` in place.
- `neunsim.models.continuous`: `HindmarshRoseModel`, `IzhikevichModel`
  (with `restart`, `pre_step` and `post_step` for its spike reset) and
  `SimpleOscillatorModel`. Each has an `eval` method that returns
  derivatives.
- `neunsim.models.maps`: `RulkovMapModel` and `BistableRulkovMapModel`, whose
  `eval` returns the next state of the map, and `FerdoMapModel`, which
  updates itself on `step` and collects input with `add_synaptic_input`.
- `neunsim.models.vavoulis`: `VavoulisCGCModelQ10`, a conductance-based model
  with Q10 temperature scaling. Its `eval` also stores each ionic current and
  the voltage derivative in the parameter list it is given. `var_names()` and
  `param_names()` list the names in index order.
- `neunsim.synapses`: `CurrentPulse` injects a constant current while its
  local time lies strictly inside a window. `DirectSynapsis` passes `g` times
  a presynaptic variable to a neuron whenever that variable exceeds `t`.
- `neunsim.network`: `NeuronNetwork` holds neurons, synapses and input
  functions `source(step, network)`, and steps them together. Synapses are
  stepped first, then each neuron after its inputs have been fed. `simulate`
  writes one line per step: the time, then each neuron's voltage, then each
  synapse's current. By default these are the members named `v` and `i1`.
- `neunsim.analysis`: `advance_until_crossing_threshold`, `get_period` and
  their `_adding_input` variants. They step a neuron until a variable rises
  through a threshold; `get_period` returns the number of steps this took.
- `neunsim.peaks`: `detect_peaks(voltages, tolerance)` returns the indices of
  local maxima whose prominence is greater than `tolerance` times their
  height.
- `neunsim.objective`: `AmplitudeObjective` simulates a network and scores it
  in [0, 1]. The score combines how close the spike heights are to a target
  amplitude with how close the spike count is to a target count.

## Example

```python
from neunsim.analysis import get_period
from neunsim.integrators import RungeKutta6
from neunsim.models.continuous import HindmarshRoseModel
from neunsim.system import DifferentialNeuron

model = HindmarshRoseModel([3.0, 0.0021, 4.0])  # e, mu, S
neuron = DifferentialNeuron(model, RungeKutta6)
neuron.set(HindmarshRoseModel.Variable.x, -1.0)

steps = get_period(neuron, HindmarshRoseModel.Variable.x, 0.01, 1.0)
print(steps * 0.01)
```

## What it does not do

This is a library only. It has no command-line program and no file formats
beyond the plain text of `save`, `load` and `simulate`.

It includes no optimizer. `AmplitudeObjective` scores a network you have
built, but nothing in the package searches for model parameters.

No class steps the map models that only have `eval`
(`RulkovMapModel` and `BistableRulkovMapModel`). You iterate them yourself
from the state that `eval` returns.
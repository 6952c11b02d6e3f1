"""Neuron models, integrators, synapses, networks and spike analysis."""

__version__ = "0.3.2"
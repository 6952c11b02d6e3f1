"""Neuron models: discrete maps, continuous systems and a Q10 conductance model."""
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "neunsim"
version = "0.3.2"
description = "Simulation of neuron models, synapses and small neural networks."
requires-python = ">=3.10"
dependencies = []
keywords = ["neuroscience", "neuron", "simulation", "dynamical systems", "runge-kutta"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["neunsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

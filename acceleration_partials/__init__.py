"""
Acceleration Partials
=====================

Partial derivatives of acceleration models w.r.t. body states and estimatable
parameters, for linearizing the dynamics in orbit determination.

Subpackages:
------------
- model          : bodies, atmosphere, flight conditions, aerodynamic acceleration
- estimation     : acceleration partials and parameter descriptors
- input          : YAML scenario configuration and command-line interface
- initialization : builds the environment and partial of a scenario
- utility        : logging and printing helpers
"""

__version__ = '0.1.0'

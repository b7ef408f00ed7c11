"""
Initialization Package
======================

Builds the environment models and acceleration partial of a scenario.
"""

from .scenario import build_scenario

__all__ = ['build_scenario']

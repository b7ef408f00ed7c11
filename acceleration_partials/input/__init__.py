"""
Input Package
=============

Scenario configuration (YAML) and command-line interface.
"""

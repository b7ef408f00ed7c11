"""
Test Package
============

Test suite for the aerodynamic acceleration partials.

Modules:
--------
- test_numerical_partial        : Central-difference partials, caching, and state restoration
- test_acceleration_partial     : Block extraction and parameter partial registry
- test_aerodynamic_partial      : Aerodynamic state, drag coefficient, and mass dependency partials
- test_jacobian                 : State derivative Jacobian assembly
- test_atmosphere               : Exponential and tabulated atmosphere models
- test_aerodynamics             : Frame converter, flight conditions, and aerodynamic acceleration
- test_configuration            : Scenario file parsing and validation
- test_main                     : Command-line driver
"""

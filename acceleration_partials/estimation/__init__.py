"""
Estimation Package
==================

Acceleration partials and parameter descriptors consumed by an
orbit-determination filter.

Modules:
--------
- acceleration_partial : base class (partial cache, block extraction, parameter registry)
- numerical_partial    : central-difference state partials
- aerodynamic_partial  : aerodynamic acceleration partial (state, drag coefficient, mass dependency)
- parameters           : parameter and propagated-state descriptors
- errors               : exception types
- jacobian             : state derivative Jacobian assembly
"""

from .errors               import AccelerationPartialError, PartialNotUpdatedError, DependencyNotImplementedError
from .parameters           import (
  ParameterType,
  IntegratedStateType,
  EstimatableParameter,
  VectorEstimatableParameter,
  ConstantDragCoefficient,
)
from .acceleration_partial import AccelerationPartial
from .numerical_partial    import (
  NumericalAccelerationPartial,
  compute_central_difference_state_partials,
  perturbed_state,
  validate_state_perturbations,
)
from .aerodynamic_partial  import AerodynamicAccelerationPartial
from .jacobian             import assemble_state_derivative_jacobian

__all__ = [
  'AccelerationPartialError',
  'PartialNotUpdatedError',
  'DependencyNotImplementedError',
  'ParameterType',
  'IntegratedStateType',
  'EstimatableParameter',
  'VectorEstimatableParameter',
  'ConstantDragCoefficient',
  'AccelerationPartial',
  'NumericalAccelerationPartial',
  'compute_central_difference_state_partials',
  'perturbed_state',
  'validate_state_perturbations',
  'AerodynamicAccelerationPartial',
  'assemble_state_derivative_jacobian',
]

"""
Estimatable Parameters
======================

Parameter descriptors handed to acceleration partials by the estimator.

A descriptor identifies a parameter by its type, the body it belongs to, and
an optional secondary identifier (e.g. a ground station name). The value is
read and written through getter/setter callables, so the descriptor never
owns the model it refers to.
"""
import numpy as np

from enum   import Enum
from typing import Callable, Optional

from acceleration_partials.model.aerodynamics import AerodynamicCoefficientInterface


class ParameterType(Enum):
  CONSTANT_DRAG_COEFFICIENT        = 'constant_drag_coefficient'
  RADIATION_PRESSURE_COEFFICIENT   = 'radiation_pressure_coefficient'
  GRAVITATIONAL_PARAMETER          = 'gravitational_parameter'
  GROUND_STATION_POSITION          = 'ground_station_position'
  SPHERICAL_HARMONICS_COEFFICIENTS = 'spherical_harmonics_coefficients'


class IntegratedStateType(Enum):
  TRANSLATIONAL_STATE = 'translational_state'
  ROTATIONAL_STATE    = 'rotational_state'
  BODY_MASS_STATE     = 'body_mass_state'


class EstimatableParameter:
  """
  Scalar estimatable parameter
  """
  is_vector = False

  def __init__(
    self,
    parameter_type  : ParameterType,
    associated_body : str,
    value_getter    : Callable,
    value_setter    : Optional[Callable] = None,
    secondary_id    : str                = '',
  ):
    """
    Initialize parameter descriptor

    Input:
    ------
      parameter_type : ParameterType
        Kind of parameter.
      associated_body : str
        Name of the body the parameter belongs to.
      value_getter : Callable
        Returns the current parameter value.
      value_setter : Callable, optional
        Sets the parameter value. Read-only parameter if None.
      secondary_id : str
        Secondary identifier (e.g. ground station name).

    Output:
    -------
      None
    """
    self.parameter_type  = parameter_type
    self.associated_body = associated_body
    self.secondary_id    = secondary_id
    self._value_getter   = value_getter
    self._value_setter   = value_setter

  @property
  def parameter_size(
    self,
  ) -> int:
    return 1

  def get_parameter_name(
    self,
  ) -> tuple:
    """
    Parameter identifier: (parameter_type, (associated_body, secondary_id))
    """
    return self.parameter_type, (self.associated_body, self.secondary_id)

  def get_parameter_value(
    self,
  ):
    return self._value_getter()

  def set_parameter_value(
    self,
    value,
  ) -> None:
    if self._value_setter is None:
      raise AttributeError(f"Parameter {self.parameter_type.value} of {self.associated_body} is read-only.")
    self._value_setter(value)

  def __repr__(
    self,
  ) -> str:
    return f"{type(self).__name__}({self.parameter_type.value}, body={self.associated_body!r})"


class VectorEstimatableParameter(EstimatableParameter):
  """
  Vector-valued estimatable parameter
  """
  is_vector = True

  @property
  def parameter_size(
    self,
  ) -> int:
    return int(np.asarray(self.get_parameter_value()).size)


class ConstantDragCoefficient(EstimatableParameter):
  """
  Constant drag coefficient of a body's aerodynamic coefficient interface
  """

  def __init__(
    self,
    coefficient_interface : AerodynamicCoefficientInterface,
    associated_body       : str,
  ):
    super().__init__(
      parameter_type  = ParameterType.CONSTANT_DRAG_COEFFICIENT,
      associated_body = associated_body,
      value_getter    = coefficient_interface.get_drag_coefficient,
      value_setter    = coefficient_interface.set_drag_coefficient,
    )

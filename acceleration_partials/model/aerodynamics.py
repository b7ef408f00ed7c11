"""
Aerodynamic Acceleration Module
===============================

Aerodynamic force coefficients and the resulting acceleration of a body
flying through the atmosphere of a central body.

Summary:
--------
  q       = 0.5 * rho * v_air²
  acc_vec = R_aero_to_inertial @ ( -(q * S_ref / m) * [C_D, C_S, C_L] )

Coefficients are defined along the negative aerodynamic axes: a positive
drag coefficient decelerates the body along its airspeed direction.

Both classes keep a cached evaluation time. A NaN time never matches the
cache, so passing NaN forces recomputation.
"""
import numpy as np

from typing import Callable

from acceleration_partials.model.flight_conditions import FlightConditions


class AerodynamicCoefficientInterface:
  """
  Constant aerodynamic force coefficients and reference area
  """

  def __init__(
    self,
    reference_area         : float,
    drag_coefficient       : float,
    side_force_coefficient : float = 0.0,
    lift_coefficient       : float = 0.0,
  ):
    """
    Initialize coefficient interface

    Input:
    ------
      reference_area : float
        Aerodynamic reference area [m²].
      drag_coefficient : float
        Drag coefficient C_D.
      side_force_coefficient : float
        Side force coefficient C_S.
      lift_coefficient : float
        Lift coefficient C_L.

    Output:
    -------
      None
    """
    if reference_area <= 0:
      raise ValueError(f"Reference area must be positive, got {reference_area}.")

    self.reference_area         = reference_area
    self.drag_coefficient       = drag_coefficient
    self.side_force_coefficient = side_force_coefficient
    self.lift_coefficient       = lift_coefficient

  def get_reference_area(
    self,
  ) -> float:
    return self.reference_area

  def get_drag_coefficient(
    self,
  ) -> float:
    return self.drag_coefficient

  def set_drag_coefficient(
    self,
    drag_coefficient : float,
  ) -> None:
    self.drag_coefficient = drag_coefficient

  def get_current_force_coefficients(
    self,
  ) -> np.ndarray:
    """
    Force coefficients [C_D, C_S, C_L] in the aerodynamic frame
    """
    return np.array([self.drag_coefficient, self.side_force_coefficient, self.lift_coefficient])


class AerodynamicAcceleration:
  """
  Aerodynamic acceleration evaluated from the current flight conditions
  """

  def __init__(
    self,
    flight_conditions     : FlightConditions,
    coefficient_interface : AerodynamicCoefficientInterface,
    mass_function         : Callable[[], float],
  ):
    """
    Initialize aerodynamic acceleration

    Input:
    ------
      flight_conditions : FlightConditions
        Flight conditions of the accelerated body. Must be updated before update_members().
      coefficient_interface : AerodynamicCoefficientInterface
        Aerodynamic coefficients and reference area.
      mass_function : Callable[[], float]
        Returns the current mass of the accelerated body [kg].

    Output:
    -------
      None
    """
    self.flight_conditions     = flight_conditions
    self.coefficient_interface = coefficient_interface
    self.mass_function         = mass_function

    self.current_time    = np.nan
    self.current_acc_vec = np.zeros(3)

  def reset_time(
    self,
    time : float = np.nan,
  ) -> None:
    """
    Reset the cached evaluation time, forcing recomputation on the next update
    """
    self.current_time = time

  def update_members(
    self,
    time : float = np.nan,
  ) -> None:
    """
    Recompute the acceleration if time differs from the cached time

    Input:
    ------
      time : float
        Evaluation time [s]. NaN always recomputes.

    Output:
    -------
      None
    """
    if time == self.current_time:
      return

    dynamic_pressure = 0.5 * self.flight_conditions.get_current_density() * self.flight_conditions.get_current_airspeed()**2
    force_scale      = dynamic_pressure * self.coefficient_interface.get_reference_area() / self.mass_function()

    aero_acc_vec = -force_scale * self.coefficient_interface.get_current_force_coefficients()

    self.current_acc_vec = self.flight_conditions.get_rotation_from_aerodynamic_to_inertial_frame() @ aero_acc_vec
    self.current_time    = time

  def get_acceleration(
    self,
  ) -> np.ndarray:
    """
    Acceleration computed by the last update_members() call [m/s²]
    """
    return self.current_acc_vec.copy()

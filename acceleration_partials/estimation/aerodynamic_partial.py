"""
Aerodynamic Acceleration Partial
================================

Partials of the aerodynamic acceleration w.r.t. the translational state of
the accelerated and accelerating (central) body, and w.r.t. the drag
coefficient.

Summary:
--------
  d(acc_vec)/d([pos_vec, vel_vec]) : central differences, see numerical_partial
  d(acc_vec)/d(C_D)                : analytic,
                                     R_aero_to_inertial @ (-x_hat) * 0.5 * rho * v_air² * S_ref / m

Both read the flight conditions refreshed by update(); update() must have
been called for the current evaluation time first.
"""
import numpy as np

from typing import Callable, Sequence

from acceleration_partials.estimation.errors            import DependencyNotImplementedError, PartialNotUpdatedError
from acceleration_partials.estimation.numerical_partial import NumericalAccelerationPartial
from acceleration_partials.estimation.parameters        import IntegratedStateType, ParameterType
from acceleration_partials.model.aerodynamics           import AerodynamicAcceleration
from acceleration_partials.model.constants              import PARTIALCONSTANTS
from acceleration_partials.model.flight_conditions      import FlightConditions


class AerodynamicAccelerationPartial(NumericalAccelerationPartial):
  """
  Partial of the aerodynamic acceleration
  """

  def __init__(
    self,
    aerodynamic_acceleration : AerodynamicAcceleration,
    flight_conditions        : FlightConditions,
    state_get_function       : Callable[[], np.ndarray],
    state_set_function       : Callable[[np.ndarray], None],
    accelerated_body         : str,
    accelerating_body        : str,
    body_state_perturbations : Sequence[float] = PARTIALCONSTANTS.BODY_STATE_PERTURBATIONS,
  ):
    """
    Initialize aerodynamic acceleration partial

    Input:
    ------
      aerodynamic_acceleration : AerodynamicAcceleration
        Acceleration model; shared, not owned.
      flight_conditions : FlightConditions
        Flight conditions of the accelerated body; shared, not owned.
      state_get_function : Callable[[], np.ndarray]
        Returns the state [pos, vel] of the accelerated body [m, m/s].
      state_set_function : Callable[[np.ndarray], None]
        Overwrites the state of the accelerated body.
      accelerated_body : str
        Name of the body undergoing the acceleration.
      accelerating_body : str
        Name of the central body whose atmosphere exerts the acceleration.
      body_state_perturbations : Sequence[float]
        Central-difference step per state component [m, m, m, m/s, m/s, m/s].

    Output:
    -------
      None
    """
    super().__init__(
      acceleration_function        = aerodynamic_acceleration.get_acceleration,
      state_get_function           = state_get_function,
      state_set_function           = state_set_function,
      accelerated_body             = accelerated_body,
      accelerating_body            = accelerating_body,
      environment_reset_functions  = [flight_conditions.reset_current_time, aerodynamic_acceleration.reset_time],
      environment_update_functions = [flight_conditions.update_conditions,  aerodynamic_acceleration.update_members],
      body_state_perturbations     = body_state_perturbations,
    )
    self.aerodynamic_acceleration = aerodynamic_acceleration
    self.flight_conditions        = flight_conditions

    self.register_parameter_partial(
      parameter_type    = ParameterType.CONSTANT_DRAG_COEFFICIENT,
      partial_function  = self.compute_acceleration_partial_wrt_current_drag_coefficient,
      number_of_columns = 1,
    )

  def compute_acceleration_partial_wrt_current_drag_coefficient(
    self,
  ) -> np.ndarray:
    """
    Partial of the aerodynamic acceleration w.r.t. the drag coefficient

    Input:
    ------
      None (reads the flight conditions refreshed by the last update())

    Output:
    -------
      acc_partial : np.ndarray
        Partial d(acc_vec)/d(C_D) of shape (3, 1) [m/s²].

    Raises:
    -------
      PartialNotUpdatedError
        If update() has not completed since construction or the last reset_time().
    """
    if not self.is_updated:
      raise PartialNotUpdatedError(
        f"Drag coefficient partial of {self.accelerated_body} requested before update() completed."
      )

    rot_mat_aero_to_xyz = self.flight_conditions.get_rotation_from_aerodynamic_to_inertial_frame()
    airspeed            = self.flight_conditions.get_current_airspeed()
    reference_area      = self.flight_conditions.get_aerodynamic_coefficient_interface().get_reference_area()
    mass                = self.aerodynamic_acceleration.mass_function()

    # Drag acts along the negative x-axis of the aerodynamic frame
    drag_axis_xyz = rot_mat_aero_to_xyz @ np.array([-1.0, 0.0, 0.0])
    force_scale   = 0.5 * self.flight_conditions.get_current_density() * airspeed * airspeed * reference_area

    return (drag_axis_xyz * force_scale / mass).reshape(3, 1)

  def is_state_derivative_dependent_on_integrated_non_translational_state(
    self,
    state_reference_point : tuple,
    integrated_state_type : IntegratedStateType,
  ) -> bool:
    """
    Whether the aerodynamic acceleration depends on a non-translational propagated state

    Input:
    ------
      state_reference_point : tuple
        (body_name, reference_point) of the propagated state.
      integrated_state_type : IntegratedStateType
        Type of the propagated state.

    Output:
    -------
      is_dependent : bool
        False for all states without a modeled dependency.

    Raises:
    -------
      DependencyNotImplementedError
        For the mass state of the accelerated or accelerating body; the
        coupling exists but its partial is not modeled.
    """
    body_name = state_reference_point[0]
    if body_name in (self.accelerated_body, self.accelerating_body) and integrated_state_type == IntegratedStateType.BODY_MASS_STATE:
      raise DependencyNotImplementedError(
        f"Dependency of aerodynamic acceleration on the mass of {body_name} is not yet implemented."
      )
    return False

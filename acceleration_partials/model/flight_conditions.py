"""
Flight Conditions Module
========================

Atmospheric state seen by a body moving relative to a rotating central body:
altitude, density, airspeed velocity, and the aerodynamic frame orientation.
"""
import numpy as np

from typing import Callable

from acceleration_partials.model.constants       import SOLARSYSTEMCONSTANTS
from acceleration_partials.model.frame_converter import FrameConverter


class FlightConditions:
  """
  Flight conditions of a body in the atmosphere of a central body
  """

  def __init__(
    self,
    atmosphere_model           : object,
    coefficient_interface      : object,
    state_function             : Callable[[], np.ndarray],
    central_body_radius        : float = SOLARSYSTEMCONSTANTS.EARTH.RADIUS.EQUATOR,
    central_body_rotation_rate : float = SOLARSYSTEMCONSTANTS.EARTH.OMEGA,
  ):
    """
    Initialize flight conditions

    Input:
    ------
      atmosphere_model : object
        Model providing get_density(altitude, longitude, latitude, time).
      coefficient_interface : AerodynamicCoefficientInterface
        Aerodynamic coefficients and reference area of the body.
      state_function : Callable[[], np.ndarray]
        Returns the body state [pos, vel] relative to the central body [m, m/s].
      central_body_radius : float
        Central body equatorial radius [m].
      central_body_rotation_rate : float
        Central body rotation rate about its z-axis [rad/s].

    Output:
    -------
      None
    """
    self.atmosphere_model           = atmosphere_model
    self.coefficient_interface      = coefficient_interface
    self.state_function             = state_function
    self.central_body_radius        = central_body_radius
    self.central_body_rotation_rate = central_body_rotation_rate

    self.current_time                = np.nan
    self.current_altitude            = np.nan
    self.current_density             = np.nan
    self.current_airspeed            = np.nan
    self.current_airspeed_vel_vec    = np.full(3, np.nan)
    self.current_rot_mat_xyz_to_aero = np.eye(3)

  def reset_current_time(
    self,
    time : float = np.nan,
  ) -> None:
    """
    Reset the cached evaluation time, forcing recomputation on the next update
    """
    self.current_time = time

  def update_conditions(
    self,
    time : float = np.nan,
  ) -> None:
    """
    Recompute flight conditions if time differs from the cached time

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

    state_vec = self.state_function()
    pos_vec   = state_vec[0:3]
    vel_vec   = state_vec[3:6]

    # Altitude above a spherical central body
    self.current_altitude = float(np.linalg.norm(pos_vec) - self.central_body_radius)

    # Density at current altitude
    self.current_density = self.atmosphere_model.get_density(self.current_altitude, 0.0, 0.0, time)

    # Velocity relative to rotating atmosphere
    omega_vec                     = np.array([0.0, 0.0, self.central_body_rotation_rate])
    self.current_airspeed_vel_vec = vel_vec - np.cross(omega_vec, pos_vec)
    self.current_airspeed         = float(np.linalg.norm(self.current_airspeed_vel_vec))

    # Aerodynamic frame orientation
    self.current_rot_mat_xyz_to_aero = FrameConverter.inertial_to_aerodynamic(pos_vec, self.current_airspeed_vel_vec)

    self.current_time = time

  def get_current_altitude(
    self,
  ) -> float:
    return self.current_altitude

  def get_current_density(
    self,
  ) -> float:
    return self.current_density

  def get_current_airspeed(
    self,
  ) -> float:
    return self.current_airspeed

  def get_current_airspeed_velocity(
    self,
  ) -> np.ndarray:
    return self.current_airspeed_vel_vec.copy()

  def get_rotation_from_inertial_to_aerodynamic_frame(
    self,
  ) -> np.ndarray:
    return self.current_rot_mat_xyz_to_aero.copy()

  def get_rotation_from_aerodynamic_to_inertial_frame(
    self,
  ) -> np.ndarray:
    return self.current_rot_mat_xyz_to_aero.T.copy()

  def get_aerodynamic_coefficient_interface(
    self,
  ):
    return self.coefficient_interface

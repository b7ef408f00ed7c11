"""
Aerodynamic Environment Tests
=============================

Tests for the aerodynamic frame, flight conditions, and aerodynamic
acceleration models.

Tests:
------
TestFrameConverter
  - test_sanity_check_axes_orthonormal       : rotation matrix is a proper rotation
  - test_sanity_check_x_along_airspeed       : x-axis along the airspeed velocity
  - test_sanity_check_z_toward_center        : z-axis has a component toward the central body
  - test_zero_airspeed_identity              : zero airspeed returns the identity
  - test_position_parallel_to_airspeed       : degenerate geometry still gives a rotation
  - test_aerodynamic_to_inertial_transpose   : inverse rotation is the transpose

TestFlightConditions
  - test_altitude_density_airspeed           : conditions computed from the body state
  - test_same_time_skips_update              : repeated time keeps the cached conditions
  - test_nan_time_recomputes                 : NaN time always recomputes
  - test_reset_forces_recompute              : reset_current_time() invalidates the cache

TestAerodynamicAcceleration
  - test_drag_magnitude                      : |a| = 0.5 rho v² C_D S / m
  - test_drag_opposes_airspeed               : drag acts along -v_rel
  - test_lift_points_away_from_center        : positive lift has an outward radial component
  - test_same_time_skips_update              : repeated time keeps the cached acceleration
  - test_acceleration_is_copy                : returned vector does not alias the cache

Usage:
------
  python -m pytest tests/test_aerodynamics.py -v
"""
import pytest
import numpy as np

from acceleration_partials.model.aerodynamics      import AerodynamicCoefficientInterface, AerodynamicAcceleration
from acceleration_partials.model.body              import Body
from acceleration_partials.model.constants         import SOLARSYSTEMCONSTANTS
from acceleration_partials.model.flight_conditions import FlightConditions
from acceleration_partials.model.frame_converter   import FrameConverter


def expected_airspeed_velocity(state_vec):
  omega_vec = np.array([0.0, 0.0, SOLARSYSTEMCONSTANTS.EARTH.OMEGA])
  return state_vec[3:6] - np.cross(omega_vec, state_vec[0:3])


class TestFrameConverter:
  """
  Tests for the inertial to aerodynamic frame rotation.
  """

  def test_sanity_check_axes_orthonormal(self, inclined_leo_state):
    rot_mat_xyz_to_aero = FrameConverter.inertial_to_aerodynamic(inclined_leo_state[0:3], inclined_leo_state[3:6])

    assert np.allclose(rot_mat_xyz_to_aero @ rot_mat_xyz_to_aero.T, np.eye(3), atol=1e-14)
    assert np.isclose(np.linalg.det(rot_mat_xyz_to_aero), 1.0, atol=1e-14)

  def test_sanity_check_x_along_airspeed(self, inclined_leo_state):
    vel_vec             = inclined_leo_state[3:6]
    rot_mat_xyz_to_aero = FrameConverter.inertial_to_aerodynamic(inclined_leo_state[0:3], vel_vec)

    assert np.allclose(rot_mat_xyz_to_aero[0, :], vel_vec / np.linalg.norm(vel_vec), atol=1e-14)

  def test_sanity_check_z_toward_center(self, leo_initial_state):
    rot_mat_xyz_to_aero = FrameConverter.inertial_to_aerodynamic(leo_initial_state[0:3], leo_initial_state[3:6])

    # Circular equatorial orbit: z points straight down, y is opposite the orbit normal
    assert np.allclose(rot_mat_xyz_to_aero[2, :], [-1.0, 0.0, 0.0], atol=1e-14)
    assert np.allclose(rot_mat_xyz_to_aero[1, :], [ 0.0, 0.0, -1.0], atol=1e-14)

  def test_zero_airspeed_identity(self):
    rot_mat_xyz_to_aero = FrameConverter.inertial_to_aerodynamic(np.array([7000.0e3, 0.0, 0.0]), np.zeros(3))

    assert np.array_equal(rot_mat_xyz_to_aero, np.eye(3))

  def test_position_parallel_to_airspeed(self):
    rot_mat_xyz_to_aero = FrameConverter.inertial_to_aerodynamic(
      np.array([7000.0e3, 0.0, 0.0]),
      np.array([100.0, 0.0, 0.0]),
    )

    assert np.allclose(rot_mat_xyz_to_aero @ rot_mat_xyz_to_aero.T, np.eye(3), atol=1e-14)
    assert np.allclose(rot_mat_xyz_to_aero[0, :], [1.0, 0.0, 0.0])

  def test_aerodynamic_to_inertial_transpose(self, inclined_leo_state):
    pos_vec = inclined_leo_state[0:3]
    vel_vec = inclined_leo_state[3:6]

    assert np.array_equal(
      FrameConverter.aerodynamic_to_inertial(pos_vec, vel_vec),
      FrameConverter.inertial_to_aerodynamic(pos_vec, vel_vec).T,
    )


class TestFlightConditions:
  """
  Tests for FlightConditions.
  """

  def test_altitude_density_airspeed(self, aerodynamic_environment, leo_initial_state, leo_atmosphere):
    flight_conditions = aerodynamic_environment['flight_conditions']

    flight_conditions.update_conditions(0.0)

    expected_altitude = 7000.0e3 - SOLARSYSTEMCONSTANTS.EARTH.RADIUS.EQUATOR
    expected_airspeed = expected_airspeed_velocity(leo_initial_state)

    assert np.isclose(flight_conditions.get_current_altitude(), expected_altitude)
    assert np.isclose(flight_conditions.get_current_density(), leo_atmosphere.get_density(expected_altitude))
    assert np.allclose(flight_conditions.get_current_airspeed_velocity(), expected_airspeed)
    assert np.isclose(flight_conditions.get_current_airspeed(), np.linalg.norm(expected_airspeed))
    assert np.array_equal(
      flight_conditions.get_rotation_from_aerodynamic_to_inertial_frame(),
      flight_conditions.get_rotation_from_inertial_to_aerodynamic_frame().T,
    )
    assert flight_conditions.get_aerodynamic_coefficient_interface() is aerodynamic_environment['coefficient_interface']

  def test_same_time_skips_update(self, aerodynamic_environment, leo_initial_state):
    body              = aerodynamic_environment['body']
    flight_conditions = aerodynamic_environment['flight_conditions']

    flight_conditions.update_conditions(5.0)
    altitude = flight_conditions.get_current_altitude()

    body.set_state(leo_initial_state + np.array([1000.0, 0.0, 0.0, 0.0, 0.0, 0.0]))
    flight_conditions.update_conditions(5.0)

    assert flight_conditions.get_current_altitude() == altitude

  def test_nan_time_recomputes(self, aerodynamic_environment, leo_initial_state):
    body              = aerodynamic_environment['body']
    flight_conditions = aerodynamic_environment['flight_conditions']

    flight_conditions.update_conditions()
    altitude = flight_conditions.get_current_altitude()

    body.set_state(leo_initial_state + np.array([1000.0, 0.0, 0.0, 0.0, 0.0, 0.0]))
    flight_conditions.update_conditions()

    assert np.isclose(flight_conditions.get_current_altitude(), altitude + 1000.0)

  def test_reset_forces_recompute(self, aerodynamic_environment, leo_initial_state):
    body              = aerodynamic_environment['body']
    flight_conditions = aerodynamic_environment['flight_conditions']

    flight_conditions.update_conditions(5.0)
    altitude = flight_conditions.get_current_altitude()

    body.set_state(leo_initial_state + np.array([1000.0, 0.0, 0.0, 0.0, 0.0, 0.0]))
    flight_conditions.reset_current_time()
    flight_conditions.update_conditions(5.0)

    assert np.isclose(flight_conditions.get_current_altitude(), altitude + 1000.0)


class TestAerodynamicAcceleration:
  """
  Tests for AerodynamicAcceleration.
  """

  def test_drag_magnitude(self, aerodynamic_environment):
    flight_conditions        = aerodynamic_environment['flight_conditions']
    aerodynamic_acceleration = aerodynamic_environment['aerodynamic_acceleration']

    flight_conditions.update_conditions(0.0)
    aerodynamic_acceleration.update_members(0.0)

    density  = flight_conditions.get_current_density()
    airspeed = flight_conditions.get_current_airspeed()
    expected = 0.5 * density * airspeed**2 * 2.2 * 10.0 / 1000.0

    assert np.isclose(np.linalg.norm(aerodynamic_acceleration.get_acceleration()), expected, rtol=1e-12)

  def test_drag_opposes_airspeed(self, aerodynamic_environment, leo_initial_state):
    flight_conditions        = aerodynamic_environment['flight_conditions']
    aerodynamic_acceleration = aerodynamic_environment['aerodynamic_acceleration']

    flight_conditions.update_conditions(0.0)
    aerodynamic_acceleration.update_members(0.0)

    acc_vec          = aerodynamic_acceleration.get_acceleration()
    airspeed_vel_vec = expected_airspeed_velocity(leo_initial_state)

    assert np.allclose(
      acc_vec / np.linalg.norm(acc_vec),
      -airspeed_vel_vec / np.linalg.norm(airspeed_vel_vec),
      atol=1e-12,
    )

  def test_lift_points_away_from_center(self, leo_initial_state, leo_atmosphere):
    body = Body(name='Vehicle', state_vec=leo_initial_state, mass=1000.0)

    coefficient_interface = AerodynamicCoefficientInterface(
      reference_area   = 10.0,
      drag_coefficient = 0.0,
      lift_coefficient = 0.5,
    )
    flight_conditions = FlightConditions(
      atmosphere_model      = leo_atmosphere,
      coefficient_interface = coefficient_interface,
      state_function        = body.get_state,
    )
    aerodynamic_acceleration = AerodynamicAcceleration(
      flight_conditions     = flight_conditions,
      coefficient_interface = coefficient_interface,
      mass_function         = body.get_mass,
    )

    flight_conditions.update_conditions()
    aerodynamic_acceleration.update_members()
    acc_vec = aerodynamic_acceleration.get_acceleration()

    assert acc_vec[0] > 0
    assert np.isclose(acc_vec[1], 0.0, atol=1e-20)
    assert np.isclose(acc_vec[2], 0.0, atol=1e-20)

  def test_same_time_skips_update(self, aerodynamic_environment):
    coefficient_interface    = aerodynamic_environment['coefficient_interface']
    flight_conditions        = aerodynamic_environment['flight_conditions']
    aerodynamic_acceleration = aerodynamic_environment['aerodynamic_acceleration']

    flight_conditions.update_conditions(1.0)
    aerodynamic_acceleration.update_members(1.0)
    acc_vec = aerodynamic_acceleration.get_acceleration()

    coefficient_interface.set_drag_coefficient(4.4)
    aerodynamic_acceleration.update_members(1.0)
    assert np.array_equal(aerodynamic_acceleration.get_acceleration(), acc_vec)

    aerodynamic_acceleration.reset_time()
    aerodynamic_acceleration.update_members(1.0)
    assert np.allclose(aerodynamic_acceleration.get_acceleration(), 2.0 * acc_vec, rtol=1e-14)

  def test_acceleration_is_copy(self, aerodynamic_environment):
    flight_conditions        = aerodynamic_environment['flight_conditions']
    aerodynamic_acceleration = aerodynamic_environment['aerodynamic_acceleration']

    flight_conditions.update_conditions()
    aerodynamic_acceleration.update_members()

    acc_vec    = aerodynamic_acceleration.get_acceleration()
    acc_vec[:] = 0.0

    assert np.linalg.norm(aerodynamic_acceleration.get_acceleration()) > 0


class TestCoefficientInterface:
  """
  Tests for AerodynamicCoefficientInterface.
  """

  def test_force_coefficients(self):
    coefficient_interface = AerodynamicCoefficientInterface(4.0, 2.0, side_force_coefficient=0.1, lift_coefficient=0.3)

    assert np.array_equal(coefficient_interface.get_current_force_coefficients(), [2.0, 0.1, 0.3])
    assert coefficient_interface.get_reference_area() == 4.0

  def test_invalid_reference_area(self):
    with pytest.raises(ValueError):
      AerodynamicCoefficientInterface(reference_area=0.0, drag_coefficient=2.2)

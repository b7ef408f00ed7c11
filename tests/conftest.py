"""
Pytest Configuration and Fixtures
=================================

Shared fixtures for all acceleration partial tests.
"""
import pytest
import numpy as np

from pathlib import Path

from acceleration_partials.model.body              import Body
from acceleration_partials.model.atmosphere        import ExponentialAtmosphere
from acceleration_partials.model.aerodynamics      import AerodynamicCoefficientInterface, AerodynamicAcceleration
from acceleration_partials.model.flight_conditions import FlightConditions


@pytest.fixture(scope="session")
def project_root():
  """Return the project root directory."""
  return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def data_path(project_root):
  """Return path to the example data directory."""
  return project_root / "data"


@pytest.fixture
def leo_initial_state():
  """Typical LEO initial state for testing."""
  return np.array([
    7000.0e3,    # x [m]
    0.0,         # y [m]
    0.0,         # z [m]
    0.0,         # vx [m/s]
    7.5e3,       # vy [m/s]
    0.0,         # vz [m/s]
  ])


@pytest.fixture
def inclined_leo_state():
  """LEO state at 400 km altitude on an inclined orbit, away from the coordinate axes."""
  return np.array([
    5000.0e3,    # x [m]
    3500.0e3,    # y [m]
    2956.0e3,    # z [m]
    -4200.0,     # vx [m/s]
    5100.0,      # vy [m/s]
    1800.0,      # vz [m/s]
  ])


@pytest.fixture
def leo_atmosphere():
  """Exponential atmosphere fitted around 400 km altitude."""
  return ExponentialAtmosphere(
    reference_density  = 3.725e-12,
    scale_height       = 58515.0,
    reference_altitude = 400.0e3,
    temperature        = 1000.0,
  )


@pytest.fixture
def aerodynamic_environment(leo_initial_state, leo_atmosphere):
  """Body, flight conditions, and aerodynamic acceleration of a drag-only vehicle."""
  body = Body(name='Vehicle', state_vec=leo_initial_state, mass=1000.0)

  coefficient_interface = AerodynamicCoefficientInterface(
    reference_area   = 10.0,
    drag_coefficient = 2.2,
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

  return {
    'body'                     : body,
    'coefficient_interface'    : coefficient_interface,
    'flight_conditions'        : flight_conditions,
    'aerodynamic_acceleration' : aerodynamic_acceleration,
  }


@pytest.fixture
def example_scenario_filepath(data_path):
  """Return path to the example exponential-atmosphere scenario."""
  return data_path / "example_scenario.yaml"


@pytest.fixture
def tabulated_scenario_filepath(data_path):
  """Return path to the example tabulated-atmosphere scenario."""
  return data_path / "example_scenario_tabulated.yaml"

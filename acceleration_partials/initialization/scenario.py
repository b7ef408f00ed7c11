from types import SimpleNamespace

from acceleration_partials.model.body                     import Body
from acceleration_partials.model.atmosphere               import ExponentialAtmosphere, TabulatedAtmosphere
from acceleration_partials.model.aerodynamics             import AerodynamicCoefficientInterface, AerodynamicAcceleration
from acceleration_partials.model.flight_conditions        import FlightConditions
from acceleration_partials.estimation.aerodynamic_partial import AerodynamicAccelerationPartial
from acceleration_partials.estimation.parameters          import ConstantDragCoefficient


def build_atmosphere_model(
  atmosphere_config : SimpleNamespace,
):
  """
  Create the atmosphere model described by the configuration.

  Input:
  ------
    atmosphere_config : SimpleNamespace
      config.atmosphere from build_config.

  Output:
  -------
    atmosphere_model : ExponentialAtmosphere | TabulatedAtmosphere
  """
  if atmosphere_config.model == 'tabulated':
    return TabulatedAtmosphere.from_file(atmosphere_config.table_filepath)

  return ExponentialAtmosphere(
    reference_density  = atmosphere_config.reference_density,
    scale_height       = atmosphere_config.scale_height,
    reference_altitude = atmosphere_config.reference_altitude,
    temperature        = atmosphere_config.temperature,
  )


def build_scenario(
  config : SimpleNamespace,
) -> SimpleNamespace:
  """
  Create the body, environment models, and aerodynamic acceleration partial of a scenario.

  Input:
  ------
    config : SimpleNamespace
      Configuration object from build_config.

  Output:
  -------
    scenario : SimpleNamespace
      Attributes body, atmosphere_model, coefficient_interface, flight_conditions,
      aerodynamic_acceleration, acceleration_partial, drag_coefficient_parameter.
  """
  body = Body(
    name      = config.body.name,
    state_vec = config.body.state_vec,
    mass      = config.body.mass,
  )

  atmosphere_model = build_atmosphere_model(config.atmosphere)

  coefficient_interface = AerodynamicCoefficientInterface(
    reference_area         = config.drag.area,
    drag_coefficient       = config.drag.coeff,
    side_force_coefficient = config.drag.side_coeff,
    lift_coefficient       = config.drag.lift_coeff,
  )

  flight_conditions = FlightConditions(
    atmosphere_model           = atmosphere_model,
    coefficient_interface      = coefficient_interface,
    state_function             = body.get_state,
    central_body_radius        = config.central_body.radius,
    central_body_rotation_rate = config.central_body.rotation_rate,
  )

  aerodynamic_acceleration = AerodynamicAcceleration(
    flight_conditions     = flight_conditions,
    coefficient_interface = coefficient_interface,
    mass_function         = body.get_mass,
  )

  acceleration_partial = AerodynamicAccelerationPartial(
    aerodynamic_acceleration = aerodynamic_acceleration,
    flight_conditions        = flight_conditions,
    state_get_function       = body.get_state,
    state_set_function       = body.set_state,
    accelerated_body         = body.name,
    accelerating_body        = config.central_body.name,
    body_state_perturbations = config.partials.perturbations,
  )

  drag_coefficient_parameter = ConstantDragCoefficient(
    coefficient_interface = coefficient_interface,
    associated_body       = body.name,
  )

  return SimpleNamespace(
    body                       = body,
    atmosphere_model           = atmosphere_model,
    coefficient_interface      = coefficient_interface,
    flight_conditions          = flight_conditions,
    aerodynamic_acceleration   = aerodynamic_acceleration,
    acceleration_partial       = acceleration_partial,
    drag_coefficient_parameter = drag_coefficient_parameter,
  )

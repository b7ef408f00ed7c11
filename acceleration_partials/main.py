"""
Aerodynamic Acceleration Partials

Description:
  This script evaluates the partial derivatives of the aerodynamic acceleration
  of a body w.r.t. its Cartesian state and its drag coefficient, as used to
  linearize the dynamics in orbit determination. The scenario (body state,
  mass, drag properties, central body, atmosphere model, perturbation sizes) is
  read from a YAML file.

  The script performs the following steps:
  1. Builds the body, atmosphere, flight conditions, and aerodynamic acceleration.
  2. Updates the acceleration partial once at the evaluation time.
  3. Extracts the state partials and the drag coefficient partial.
  4. Assembles the state derivative Jacobian of [pos, vel, C_D].
  5. Queries non-translational (mass) state dependencies.
  6. Optionally repeats the update with scaled perturbations and compares.

Usage:

  Argument            Required   Description
  ------------------  --------   --------------------------------------------------
  config_filepath     Yes        Scenario YAML file
  --time              No         Evaluation time [s] (default: scenario value, or current)
  --log-filepath      No         Also write terminal output to this file
  --verify            No         Compare against partials with scaled perturbations

  Example Commands:
    python -m acceleration_partials.main data/example_scenario.yaml

    python -m acceleration_partials.main data/example_scenario.yaml \
      --time 0.0 \
      --verify \
      --log-filepath output/partials.log
"""
import sys
import numpy as np

from pathlib import Path
from typing  import Optional

from acceleration_partials.estimation.aerodynamic_partial import AerodynamicAccelerationPartial
from acceleration_partials.estimation.errors              import DependencyNotImplementedError
from acceleration_partials.estimation.jacobian            import assemble_state_derivative_jacobian
from acceleration_partials.estimation.parameters          import IntegratedStateType, ParameterType, VectorEstimatableParameter
from acceleration_partials.initialization.scenario        import build_scenario
from acceleration_partials.input.cli                      import parse_command_line_arguments
from acceleration_partials.input.configuration            import build_config, print_configuration
from acceleration_partials.utility.logger                 import logging_to_file
from acceleration_partials.utility.printer                import (
  print_state_partials,
  print_parameter_partials,
  print_dependency_summary,
  print_verification_summary,
)


def verify_state_partials(
  scenario            : object,
  time                : float,
  verification_factor : float,
) -> tuple:
  """
  Recompute the state partials with scaled perturbations and compare.

  Input:
  ------
    scenario : SimpleNamespace
      Scenario from build_scenario; its partial must be updated.
    time : float
      Evaluation time [s].
    verification_factor : float
      Scale applied to the perturbations of the reference partial.

  Output:
  -------
    max_abs_difference : float
      Largest absolute difference between the two 3x6 partials.
    max_rel_difference : float
      max_abs_difference divided by the largest absolute reference entry.
  """
  reference_partial = scenario.acceleration_partial

  scaled_partial = AerodynamicAccelerationPartial(
    aerodynamic_acceleration = scenario.aerodynamic_acceleration,
    flight_conditions        = scenario.flight_conditions,
    state_get_function       = scenario.body.get_state,
    state_set_function       = scenario.body.set_state,
    accelerated_body         = reference_partial.accelerated_body,
    accelerating_body        = reference_partial.accelerating_body,
    body_state_perturbations = reference_partial.body_state_perturbations * verification_factor,
  )
  scaled_partial.update(time)

  reference_state_partials = reference_partial.get_current_state_partials()
  scaled_state_partials    = scaled_partial.get_current_state_partials()

  max_abs_difference = float(np.max(np.abs(scaled_state_partials - reference_state_partials)))
  max_abs_reference  = float(np.max(np.abs(reference_state_partials)))
  max_rel_difference = max_abs_difference / max_abs_reference if max_abs_reference > 0 else 0.0

  return max_abs_difference, max_rel_difference


def run_partials(
  config : object,
  verify : bool = False,
) -> dict:
  """
  Evaluate the aerodynamic acceleration partials of a configured scenario.

  Input:
  ------
    config : SimpleNamespace
      Configuration object from build_config.
    verify : bool
      Compare against partials with scaled perturbations.

  Output:
  -------
    result : dict
      'success', 'state_partials' (3x6), 'drag_coefficient_partial' (3x1),
      'jacobian' (7x7), 'dependencies', and 'verification' (if requested).
  """
  scenario = build_scenario(config)
  partial  = scenario.acceleration_partial
  time     = config.partials.time

  # Single update per evaluation time; everything below reads the cache
  partial.update(time)
  state_partials = partial.get_current_state_partials()
  print_state_partials(state_partials, title=f"State Partials ({partial.accelerated_body} w.r.t. own state)")

  # Parameter partials
  central_body_harmonics = VectorEstimatableParameter(
    parameter_type  = ParameterType.SPHERICAL_HARMONICS_COEFFICIENTS,
    associated_body = partial.accelerating_body,
    value_getter    = lambda: np.zeros(3),
  )
  parameter_partials = {}
  for parameter in (scenario.drag_coefficient_parameter, central_body_harmonics):
    partial_function, number_of_columns = partial.get_parameter_partial_function(parameter)
    label = f"{parameter.parameter_type.value} ({parameter.associated_body})"
    parameter_partials[label] = partial_function() if number_of_columns > 0 else None
  print_parameter_partials(parameter_partials)

  drag_coefficient_partial, _ = partial.get_parameter_partial_function(scenario.drag_coefficient_parameter)

  # Jacobian of [pos, vel, C_D]
  jacobian = assemble_state_derivative_jacobian([partial], [scenario.drag_coefficient_parameter])

  # Mass dependencies
  dependencies = {}
  for body_name in (partial.accelerated_body, partial.accelerating_body):
    label = f"{IntegratedStateType.BODY_MASS_STATE.value} ({body_name})"
    try:
      dependencies[label] = partial.is_state_derivative_dependent_on_integrated_non_translational_state(
        (body_name, ''), IntegratedStateType.BODY_MASS_STATE,
      )
    except DependencyNotImplementedError as error:
      dependencies[label] = str(error)
  print_dependency_summary(dependencies)

  result = {
    'success'                  : True,
    'message'                  : 'Partials computed',
    'state_partials'           : state_partials,
    'drag_coefficient_partial' : drag_coefficient_partial(),
    'jacobian'                 : jacobian,
    'dependencies'             : dependencies,
  }

  if verify:
    max_abs_difference, max_rel_difference = verify_state_partials(
      scenario            = scenario,
      time                = time,
      verification_factor = config.partials.verification_factor,
    )
    print_verification_summary(max_abs_difference, max_rel_difference, config.partials.verification_factor)
    result['verification'] = {
      'max_abs_difference' : max_abs_difference,
      'max_rel_difference' : max_rel_difference,
    }

  return result


def main(
  config_filepath : str,
  time            : Optional[float] = None,
  log_filepath    : Optional[str]   = None,
  verify          : bool            = False,
) -> dict:
  """
  Main function to evaluate aerodynamic acceleration partials.

  Input:
  ------
    config_filepath : str
      Scenario YAML file.
    time : float, optional
      Evaluation time [s]; overrides the scenario value.
    log_filepath : str, optional
      Also write terminal output to this file.
    verify : bool
      Compare against partials with scaled perturbations.

  Output:
  -------
    result : dict
      Result dictionary with 'success' and 'message'; see run_partials.
  """
  with logging_to_file(Path(log_filepath) if log_filepath is not None else None):
    try:
      config = build_config(config_filepath, time=time)
    except (FileNotFoundError, ValueError) as error:
      print(f"\n    [ERROR] Invalid scenario: {error}")
      return {'success': False, 'message': str(error)}

    print_configuration(config)

    try:
      result = run_partials(config, verify=verify)
    except (FileNotFoundError, ValueError) as error:
      print(f"\n    [ERROR] Partials evaluation failed: {error}")
      return {'success': False, 'message': str(error)}

    print("\nDone")
    return result


def cli_main(
) -> None:
  args   = parse_command_line_arguments()
  result = main(
    config_filepath = args.config_filepath,
    time            = args.time,
    log_filepath    = args.log_filepath,
    verify          = args.verify,
  )
  sys.exit(0 if result['success'] else 1)


if __name__ == '__main__':
  cli_main()

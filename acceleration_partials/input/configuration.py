import yaml
import numpy as np

from pathlib import Path
from types   import SimpleNamespace
from typing  import Optional, Union

from acceleration_partials.model.constants import SOLARSYSTEMCONSTANTS, PARTIALCONSTANTS


SUPPORTED_ATMOSPHERE_MODELS = ('exponential', 'tabulated')


def _get_section(
  scenario_data : dict,
  key           : str,
) -> dict:
  # Missing or empty sections fall back to defaults
  section = scenario_data.get(key)
  if section is None:
    return {}
  if not isinstance(section, dict):
    raise ValueError(f"Scenario '{key}' must be a mapping, got {type(section).__name__}.")
  return section


def load_scenario_file(
  config_filepath : Union[str, Path],
) -> dict:
  """
  Load a scenario from a YAML file.

  Input:
  ------
    config_filepath : str | Path
      Path to the scenario YAML file.

  Output:
  -------
    scenario_data : dict
      Raw scenario dictionary.

  Raises:
  -------
    FileNotFoundError
      If the file does not exist.
    ValueError
      If the file does not hold a YAML mapping.
  """
  config_filepath = Path(config_filepath)
  if not config_filepath.exists():
    raise FileNotFoundError(f"Scenario file not found: {config_filepath}")

  with open(config_filepath, 'r') as f:
    scenario_data = yaml.safe_load(f)

  if scenario_data is None:
    scenario_data = {}
  if not isinstance(scenario_data, dict):
    raise ValueError(f"Scenario file {config_filepath.name} must contain a YAML mapping.")

  return scenario_data


def _build_state_vector(
  scenario_data : dict,
) -> np.ndarray:
  # Support 'state' (6-element list) OR 'pos_vec__m' and 'vel_vec__m_per_s'
  if 'state' in scenario_data:
    state_vec = np.array(scenario_data['state'], dtype=float)
  elif 'pos_vec__m' in scenario_data and 'vel_vec__m_per_s' in scenario_data:
    state_vec = np.hstack((
      np.array(scenario_data['pos_vec__m'],       dtype=float),
      np.array(scenario_data['vel_vec__m_per_s'], dtype=float),
    ))
  else:
    raise ValueError("Scenario must define 'state' or both 'pos_vec__m' and 'vel_vec__m_per_s'.")

  if state_vec.shape != (6,):
    raise ValueError(f"Scenario state must have 6 components, got {state_vec.size}.")

  return state_vec


def _build_central_body(
  scenario_data : dict,
) -> SimpleNamespace:
  central_body_data = scenario_data.get('central_body')
  if isinstance(central_body_data, str):
    central_body_data = {'name': central_body_data}
  else:
    central_body_data = _get_section(scenario_data, 'central_body')

  name = str(central_body_data.get('name', 'EARTH')).upper()
  if name not in SOLARSYSTEMCONSTANTS.NAME_TO_BODY:
    raise ValueError(f"Unknown central body: {name}. Supported: {list(SOLARSYSTEMCONSTANTS.NAME_TO_BODY.keys())}")
  body_constants = SOLARSYSTEMCONSTANTS.NAME_TO_BODY[name]

  return SimpleNamespace(
    name          = name,
    radius        = float(central_body_data.get('radius__m',                body_constants.RADIUS.EQUATOR)),
    rotation_rate = float(central_body_data.get('rotation_rate__rad_per_s', body_constants.OMEGA)),
    constants     = body_constants,
  )


def _build_atmosphere(
  scenario_data     : dict,
  central_body      : SimpleNamespace,
  config_folderpath : Path,
) -> SimpleNamespace:
  atmosphere_data = _get_section(scenario_data, 'atmosphere')

  model = str(atmosphere_data.get('model', 'exponential')).lower()
  if model not in SUPPORTED_ATMOSPHERE_MODELS:
    raise ValueError(f"Unknown atmosphere model: {model}. Supported: {list(SUPPORTED_ATMOSPHERE_MODELS)}")

  if model == 'exponential':
    return SimpleNamespace(
      model              = model,
      reference_density  = float(atmosphere_data.get('reference_density__kg_per_m3', central_body.constants.RHO_0)),
      reference_altitude = float(atmosphere_data.get('reference_altitude__m',        0.0)),
      scale_height       = float(atmosphere_data.get('scale_height__m',              central_body.constants.H_0)),
      temperature        = float(atmosphere_data.get('temperature__K',               central_body.constants.T_0)),
      table_filepath     = None,
    )

  # Tabulated atmosphere: table path is relative to the scenario file
  if 'table_filepath' not in atmosphere_data:
    raise ValueError("Tabulated atmosphere requires 'table_filepath'.")
  table_filepath = Path(atmosphere_data['table_filepath'])
  if not table_filepath.is_absolute():
    table_filepath = config_folderpath / table_filepath

  return SimpleNamespace(
    model          = model,
    table_filepath = table_filepath,
  )


def build_config(
  config_filepath : Union[str, Path],
  time            : Optional[float] = None,
) -> SimpleNamespace:
  """
  Parse and validate a scenario file into a configuration object.

  Input:
  ------
    config_filepath : str | Path
      Path to the scenario YAML file.
    time : float, optional
      Evaluation time [s]; overrides partials.time__s of the file.

  Output:
  -------
    config : SimpleNamespace
      Configuration with attributes body, central_body, drag, atmosphere, partials.

  Raises:
  -------
    FileNotFoundError
      If the scenario file does not exist.
    ValueError
      If a value is missing or invalid.
  """
  config_filepath = Path(config_filepath)
  scenario_data   = load_scenario_file(config_filepath)

  # Body
  body = SimpleNamespace(
    name      = str(scenario_data.get('name', 'Vehicle')),
    state_vec = _build_state_vector(scenario_data),
    mass      = float(scenario_data.get('mass__kg', 1000.0)),
  )
  if body.mass <= 0:
    raise ValueError(f"Body mass must be positive, got {body.mass}.")

  # Drag, with defaults for missing keys
  default_drag = {'coeff': 2.2, 'area__m2': 10.0, 'side_coeff': 0.0, 'lift_coeff': 0.0}
  drag_data    = dict(_get_section(scenario_data, 'drag'))
  for k, v in default_drag.items():
    drag_data.setdefault(k, v)
  drag = SimpleNamespace(
    coeff      = float(drag_data['coeff']),
    area       = float(drag_data['area__m2']),
    side_coeff = float(drag_data['side_coeff']),
    lift_coeff = float(drag_data['lift_coeff']),
  )
  if drag.area <= 0:
    raise ValueError(f"Drag reference area must be positive, got {drag.area}.")

  # Central body and atmosphere
  central_body = _build_central_body(scenario_data)
  atmosphere   = _build_atmosphere(scenario_data, central_body, config_filepath.parent)

  # Partials
  partials_data = _get_section(scenario_data, 'partials')
  perturbations = np.array(partials_data.get('perturbations', PARTIALCONSTANTS.BODY_STATE_PERTURBATIONS), dtype=float)
  if perturbations.shape != (6,) or np.any(perturbations <= 0):
    raise ValueError(f"Partials perturbations must be 6 positive values, got {perturbations.tolist()}.")

  if time is None:
    time = partials_data.get('time__s')
  partials = SimpleNamespace(
    time                = np.nan if time is None else float(time),
    perturbations       = perturbations,
    verification_factor = float(partials_data.get('verification_factor', 0.1)),
  )
  if partials.verification_factor <= 0:
    raise ValueError(f"Partials verification factor must be positive, got {partials.verification_factor}.")

  return SimpleNamespace(
    config_filepath = config_filepath,
    body            = body,
    central_body    = central_body,
    drag            = drag,
    atmosphere      = atmosphere,
    partials        = partials,
  )


def print_configuration(
  config : SimpleNamespace,
) -> None:
  """
  Print the scenario configuration in a formatted table.

  Input:
  ------
    config : SimpleNamespace
      Configuration object from build_config.

  Output:
  -------
    None
  """
  if config.atmosphere.model == 'exponential':
    atmosphere_str = (
      f"exponential (rho_0 {config.atmosphere.reference_density:.6e} kg/m³ "
      f"at {config.atmosphere.reference_altitude:.1f} m, H {config.atmosphere.scale_height:.1f} m)"
    )
  else:
    atmosphere_str = f"tabulated ({config.atmosphere.table_filepath.name})"

  pos_vec = config.body.state_vec[0:3]
  vel_vec = config.body.state_vec[3:6]

  entries = [
    ('scenario_file',  config.config_filepath.name),
    ('body',           config.body.name),
    ('mass',           f"{config.body.mass} kg"),
    ('position',       f"{pos_vec[0]:.6e} {pos_vec[1]:.6e} {pos_vec[2]:.6e} m"),
    ('velocity',       f"{vel_vec[0]:.6e} {vel_vec[1]:.6e} {vel_vec[2]:.6e} m/s"),
    ('central_body',   config.central_body.name),
    ('drag_coeff',     config.drag.coeff),
    ('drag_area',      f"{config.drag.area} m²"),
    ('atmosphere',     atmosphere_str),
    ('time',           "current (NaN)" if np.isnan(config.partials.time) else f"{config.partials.time} s"),
    ('perturbations',  ' '.join(f"{p:g}" for p in config.partials.perturbations)),
  ]

  # Calculate column width: max of header and all names, plus 4 for spacing
  min_spacing = 4
  name_width  = max(len('Argument'), max(len(name) for name, _ in entries)) + min_spacing

  print("\nScenario Configuration")
  print("  " + "Argument".ljust(name_width) + "Value")
  print("  " + ("-" * (name_width - min_spacing)).ljust(name_width) + "-----")
  for name, value in entries:
    print("  " + name.ljust(name_width) + str(value))

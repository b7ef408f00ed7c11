"""
Numerical Acceleration Partials
===============================

Central-difference partials of an acceleration w.r.t. the Cartesian state of
the accelerated body.

Summary:
--------
For each state component i with step dx_i > 0:

  acc_up   = acc(state_nominal + dx_i * e_i)
  acc_down = acc(state_nominal - dx_i * e_i)
  d(acc_vec)/d(state_i) = (acc_up - acc_down) / (2 * dx_i)

The truncation error is O(dx_i²). Steps are fixed: too small a step gives
cancellation error, too large a step gives truncation error, so they must
be chosen for the scale of the dynamics (e.g. meters for position, cm/s for
velocity in low Earth orbit).

Every perturbed evaluation writes the perturbed state through the state
setter, resets the environment model caches, and recomputes them. The
nominal state and nominal environment are restored on exit, including when
an environment model raises.
"""
import numpy as np

from contextlib import contextmanager
from typing     import Callable, Iterator, Optional, Sequence

from acceleration_partials.estimation.acceleration_partial import AccelerationPartial
from acceleration_partials.model.constants                 import PARTIALCONSTANTS


def validate_state_perturbations(
  body_state_perturbations : Sequence[float],
) -> np.ndarray:
  """
  Validate central-difference steps and return them as a read-only array

  Input:
  ------
    body_state_perturbations : Sequence[float]
      Step per state component [m, m, m, m/s, m/s, m/s].

  Output:
  -------
    body_state_perturbations : np.ndarray
      Read-only array of shape (6,).

  Raises:
  -------
    ValueError
      If there are not 6 steps or any step is not a finite positive number.
  """
  perturbations = np.array(body_state_perturbations, dtype=float).reshape(-1)
  if perturbations.shape != (6,):
    raise ValueError(f"Body state perturbations must have 6 components, got {perturbations.shape[0]}.")
  if not np.all(np.isfinite(perturbations)) or np.any(perturbations <= 0):
    raise ValueError(f"Body state perturbations must be finite and strictly positive, got {perturbations}.")

  perturbations.setflags(write=False)
  return perturbations


@contextmanager
def perturbed_state(
  state_get_function : Callable[[], np.ndarray],
  restore_function   : Callable[[np.ndarray], object],
) -> Iterator[np.ndarray]:
  """
  Context in which the state may be perturbed; the nominal state is restored on every exit path

  Input:
  ------
    state_get_function : Callable[[], np.ndarray]
      Returns the nominal state.
    restore_function : Callable[[np.ndarray], object]
      Writes the nominal state back and refreshes everything that depends on it.

  Output:
  -------
    nominal_state_vec : np.ndarray
      Copy of the nominal state.

  Usage:
  ------
    with perturbed_state(body.get_state, restore) as nominal_state_vec:
      ...
  """
  nominal_state_vec = np.array(state_get_function(), dtype=float)
  try:
    yield nominal_state_vec.copy()
  except BaseException as error:
    # The error raised inside the block takes precedence over a failed restore
    try:
      restore_function(nominal_state_vec)
    except Exception as restore_error:
      raise error from restore_error
    raise
  else:
    restore_function(nominal_state_vec)


def compute_central_difference_state_partials(
  acceleration_at_state    : Callable[[np.ndarray], np.ndarray],
  nominal_state_vec        : np.ndarray,
  body_state_perturbations : np.ndarray,
) -> np.ndarray:
  """
  Central-difference partial of an acceleration w.r.t. a 6-element state

  Input:
  ------
    acceleration_at_state : Callable[[np.ndarray], np.ndarray]
      Evaluates the acceleration [m/s²] at a given state.
    nominal_state_vec : np.ndarray
      Nominal state [pos, vel] [m, m/s].
    body_state_perturbations : np.ndarray
      Step per state component.

  Output:
  -------
    state_partials : np.ndarray
      3x6 matrix, column i = d(acc_vec)/d(state_i).
  """
  state_partials = np.zeros((3, 6))

  for i in range(6):
    up_perturbed_state_vec       = nominal_state_vec.copy()
    up_perturbed_state_vec[i]   += body_state_perturbations[i]
    up_perturbed_acc_vec         = np.asarray(acceleration_at_state(up_perturbed_state_vec), dtype=float)

    down_perturbed_state_vec     = nominal_state_vec.copy()
    down_perturbed_state_vec[i] -= body_state_perturbations[i]
    down_perturbed_acc_vec       = np.asarray(acceleration_at_state(down_perturbed_state_vec), dtype=float)

    state_partials[:, i] = (up_perturbed_acc_vec - down_perturbed_acc_vec) / (2.0 * body_state_perturbations[i])

  return state_partials


class NumericalAccelerationPartial(AccelerationPartial):
  """
  Acceleration partial w.r.t. body states computed by central differences.

  Usable with any acceleration model that reads the accelerated body's state
  through the given getter, e.g. to verify analytic partials.
  """

  def __init__(
    self,
    acceleration_function        : Callable[[], np.ndarray],
    state_get_function           : Callable[[], np.ndarray],
    state_set_function           : Callable[[np.ndarray], None],
    accelerated_body             : str,
    accelerating_body            : str,
    environment_reset_functions  : Optional[Sequence[Callable[[float], None]]] = None,
    environment_update_functions : Optional[Sequence[Callable[[float], None]]] = None,
    body_state_perturbations     : Sequence[float]                             = PARTIALCONSTANTS.BODY_STATE_PERTURBATIONS,
  ):
    """
    Initialize numerical acceleration partial

    Input:
    ------
      acceleration_function : Callable[[], np.ndarray]
        Returns the current acceleration [m/s²] of the accelerated body.
      state_get_function : Callable[[], np.ndarray]
        Returns the state [pos, vel] of the accelerated body.
      state_set_function : Callable[[np.ndarray], None]
        Overwrites the state of the accelerated body.
      accelerated_body : str
        Name of the body undergoing the acceleration.
      accelerating_body : str
        Name of the body exerting the acceleration.
      environment_reset_functions : list of Callable[[float], None], optional
        Called with NaN before each state change to invalidate cached environment time.
      environment_update_functions : list of Callable[[float], None], optional
        Called in order with the evaluation time after each state change.
      body_state_perturbations : Sequence[float]
        Central-difference step per state component [m, m, m, m/s, m/s, m/s].

    Output:
    -------
      None
    """
    super().__init__(accelerated_body, accelerating_body)

    self.acceleration_function        = acceleration_function
    self.state_get_function           = state_get_function
    self.state_set_function           = state_set_function
    self.environment_reset_functions  = list(environment_reset_functions  or [])
    self.environment_update_functions = list(environment_update_functions or [])
    self._body_state_perturbations    = validate_state_perturbations(body_state_perturbations)

  @property
  def body_state_perturbations(
    self,
  ) -> np.ndarray:
    return self._body_state_perturbations

  def _evaluate_acceleration(
    self,
    state_vec : np.ndarray,
    time      : float,
  ) -> np.ndarray:
    """
    Set the state, refresh the environment at time, and return the acceleration
    """
    for reset_function in self.environment_reset_functions:
      reset_function(np.nan)
    self.state_set_function(state_vec)
    for update_function in self.environment_update_functions:
      update_function(time)
    return self.acceleration_function()

  def update(
    self,
    current_time : float = np.nan,
  ) -> None:
    """
    Recompute the 3x6 partial w.r.t. the accelerated body state

    Input:
    ------
      current_time : float
        Evaluation time [s]. NaN means the current environment time and always
        recomputes; a repeated non-NaN time reuses the cached partials.

    Output:
    -------
      None
    """
    if self.is_updated and current_time == self.current_time:
      return

    self.is_updated = False

    restore_nominal = lambda nominal_state_vec: self._evaluate_acceleration(nominal_state_vec, current_time)
    with perturbed_state(self.state_get_function, restore_nominal) as nominal_state_vec:
      state_partials = compute_central_difference_state_partials(
        acceleration_at_state    = lambda state_vec: self._evaluate_acceleration(state_vec, current_time),
        nominal_state_vec        = nominal_state_vec,
        body_state_perturbations = self._body_state_perturbations,
      )

    self.current_acceleration_state_partials = state_partials
    self.current_time                        = current_time
    self.is_updated                          = True

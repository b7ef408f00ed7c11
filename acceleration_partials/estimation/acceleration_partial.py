"""
Acceleration Partial Base
=========================

Common interface of all acceleration partials used by the estimator.

Summary:
--------
An acceleration partial is bound to one acceleration model and one ordered
pair (accelerated body, accelerating body). Once per evaluation time the
estimator calls update(time), which fills a 3x6 cache

  current_acceleration_state_partials = d(acc_vec) / d([pos_vec, vel_vec])

of the accelerated body. The block extraction methods then add (or subtract)
3x3 blocks of that cache into a larger Jacobian, and parameter partial
functions obtained from the registry evaluate d(acc_vec)/d(parameter) from
the same cached environment.

Sign convention:
----------------
The acceleration depends on the relative state of the accelerated body with
respect to the accelerating body, so the partials w.r.t. the accelerating
body are the negated partials w.r.t. the accelerated body.

Parameter registry:
-------------------
Subclasses register the parameter types they depend on:

  self.register_parameter_partial(
    parameter_type    = ParameterType.CONSTANT_DRAG_COEFFICIENT,
    partial_function  = self.compute_acceleration_partial_wrt_current_drag_coefficient,
    number_of_columns = 1,
  )

Types without an entry, or whose owning body is rejected by the entry's body
predicate, have no dependency: (None, 0) is returned, which is not an error.
"""
import numpy as np

from typing import Callable, Optional

from acceleration_partials.estimation.errors     import PartialNotUpdatedError
from acceleration_partials.estimation.parameters import EstimatableParameter, IntegratedStateType, ParameterType


class AccelerationPartial:
  """
  Base class for partials of an acceleration w.r.t. body states and parameters
  """

  def __init__(
    self,
    accelerated_body  : str,
    accelerating_body : str,
  ):
    """
    Initialize acceleration partial

    Input:
    ------
      accelerated_body : str
        Name of the body undergoing the acceleration.
      accelerating_body : str
        Name of the body exerting the acceleration.

    Output:
    -------
      None
    """
    self.accelerated_body  = accelerated_body
    self.accelerating_body = accelerating_body

    self.current_time                        = np.nan
    self.is_updated                          = False
    self.current_acceleration_state_partials = np.zeros((3, 6))

    self._scalar_parameter_partials = {}
    self._vector_parameter_partials = {}

  # ---------------------------------------------------------------------------
  # Cache bookkeeping
  # ---------------------------------------------------------------------------

  def update(
    self,
    current_time : float = np.nan,
  ) -> None:
    raise NotImplementedError(f"{type(self).__name__} does not implement update().")

  def reset_time(
    self,
    current_time : float = np.nan,
  ) -> None:
    """
    Invalidate the cached partials; the next update() recomputes them
    """
    self.current_time = current_time
    self.is_updated   = False

  def get_current_state_partials(
    self,
  ) -> np.ndarray:
    """
    Copy of the cached 3x6 partial of the acceleration w.r.t. the accelerated body state
    """
    return self._get_valid_state_partials().copy()

  def _get_valid_state_partials(
    self,
  ) -> np.ndarray:
    if not self.is_updated:
      raise PartialNotUpdatedError(
        f"Partials of acceleration on {self.accelerated_body} due to {self.accelerating_body} "
        f"were read before update() completed."
      )
    return self.current_acceleration_state_partials

  # ---------------------------------------------------------------------------
  # Block extraction
  # ---------------------------------------------------------------------------

  @staticmethod
  def _add_block(
    partial_matrix   : np.ndarray,
    block            : np.ndarray,
    add_contribution : bool,
    start_row        : int,
    start_column     : int,
  ) -> None:
    """
    Add (or subtract) a 3x3 block into partial_matrix in place, starting at (start_row, start_column)
    """
    if partial_matrix.ndim != 2:
      raise IndexError(f"Partial matrix must be 2-dimensional, got {partial_matrix.ndim} dimensions.")
    number_of_rows, number_of_columns = partial_matrix.shape
    if start_row < 0 or start_column < 0 or start_row + 3 > number_of_rows or start_column + 3 > number_of_columns:
      raise IndexError(
        f"3x3 block at ({start_row}, {start_column}) does not fit in a "
        f"{number_of_rows}x{number_of_columns} partial matrix."
      )

    if add_contribution:
      partial_matrix[start_row:start_row+3, start_column:start_column+3] += block
    else:
      partial_matrix[start_row:start_row+3, start_column:start_column+3] -= block

  def wrt_position_of_accelerated_body(
    self,
    partial_matrix   : np.ndarray,
    add_contribution : bool = True,
    start_row        : int  = 0,
    start_column     : int  = 0,
  ) -> None:
    """
    Add the partial w.r.t. the position of the accelerated body to partial_matrix

    Input:
    ------
      partial_matrix : np.ndarray
        Matrix modified in place; entries outside the 3x3 block are untouched.
      add_contribution : bool
        True adds the partial, False subtracts it.
      start_row : int
        First row of the block in partial_matrix.
      start_column : int
        First column of the block in partial_matrix.

    Output:
    -------
      None
    """
    block = self._get_valid_state_partials()[:, 0:3]
    self._add_block(partial_matrix, block, add_contribution, start_row, start_column)

  def wrt_velocity_of_accelerated_body(
    self,
    partial_matrix   : np.ndarray,
    add_contribution : bool = True,
    start_row        : int  = 0,
    start_column     : int  = 0,
  ) -> None:
    """
    Add the partial w.r.t. the velocity of the accelerated body to partial_matrix
    """
    block = self._get_valid_state_partials()[:, 3:6]
    self._add_block(partial_matrix, block, add_contribution, start_row, start_column)

  def wrt_position_of_accelerating_body(
    self,
    partial_matrix   : np.ndarray,
    add_contribution : bool = True,
    start_row        : int  = 0,
    start_column     : int  = 0,
  ) -> None:
    """
    Add the partial w.r.t. the position of the accelerating body to partial_matrix
    """
    block = self._get_valid_state_partials()[:, 0:3]
    self._add_block(partial_matrix, block, not add_contribution, start_row, start_column)

  def wrt_velocity_of_accelerating_body(
    self,
    partial_matrix   : np.ndarray,
    add_contribution : bool = True,
    start_row        : int  = 0,
    start_column     : int  = 0,
  ) -> None:
    """
    Add the partial w.r.t. the velocity of the accelerating body to partial_matrix
    """
    block = self._get_valid_state_partials()[:, 3:6]
    self._add_block(partial_matrix, block, not add_contribution, start_row, start_column)

  # ---------------------------------------------------------------------------
  # Parameter partial registry
  # ---------------------------------------------------------------------------

  def register_parameter_partial(
    self,
    parameter_type    : ParameterType,
    partial_function  : Callable[[], np.ndarray],
    number_of_columns : int                                = 1,
    body_predicate    : Optional[Callable[[str], bool]]    = None,
    is_vector         : bool                               = False,
  ) -> None:
    """
    Register the partial function of a parameter type this acceleration depends on

    Input:
    ------
      parameter_type : ParameterType
        Kind of parameter.
      partial_function : Callable[[], np.ndarray]
        Returns the (3, number_of_columns) partial from the current cached environment.
      number_of_columns : int
        Number of partial columns (parameter size).
      body_predicate : Callable[[str], bool], optional
        Accepts the parameter's owning body. Default: owner is the accelerated body.
      is_vector : bool
        Register for vector-valued parameters instead of scalar ones.

    Output:
    -------
      None
    """
    if number_of_columns < 1:
      raise ValueError(f"Number of partial columns must be at least 1, got {number_of_columns}.")
    if body_predicate is None:
      body_predicate = lambda body_name: body_name == self.accelerated_body

    table = self._vector_parameter_partials if is_vector else self._scalar_parameter_partials
    table[parameter_type] = (body_predicate, partial_function, number_of_columns)

  def get_parameter_partial_function(
    self,
    parameter : EstimatableParameter,
  ) -> tuple:
    """
    Look up the partial function of the acceleration w.r.t. a parameter

    Input:
    ------
      parameter : EstimatableParameter
        Scalar or vector parameter descriptor.

    Output:
    -------
      partial_function : Callable | None
        Returns the partial as an array of shape (3, number_of_columns). None if no dependency.
      number_of_columns : int
        Number of partial columns, 0 if no dependency.
    """
    table = self._vector_parameter_partials if parameter.is_vector else self._scalar_parameter_partials

    entry = table.get(parameter.parameter_type)
    if entry is None:
      return None, 0

    body_predicate, partial_function, number_of_columns = entry
    if not body_predicate(parameter.associated_body):
      return None, 0

    return partial_function, number_of_columns

  # ---------------------------------------------------------------------------
  # Dependency query
  # ---------------------------------------------------------------------------

  def is_state_derivative_dependent_on_integrated_non_translational_state(
    self,
    state_reference_point : tuple,
    integrated_state_type : IntegratedStateType,
  ) -> bool:
    """
    Whether the acceleration depends on a non-translational propagated state

    Input:
    ------
      state_reference_point : tuple
        (body_name, reference_point) of the propagated state.
      integrated_state_type : IntegratedStateType
        Type of the propagated state.

    Output:
    -------
      is_dependent : bool
    """
    return False

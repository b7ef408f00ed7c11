"""
State Derivative Jacobian
=========================

Assembles the Jacobian of the translational state derivative of one body,
augmented with estimated parameters, from a set of acceleration partials.

  state   = [pos_vec, vel_vec, p_1, ..., p_k]
  A       = d(state_dot)/d(state)

           | 0            I            0                |
  A      = | d(acc)/d(r)  d(acc)/d(v)  d(acc)/d(p_1..p_k) |
           | 0            0            0                |

Each acceleration partial adds its own contribution, so several accelerations
acting on the same body accumulate in one matrix.
"""
import numpy as np

from typing import Sequence

from acceleration_partials.estimation.acceleration_partial import AccelerationPartial
from acceleration_partials.estimation.parameters           import EstimatableParameter


def assemble_state_derivative_jacobian(
  acceleration_partials : Sequence[AccelerationPartial],
  parameters            : Sequence[EstimatableParameter] = (),
) -> np.ndarray:
  """
  Build the Jacobian of [vel_vec, acc_vec, 0] w.r.t. [pos_vec, vel_vec, parameters]

  Input:
  ------
    acceleration_partials : Sequence[AccelerationPartial]
      Updated partials of every acceleration acting on the body.
    parameters : Sequence[EstimatableParameter]
      Estimated parameters, in state order.

  Output:
  -------
    jacobian : np.ndarray
      Square matrix of size 6 + total parameter size.
  """
  parameter_sizes = [parameter.parameter_size for parameter in parameters]
  state_size      = 6 + sum(parameter_sizes)

  jacobian           = np.zeros((state_size, state_size))
  jacobian[0:3, 3:6] = np.eye(3)

  for acceleration_partial in acceleration_partials:
    acceleration_partial.wrt_position_of_accelerated_body(jacobian, start_row=3, start_column=0)
    acceleration_partial.wrt_velocity_of_accelerated_body(jacobian, start_row=3, start_column=3)

    start_column = 6
    for parameter, parameter_size in zip(parameters, parameter_sizes):
      partial_function, number_of_columns = acceleration_partial.get_parameter_partial_function(parameter)
      if number_of_columns > 0:
        jacobian[3:6, start_column:start_column+number_of_columns] += partial_function()
      start_column += parameter_size

  return jacobian

import numpy as np

from typing import Optional


STATE_COMPONENT_LABELS = ('x', 'y', 'z', 'vx', 'vy', 'vz')


def print_state_partials(
  state_partials : np.ndarray,
  title          : str = "State Partials",
) -> None:
  """
  Print a 3x6 acceleration partial w.r.t. the body state.

  Input:
  ------
    state_partials : np.ndarray
      3x6 partial d(acc_vec)/d([pos_vec, vel_vec]).
    title : str
      Section title.
  """
  print(f"\n{title}")
  print(f"  Columns: d(acc)/d(pos) [1/s²] for x, y, z and d(acc)/d(vel) [1/s] for vx, vy, vz")
  header = "".join(f"{label:>21}" for label in STATE_COMPONENT_LABELS)
  print(f"         {header}")
  for row_idx, acc_label in enumerate(('ax', 'ay', 'az')):
    row = "".join(f"{value:>21.12e}" for value in state_partials[row_idx, :])
    print(f"    {acc_label:<5}{row}")


def print_parameter_partials(
  parameter_partials : dict,
) -> None:
  """
  Print acceleration partials w.r.t. parameters.

  Input:
  ------
    parameter_partials : dict
      Parameter label -> (3, n) partial, or None if the acceleration does not depend on it.
  """
  print("\nParameter Partials")
  for label, partial in parameter_partials.items():
    if partial is None:
      print(f"  {label:<36} : no dependency")
      continue
    for column_idx in range(partial.shape[1]):
      column = partial[:, column_idx]
      print(f"  {label:<36} : {column[0]:>19.12e}  {column[1]:>19.12e}  {column[2]:>19.12e} m/s²")


def print_dependency_summary(
  dependencies : dict,
) -> None:
  """
  Print non-translational state dependencies.

  Input:
  ------
    dependencies : dict
      State label -> True, False, or an error message for dependencies that are not implemented.
  """
  print("\nNon-Translational State Dependencies")
  for label, dependency in dependencies.items():
    if isinstance(dependency, str):
      print(f"  {label:<36} : [NOT IMPLEMENTED] {dependency}")
    else:
      print(f"  {label:<36} : {dependency}")


def print_verification_summary(
  max_abs_difference  : float,
  max_rel_difference  : float,
  verification_factor : Optional[float] = None,
) -> None:
  """
  Print the comparison of the state partials against a second evaluation.
  """
  print("\nVerification")
  if verification_factor is not None:
    print(f"  Perturbation Scale Factor : {verification_factor:g}")
  print(f"  Max Absolute Difference   : {max_abs_difference:>19.12e}")
  print(f"  Max Relative Difference   : {max_rel_difference:>19.12e}")

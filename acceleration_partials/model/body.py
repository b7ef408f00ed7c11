"""
Body Module
===========

Holds the translational state and mass of a body. The state get/set pair is
the accessor through which acceleration partials perturb the body.
"""
import numpy as np


class Body:
  """
  Body with a Cartesian state [pos, vel] and a mass
  """

  def __init__(
    self,
    name      : str,
    state_vec : np.ndarray,
    mass      : float = 1.0,
  ):
    """
    Initialize body

    Input:
    ------
      name : str
        Body name (e.g. 'Vehicle', 'Earth').
      state_vec : np.ndarray
        Cartesian state [pos, vel] [m, m/s].
      mass : float
        Body mass [kg].

    Output:
    -------
      None
    """
    self.name = name
    self.set_state(state_vec)
    self.set_mass(mass)

  def get_state(
    self,
  ) -> np.ndarray:
    """
    Return a copy of the current state [m, m/s]
    """
    return self._state_vec.copy()

  def set_state(
    self,
    state_vec : np.ndarray,
  ) -> None:
    """
    Overwrite the current state

    Input:
    ------
      state_vec : np.ndarray
        Cartesian state [pos, vel] [m, m/s].

    Raises:
    -------
      ValueError
        If the state does not have 6 finite components.
    """
    state_vec = np.array(state_vec, dtype=float).reshape(-1)
    if state_vec.shape != (6,):
      raise ValueError(f"Body state must have 6 components, got {state_vec.shape[0]}.")
    if not np.all(np.isfinite(state_vec)):
      raise ValueError(f"Body state of {self.name} must be finite.")
    self._state_vec = state_vec

  def get_position(
    self,
  ) -> np.ndarray:
    return self._state_vec[0:3].copy()

  def get_velocity(
    self,
  ) -> np.ndarray:
    return self._state_vec[3:6].copy()

  def get_mass(
    self,
  ) -> float:
    return self._mass

  def set_mass(
    self,
    mass : float,
  ) -> None:
    if mass <= 0:
      raise ValueError(f"Mass of {self.name} must be positive, got {mass}.")
    self._mass = float(mass)

import numpy as np


class FrameConverter:
  @staticmethod
  def inertial_to_aerodynamic(
    xyz_pos_vec          : np.ndarray,
    xyz_airspeed_vel_vec : np.ndarray,
  ) -> np.ndarray:
    """
    Calculate the rotation matrix from Inertial (XYZ) to Aerodynamic frame.

    Input:
    ------
      xyz_pos_vec : np.ndarray
        Position vector relative to the central body in inertial frame [m].
      xyz_airspeed_vel_vec : np.ndarray
        Velocity relative to the rotating atmosphere in inertial frame [m/s].

    Output:
    -------
      rot_mat_xyz_to_aero : np.ndarray
        3x3 Rotation matrix from Inertial to Aerodynamic frame.

    Notes:
    ------
      Zero angle of attack, sideslip, and bank angle are assumed:
        x_hat : along the airspeed velocity (drag acts along -x_hat)
        z_hat : component of -r_hat orthogonal to x_hat (local "down")
        y_hat : z_hat cross x_hat
      Zero airspeed returns the identity. If the position is parallel to the
      airspeed velocity, the inertial axis least aligned with x_hat is used
      in place of -r_hat.

    Usage:
    ------
      rot_mat_xyz_to_aero = FrameConverter.inertial_to_aerodynamic(
        xyz_pos_vec          = xyz_pos_vec,
        xyz_airspeed_vel_vec = xyz_airspeed_vel_vec,
      )
    """
    airspeed_mag = np.linalg.norm(xyz_airspeed_vel_vec)
    if airspeed_mag == 0:
      return np.eye(3)

    # x_hat unit vector
    x_hat = xyz_airspeed_vel_vec / airspeed_mag

    # z_hat unit vector
    down_vec = -xyz_pos_vec / np.linalg.norm(xyz_pos_vec)
    z_vec    = down_vec - np.dot(down_vec, x_hat) * x_hat
    z_mag    = np.linalg.norm(z_vec)
    if z_mag < 1.0e-12:
      fallback_axis = np.eye(3)[np.argmin(np.abs(x_hat))]
      z_vec         = fallback_axis - np.dot(fallback_axis, x_hat) * x_hat
      z_mag         = np.linalg.norm(z_vec)
    z_hat = z_vec / z_mag

    # y_hat unit vector
    y_hat = np.cross(z_hat, x_hat)

    # Rotation matrix from inertial to aerodynamic frame
    rot_mat_xyz_to_aero = np.vstack((x_hat, y_hat, z_hat))

    # Return rotation matrix
    return rot_mat_xyz_to_aero

  @staticmethod
  def aerodynamic_to_inertial(
    xyz_pos_vec          : np.ndarray,
    xyz_airspeed_vel_vec : np.ndarray,
  ) -> np.ndarray:
    """
    Calculate the rotation matrix from Aerodynamic to Inertial (XYZ) frame.

    Input:
    ------
      xyz_pos_vec : np.ndarray
        Position vector relative to the central body in inertial frame [m].
      xyz_airspeed_vel_vec : np.ndarray
        Velocity relative to the rotating atmosphere in inertial frame [m/s].

    Output:
    -------
      rot_mat_aero_to_xyz : np.ndarray
        3x3 Rotation matrix from Aerodynamic to Inertial frame.
    """
    return FrameConverter.inertial_to_aerodynamic(xyz_pos_vec, xyz_airspeed_vel_vec).T

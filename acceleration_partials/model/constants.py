class PHYSICALCONSTANTS:
  specific_gas_constant_air = 287.058  # Specific gas constant of dry air [J/(kg·K)]

class SOLARSYSTEMCONSTANTS:
  """
  Class to hold physical constants of the central bodies used by the flight conditions.
  """

  class EARTH:
    class RADIUS:
      EQUATOR = 6378137.0                     # Earth's WGS84 equatorial radius [m]
      POLAR   = 6356752.3                     # Earth's WGS84 polar radius [m]

    GP = 3.986004418e14                       # Earth's gravitational parameter [m³/s²]

    # Rotation rate
    OMEGA = 7.2921150e-5                      # Earth's rotation rate [rad/s]

    # Reference atmosphere parameters (simplified exponential model)
    RHO_0 = 1.225                             # Earth's sea level density [kg/m³]
    H_0   = 8500.0                            # Earth's scale height [m]
    T_0   = 288.15                            # Earth's sea level temperature [K]

  class MARS:
    class RADIUS:
      EQUATOR = 3397200.0                     # Mars's equatorial radius [m]

    GP    = 4.28283e13                        # Mars's gravitational parameter [m³/s²]
    OMEGA = 7.088218e-5                       # Mars's rotation rate [rad/s]
    RHO_0 = 0.020                             # Mars's surface density [kg/m³]
    H_0   = 11100.0                           # Mars's scale height [m]
    T_0   = 210.0                             # Mars's mean surface temperature [K]

  # Mapping from body name to constants class
  NAME_TO_BODY = {
    'EARTH' : EARTH,
    'MARS'  : MARS,
  }

class PARTIALCONSTANTS:
  """
  Default settings for numerical acceleration partials.
  """
  # Central-difference step per state component [m, m, m, m/s, m/s, m/s]
  BODY_STATE_PERTURBATIONS = (10.0, 10.0, 10.0, 1.0e-2, 1.0e-2, 1.0e-2)

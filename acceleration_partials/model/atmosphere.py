"""
Atmosphere Models
=================

Density, pressure, and temperature as a function of altitude.

Models:
-------
  ExponentialAtmosphere
    rho = rho_0 * exp(-(h - h_0) / H)
  TabulatedAtmosphere
    Cubic interpolation of a 4-column table (altitude, density, pressure, temperature)

Units:
------
- Altitude    : meters [m]
- Density     : kilograms per cubic meter [kg/m³]
- Pressure    : pascals [Pa]
- Temperature : kelvin [K]
"""
import numpy as np

from pathlib           import Path
from typing            import Union
from scipy.interpolate import interp1d

from acceleration_partials.model.constants import SOLARSYSTEMCONSTANTS, PHYSICALCONSTANTS


class ExponentialAtmosphere:
  """
  Simplified exponential atmosphere with isothermal ideal-gas pressure
  """

  def __init__(
    self,
    reference_density  : float = SOLARSYSTEMCONSTANTS.EARTH.RHO_0,
    scale_height       : float = SOLARSYSTEMCONSTANTS.EARTH.H_0,
    reference_altitude : float = 0.0,
    temperature        : float = SOLARSYSTEMCONSTANTS.EARTH.T_0,
  ):
    """
    Initialize exponential atmosphere

    Input:
    ------
      reference_density : float
        Density at the reference altitude [kg/m³].
      scale_height : float
        Density scale height [m].
      reference_altitude : float
        Altitude of the reference density [m].
      temperature : float
        Constant atmosphere temperature [K].

    Output:
    -------
      None
    """
    if reference_density < 0:
      raise ValueError(f"Reference density must be non-negative, got {reference_density}.")
    if scale_height <= 0:
      raise ValueError(f"Scale height must be positive, got {scale_height}.")

    self.reference_density  = reference_density
    self.scale_height       = scale_height
    self.reference_altitude = reference_altitude
    self.temperature        = temperature

  def get_density(
    self,
    altitude  : float,
    longitude : float = 0.0,
    latitude  : float = 0.0,
    time      : float = 0.0,
  ) -> float:
    """
    Atmospheric density at altitude

    Input:
    ------
      altitude : float
        Altitude above the central body's surface [m]
      longitude, latitude, time : float
        Unused by this model.

    Output:
    -------
      density : float
        Atmospheric density [kg/m³]
    """
    if altitude < 0:
      altitude = 0

    return self.reference_density * np.exp(-(altitude - self.reference_altitude) / self.scale_height)

  def get_pressure(
    self,
    altitude  : float,
    longitude : float = 0.0,
    latitude  : float = 0.0,
    time      : float = 0.0,
  ) -> float:
    # Ideal gas law p = rho * R * T
    density = self.get_density(altitude)
    return density * PHYSICALCONSTANTS.specific_gas_constant_air * self.temperature

  def get_temperature(
    self,
    altitude  : float,
    longitude : float = 0.0,
    latitude  : float = 0.0,
    time      : float = 0.0,
  ) -> float:
    return self.temperature


class TabulatedAtmosphere:
  """
  Atmosphere interpolated from a table of altitude, density, pressure, and temperature.

  Table files hold four whitespace-separated columns in the order
  altitude [m], density [kg/m³], pressure [Pa], temperature [K].
  Lines starting with '#' are comments.
  """

  def __init__(
    self,
    altitude_data    : np.ndarray,
    density_data     : np.ndarray,
    pressure_data    : np.ndarray,
    temperature_data : np.ndarray,
  ):
    """
    Initialize tabulated atmosphere

    Input:
    ------
      altitude_data : np.ndarray
        Strictly increasing altitudes [m].
      density_data : np.ndarray
        Density at each altitude [kg/m³].
      pressure_data : np.ndarray
        Pressure at each altitude [Pa].
      temperature_data : np.ndarray
        Temperature at each altitude [K].

    Output:
    -------
      None
    """
    altitude_data    = np.asarray(altitude_data,    dtype=float)
    density_data     = np.asarray(density_data,     dtype=float)
    pressure_data    = np.asarray(pressure_data,    dtype=float)
    temperature_data = np.asarray(temperature_data, dtype=float)

    if altitude_data.ndim != 1 or altitude_data.size < 4:
      raise ValueError("Atmosphere table needs at least 4 altitude entries for cubic interpolation.")
    for name, data in (('density', density_data), ('pressure', pressure_data), ('temperature', temperature_data)):
      if data.shape != altitude_data.shape:
        raise ValueError(f"Atmosphere table {name} column has {data.size} entries, expected {altitude_data.size}.")
    if np.any(np.diff(altitude_data) <= 0):
      raise ValueError("Atmosphere table altitudes must be strictly increasing.")

    self.altitude_data    = altitude_data
    self.density_data     = density_data
    self.pressure_data    = pressure_data
    self.temperature_data = temperature_data

    self._density_interpolator     = interp1d(altitude_data, density_data,     kind='cubic')
    self._pressure_interpolator    = interp1d(altitude_data, pressure_data,    kind='cubic')
    self._temperature_interpolator = interp1d(altitude_data, temperature_data, kind='cubic')

  @classmethod
  def from_file(
    cls,
    filepath : Union[str, Path],
  ) -> 'TabulatedAtmosphere':
    """
    Load a tabulated atmosphere from a 4-column text file

    Input:
    ------
      filepath : str | Path
        Path to the atmosphere table file.

    Output:
    -------
      atmosphere : TabulatedAtmosphere
    """
    filepath = Path(filepath)
    if not filepath.exists():
      raise FileNotFoundError(f"Atmosphere table file not found: {filepath}")

    table = np.loadtxt(filepath, comments='#', ndmin=2)
    if table.shape[1] != 4:
      raise ValueError(f"Atmosphere table {filepath.name} must have 4 columns, got {table.shape[1]}.")

    atmosphere = cls(
      altitude_data    = table[:, 0],
      density_data     = table[:, 1],
      pressure_data    = table[:, 2],
      temperature_data = table[:, 3],
    )
    atmosphere.table_filepath = filepath
    return atmosphere

  def _check_altitude(
    self,
    altitude : float,
  ) -> None:
    if not (self.altitude_data[0] <= altitude <= self.altitude_data[-1]):
      raise ValueError(
        f"Altitude {altitude:.3f} m is outside the atmosphere table range "
        f"[{self.altitude_data[0]:.3f}, {self.altitude_data[-1]:.3f}] m."
      )

  def get_density(
    self,
    altitude  : float,
    longitude : float = 0.0,
    latitude  : float = 0.0,
    time      : float = 0.0,
  ) -> float:
    """
    Interpolated density at altitude

    Input:
    ------
      altitude : float
        Altitude [m]; must lie within the table range.

    Output:
    -------
      density : float
        Atmospheric density [kg/m³]

    Raises:
    -------
      ValueError
        If the altitude is outside the table.
    """
    self._check_altitude(altitude)
    return float(self._density_interpolator(altitude))

  def get_pressure(
    self,
    altitude  : float,
    longitude : float = 0.0,
    latitude  : float = 0.0,
    time      : float = 0.0,
  ) -> float:
    self._check_altitude(altitude)
    return float(self._pressure_interpolator(altitude))

  def get_temperature(
    self,
    altitude  : float,
    longitude : float = 0.0,
    latitude  : float = 0.0,
    time      : float = 0.0,
  ) -> float:
    self._check_altitude(altitude)
    return float(self._temperature_interpolator(altitude))

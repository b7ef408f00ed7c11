"""
Environment Model Package
=========================

Bodies, atmosphere models, flight conditions, and the aerodynamic
acceleration whose partials are computed by the estimation package.
"""

from .body              import Body
from .atmosphere        import ExponentialAtmosphere, TabulatedAtmosphere
from .flight_conditions import FlightConditions
from .aerodynamics      import AerodynamicCoefficientInterface, AerodynamicAcceleration
from .frame_converter   import FrameConverter

__all__ = [
  'Body',
  'ExponentialAtmosphere',
  'TabulatedAtmosphere',
  'FlightConditions',
  'AerodynamicCoefficientInterface',
  'AerodynamicAcceleration',
  'FrameConverter',
]

"""
Estimation Errors
=================

Exception types raised by acceleration partials.

  AccelerationPartialError
  └── PartialNotUpdatedError        : cache read before a completed update()
  DependencyNotImplementedError     : known physical coupling with no partial model yet

DependencyNotImplementedError derives from NotImplementedError, not from
AccelerationPartialError.
"""


class AccelerationPartialError(RuntimeError):
  """
  Base class for acceleration partial errors.
  """


class PartialNotUpdatedError(AccelerationPartialError):
  """
  Raised when partials are read before update() has completed.
  """


class DependencyNotImplementedError(NotImplementedError):
  """
  Raised when a dependency exists whose partial is not yet modeled.
  """

"""Environment-driven placeholder interpolation for deployment templates."""

from .variables import VariableInterpolator, interpolate
from .exceptions import InterpolationError, UnresolvedVariableError

__all__ = [
    'VariableInterpolator',
    'interpolate',
    'InterpolationError',
    'UnresolvedVariableError',
]

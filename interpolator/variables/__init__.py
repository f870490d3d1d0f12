"""
Variable interpolation module.
Placeholder extraction, environment resolution and substitution.
"""

from .placeholders import Placeholder, extract_placeholders
from .resolver import EnvironmentResolver, escape_value
from .substitution import VariableInterpolator, interpolate, substitute_placeholders

__all__ = [
    'Placeholder',
    'extract_placeholders',
    'EnvironmentResolver',
    'escape_value',
    'VariableInterpolator',
    'interpolate',
    'substitute_placeholders',
]

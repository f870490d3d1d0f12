"""Security module for masking resolved values in log output."""

from .masking import ValueMasker, MaskingFilter

__all__ = ['ValueMasker', 'MaskingFilter']

"""CLI command handlers."""

from .interpolate import interpolate_files

__all__ = ['interpolate_files']

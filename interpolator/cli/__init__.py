"""Command line interface for interpolator."""

"""Interpolator exceptions."""

from typing import List
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single configuration validation error."""
    message: str
    path: str = ""


class InterpolationError(Exception):
    """Base class for errors that abort an interpolation run.

    Carries the process exit code the CLI should terminate with.
    """

    exit_code = 1


class UnresolvedVariableError(InterpolationError):
    """Raised when a placeholder has no value under either prefix.

    Empty values count as missing, so the variable may be set but blank.
    """

    def __init__(self, name: str, primary_key: str, alternative_key: str):
        self.name = name
        self.primary_key = primary_key
        self.alternative_key = alternative_key

        super().__init__(
            f"Environment variable {name} not resolved: "
            f"environment variables {primary_key} and {alternative_key} do not exist"
        )


class ConfigValidationError(InterpolationError):
    """Raised when the configuration file is malformed.

    All problems found in the file are collected and reported together.
    """

    exit_code = 2

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Config error at '{error.path}': {error.message}")
            else:
                messages.append(f"Config error: {error.message}")

        super().__init__("\n".join(messages))

"""Optional YAML configuration for the interpolate command."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from interpolator.exceptions import ConfigValidationError, ValidationError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = '.interpolate.yaml'
LOG_LEVELS = ('debug', 'info', 'warn', 'error')


@dataclass
class InterpolationConfig:
    """
    Settings for an interpolation run.

    Attributes:
        prefix: Primary environment prefix
        alternative_prefix: Prefix tried when the primary key is unset or empty
        log_level: One of debug, info, warn, error
    """
    prefix: str = ''
    alternative_prefix: str = ''
    log_level: str = 'info'

    def merge(
        self,
        prefix: Optional[str] = None,
        alternative_prefix: Optional[str] = None,
        log_level: Optional[str] = None
    ) -> 'InterpolationConfig':
        """Return a copy with every non-None argument overriding the file value."""
        return InterpolationConfig(
            prefix=prefix if prefix is not None else self.prefix,
            alternative_prefix=(
                alternative_prefix if alternative_prefix is not None else self.alternative_prefix
            ),
            log_level=log_level if log_level is not None else self.log_level,
        )


class ConfigLoader:
    """Loads and validates the configuration file."""

    KNOWN_KEYS = {'prefix', 'alternative_prefix', 'log_level'}

    def __init__(self):
        self.errors: List[ValidationError] = []

    def load(self, config_path: Path) -> InterpolationConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML file

        Returns:
            Parsed configuration

        Raises:
            ConfigValidationError: If the file cannot be parsed or holds invalid values
        """
        self.errors = []

        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self._add_error(f"Failed to load config: {e}")
            self._raise_validation_errors()

        # An empty file is a valid, empty configuration
        if data is None:
            data = {}

        if not isinstance(data, dict):
            self._add_error("Config must be a YAML object/dictionary")
            self._raise_validation_errors()

        self._validate(data)
        if self.errors:
            self._raise_validation_errors()

        logger.debug(f"Loaded config from {config_path}")
        return InterpolationConfig(**data)

    def _validate(self, data: Dict[str, Any]) -> None:
        for key in sorted(set(data) - self.KNOWN_KEYS):
            self._add_error(f"Unknown field '{key}'", key)

        for key in ('prefix', 'alternative_prefix'):
            if key in data and not isinstance(data[key], str):
                self._add_error(f"'{key}' must be a string, got {type(data[key]).__name__}", key)

        if 'log_level' in data and data['log_level'] not in LOG_LEVELS:
            self._add_error(f"'log_level' must be one of {', '.join(LOG_LEVELS)}", 'log_level')

    def _add_error(self, message: str, path: str = "") -> None:
        self.errors.append(ValidationError(message=message, path=path))

    def _raise_validation_errors(self) -> None:
        raise ConfigValidationError(self.errors)


def load_config(config_path: Optional[Path] = None, workspace: Optional[Path] = None) -> InterpolationConfig:
    """
    Load the configuration for a run.

    An explicit path must exist. Without one, DEFAULT_CONFIG_FILE in the
    workspace (current directory by default) is used if present; otherwise
    built-in defaults apply.

    Raises:
        FileNotFoundError: If an explicit config path does not exist
        ConfigValidationError: If the config file is invalid
    """
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return ConfigLoader().load(config_path)

    default_path = (workspace or Path.cwd()) / DEFAULT_CONFIG_FILE
    if default_path.exists():
        return ConfigLoader().load(default_path)

    return InterpolationConfig()

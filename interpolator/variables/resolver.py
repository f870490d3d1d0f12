"""
Environment resolution for placeholders.

Each logical name is looked up as <primary>_<NAME>, then <alternative>_<NAME>.
An empty value is treated exactly like an unset variable: resolution requires
a non-empty value.
"""

import logging
import os
from typing import Dict, Mapping, Optional, Tuple

from ..exceptions import UnresolvedVariableError
from ..security.masking import ValueMasker
from .placeholders import Placeholder


logger = logging.getLogger(__name__)


def escape_value(value: str) -> str:
    """Replace literal newlines with a backslash-n sequence; nothing else is escaped."""
    return value.replace('\n', '\\n')


class EnvironmentResolver:
    """
    Resolves placeholder values from a two-tier prefixed environment.

    Prefixes are passed in explicitly so independent resolvers never share
    state. The environment defaults to os.environ but any mapping works.
    """

    SEPARATOR = '_'

    def __init__(
        self,
        primary_prefix: str = '',
        alternative_prefix: str = '',
        environ: Optional[Mapping[str, str]] = None,
        masker: Optional[ValueMasker] = None
    ):
        self.primary_prefix = primary_prefix
        self.alternative_prefix = alternative_prefix
        self.environ = environ if environ is not None else os.environ
        self.masker = masker

    def candidate_keys(self, name: str) -> Tuple[str, str]:
        """Return the (primary, alternative) environment keys for a logical name."""
        return (
            f"{self.primary_prefix}{self.SEPARATOR}{name}",
            f"{self.alternative_prefix}{self.SEPARATOR}{name}",
        )

    def resolve_value(self, name: str) -> str:
        """
        Look up the raw (unescaped) value for a logical name.

        Args:
            name: Logical variable name

        Returns:
            The first non-empty value among the candidate keys

        Raises:
            UnresolvedVariableError: If both candidate keys are unset or empty
        """
        primary_key, alternative_key = self.candidate_keys(name)

        for key in (primary_key, alternative_key):
            value = self.environ.get(key, '')
            if value:
                logger.debug(f"Resolved {name} from {key}")
                if self.masker is not None:
                    self.masker.register(value)
                return value

        raise UnresolvedVariableError(name, primary_key, alternative_key)

    def resolve(self, placeholders: Dict[str, Placeholder]) -> Dict[str, Placeholder]:
        """
        Populate resolved_value on every placeholder, in first-seen order.

        Stops at the first unresolvable placeholder; the rest are not attempted.

        Raises:
            UnresolvedVariableError: For the first placeholder with no value
        """
        for placeholder in placeholders.values():
            placeholder.resolved_value = escape_value(self.resolve_value(placeholder.name))
            # The escaped form is what ends up in documents and log lines
            if self.masker is not None:
                self.masker.register(placeholder.resolved_value)

        return placeholders

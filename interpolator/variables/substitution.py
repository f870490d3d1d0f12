"""
Placeholder substitution and the end-to-end interpolation pipeline.
Extraction -> environment resolution -> substitution, in that order.
"""

import logging
from typing import Dict, Mapping, Optional, Union

from ..security.masking import ValueMasker
from .placeholders import Placeholder, decode_document, encode_document, extract_placeholders
from .resolver import EnvironmentResolver


logger = logging.getLogger(__name__)


def substitute_placeholders(text: str, placeholders: Dict[str, Placeholder]) -> str:
    """
    Replace every occurrence of each placeholder's literal text with its value.

    Replacement is plain text, so '$' and backslashes in values are kept as-is.
    Occurrences spelled differently from the first literal are left untouched.

    Args:
        text: Original document text
        placeholders: Fully resolved placeholders

    Returns:
        The rewritten text

    Raises:
        ValueError: If a placeholder has not been resolved
    """
    for placeholder in placeholders.values():
        if not placeholder.is_resolved:
            raise ValueError(f"Placeholder {placeholder.name} has not been resolved")

        logger.debug(f"Substituting {placeholder.literal_text} -> {placeholder.resolved_value}")
        text = text.replace(placeholder.literal_text, placeholder.resolved_value)

    return text


class VariableInterpolator:
    """
    Fills {{NAME}} placeholders in a document from the environment.

    The placeholders found by the most recent call are kept on
    ``placeholders`` so callers can tell whether there was anything to do.
    """

    def __init__(
        self,
        primary_prefix: str = '',
        alternative_prefix: str = '',
        environ: Optional[Mapping[str, str]] = None,
        masker: Optional[ValueMasker] = None
    ):
        self.resolver = EnvironmentResolver(
            primary_prefix=primary_prefix,
            alternative_prefix=alternative_prefix,
            environ=environ,
            masker=masker
        )
        self.placeholders: Dict[str, Placeholder] = {}

    def interpolate(self, document: Union[str, bytes]) -> Union[str, bytes]:
        """
        Interpolate a document.

        Args:
            document: Template as text or bytes

        Returns:
            The rewritten document, of the same type as the input. The input
            object itself when it contains no placeholders.

        Raises:
            UnresolvedVariableError: On the first placeholder with no value
        """
        self.placeholders = extract_placeholders(document)
        if not self.placeholders:
            logger.debug("No placeholders found, document left unchanged")
            return document

        logger.debug(f"Found placeholders: {list(self.placeholders)}")
        self.resolver.resolve(self.placeholders)

        text = substitute_placeholders(decode_document(document), self.placeholders)
        if isinstance(document, bytes):
            return encode_document(text)
        return text


def interpolate(
    document: Union[str, bytes],
    primary_prefix: str,
    alternative_prefix: str,
    environ: Optional[Mapping[str, str]] = None
) -> Union[str, bytes]:
    """Interpolate a document using a fresh VariableInterpolator."""
    return VariableInterpolator(primary_prefix, alternative_prefix, environ).interpolate(document)

"""
Placeholder extraction.
Finds {{NAME}} tokens in raw template text and records the first literal
spelling of every logical variable name.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Union


# Non-greedy, at least one character between the braces: '{{}}' never matches.
PLACEHOLDER_PATTERN = re.compile(r'\{\{(.+?)\}\}')
WHITESPACE_PATTERN = re.compile(r'\s')

# Arbitrary bytes survive a decode/encode cycle with surrogateescape.
DOCUMENT_ENCODING = 'utf-8'
DOCUMENT_ERRORS = 'surrogateescape'


@dataclass
class Placeholder:
    """
    One logical variable found in a document.

    Attributes:
        name: Text between the braces with all whitespace removed
        literal_text: Exact source text of the first occurrence, braces included
        resolved_value: Escaped environment value, None until resolved
    """
    name: str
    literal_text: str
    resolved_value: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self.resolved_value is not None


def decode_document(document: Union[str, bytes]) -> str:
    """Return the document as text, decoding bytes losslessly."""
    if isinstance(document, bytes):
        return document.decode(DOCUMENT_ENCODING, DOCUMENT_ERRORS)
    return document


def encode_document(text: str) -> bytes:
    """Inverse of decode_document for bytes input."""
    return text.encode(DOCUMENT_ENCODING, DOCUMENT_ERRORS)


def placeholder_name(raw: str) -> str:
    """Strip every whitespace character from the text captured inside braces."""
    return WHITESPACE_PATTERN.sub('', raw)


def extract_placeholders(document: Union[str, bytes]) -> Dict[str, Placeholder]:
    """
    Scan a document for {{...}} placeholders.

    Only the first occurrence of each logical name is kept; later occurrences,
    even when written with different internal whitespace, are ignored and so
    will not be substituted.

    Args:
        document: Template text or raw bytes

    Returns:
        Mapping of logical name to Placeholder, in first-seen order.
        Empty when the document contains no placeholders.
    """
    text = decode_document(document)

    placeholders: Dict[str, Placeholder] = {}
    for match in PLACEHOLDER_PATTERN.finditer(text):
        name = placeholder_name(match.group(1))
        if name not in placeholders:
            placeholders[name] = Placeholder(name=name, literal_text=match.group(0))

    return placeholders

"""
Masking of resolved environment values.

Interpolated variables routinely carry credentials (registry tokens, database
URLs), so any value the resolver hands out is registered here and replaced by
'***' wherever it shows up in log output.
"""

import logging
import re
from typing import Any, Dict, Set


MASK = '***'


class ValueMasker:
    """Tracks values to hide and masks them in text."""

    def __init__(self):
        self._masked_values: Set[str] = set()

    def register(self, value: str) -> None:
        """Track a value for masking. Empty strings are ignored."""
        if value:
            self._masked_values.add(value)

    def mask_text(self, text: str) -> str:
        """
        Mask known values in text.

        Longer values are masked first so a value that contains another one
        is hidden as a whole.

        Args:
            text: Text potentially containing registered values

        Returns:
            Text with registered values replaced by '***'
        """
        if not text or not self._masked_values:
            return text

        masked = text
        for value in sorted(self._masked_values, key=len, reverse=True):
            if value in masked:
                masked = re.sub(re.escape(value), MASK, masked)

        return masked

    def mask_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively mask string values of a dictionary."""
        if not data or not self._masked_values:
            return data

        masked = {}
        for key, value in data.items():
            if isinstance(value, str):
                masked[key] = self.mask_text(value)
            elif isinstance(value, dict):
                masked[key] = self.mask_dict(value)
            else:
                masked[key] = value

        return masked

    def clear(self):
        """Forget every registered value."""
        self._masked_values.clear()


class MaskingFilter(logging.Filter):
    """
    Logging filter that masks registered values in log records.

    Attach to a handler so records are masked after formatting arguments
    are known but before they are emitted.
    """

    def __init__(self, masker: ValueMasker):
        super().__init__()
        self.masker = masker

    def filter(self, record):
        record.msg = self.masker.mask_text(str(record.msg))

        if record.args:
            if isinstance(record.args, dict):
                record.args = self.masker.mask_dict(record.args)
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    self.masker.mask_text(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )

        return True

"""
Format tags understood by edi-transform.

A tag names one of the three representations a payload can be converted
from or to. Tags arrive from callers as free-form strings (query
parameters, CLI flags), so ``FormatTag.from_tag`` normalizes them
(trim + lowercase) and rejects anything outside the closed set.
"""

from __future__ import annotations

from enum import Enum

from edi_transform.exceptions import UnsupportedFormatError


class FormatTag(str, Enum):
    """Closed set of supported representations."""

    STRING = "string"
    JSON = "json"
    XML = "xml"

    @classmethod
    def from_tag(cls, tag: FormatTag | str, direction: str = "Format") -> FormatTag:
        """Normalize a caller-supplied tag into a ``FormatTag``.

        Args:
            tag: A ``FormatTag`` or a string such as ``" JSON "``.
            direction: Prefix for the error message (``"Input"`` or
                ``"Output"``).

        Raises:
            UnsupportedFormatError: If the tag is not a supported format.
                The error keeps the original, non-normalized tag.
        """
        if isinstance(tag, cls):
            return tag
        if not isinstance(tag, str):
            raise UnsupportedFormatError(tag, direction)
        try:
            return cls(tag.strip().lower())
        except ValueError:
            raise UnsupportedFormatError(tag, direction) from None

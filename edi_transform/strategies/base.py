"""
Base parser / formatter interfaces for edi-transform.

Every format is handled by a pair of strategies:
1. A parser turns a raw payload into the intermediate Document.
2. A formatter turns a Document back into serialized text.

Both receive the per-call ``TransformOptions``; strategies that do not use
delimiters simply ignore them. Strategies hold no state, so one instance
may serve any number of calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from edi_transform.config import TransformOptions
from edi_transform.document import Document
from edi_transform.exceptions import InvalidInputError


def payload_to_text(payload: Any) -> str | None:
    """Return *payload* as text, or ``None`` if it is not textual.

    Raw bytes are decoded as UTF-8; a leading BOM is dropped.

    Raises:
        InvalidInputError: If bytes are not valid UTF-8.
    """
    if isinstance(payload, str):
        return payload
    if isinstance(payload, (bytes, bytearray)):
        try:
            return bytes(payload).decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise InvalidInputError(f"Payload is not valid UTF-8: {exc}") from exc
    return None


class BaseParser(ABC):
    """Abstract base class for format parsers."""

    @abstractmethod
    def parse(self, payload: Any, options: TransformOptions) -> Document:
        """Parse a raw payload into a Document.

        Args:
            payload: Text, bytes, or a structured object.
            options: Delimiter settings for this call.

        Returns:
            The intermediate Document.

        Raises:
            InvalidInputError: If the payload does not fit the format.
        """


class BaseFormatter(ABC):
    """Abstract base class for format serializers."""

    @abstractmethod
    def format(self, document: Document, options: TransformOptions) -> str:
        """Serialize a Document into text."""

"""
JSON codec for edi-transform.

JSON maps directly onto the intermediate Document, so both directions are
thin wrappers over the ``json`` module. The parser only enforces that the
top level is an object (group name -> records); a bare array or primitive
is rejected.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from edi_transform.config import TransformOptions
from edi_transform.document import Document, summarize
from edi_transform.exceptions import InvalidInputError, TransformError
from edi_transform.strategies.base import BaseFormatter, BaseParser, payload_to_text

logger = logging.getLogger(__name__)


class JsonParser(BaseParser):
    """Parser for JSON text or already-decoded JSON objects."""

    def parse(self, payload: Any, options: TransformOptions) -> Document:
        text = payload_to_text(payload)
        if text is not None:
            try:
                data = json.loads(text)
            except json.JSONDecodeError as exc:
                raise InvalidInputError(f"Invalid JSON data: {exc}") from exc
        else:
            data = payload

        if not isinstance(data, Mapping):
            raise InvalidInputError(
                "Invalid JSON data: top level must be an object of groups, "
                f"got {type(data).__name__}"
            )

        document = dict(data)
        logger.debug("Parsed JSON: %s", summarize(document))
        return document


class JsonFormatter(BaseFormatter):
    """Formatter producing pretty-printed JSON (2-space indent)."""

    def format(self, document: Document, options: TransformOptions) -> str:
        try:
            return json.dumps(document, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise TransformError(f"Failed to format data as JSON: {exc}") from exc

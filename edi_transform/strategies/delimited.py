"""
Delimited-string codec for edi-transform.

The flat string format uses two delimiters:

    ProductID*4*8*15~AddressID*42*108~
    |________________|__________________
          segment         segment

- The segment delimiter (default ``~``) separates segments.
- The element delimiter (default ``*``) separates the elements inside a
  segment. The first element is the group key; the rest are values.

Parsing turns every segment into one record whose fields are named after
the group key and the value position (``ProductID1``, ``ProductID2``, ...).
Segments sharing a group key accumulate into that group's record list.

Formatting writes each record back as one segment, always terminated by
the segment delimiter.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from edi_transform.config import TransformOptions
from edi_transform.document import Document, append_record, build_record, summarize
from edi_transform.exceptions import EmptySegmentsError, InvalidInputError
from edi_transform.strategies.base import BaseFormatter, BaseParser, payload_to_text

logger = logging.getLogger(__name__)


class DelimitedParser(BaseParser):
    """Parser for segment/element delimited strings."""

    def parse(self, payload: Any, options: TransformOptions) -> Document:
        text = payload_to_text(payload)
        if text is None:
            raise InvalidInputError("Data is not a valid string")

        seg = options.segment_delineator
        elem = options.element_delineator

        segments = text.strip().split(seg)
        if not segments or (len(segments) == 1 and not segments[0].strip()):
            raise EmptySegmentsError()

        document: Document = {}
        for position, segment in enumerate(segments, start=1):
            segment = segment.strip()
            if not segment:
                # Trailing delimiter or doubled delimiter
                continue
            elements = segment.split(elem)
            group = elements[0].strip()
            if not group:
                raise InvalidInputError(
                    f"Segment {position} has an empty group key: {segment!r}"
                )
            values = [value.strip() for value in elements[1:]]
            append_record(document, group, build_record(group, values))

        if not document:
            raise EmptySegmentsError()

        logger.debug("Parsed delimited string: %s", summarize(document))
        return document


class DelimitedFormatter(BaseFormatter):
    """Formatter for segment/element delimited strings."""

    def format(self, document: Document, options: TransformOptions) -> str:
        seg = options.segment_delineator
        elem = options.element_delineator

        parts: list[str] = []
        for group, records in document.items():
            if not group:
                raise InvalidInputError("Group key must not be empty")
            _check_token(group, "Group key", group, seg, elem)
            if not isinstance(records, list):
                raise InvalidInputError(
                    f"Group '{group}' must be a list of records, "
                    f"got {type(records).__name__}"
                )
            for record in records:
                values = [_to_value(group, v) for v in _record_values(record)]
                for value in values:
                    _check_token(value, "Value", group, seg, elem)
                parts.append(f"{group}{elem}{elem.join(values)}{seg}")

        return "".join(parts).rstrip()


def _record_values(record: Any) -> list[Any]:
    """Values of a record in field order; a scalar record is one value."""
    if isinstance(record, Mapping):
        return list(record.values())
    return [record]


def _to_value(group: str, value: Any) -> str:
    """Render one field value as text."""
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise InvalidInputError(
        f"Group '{group}' contains a nested {type(value).__name__}; "
        "the string format only holds flat records"
    )


def _check_token(token: str, what: str, group: str, seg: str, elem: str) -> None:
    """Reject text that would be split apart when parsed back."""
    for delimiter in (seg, elem):
        if delimiter in token:
            raise InvalidInputError(
                f"{what} {token!r} in group '{group}' contains the "
                f"delimiter {delimiter!r}"
            )

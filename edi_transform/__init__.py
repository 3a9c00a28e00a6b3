"""
edi-transform: convert payloads between delimited strings, JSON and XML.

Public API surface:

- ``transform(payload, target, ...)`` -- **recommended entry point**.
  Detects the source format when it is not given, then converts.

- ``detect_format(payload)`` -- classify a payload as ``string``, ``json``
  or ``xml`` without converting it.

- ``Transformer`` -- the orchestrator behind ``transform()``. Its
  ``execute()`` never detects; the source tag is always explicit.

- ``TransformOptions`` / ``load_options`` -- delimiter settings, built per
  call or loaded from a YAML file.

Example::

    import edi_transform

    edi_transform.transform("ProductID*4*8*15~", target="json")
    # pretty-printed JSON: {"ProductID": [{"ProductID1": "4", ...}]}

    edi_transform.transform(
        "<ContactID><ContactID1>59</ContactID1></ContactID>",
        target="string",
        options={"segmentDelineator": "|", "elementDelineator": "^"},
    )
    # 'ContactID^59|'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from edi_transform.config import TransformOptions, load_options, resolve_options, save_options
from edi_transform.detect import detect_format
from edi_transform.exceptions import (
    DetectionFailure,
    EdiTransformError,
    EmptySegmentsError,
    InvalidInputError,
    TransformError,
    UnsupportedFormatError,
    is_client_error,
)
from edi_transform.formats import FormatTag
from edi_transform.pipeline import Transformer
from edi_transform.registry import resolve_formatter, resolve_parser, supported_formats

__all__ = [
    "transform",
    "detect_format",
    "Transformer",
    "TransformOptions",
    "FormatTag",
    "load_options",
    "save_options",
    "resolve_options",
    "resolve_parser",
    "resolve_formatter",
    "supported_formats",
    "is_client_error",
    "EdiTransformError",
    "DetectionFailure",
    "UnsupportedFormatError",
    "InvalidInputError",
    "EmptySegmentsError",
    "TransformError",
]

logger = logging.getLogger(__name__)

_DEFAULT_TRANSFORMER = Transformer()


def transform(
    payload: Any,
    target: FormatTag | str,
    source: FormatTag | str | None = None,
    options: TransformOptions | Mapping[str, Any] | None = None,
) -> str:
    """Convert *payload* into the *target* format.

    Orchestration:
      1. If *source* is ``None``, ``detect_format()`` picks it.
      2. ``Transformer.execute()`` parses and re-serializes.

    Args:
        payload: Text, bytes, or an already-decoded JSON object.
        target: Output format tag (``string``, ``json`` or ``xml``).
        source: Input format tag. Detected from the payload if omitted.
        options: Delimiter overrides, e.g.
            ``{"segmentDelineator": "|", "elementDelineator": "^"}``.

    Returns:
        The serialized output.

    Raises:
        DetectionFailure: If *source* is omitted and cannot be detected.
        UnsupportedFormatError: If a tag is not supported.
        InvalidInputError: If the payload or options are malformed.
        TransformError: For unexpected internal failures.
    """
    if source is None:
        source = detect_format(payload)
        logger.info("transform() -- detected source format: %s", source.value)
    return _DEFAULT_TRANSFORMER.execute(payload, source, target, options)

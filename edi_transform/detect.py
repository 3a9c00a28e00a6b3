"""
Format detection for edi-transform.

Classifies a raw payload as one of the supported source formats when the
caller does not declare one. This is a best-effort heuristic on the first
character; the codec chosen afterwards does the real validation, so a
broken JSON string that starts with ``{`` is still routed to JSON.

Detection algorithm:
1. ``None`` -> DetectionFailure.
2. A mapping or list (already-decoded structure) -> json.
3. Bytes are decoded as UTF-8; text is trimmed.
4. Empty text -> DetectionFailure.
5. ``{`` or ``[`` -> json; ``<`` -> xml; anything else -> string.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from edi_transform.exceptions import DetectionFailure, InvalidInputError
from edi_transform.formats import FormatTag
from edi_transform.strategies.base import payload_to_text

logger = logging.getLogger(__name__)


def _read_text(payload: Any) -> str:
    """Return a textual payload as str, or raise DetectionFailure."""
    try:
        text = payload_to_text(payload)
    except InvalidInputError as exc:
        raise DetectionFailure(str(exc)) from exc
    if text is None:
        raise DetectionFailure(
            f"Unable to detect input data type for {type(payload).__name__} payload"
        )
    return text


def detect_format(payload: Any) -> FormatTag:
    """Detect the source format of a payload.

    Args:
        payload: Text, bytes, or an already-decoded mapping/list.

    Returns:
        The detected ``FormatTag``.

    Raises:
        DetectionFailure: If the payload is absent, blank, undecodable or
            of an unsupported type.
    """
    if payload is None:
        raise DetectionFailure("No data provided for type detection")

    if isinstance(payload, (Mapping, list)):
        logger.debug("Detected json (structured %s payload)", type(payload).__name__)
        return FormatTag.JSON

    text = _read_text(payload).strip()
    if not text:
        raise DetectionFailure("No data provided for type detection")

    if text[0] in "{[":
        fmt = FormatTag.JSON
    elif text[0] == "<":
        fmt = FormatTag.XML
    else:
        fmt = FormatTag.STRING

    logger.debug("Detected %s from leading %r", fmt.value, text[0])
    return fmt

"""
Transformation orchestrator for edi-transform.

Runs one conversion as two steps:

1. **Parse**: the source-format parser turns the payload into the
   intermediate Document.
2. **Format**: the target-format formatter serializes the Document.

Both strategies are resolved before anything is parsed, so an unsupported
target tag fails fast. Errors from the package's own taxonomy pass through
unchanged; anything else is wrapped in ``TransformError``. There are no
retries and no fallback formats: a bad payload is the caller's problem.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from edi_transform.config import TransformOptions, resolve_options
from edi_transform.document import summarize
from edi_transform.exceptions import EdiTransformError, TransformError
from edi_transform.formats import FormatTag
from edi_transform.registry import resolve_formatter, resolve_parser

logger = logging.getLogger(__name__)


class Transformer:
    """Converts payloads between the supported formats.

    The transformer is **stateless** apart from its default options, which
    are frozen. Each call to ``execute()`` builds its own options and
    Document, so one instance can be shared across concurrent callers.
    """

    def __init__(self, defaults: TransformOptions | None = None) -> None:
        self.defaults = defaults if defaults is not None else TransformOptions()

    def execute(
        self,
        payload: Any,
        source: FormatTag | str,
        target: FormatTag | str,
        options: TransformOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Convert *payload* from the *source* format to the *target* format.

        Args:
            payload: Text, bytes, or an already-decoded JSON object.
            source: Source format tag (``string``, ``json`` or ``xml``).
            target: Target format tag.
            options: Delimiter overrides layered onto ``self.defaults``.

        Returns:
            The serialized output.

        Raises:
            UnsupportedFormatError: If either tag is not supported.
            InvalidInputError: If the payload or options are malformed.
            EmptySegmentsError: If a string payload has no segments.
            TransformError: For any other failure.
        """
        parser = resolve_parser(source)
        formatter = resolve_formatter(target)
        opts = resolve_options(options, self.defaults)

        try:
            logger.info("Step 1/2: Parsing %s input", FormatTag.from_tag(source).value)
            document = parser.parse(payload, opts)
            logger.info("  Parsed %s", summarize(document))

            logger.info("Step 2/2: Formatting as %s", FormatTag.from_tag(target).value)
            output = formatter.format(document, opts)
        except EdiTransformError:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure during transformation")
            raise TransformError(str(exc)) from exc

        logger.info("  Wrote %d characters", len(output))
        return output

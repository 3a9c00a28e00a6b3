"""
Strategy resolver for edi-transform.

Maps a format tag to the parser or formatter that handles it. The tables
are keyed by ``FormatTag``, so a caller's tag is normalized once and an
unknown tag fails before any lookup happens.

Resolution is pure: each call builds a fresh, stateless strategy.
"""

from __future__ import annotations

import logging

from edi_transform.formats import FormatTag
from edi_transform.strategies.base import BaseFormatter, BaseParser
from edi_transform.strategies.delimited import DelimitedFormatter, DelimitedParser
from edi_transform.strategies.json_codec import JsonFormatter, JsonParser
from edi_transform.strategies.xml_codec import XmlFormatter, XmlParser

logger = logging.getLogger(__name__)

_PARSER_MAP: dict[FormatTag, type[BaseParser]] = {
    FormatTag.STRING: DelimitedParser,
    FormatTag.JSON: JsonParser,
    FormatTag.XML: XmlParser,
}

_FORMATTER_MAP: dict[FormatTag, type[BaseFormatter]] = {
    FormatTag.STRING: DelimitedFormatter,
    FormatTag.JSON: JsonFormatter,
    FormatTag.XML: XmlFormatter,
}


def supported_formats() -> list[str]:
    """Tag values accepted by the resolver."""
    return [tag.value for tag in FormatTag]


def resolve_parser(tag: FormatTag | str) -> BaseParser:
    """Return the parser for *tag*.

    Raises:
        UnsupportedFormatError: If *tag* is not a supported format.
    """
    fmt = FormatTag.from_tag(tag, direction="Input")
    parser_cls = _PARSER_MAP[fmt]
    logger.debug("Resolved parser %s for %r", parser_cls.__name__, tag)
    return parser_cls()


def resolve_formatter(tag: FormatTag | str) -> BaseFormatter:
    """Return the formatter for *tag*.

    Raises:
        UnsupportedFormatError: If *tag* is not a supported format.
    """
    fmt = FormatTag.from_tag(tag, direction="Output")
    formatter_cls = _FORMATTER_MAP[fmt]
    logger.debug("Resolved formatter %s for %r", formatter_cls.__name__, tag)
    return formatter_cls()

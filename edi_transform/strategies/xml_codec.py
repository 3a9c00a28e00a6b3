"""
XML codec for edi-transform.

Converts between element-only XML and the intermediate Document using
``xml.etree.ElementTree``:

    <ProductID><ProductID1>4</ProductID1><ProductID2>8</ProductID2></ProductID>
    <ContactID><ContactID1>59</ContactID1></ContactID>

<->

    {"ProductID": [{"ProductID1": "4", "ProductID2": "8"}],
     "ContactID": [{"ContactID1": "59"}]}

Conventions:
- Top-level elements are groups. A payload may hold several of them (a
  fragment), so the text is parsed inside a synthetic container element.
- Every group parses to a list, even when it occurs once, so XML input
  has the same shape as string or JSON input.
- Below the group level, repeated child tags become lists, elements with
  children become mappings, and leaves become their stripped text (``""``
  when empty). An empty group element parses to the empty record ``{}``.
  Values always stay strings.
- Attributes, tail text and namespace URIs are not carried over.
- Output has no XML declaration and no root wrapper.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any

from edi_transform.config import TransformOptions
from edi_transform.document import Document, summarize
from edi_transform.exceptions import InvalidInputError
from edi_transform.strategies.base import BaseFormatter, BaseParser, payload_to_text

logger = logging.getLogger(__name__)

_CONTAINER_TAG = "edi-transform-fragment"
_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>", re.IGNORECASE)
_XML_NAME = re.compile(r"[^\W\d][\w.\-]*")


def _local_name(tag: str) -> str:
    """Drop a ``{namespace}`` prefix from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


def _element_to_value(element: ET.Element) -> Any:
    """Convert an element (below group level) into text or a mapping."""
    children = list(element)
    if not children:
        return (element.text or "").strip()

    value: dict[str, Any] = {}
    for child in children:
        tag = _local_name(child.tag)
        converted = _element_to_value(child)
        if tag not in value:
            value[tag] = converted
        elif isinstance(value[tag], list):
            value[tag].append(converted)
        else:
            value[tag] = [value[tag], converted]
    return value


class XmlParser(BaseParser):
    """Parser for element-only XML documents and fragments."""

    def parse(self, payload: Any, options: TransformOptions) -> Document:
        text = payload_to_text(payload)
        if text is None:
            raise InvalidInputError("XML data must be a string")

        body = _DECLARATION.sub("", text, count=1)
        if not body.strip():
            raise InvalidInputError("Failed to parse XML: document is empty")

        try:
            container = ET.fromstring(f"<{_CONTAINER_TAG}>{body}</{_CONTAINER_TAG}>")
        except ET.ParseError as exc:
            raise InvalidInputError(f"Failed to parse XML: {exc}") from exc

        with_attributes = sum(1 for el in container.iter() if el.attrib)
        if with_attributes:
            logger.warning("Ignoring attributes on %d XML element(s)", with_attributes)

        document: Document = {}
        for element in container:
            tag = _local_name(element.tag)
            # An empty group element is a record with no fields
            record = _element_to_value(element)
            document.setdefault(tag, []).append(record if record != "" else {})

        logger.debug("Parsed XML: %s", summarize(document))
        return document


class XmlFormatter(BaseFormatter):
    """Formatter producing an XML fragment, one element per record."""

    def format(self, document: Document, options: TransformOptions) -> str:
        container = ET.Element(_CONTAINER_TAG)
        for group, records in document.items():
            _append(container, group, records)
        return "".join(ET.tostring(child, encoding="unicode") for child in container)


def _append(parent: ET.Element, tag: Any, value: Any) -> None:
    """Append *value* under *parent* as one or more ``<tag>`` elements."""
    if not isinstance(tag, str) or not _XML_NAME.fullmatch(tag):
        raise InvalidInputError(f"{tag!r} cannot be used as an XML element name")
    if isinstance(value, list):
        for item in value:
            _append(parent, tag, item)
        return

    element = ET.SubElement(parent, tag)
    if isinstance(value, Mapping):
        for key, child in value.items():
            _append(element, key, child)
    elif isinstance(value, bool):
        element.text = "true" if value else "false"
    elif value is not None:
        element.text = str(value)

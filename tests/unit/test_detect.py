"""
Unit tests for format detection (edi_transform.detect).
"""

import pytest

from edi_transform.detect import detect_format
from edi_transform.exceptions import DetectionFailure
from edi_transform.formats import FormatTag


class TestDetectFormat:
    """Tests for detect_format() on text payloads."""

    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            ('{"a":1}', FormatTag.JSON),
            ("[1, 2]", FormatTag.JSON),
            ("<a/>", FormatTag.XML),
            ('<?xml version="1.0"?><a/>', FormatTag.XML),
            ("A*1*2~", FormatTag.STRING),
            ("ProductID*4*8*15~", FormatTag.STRING),
        ],
    )
    def test_text(self, payload, expected):
        assert detect_format(payload) is expected

    def test_leading_whitespace_ignored(self):
        assert detect_format('\n   {"a": []}') is FormatTag.JSON
        assert detect_format("  \t<a/>") is FormatTag.XML

    def test_malformed_json_still_routes_to_json(self):
        assert detect_format("{not json") is FormatTag.JSON

    def test_bytes(self):
        assert detect_format(b"<a/>") is FormatTag.XML
        assert detect_format("\ufeff{}".encode("utf-8")) is FormatTag.JSON

    def test_tag_value(self):
        assert detect_format("A*1~").value == "string"


class TestDetectStructured:
    """Already-decoded payloads are JSON."""

    def test_mapping(self):
        assert detect_format({"A": [{"A1": "1"}]}) is FormatTag.JSON

    def test_empty_mapping(self):
        assert detect_format({}) is FormatTag.JSON

    def test_list(self):
        assert detect_format([{"a": "1"}]) is FormatTag.JSON


class TestDetectFailure:
    """Absent or unclassifiable payloads."""

    def test_none(self):
        with pytest.raises(DetectionFailure, match="No data provided"):
            detect_format(None)

    @pytest.mark.parametrize("payload", ["", "   ", b"", b" \n "])
    def test_blank(self, payload):
        with pytest.raises(DetectionFailure):
            detect_format(payload)

    def test_undecodable_bytes(self):
        with pytest.raises(DetectionFailure, match="UTF-8"):
            detect_format(b"\xff\xfe\xfa")

    def test_unsupported_type(self):
        with pytest.raises(DetectionFailure, match="int"):
            detect_format(42)

    @pytest.mark.parametrize("payload", [3.5, True, object()])
    def test_scalars_are_not_stringified(self, payload):
        with pytest.raises(DetectionFailure, match=type(payload).__name__):
            detect_format(payload)

"""
Unit tests for the JSON codec (edi_transform.strategies.json_codec).
"""

from __future__ import annotations

import json

import pytest

from edi_transform.exceptions import InvalidInputError, TransformError
from edi_transform.strategies.json_codec import JsonFormatter, JsonParser


class TestJsonParser:
    """Tests for JsonParser.parse()."""

    def test_parses_text(self, default_options, order_document):
        text = json.dumps(order_document)
        assert JsonParser().parse(text, default_options) == order_document

    def test_parses_bytes(self, default_options):
        payload = '{"ContactID": [{"ContactID1": "59"}]}'.encode("utf-8")
        assert JsonParser().parse(payload, default_options) == {
            "ContactID": [{"ContactID1": "59"}]
        }

    def test_accepts_structured_object(self, default_options, order_document):
        assert JsonParser().parse(order_document, default_options) == order_document

    def test_key_order_preserved(self, default_options):
        text = '{"Zeta": [{"Zeta1": "1"}], "Alpha": [{"Alpha1": "2"}]}'
        assert list(JsonParser().parse(text, default_options)) == ["Zeta", "Alpha"]

    def test_empty_object(self, default_options):
        assert JsonParser().parse("{}", default_options) == {}

    def test_malformed_text_raises(self, default_options):
        with pytest.raises(InvalidInputError, match="Invalid JSON data"):
            JsonParser().parse('{"a": [', default_options)

    def test_top_level_array_text_raises(self, default_options):
        with pytest.raises(InvalidInputError, match="top level must be an object"):
            JsonParser().parse('[{"a": "1"}]', default_options)

    def test_top_level_array_object_raises(self, default_options):
        with pytest.raises(InvalidInputError, match="list"):
            JsonParser().parse([{"a": "1"}], default_options)

    @pytest.mark.parametrize("payload", ["42", '"text"', "null", 42, None])
    def test_primitives_raise(self, default_options, payload):
        with pytest.raises(InvalidInputError):
            JsonParser().parse(payload, default_options)


class TestJsonFormatter:
    """Tests for JsonFormatter.format()."""

    def test_two_space_indent(self, default_options):
        result = JsonFormatter().format({"A": [{"A1": "x"}]}, default_options)
        assert result == '{\n  "A": [\n    {\n      "A1": "x"\n    }\n  ]\n}'

    def test_empty_document(self, default_options):
        assert JsonFormatter().format({}, default_options) == "{}"

    def test_non_ascii_kept(self, default_options):
        result = JsonFormatter().format({"Name": [{"Name1": "Müller"}]}, default_options)
        assert "Müller" in result

    def test_unserializable_raises_transform_error(self, default_options):
        with pytest.raises(TransformError, match="Failed to format data as JSON"):
            JsonFormatter().format({"A": [{"A1": object()}]}, default_options)

    def test_round_trip(self, default_options, order_document):
        text = JsonFormatter().format(order_document, default_options)
        assert JsonParser().parse(text, default_options) == order_document

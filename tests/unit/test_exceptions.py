"""
Unit tests for the exception hierarchy (edi_transform.exceptions).
"""

import pytest

from edi_transform.exceptions import (
    DetectionFailure,
    EdiTransformError,
    EmptySegmentsError,
    InvalidInputError,
    TransformError,
    UnsupportedFormatError,
    is_client_error,
)


class TestHierarchy:
    """Every error derives from EdiTransformError."""

    @pytest.mark.parametrize(
        "exc",
        [
            DetectionFailure("x"),
            UnsupportedFormatError("yaml"),
            InvalidInputError("x"),
            EmptySegmentsError(),
            TransformError("x"),
        ],
    )
    def test_base_class(self, exc):
        assert isinstance(exc, EdiTransformError)

    def test_empty_segments_is_invalid_input(self):
        assert issubclass(EmptySegmentsError, InvalidInputError)


class TestClientErrors:
    """Tests for is_client_error()."""

    @pytest.mark.parametrize(
        "exc",
        [
            DetectionFailure("x"),
            UnsupportedFormatError("yaml"),
            InvalidInputError("x"),
            EmptySegmentsError(),
        ],
    )
    def test_client_errors(self, exc):
        assert is_client_error(exc) is True

    def test_transform_error_is_server_fault(self):
        assert is_client_error(TransformError("x")) is False

    def test_foreign_exception(self):
        assert is_client_error(ValueError("x")) is False


class TestAttributes:
    """Diagnostic attributes carried by the errors."""

    def test_unsupported_format_tag(self):
        exc = UnsupportedFormatError(" Yaml ", "Output")
        assert exc.tag == " Yaml "
        assert str(exc).startswith('Output of type " Yaml " is not supported.')

    def test_invalid_input_details(self):
        assert InvalidInputError("bad shape").details == "bad shape"

    def test_empty_segments_default_message(self):
        assert str(EmptySegmentsError()) == "No segments found in string data"

    def test_transform_error_cause(self):
        exc = TransformError("disk on fire")
        assert exc.cause == "disk on fire"
        assert "disk on fire" in str(exc)

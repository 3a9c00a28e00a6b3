"""
Custom exception hierarchy for edi-transform.

Every error raised by the conversion core derives from ``EdiTransformError``
so a caller (an HTTP handler, the CLI script) can catch the whole family in
one place and still branch on the concrete kind.

Each class carries a ``client_error`` flag:
- ``True`` means the payload, tag or options supplied by the caller are at
  fault (a transport layer would answer with a client-error response).
- ``False`` means something unexpected broke inside the core.

The core itself never maps these to status codes.
"""


class EdiTransformError(Exception):
    """Base exception for all edi-transform errors."""

    client_error = True


class DetectionFailure(EdiTransformError):
    """Raised when the source format of a payload cannot be detected.

    Happens for absent or blank payloads, undecodable bytes, and payload
    types that are neither text nor a structured object.
    """


class UnsupportedFormatError(EdiTransformError):
    """Raised when a source or target format tag is not supported.

    The ``tag`` attribute keeps the tag exactly as the caller passed it
    (before trimming and lowercasing) for diagnostics.
    """

    def __init__(self, tag: object, direction: str = "Format") -> None:
        self.tag = tag
        supported = ", ".join(_supported_tags())
        super().__init__(
            f'{direction} of type "{tag}" is not supported. '
            f"Supported formats: {supported}"
        )


class InvalidInputError(EdiTransformError):
    """Raised when a payload does not match the grammar of its codec.

    For example: a non-text payload given to the delimited parser,
    malformed JSON or XML, a bare JSON array, or a Document that cannot be
    written in the target representation.
    """

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(details)


class EmptySegmentsError(InvalidInputError):
    """Raised when delimited-string input contains no parseable segments."""

    def __init__(self, details: str = "No segments found in string data") -> None:
        super().__init__(details)


class TransformError(EdiTransformError):
    """Raised when the conversion fails for a reason outside the taxonomy.

    Wraps the underlying exception; ``cause`` holds its message.
    """

    client_error = False

    def __init__(self, cause: str) -> None:
        self.cause = cause
        super().__init__(f"Transformation failed: {cause}")


def is_client_error(exc: BaseException) -> bool:
    """Return True if *exc* is a caller-input error from this package."""
    return isinstance(exc, EdiTransformError) and exc.client_error


def _supported_tags() -> list[str]:
    # Local import: formats.py imports this module.
    from edi_transform.formats import FormatTag

    return [tag.value for tag in FormatTag]

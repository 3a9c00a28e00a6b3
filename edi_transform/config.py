"""
Conversion options and YAML I/O for edi-transform.

The only tunables of the core are the two delimiters of the flat string
format. They live in the ``TransformOptions`` Pydantic model, which maps
1:1 to an optional YAML options file:

    segmentDelineator: "~"
    elementDelineator: "*"

Key functions:
- resolve_options(overrides, defaults) -> TransformOptions: layer
  per-call overrides onto defaults (the per-request lifecycle).
- load_options(path) -> TransformOptions: load and validate from YAML.
- save_options(options, path): serialize to YAML.

Options objects are frozen, so one instance can be shared by concurrent
calls without any of them changing it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from edi_transform.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

DEFAULT_SEGMENT_DELINEATOR = "~"
DEFAULT_ELEMENT_DELINEATOR = "*"


class TransformOptions(BaseModel):
    """Delimiter settings for the flat string format.

    Field aliases use the camelCase names callers send over the wire
    (``segmentDelineator`` / ``elementDelineator``); the snake_case names
    are accepted too.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    segment_delineator: str = Field(
        DEFAULT_SEGMENT_DELINEATOR,
        alias="segmentDelineator",
        min_length=1,
        description="Separates segments (one record each) in the string format",
    )
    element_delineator: str = Field(
        DEFAULT_ELEMENT_DELINEATOR,
        alias="elementDelineator",
        min_length=1,
        description="Separates the group key and values inside a segment",
    )

    @model_validator(mode="after")
    def _check_distinct(self) -> TransformOptions:
        """Segments could not be told apart from elements otherwise."""
        seg, elem = self.segment_delineator, self.element_delineator
        if seg in elem or elem in seg:
            raise ValueError(
                "segmentDelineator and elementDelineator must differ and "
                f"neither may contain the other, got {seg!r} and {elem!r}"
            )
        return self


def resolve_options(
    overrides: TransformOptions | Mapping[str, Any] | None = None,
    defaults: TransformOptions | None = None,
) -> TransformOptions:
    """Layer caller-supplied overrides onto default options.

    Keys whose value is ``None`` are treated as absent, so optional query
    parameters can be forwarded without filtering.

    Args:
        overrides: A ``TransformOptions`` (returned unchanged), a mapping
            with camelCase or snake_case keys, or ``None``.
        defaults: Base options. Defaults to ``TransformOptions()``.

    Returns:
        A new, validated ``TransformOptions``.

    Raises:
        InvalidInputError: If the merged options fail validation
            (empty or overlapping delimiters).
    """
    if isinstance(overrides, TransformOptions):
        return overrides
    base = defaults if defaults is not None else TransformOptions()
    if not overrides:
        return base

    merged = base.model_dump(by_alias=True)
    for key, value in overrides.items():
        if value is None:
            continue
        field = TransformOptions.model_fields.get(key)
        alias = field.alias if field is not None else key
        merged[alias] = value

    try:
        return TransformOptions.model_validate(merged)
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid options: {exc}") from exc


def load_options(path: str | Path) -> TransformOptions:
    """Load and validate a YAML options file.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidInputError: If the file is empty or fails validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise InvalidInputError(f"Options file is empty: {path}")
    if not isinstance(raw, dict):
        raise InvalidInputError(f"Options file must contain a mapping: {path}")
    logger.info("Loaded options from %s", path)
    return resolve_options(raw)


def save_options(options: TransformOptions, path: str | Path) -> None:
    """Serialize options to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = options.model_dump(by_alias=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# edi-transform options\n")
        f.write("# Delimiters used when reading and writing the string format.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved options to %s", path)

"""
Intermediate Document model for edi-transform.

Every parser produces a Document and every formatter consumes one:

    {
        "ProductID": [{"ProductID1": "4", "ProductID2": "8"}],
        "ContactID": [{"ContactID1": "59"}, {"ContactID1": "60"}],
    }

- Keys are group names (case-preserved, first-seen order).
- Each group maps to the ordered list of its records.
- A record maps a synthesized field name (group name + 1-based position)
  to a string value.

Plain ``dict`` objects are used because they preserve insertion order,
which is the order formatters reproduce.
"""

from __future__ import annotations

from typing import Any

Record = dict[str, str]
Document = dict[str, list[Record]]


def field_name(group: str, position: int) -> str:
    """Synthesize the field name for the value at 1-based *position*."""
    return f"{group}{position}"


def build_record(group: str, values: list[str]) -> Record:
    """Build a record from positional values, naming fields after *group*."""
    return {field_name(group, i): value for i, value in enumerate(values, start=1)}


def append_record(document: Document, group: str, record: Record) -> None:
    """Append *record* to *group*, creating the group on first sight."""
    document.setdefault(group, []).append(record)


def summarize(document: dict[str, Any]) -> str:
    """One-line description of a Document for log messages."""
    records = sum(len(v) if isinstance(v, list) else 1 for v in document.values())
    return f"{len(document)} group(s), {records} record(s)"

"""JSON text rendering for records, record lists and failure results.

The output is kept byte-compatible with the existing console front-end:
fields appear in declaration order with the identity first, no whitespace is
emitted, and strings only have ``\\`` and ``"`` escaped. Control characters
and other characters JSON would normally escape pass through unchanged.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from .domain import Record
from .repository import Failure, NotFound, ValidationError


def escape(text: Optional[str]) -> str:
    if text is None:
        return ""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _quote(text: Optional[str]) -> str:
    return f'"{escape(text)}"'


def render_scalar(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if value is None or isinstance(value, str):
        return _quote(value)
    return _quote(str(value))


def render_record(record: Record) -> str:
    body = ",".join(
        f"{_quote(spec.wire)}:{render_scalar(getattr(record, spec.attr))}"
        for spec in record.field_specs()
    )
    return "{" + body + "}"


def render_records(records: Iterable[Record]) -> str:
    return "[" + ",".join(render_record(record) for record in records) + "]"


def render_failure(failure: Failure) -> str:
    return (
        "{"
        f'"error":{_quote(failure.code)},'
        f'"field":{_quote(failure.field)},'
        f'"value":{_quote(failure.value)}'
        "}"
    )


def to_json(value: Any) -> str:
    """Render any repository result as JSON text."""
    if value is None:
        return "null"
    if isinstance(value, (NotFound, ValidationError)):
        return render_failure(value)
    if isinstance(value, Record):
        return render_record(value)
    if isinstance(value, (list, tuple)):
        return render_records(value)
    raise TypeError(f"Cannot render {type(value).__name__} as a record")


__all__ = [
    "escape",
    "render_failure",
    "render_record",
    "render_records",
    "render_scalar",
    "to_json",
]

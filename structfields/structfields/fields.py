"""Enumerate, read and write the fields of dataclass and NamedTuple records.

Every function here works on a caller-owned record for the duration of one
call and keeps nothing afterwards. Enumeration follows declaration order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from structfields.adapters import RecordAdapter, adapter_for
from structfields.errors import (
    IntrospectionError,
    InvalidArgumentError,
    NotSettableError,
    UnknownFieldError,
    UnreadableFieldError,
)
from structfields.refs import deref

logger = logging.getLogger(__name__)

NOT_A_RECORD_OR_REFERENCE = "this function only accepts struct types or pointer-to-struct types"
NOT_A_RECORD = "the provided value must be a struct type"


@dataclass(frozen=True)
class FlattenOptions:
    """Limits for ``list_fields_flatten``.

    The defaults descend without bound, so a record that contains itself
    recurses until the interpreter gives up.
    """

    max_depth: int | None = None
    detect_cycles: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")


def _resolve_record(value: object, message: str) -> tuple[object, RecordAdapter]:
    adapter = adapter_for(value)
    if adapter is None:
        raise InvalidArgumentError(message)
    return value, adapter


def _require_field(adapter: RecordAdapter, record: object, field_name: str) -> None:
    if field_name not in adapter.field_names(record):
        raise UnknownFieldError(field_name)


def list_fields(value: object) -> list[str]:
    """Return the field names of a record, or of the record a reference points at."""
    record, adapter = _resolve_record(deref(value), NOT_A_RECORD_OR_REFERENCE)
    return adapter.field_names(record)


def list_fields_flatten(value: object, options: FlattenOptions | None = None) -> list[str]:
    """Return field names depth-first, each nested record's names right after its own.

    Fields holding a record (or a reference to one) are descended into. Errors
    raised while descending are dropped and the field contributes only its name.
    """
    if options is None:
        options = FlattenOptions()
    return _flatten(value, options, depth=0, path=())


def _flatten(
    value: object, options: FlattenOptions, *, depth: int, path: tuple[int, ...]
) -> list[str]:
    record, adapter = _resolve_record(deref(value), NOT_A_RECORD_OR_REFERENCE)
    path = (*path, id(record))

    names: list[str] = []
    for name in adapter.field_names(record):
        names.append(name)

        if options.max_depth is not None and depth >= options.max_depth:
            logger.debug("Not descending into %r: max_depth %d reached", name, options.max_depth)
            continue

        try:
            child = deref(adapter.read(record, name))
        except UnreadableFieldError:
            continue
        if adapter_for(child) is None:
            continue
        if options.detect_cycles and id(child) in path:
            logger.debug("Skipping field %r: record already on the descent path", name)
            continue

        try:
            names.extend(_flatten(child, options, depth=depth + 1, path=path))
        except IntrospectionError as exc:
            logger.debug("Ignoring nested field names under %r: %s", name, exc)

    return names


def get_field(value: object, field_name: str) -> object:
    """Return the value held in ``field_name``.

    ``value`` must be the record itself; references are rejected here.

    Raises:
        InvalidArgumentError: ``value`` is not a record.
        UnknownFieldError: the record type has no such field.
        UnreadableFieldError: the field is declared but not bound.
    """
    record, adapter = _resolve_record(value, NOT_A_RECORD)
    _require_field(adapter, record, field_name)
    return adapter.read(record, field_name)


def set_field(value: object, field_name: str, new_value: object) -> None:
    """Overwrite ``field_name`` on a record, or on the record a reference points at.

    Raises:
        InvalidArgumentError: ``value`` does not resolve to a record.
        UnknownFieldError: the record type has no such field.
        UnreadableFieldError: the field is declared but not bound.
        NotSettableError: the record is frozen or a named tuple.

    Anything the record's own attribute assignment raises is not caught.
    """
    record, adapter = _resolve_record(deref(value), NOT_A_RECORD)
    _require_field(adapter, record, field_name)
    adapter.read(record, field_name)
    if not adapter.is_settable(record, field_name):
        raise NotSettableError(field_name)
    adapter.write(record, field_name, new_value)


def get_vals(value: object) -> list[object]:
    """Return every field value in declaration order.

    Equivalent to ``[get_field(value, n) for n in list_fields(value)]``; the
    first failure propagates and nothing partial is returned.
    """
    return [get_field(value, name) for name in list_fields(value)]


def as_dict(value: object) -> dict[str, object]:
    """Map each field name to its value, shallowly, in declaration order."""
    return {name: get_field(value, name) for name in list_fields(value)}

from __future__ import annotations

import dataclasses
import logging
from typing import Protocol

from structfields.errors import NotSettableError, UnreadableFieldError
from structfields.refs import is_reference

logger = logging.getLogger(__name__)


class RecordAdapter(Protocol):
    def matches(self, value: object) -> bool: ...

    def field_names(self, value: object) -> list[str]: ...

    def read(self, value: object, field_name: str) -> object: ...

    def is_settable(self, value: object, field_name: str) -> bool: ...

    def write(self, value: object, field_name: str, new_value: object) -> None: ...


def _read_attribute(value: object, field_name: str) -> object:
    try:
        return getattr(value, field_name)
    except AttributeError as exc:
        # Declared on the type but never bound on the instance.
        raise UnreadableFieldError(field_name) from exc


@dataclasses.dataclass(frozen=True)
class DataclassAdapter:
    """Dataclass instances, fields in ``dataclasses.fields()`` order."""

    def matches(self, value: object) -> bool:
        return dataclasses.is_dataclass(value) and not isinstance(value, type)

    def field_names(self, value: object) -> list[str]:
        return [f.name for f in dataclasses.fields(value)]

    def read(self, value: object, field_name: str) -> object:
        return _read_attribute(value, field_name)

    def is_settable(self, value: object, field_name: str) -> bool:
        return not type(value).__dataclass_params__.frozen

    def write(self, value: object, field_name: str, new_value: object) -> None:
        # Whatever the record's own assignment raises goes straight to the caller.
        setattr(value, field_name, new_value)


@dataclasses.dataclass(frozen=True)
class NamedTupleAdapter:
    """``typing.NamedTuple`` (and ``collections.namedtuple``) instances. Always read-only."""

    def matches(self, value: object) -> bool:
        return isinstance(value, tuple) and isinstance(getattr(type(value), "_fields", None), tuple)

    def field_names(self, value: object) -> list[str]:
        return list(type(value)._fields)

    def read(self, value: object, field_name: str) -> object:
        return _read_attribute(value, field_name)

    def is_settable(self, value: object, field_name: str) -> bool:
        return False

    def write(self, value: object, field_name: str, new_value: object) -> None:
        raise NotSettableError(field_name)


# Checked in order; the first adapter whose ``matches`` accepts the value wins.
RECORD_ADAPTERS: tuple[RecordAdapter, ...] = (
    DataclassAdapter(),
    NamedTupleAdapter(),
)


def adapter_for(value: object) -> RecordAdapter | None:
    if is_reference(value):
        return None
    for adapter in RECORD_ADAPTERS:
        if adapter.matches(value):
            return adapter
    logger.debug("No record adapter for value of type %s", type(value).__name__)
    return None


def is_record(value: object) -> bool:
    return adapter_for(value) is not None

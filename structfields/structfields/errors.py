"""Exceptions raised by the field introspection helpers."""

from __future__ import annotations


class IntrospectionError(Exception):
    """Base class for every error raised while introspecting a record."""


class InvalidArgumentError(IntrospectionError, TypeError):
    """The value is not a structured record after the allowed indirection."""


class FieldError(IntrospectionError):
    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(message)


class UnknownFieldError(FieldError, LookupError):
    """The record type declares no field with the requested name."""

    def __init__(self, field_name: str) -> None:
        super().__init__(
            field_name,
            f"key '{field_name}' doesn't match any fields in the provided struct type",
        )


class UnreadableFieldError(FieldError):
    """The field is declared but holds no value that can be handed out."""

    def __init__(self, field_name: str) -> None:
        super().__init__(field_name, f"field '{field_name}' can not be read from this record")


class NotSettableError(FieldError):
    """The field exists and is readable, but the record does not allow writes."""

    def __init__(self, field_name: str) -> None:
        super().__init__(field_name, f"can't set the value of field '{field_name}'")

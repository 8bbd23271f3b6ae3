"""Single-level references to records."""

from __future__ import annotations

import weakref
from typing import Generic, TypeVar

T = TypeVar("T")


class Ref(Generic[T]):
    """A mutable box pointing at a record, or at nothing when ``target`` is None.

    A ``Ref`` is never itself treated as a record.
    """

    __slots__ = ("target",)

    def __init__(self, target: T | None = None) -> None:
        self.target = target

    def __repr__(self) -> str:
        return f"Ref({self.target!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        return self.target == other.target

    __hash__ = None  # type: ignore[assignment]


def is_reference(value: object) -> bool:
    return isinstance(value, (Ref, weakref.ReferenceType))


def deref(value: object) -> object:
    """Resolve exactly one level of indirection.

    ``Ref`` boxes yield their target and weak references yield their referent
    (None once it has been collected). Anything else is returned unchanged.
    """
    if isinstance(value, Ref):
        return value.target
    if isinstance(value, weakref.ReferenceType):
        return value()
    return value

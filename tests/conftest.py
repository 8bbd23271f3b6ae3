"""Pytest configuration and shared record fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from structfields import Ref


@dataclass
class InnerInnerThing:
    key7: str = ""
    key8: str = ""


@dataclass
class InnerThing:
    key5: float = 0.0
    key6: InnerInnerThing = field(default_factory=InnerInnerThing)


@dataclass
class Thing:
    key1: str = ""
    key2: int = 0
    key3: list[int] = field(default_factory=list)
    key4: InnerThing = field(default_factory=InnerThing)


@dataclass
class RefField:
    key1: Ref[InnerInnerThing]
    key2: str


@pytest.fixture
def thing() -> Thing:
    """Provide a populated three-level record."""
    return Thing(
        key1="string",
        key2=3,
        key3=[3, 2, 1],
        key4=InnerThing(key5=3.1, key6=InnerInnerThing("this", "that")),
    )


@pytest.fixture
def ref_field() -> RefField:
    """Provide a record whose first field is a reference to a nested record."""
    return RefField(key1=Ref(InnerInnerThing("a", "b")), key2="three")

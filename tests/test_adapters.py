"""Tests for record adapter selection."""

from __future__ import annotations

import weakref
from collections import namedtuple
from dataclasses import dataclass
from typing import NamedTuple

import pytest

from structfields import DataclassAdapter, NamedTupleAdapter, Ref, adapter_for, is_record
from structfields.errors import NotSettableError


@dataclass
class Plain:
    a: int = 1
    b: int = 2


@dataclass(frozen=True)
class Frozen:
    a: int = 1


class Typed(NamedTuple):
    a: int
    b: str = "b"


Legacy = namedtuple("Legacy", "a b")


class TestAdapterFor:
    """Test which adapter handles which value."""

    def test_dataclass_instance(self) -> None:
        """Test that dataclass instances get the dataclass adapter."""
        assert isinstance(adapter_for(Plain()), DataclassAdapter)

    def test_named_tuples(self) -> None:
        """Test that both kinds of named tuple get the named tuple adapter."""
        assert isinstance(adapter_for(Typed(1)), NamedTupleAdapter)
        assert isinstance(adapter_for(Legacy(1, 2)), NamedTupleAdapter)

    @pytest.mark.parametrize("value", [Plain, Typed, (1, 2), [1], "ab", 3, None, {"a": 1}])
    def test_non_records(self, value: object) -> None:
        """Test that classes and plain containers have no adapter."""
        assert adapter_for(value) is None
        assert not is_record(value)

    def test_references_are_not_records(self) -> None:
        """Test that references are never adapted as records themselves."""
        plain = Plain()
        assert adapter_for(Ref(plain)) is None
        assert adapter_for(weakref.ref(plain)) is None


class TestDataclassAdapter:
    """Test the dataclass adapter directly."""

    def test_field_names(self) -> None:
        """Test listing dataclass fields."""
        assert DataclassAdapter().field_names(Plain()) == ["a", "b"]

    def test_settable_unless_frozen(self) -> None:
        """Test that only non-frozen dataclasses are settable."""
        adapter = DataclassAdapter()
        assert adapter.is_settable(Plain(), "a")
        assert not adapter.is_settable(Frozen(), "a")

    def test_write(self) -> None:
        """Test writing a dataclass field."""
        value = Plain()
        DataclassAdapter().write(value, "b", 20)
        assert value.b == 20


class TestNamedTupleAdapter:
    """Test the named tuple adapter directly."""

    def test_field_names(self) -> None:
        """Test listing named tuple fields."""
        assert NamedTupleAdapter().field_names(Typed(1)) == ["a", "b"]

    def test_read(self) -> None:
        """Test reading a defaulted named tuple field."""
        assert NamedTupleAdapter().read(Typed(1), "b") == "b"

    def test_never_settable(self) -> None:
        """Test that named tuples refuse every write."""
        adapter = NamedTupleAdapter()
        assert not adapter.is_settable(Typed(1), "a")
        with pytest.raises(NotSettableError):
            adapter.write(Typed(1), "a", 2)

"""Tabulate records of one shape into a pandas DataFrame."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import pandas as pd

from structfields.errors import InvalidArgumentError
from structfields.fields import get_vals, list_fields

logger = logging.getLogger(__name__)


class RecordCollector:
    """Accumulates one row of field values per record added.

    The first record fixes the columns; later records must declare the same
    field names in the same order.
    """

    def __init__(self) -> None:
        self._columns: list[str] | None = None
        self._rows: list[list[object]] = []

    @property
    def columns(self) -> list[str]:
        return list(self._columns or [])

    def add(self, record: object) -> None:
        names = list_fields(record)
        if self._columns is not None and names != self._columns:
            raise InvalidArgumentError(
                f"record fields {names} do not match collected columns {self._columns}"
            )
        row = get_vals(record)
        if self._columns is None:
            self._columns = names
        self._rows.append(row)

    def rows(self) -> list[list[object]]:
        return [list(row) for row in self._rows]

    def __len__(self) -> int:
        return len(self._rows)

    def to_frame(self) -> pd.DataFrame:
        logger.debug("Building frame with %d row(s), columns %s", len(self._rows), self.columns)
        # object dtype keeps nested records and sequences as-is in each cell
        return pd.DataFrame(self._rows, columns=self.columns, dtype=object)


def records_to_frame(records: Iterable[object]) -> pd.DataFrame:
    collector = RecordCollector()
    for record in records:
        collector.add(record)
    return collector.to_frame()

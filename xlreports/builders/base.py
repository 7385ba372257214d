"""
Builder — populates one worksheet region from row data through a Cell.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Union

import pandas as pd

from xlreports.excel.cell import Cell
from xlreports.utils.exceptions import BuilderError

RowData = Union[Sequence[Mapping[str, Any]], Sequence[Sequence[Any]], pd.DataFrame]


def _clean(value: Any) -> Any:
    """NaN/NaT from pandas become empty cells."""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def normalize_rows(
    data: RowData | None,
    headers: Sequence[str] | None = None,
) -> tuple[list[str], list[list[Any]]]:
    """Turn dict rows, sequence rows or a DataFrame into (headers, value rows).

    Dict rows take their headers from the keys, in first-seen order, unless
    ``headers`` is given. Sequence rows without headers get "Column N" labels.
    """
    if data is None:
        return list(headers or []), []

    if isinstance(data, pd.DataFrame):
        columns = list(headers) if headers else [str(c) for c in data.columns]
        records = data.to_dict("records")
        rows = [[_clean(v) for v in rec.values()] for rec in records]
        return columns, rows

    records = list(data)
    if records and all(isinstance(r, Mapping) for r in records):
        if headers:
            columns = list(headers)
        else:
            columns = []
            for rec in records:
                for key in rec:
                    if key not in columns:
                        columns.append(key)
        rows = [[_clean(rec.get(key)) for key in columns] for rec in records]
        return [str(c) for c in columns], rows

    rows = [[_clean(v) for v in rec] for rec in records]
    width = max((len(r) for r in rows), default=0)
    if headers:
        columns = list(headers)
    else:
        columns = [f"Column {i}" for i in range(1, width + 1)]
    return columns, rows


class Builder:
    """Base builder with the three lifecycle hooks driven by document elements.

    Subclasses implement ``construct``; ``begin_table`` and ``end_table`` are
    optional.
    """

    def __init__(
        self,
        cell: Cell | None = None,
        data: RowData | None = None,
        headers: Sequence[str] | None = None,
    ) -> None:
        self._cell = cell
        self.headers: list[str] = []
        self.rows: list[list[Any]] = []
        if data is not None or headers is not None:
            self.set_data(data, headers)

    # ------------------------------------------------------------------
    # Wiring
    # ------------------------------------------------------------------

    def set_cell_object(self, cell: Cell) -> "Builder":
        self._cell = cell
        return self

    def get_cell_object(self) -> Cell:
        if self._cell is None:
            raise BuilderError(
                f"{type(self).__name__} has no cell object; call set_cell_object() first"
            )
        return self._cell

    @property
    def cell(self) -> Cell:
        return self.get_cell_object()

    def set_data(self, data: RowData | None, headers: Sequence[str] | None = None) -> "Builder":
        self.headers, self.rows = normalize_rows(data, headers)
        return self

    def get_data(self) -> list[list[Any]]:
        return self.rows

    @property
    def column_count(self) -> int:
        return max([len(self.headers)] + [len(r) for r in self.rows])

    def row_count(self) -> int:
        """Rows this builder occupies on the sheet."""
        return len(self.rows)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def begin_table(self) -> None:
        pass

    def construct(self) -> None:
        raise NotImplementedError

    def end_table(self) -> None:
        pass

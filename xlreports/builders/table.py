"""
TableBuilder — header row, data rows and an optional total row.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from openpyxl.utils import get_column_letter

from xlreports.builders.base import Builder, RowData
from xlreports.config import HEADER_STYLE_KEY, DATA_STYLE_KEY, DATA_ALTERNATE_STYLE_KEY
from xlreports.excel.cell import Cell, CellType

logger = logging.getLogger(__name__)


class TableBuilder(Builder):
    """Write a table into rows reserved on the active worksheet.

    Every cell selects its own style key and type before it is committed, so
    several builders may share one Cell without leaking settings into each
    other.
    """

    def __init__(
        self,
        cell: Cell | None = None,
        data: RowData | None = None,
        headers: Sequence[str] | None = None,
        *,
        start_column: int = 1,
        show_header: bool = True,
        header_style_key: str = HEADER_STYLE_KEY,
        data_style_key: str = DATA_STYLE_KEY,
        alternate_style_key: str | None = DATA_ALTERNATE_STYLE_KEY,
        total_style_key: str = "total",
        column_types: Mapping[int, CellType | str] | None = None,
        column_widths: Mapping[int, float] | None = None,
        header_comments: Mapping[int, str] | None = None,
        total_label: str | None = None,
        total_columns: Sequence[int] = (),
        auto_filter: bool = False,
    ) -> None:
        super().__init__(cell, data, headers)
        self.start_column = start_column
        self.show_header = show_header
        self.header_style_key = header_style_key
        self.data_style_key = data_style_key
        self.alternate_style_key = alternate_style_key
        self.total_style_key = total_style_key
        self.column_types = dict(column_types or {})
        self.column_widths = dict(column_widths or {})
        self.header_comments = dict(header_comments or {})
        self.total_label = total_label
        self.total_columns = list(total_columns)
        self.auto_filter = auto_filter
        self.start_row: int | None = None
        self.sheet_title: str | None = None

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def has_total(self) -> bool:
        return self.total_label is not None or bool(self.total_columns)

    def row_count(self) -> int:
        return int(self.show_header) + len(self.rows) + int(self.has_total)

    @property
    def header_row(self) -> int | None:
        return self.start_row if self.show_header else None

    @property
    def first_data_row(self) -> int:
        return (self.start_row or 1) + int(self.show_header)

    def _column(self, index: int) -> int:
        """Sheet column for the 1-based table column ``index``."""
        return self.start_column + index - 1

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def begin_table(self) -> None:
        session = self.cell.session
        self.sheet_title = session.active_sheet.title
        self.start_row = session.reserve_rows(self.row_count())
        logger.info(
            "Placing %d-row table at row %d of %r", self.row_count(), self.start_row, self.sheet_title
        )

    def construct(self) -> None:
        if self.start_row is None:
            self.begin_table()
        row = self.start_row
        if self.show_header:
            self._construct_header(row)
            row += 1
        for idx, values in enumerate(self.rows):
            self._construct_data_row(row, idx, values)
            row += 1
        if self.has_total:
            self._construct_total_row(row)

    def end_table(self) -> None:
        cell = self.cell
        for index in range(1, self.column_count + 1):
            column = self._column(index)
            if index in self.column_widths:
                cell.set_column_fixed_size(column, self.column_widths[index])
            elif not cell.is_column_fixed_size_set(column):
                cell.set_column_dimension_autosize(column)
        if self.auto_filter and self.show_header and self.column_count:
            cell.set_auto_filter(self._column(1), self._column(self.column_count), self.header_row)

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def _construct_header(self, row: int) -> None:
        cell = self.cell
        cell.set_style_key(self.header_style_key, fallback_to_default=True)
        cell.set_type(CellType.STRING)
        for index, label in enumerate(self.headers, 1):
            cell.set_value(label).construct_cell(self._column(index), row)
            comment = self.header_comments.get(index)
            if comment:
                cell.construct_cell_comment(self._column(index), row, comment)

    def _data_style_key(self, idx: int) -> str:
        style = self.cell.get_style_object()
        if idx % 2 == 1 and self.alternate_style_key and style.is_valid_style_key(self.alternate_style_key):
            return self.alternate_style_key
        return self.data_style_key

    def _construct_data_row(self, row: int, idx: int, values: list[Any]) -> None:
        cell = self.cell
        cell.set_style_key(self._data_style_key(idx), fallback_to_default=True)
        for index in range(1, self.column_count + 1):
            value = values[index - 1] if index <= len(values) else None
            cell.set_type(self.column_types.get(index))
            cell.set_value(value).construct_cell(self._column(index), row)

    def _construct_total_row(self, row: int) -> None:
        cell = self.cell
        cell.set_style_key(self.total_style_key, fallback_to_default=True)
        last_data_row = row - 1
        for index in range(1, self.column_count + 1):
            column = self._column(index)
            if index in self.total_columns and self.rows:
                letter = get_column_letter(column)
                cell.set_type(CellType.FORMULA)
                cell.set_value(f"SUM({letter}{self.first_data_row}:{letter}{last_data_row})")
            elif index == 1 and self.total_label is not None:
                cell.set_type(CellType.STRING).set_value(self.total_label)
            else:
                cell.set_type(None).set_value(None)
            cell.construct_cell(column, row)

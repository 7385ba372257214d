"""
WorkbookSession — the explicit handle on one openpyxl workbook.

Cells and element trees receive a session instead of reaching for a shared
global, so independent reports can be generated side by side.
"""
from __future__ import annotations

import logging
from pathlib import Path

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from xlreports.config import (
    DEFAULT_SHEET_TITLE,
    TABLE_SPACING,
    AUTOSIZE_MIN_WIDTH,
    AUTOSIZE_MAX_WIDTH,
)
from xlreports.excel.formatters import resolve_autosize_columns

logger = logging.getLogger(__name__)


class WorkbookSession:
    """Workbook plus the bookkeeping the builders need: sheet keys and free rows."""

    def __init__(
        self,
        workbook: Workbook | None = None,
        table_spacing: int = TABLE_SPACING,
    ) -> None:
        self.workbook = workbook if workbook is not None else Workbook()
        self.table_spacing = table_spacing
        # Reserved rows per worksheet title: next row a table may start on
        self._next_row: dict[str, int] = {}
        # Placement key → sheet created or found for it; openpyxl renames titles
        # that clash case-insensitively, so the key cannot be looked up by title
        self._sheets_by_key: dict[str, Worksheet] = {}

    # ------------------------------------------------------------------
    # Sheet management
    # ------------------------------------------------------------------

    @property
    def active_sheet(self) -> Worksheet:
        return self.workbook.active

    @property
    def default_sheet(self) -> Worksheet:
        """First worksheet; created when the workbook has none."""
        if not self.workbook.worksheets:
            return self.workbook.create_sheet(title=DEFAULT_SHEET_TITLE)
        return self.workbook.worksheets[0]

    def select_sheet(self, key: str | None = None) -> Worksheet:
        """Make the sheet for placement ``key`` active, creating it on first use.

        ``None`` selects the default (first) worksheet.
        """
        if key is None:
            ws = self.default_sheet
        elif key in self._sheets_by_key and self._sheets_by_key[key] in self.workbook.worksheets:
            ws = self._sheets_by_key[key]
        elif key in self.workbook.sheetnames:
            ws = self._sheets_by_key[key] = self.workbook[key]
        else:
            ws = self._sheets_by_key[key] = self.workbook.create_sheet(title=key)
            logger.info("Created worksheet %r for key %r", ws.title, key)
        self.workbook.active = ws
        return ws

    def sheet_titles(self) -> list[str]:
        return list(self.workbook.sheetnames)

    # ------------------------------------------------------------------
    # Row allocation
    # ------------------------------------------------------------------

    def next_free_row(self, ws: Worksheet | None = None) -> int:
        ws = ws if ws is not None else self.active_sheet
        return self._next_row.get(ws.title, 1)

    def reserve_rows(self, count: int, ws: Worksheet | None = None) -> int:
        """Reserve ``count`` rows on ``ws`` (active sheet by default).

        Returns the first reserved row. Consecutive reservations on one sheet
        are separated by ``table_spacing`` blank rows.
        """
        ws = ws if ws is not None else self.active_sheet
        start = self._next_row.get(ws.title)
        if start is None:
            start = 1
        else:
            start += self.table_spacing
        self._next_row[ws.title] = start + max(count, 0)
        logger.debug("Reserved rows %d-%d on %r", start, start + count - 1, ws.title)
        return start

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def resolve_autosize(
        self,
        min_width: int = AUTOSIZE_MIN_WIDTH,
        max_width: int = AUTOSIZE_MAX_WIDTH,
    ) -> None:
        """Turn every autosize flag into a concrete content-based width."""
        for ws in self.workbook.worksheets:
            resolve_autosize_columns(ws, min_width, max_width)

    def save(self, path: str | Path) -> Path:
        """Save the workbook to disk."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.resolve_autosize()
        self.workbook.save(path)
        logger.info("Saved workbook to %s", path)
        return path

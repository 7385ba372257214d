"""
Example report — the two-table layout with header, row and total styles.
"""
from __future__ import annotations

from xlreports.builders import TableBuilder
from xlreports.config import HEADER_STYLE_KEY
from xlreports.document import Element, TableElement
from xlreports.excel import Cell, CellType, WorkbookSession, border_style, default_style_collection
from xlreports.excel.styles import DARK_BLUE, WHITE
from xlreports.reports.base import Report
from xlreports.reports.no_styles import HEADERS, FIRST_TABLE, SECOND_TABLE, SECOND_SHEET


def report_styles():
    """Default collection with dash-dot-dot header borders on a dark blue fill."""
    styles = default_style_collection()
    styles.add_style_element(HEADER_STYLE_KEY, "borders", border_style("dash_dot_dot"))
    styles.add_style_element(
        HEADER_STYLE_KEY, "fill",
        {"fill_type": "solid", "start_color": DARK_BLUE, "end_color": DARK_BLUE},
    )
    styles.add_style_element(HEADER_STYLE_KEY, "font", {"bold": True, "color": WHITE})
    return styles


class ExampleReportWithStyles(Report):
    name = "with_styles"
    description = "Report with two styled tables in different worksheets, with totals and filters."

    def generate(self, session: WorkbookSession | None = None) -> WorkbookSession:
        session = session if session is not None else WorkbookSession()
        cell = Cell(session, report_styles())

        options = dict(
            column_types={1: CellType.NUMERIC, 2: CellType.NUMERIC},
            column_widths={1: 16},
            header_comments={1: "Values copied from the source rows"},
            total_label="Total",
            total_columns=[2],
            auto_filter=True,
        )
        first = TableBuilder(cell, FIRST_TABLE, HEADERS, **options)
        second = TableBuilder(cell, SECOND_TABLE, HEADERS, **options)

        document = Element(session)
        document.add_element(TableElement(first))
        document.add_element(TableElement(second), SECOND_SHEET)
        return document.construct()

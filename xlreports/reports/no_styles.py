"""
Example report — two tables on different worksheets, no styles.
"""
from __future__ import annotations

from xlreports.builders import TableBuilder
from xlreports.document import Element, TableElement
from xlreports.excel import Cell, WorkbookSession
from xlreports.reports.base import Report

HEADERS = ["First column", "Second column"]
FIRST_TABLE = [[1, 2], [3, 4]]
SECOND_TABLE = [[5, 6], [7, 8]]
SECOND_SHEET = "Second_one"


class ExampleReportNoStyles(Report):
    name = "no_styles"
    description = "Report with two tables in different worksheets with no styles."

    def generate(self, session: WorkbookSession | None = None) -> WorkbookSession:
        session = session if session is not None else WorkbookSession()
        # One cell object shared by both builders
        cell = Cell(session)

        first = TableBuilder(cell, FIRST_TABLE, HEADERS)
        second = TableBuilder(cell, SECOND_TABLE, HEADERS)

        document = Element(session)
        document.add_element(TableElement(first))
        document.add_element(TableElement(second), SECOND_SHEET)

        document.before_construct_document()
        document.construct_document()
        document.after_construct_document()
        return session

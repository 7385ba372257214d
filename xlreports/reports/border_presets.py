"""
Example report — one row per border preset.
"""
from __future__ import annotations

from xlreports.builders import TableBuilder
from xlreports.document import Element, TableElement
from xlreports.excel import BORDER_PRESETS, Cell, StyleCollection, WorkbookSession, border_style
from xlreports.reports.base import Report


class ExampleReportBorderPresets(Report):
    name = "border_presets"
    description = "Catalogue of every border preset, one framed row per preset."

    def generate(self, session: WorkbookSession | None = None) -> WorkbookSession:
        session = session if session is not None else WorkbookSession()
        document = Element(session)

        for preset, (pattern, color) in BORDER_PRESETS.items():
            styles = StyleCollection({preset: {"borders": border_style(preset)}})
            cell = Cell(session, styles)
            builder = TableBuilder(
                cell,
                [[preset, pattern, color]],
                show_header=False,
                data_style_key=preset,
                alternate_style_key=None,
            )
            document.add_element(TableElement(builder))

        return document.construct()

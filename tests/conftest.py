from __future__ import annotations

import pytest

from xlreports.excel import Cell, StyleCollection, WorkbookSession
from xlreports.excel.styles import border_style


@pytest.fixture
def session() -> WorkbookSession:
    return WorkbookSession()


@pytest.fixture
def styles() -> StyleCollection:
    """Small collection: a bold header with dash-dot-dot borders and a plain body."""
    return StyleCollection({
        "header": {
            "font": {"bold": True, "color": "FFFFFF"},
            "fill": {"fill_type": "solid", "start_color": "1F3864", "end_color": "1F3864"},
            "borders": border_style("dash_dot_dot"),
        },
        "body": {"font": {"italic": True}, "number_format": "0.00"},
    })


@pytest.fixture
def cell(session: WorkbookSession) -> Cell:
    return Cell(session)


@pytest.fixture
def styled_cell(session: WorkbookSession, styles: StyleCollection) -> Cell:
    return Cell(session, styles)

"""
Column sizing helpers.
"""
from __future__ import annotations

from openpyxl.utils import column_index_from_string
from openpyxl.worksheet.worksheet import Worksheet

from xlreports.config import AUTOSIZE_MIN_WIDTH, AUTOSIZE_MAX_WIDTH


# ---------------------------------------------------------------------------
# Content width
# ---------------------------------------------------------------------------

def content_width(ws: Worksheet, column: int) -> int:
    """Longest rendered value (in characters) found in ``column``."""
    max_length = 0
    for (value,) in ws.iter_rows(min_col=column, max_col=column, values_only=True):
        if value is None:
            continue
        # Multi-line values are as wide as their longest line
        cell_length = max(len(line) for line in str(value).splitlines() or [""])
        if cell_length > max_length:
            max_length = cell_length
    return max_length


def fit_width(max_length: int, min_width: int = AUTOSIZE_MIN_WIDTH, max_width: int = AUTOSIZE_MAX_WIDTH) -> int:
    return min(max(max_length + 2, min_width), max_width)


# ---------------------------------------------------------------------------
# Auto column width
# ---------------------------------------------------------------------------

def resolve_autosize_columns(
    ws: Worksheet,
    min_width: int = AUTOSIZE_MIN_WIDTH,
    max_width: int = AUTOSIZE_MAX_WIDTH,
) -> list[str]:
    """Give every column flagged ``auto_size`` a width computed from its content.

    openpyxl stores the flag but never measures content, so widths are fixed
    here just before saving. Returns the letters of the resized columns.
    """
    resized = []
    for letter, dimension in list(ws.column_dimensions.items()):
        if not dimension.auto_size:
            continue
        column = column_index_from_string(letter)
        dimension.width = fit_width(content_width(ws, column), min_width, max_width)
        resized.append(letter)
    return resized

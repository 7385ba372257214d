"""
Cell — stages value, type and style key, then commits them to worksheet positions.

One instance can construct any number of cells: properties stay in place after
``construct_cell`` and may be changed between commits.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from openpyxl.comments import Comment
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.dimensions import ColumnDimension

from xlreports.config import COMMENT_AUTHOR
from xlreports.excel.session import WorkbookSession
from xlreports.excel.style_collection import StyleCollection
from xlreports.excel.styles import apply_style_mapping

logger = logging.getLogger(__name__)


class CellType(str, Enum):
    """Type tags honoured when a value is written."""
    STRING = "s"
    NUMERIC = "n"
    BOOL = "b"
    FORMULA = "f"


TYPE_TAGS = frozenset(t.value for t in CellType)


def _to_number(value: Any) -> int | float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    number = float(value)
    return int(number) if number.is_integer() else number


class Cell:
    """Cell builder bound to one WorkbookSession.

    Columns and rows are 1-based. All writes go to the session's active sheet.
    """

    def __init__(self, session: WorkbookSession, style: StyleCollection | None = None) -> None:
        self.session = session
        self._value: Any = None
        self._type: CellType | str | None = None
        # Keyed by (sheet title, column) so a shared Cell tracks each sheet apart
        self._column_fixed_sizes: dict[tuple[str, int], float] = {}
        # A bare collection is used until the caller sets one
        self._style = style if style is not None else StyleCollection()
        self._style_key = self._style.default_key

    # ------------------------------------------------------------------
    # Style collection
    # ------------------------------------------------------------------

    def get_style_object(self) -> StyleCollection:
        return self._style

    def set_style_object(self, style: StyleCollection) -> "Cell":
        """Switch collections. The active key resets when the new one lacks it."""
        self._style = style
        if not style.is_valid_style_key(self._style_key):
            self._style_key = style.default_key
        return self

    def get_style_key(self) -> str:
        return self._style_key

    def set_style_key(self, style_key: str, fallback_to_default: bool = False) -> bool:
        """Select the style key used by the next commits.

        Returns True when ``style_key`` exists in the collection. On a miss the
        previous key stays active, unless ``fallback_to_default`` is set, in
        which case the collection's default key is selected.
        """
        is_valid = self._style.is_valid_style_key(style_key)
        if is_valid:
            self._style_key = style_key
        else:
            logger.debug("Style key %r not found in collection", style_key)
            if fallback_to_default:
                self._style_key = self._style.default_key
        return is_valid

    # ------------------------------------------------------------------
    # Value and type
    # ------------------------------------------------------------------

    def set_value(self, value: Any) -> "Cell":
        """Stage a value: text, number, or a formula starting with '='."""
        self._value = value
        return self

    def get_value(self) -> Any:
        return self._value

    def set_type(self, cell_type: CellType | str | None) -> "Cell":
        """Stage a type tag.

        Tags outside CellType are stored as given and not validated; values
        staged with them are written uncoerced and openpyxl infers the type.
        """
        if cell_type in TYPE_TAGS:
            cell_type = CellType(cell_type)
        self._type = cell_type
        return self

    def get_type(self) -> CellType | str | None:
        return self._type

    def get_cell_value(self, column: int, row: int) -> Any:
        """Value currently stored at (column, row) of the active sheet."""
        return self.session.active_sheet.cell(row=row, column=column).value

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    def _get_column_dimension(self, column: int) -> ColumnDimension:
        return self.session.active_sheet.column_dimensions[get_column_letter(column)]

    def get_column_dimension(self, column: int) -> str:
        """Letter coordinate of a numeric column."""
        return self._get_column_dimension(column).index

    def set_column_dimension_autosize(self, column: int, auto_size: bool = True) -> ColumnDimension:
        dimension = self._get_column_dimension(column)
        dimension.auto_size = auto_size
        return dimension

    def is_column_fixed_size_set(self, column: int) -> bool:
        return (self.session.active_sheet.title, column) in self._column_fixed_sizes

    def set_column_fixed_size(self, column: int, width: float) -> ColumnDimension:
        """Fix a column width; autosize is switched off for that column."""
        self._column_fixed_sizes[(self.session.active_sheet.title, column)] = width
        dimension = self._get_column_dimension(column)
        dimension.auto_size = False
        dimension.width = width
        return dimension

    def set_auto_filter(self, column_min: int, column_max: int, header_row: int) -> "Cell":
        """Put an autofilter over columns ``column_min..column_max`` of ``header_row``."""
        ref = (
            f"{get_column_letter(column_min)}{header_row}:"
            f"{get_column_letter(column_max)}{header_row}"
        )
        self.session.active_sheet.auto_filter.ref = ref
        return self

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def construct_cell_comment(self, column: int, row: int, text: str) -> "Cell":
        """Attach ``text`` as a comment; an existing comment gets it on a new line."""
        ws_cell = self.session.active_sheet.cell(row=row, column=column)
        if ws_cell.comment is not None:
            text = f"{ws_cell.comment.text}\n{text}"
        ws_cell.comment = Comment(text, COMMENT_AUTHOR)
        return self

    def construct_cell_styles(self, column: int, row: int) -> "Cell":
        ws_cell = self.session.active_sheet.cell(row=row, column=column)
        apply_style_mapping(ws_cell, self._style.get_style_array(self._style_key))
        return self

    def _typed_value(self) -> Any:
        value = self._value
        if not isinstance(self._type, CellType) or value is None:
            return value
        if self._type is CellType.STRING:
            return str(value)
        if self._type is CellType.NUMERIC:
            return _to_number(value)
        if self._type is CellType.BOOL:
            return bool(value)
        # CellType.FORMULA
        formula = str(value)
        return formula if formula.startswith("=") else f"={formula}"

    def construct_cell(self, column: int, row: int) -> "Cell":
        """Create the cell at (column, row) with the staged properties."""
        self.construct_cell_styles(column, row)

        ws_cell = self.session.active_sheet.cell(row=row, column=column)
        ws_cell.value = self._typed_value()
        if self._type is CellType.STRING and ws_cell.value is not None:
            # openpyxl treats a leading '=' as a formula
            ws_cell.data_type = "s"
        return self

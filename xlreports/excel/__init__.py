"""Workbook session, cell builder, style collections and border presets."""
from .styles import BORDER_PRESETS, border_style, borders_mapping, apply_style_mapping
from .style_collection import StyleCollection, default_style_collection
from .session import WorkbookSession
from .cell import Cell, CellType

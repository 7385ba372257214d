"""xlreports — spreadsheet reports assembled from composable elements over openpyxl."""
from xlreports.excel import Cell, CellType, StyleCollection, WorkbookSession, border_style
from xlreports.document import Element, TableElement
from xlreports.builders import Builder, TableBuilder

__version__ = "1.0.0"

"""Builders that populate worksheet regions from row data."""
from .base import Builder, normalize_rows
from .table import TableBuilder

"""
Single source of truth for colours, border presets and style-attribute mappings.

A style-attribute mapping is a plain nested dict; ``apply_style_mapping`` turns
it into openpyxl Font / PatternFill / Border / Alignment objects on a cell.
"""
from __future__ import annotations

import copy
from typing import Any

from openpyxl.cell.cell import Cell as WorksheetCell
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

from xlreports.utils.exceptions import UnknownBorderPresetError

StyleMapping = dict[str, Any]

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
BLACK = "000000"
WHITE = "FFFFFF"
RED = "FF0000"
GREEN = "00FF00"
BLUE = "0000FF"
DARK_BLUE = "1F3864"
DARK_GREEN = "1B5E20"
LIGHT_GREEN = "E8F5E9"
ALTERNATE_ROW = "F5F5F5"
TOTAL_ROW_BG = "E3F2FD"
GRAY = "CCCCCC"
DARK_GRAY = "999999"

# ---------------------------------------------------------------------------
# Border presets: name → (line pattern, colour)
# ---------------------------------------------------------------------------
BORDER_POSITIONS = ("left", "right", "top", "bottom")
ALL_BORDER_POSITIONS = BORDER_POSITIONS + ("diagonal",)

BORDER_PRESETS: dict[str, tuple[str, str]] = {
    "thin": ("thin", BLACK),
    "thin_gray": ("thin", GRAY),
    "medium": ("medium", BLACK),
    "thick": ("thick", BLACK),
    "double": ("double", BLACK),
    "hair": ("hair", BLACK),
    "dotted": ("dotted", BLACK),
    "dashed": ("dashed", BLACK),
    "medium_dashed": ("mediumDashed", BLACK),
    "dash_dot": ("dashDot", BLACK),
    "dash_dot_dot": ("dashDotDot", BLACK),
    "medium_dash_dot": ("mediumDashDot", BLACK),
    "medium_dash_dot_dot": ("mediumDashDotDot", BLACK),
    "slant_dash_dot": ("slantDashDot", BLACK),
    "total": ("medium", DARK_GRAY),
}


def borders_mapping(
    pattern: str,
    color: str,
    positions: tuple[str, ...] = BORDER_POSITIONS,
) -> dict[str, dict[str, str]]:
    """Expand one (pattern, colour) pair onto every position in ``positions``."""
    return {position: {"style": pattern, "color": color} for position in positions}


def border_style(preset: str) -> dict[str, dict[str, str]]:
    """Return the four-sided border mapping for a named preset.

    Each call builds a new dict, so callers may mutate the result.
    """
    try:
        pattern, color = BORDER_PRESETS[preset]
    except KeyError:
        raise UnknownBorderPresetError(preset, sorted(BORDER_PRESETS)) from None
    return borders_mapping(pattern, color)


# ---------------------------------------------------------------------------
# Style-attribute mappings used by the bundled collections
# ---------------------------------------------------------------------------
HEADER_STYLE: StyleMapping = {
    "font": {"name": "Calibri", "size": 11, "bold": True, "color": WHITE},
    "fill": {"fill_type": "solid", "start_color": DARK_GREEN, "end_color": DARK_GREEN},
    "borders": border_style("thin"),
    "alignment": {"horizontal": "center", "vertical": "center"},
}
DATA_STYLE: StyleMapping = {
    "font": {"name": "Calibri", "size": 10, "color": BLACK},
    "borders": border_style("thin_gray"),
}
DATA_ALTERNATE_STYLE: StyleMapping = {
    "font": {"name": "Calibri", "size": 10, "color": BLACK},
    "fill": {"fill_type": "solid", "start_color": ALTERNATE_ROW, "end_color": ALTERNATE_ROW},
    "borders": border_style("thin_gray"),
}
TOTAL_STYLE: StyleMapping = {
    "font": {"name": "Calibri", "size": 10, "bold": True, "color": BLACK},
    "fill": {"fill_type": "solid", "start_color": TOTAL_ROW_BG, "end_color": TOTAL_ROW_BG},
    "borders": border_style("total"),
    "number_format": "#,##0",
}


# ---------------------------------------------------------------------------
# Mapping → openpyxl
# ---------------------------------------------------------------------------

def build_border(borders: dict[str, dict[str, str] | None], base: Border | None = None) -> Border:
    """Build a Border from a position mapping, keeping sides of ``base`` it does not name."""
    sides = {}
    for position in ALL_BORDER_POSITIONS:
        side = getattr(base, position) if base is not None else None
        sides[position] = copy.copy(side) if side is not None else Side()
    for position, spec in borders.items():
        sides[position] = Side(**spec) if spec else Side()
    return Border(**sides)


def apply_style_mapping(cell: WorksheetCell, mapping: StyleMapping) -> None:
    """Apply a style-attribute mapping to a single worksheet cell.

    Groups absent from ``mapping`` leave the cell's current style untouched.
    """
    if not mapping:
        return
    if "font" in mapping:
        cell.font = Font(**mapping["font"])
    if "fill" in mapping:
        cell.fill = PatternFill(**mapping["fill"])
    if "borders" in mapping:
        cell.border = build_border(mapping["borders"], cell.border)
    if "alignment" in mapping:
        cell.alignment = Alignment(**mapping["alignment"])
    if "number_format" in mapping:
        cell.number_format = mapping["number_format"]

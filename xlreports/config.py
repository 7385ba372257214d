"""
xlreports — Configuration: output paths, style defaults, layout constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with XLREPORTS_OUTPUT_DIR
# ---------------------------------------------------------------------------
OUTPUT_FOLDER = Path(os.environ.get("XLREPORTS_OUTPUT_DIR", "reports"))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("XLREPORTS_LOG_LEVEL", "WARNING").upper()

# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------
DEFAULT_STYLE_KEY = "default"
HEADER_STYLE_KEY = "header"
DATA_STYLE_KEY = "data"
DATA_ALTERNATE_STYLE_KEY = "data_alternate"

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
DEFAULT_SHEET_TITLE = "Sheet"
# Blank rows left between two tables placed on the same worksheet
TABLE_SPACING = int(os.environ.get("XLREPORTS_TABLE_SPACING", "1"))
AUTOSIZE_MIN_WIDTH = 10
AUTOSIZE_MAX_WIDTH = 55

# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------
COMMENT_AUTHOR = os.environ.get("XLREPORTS_COMMENT_AUTHOR", "xlreports")

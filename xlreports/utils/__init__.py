"""Logging setup and the exception hierarchy."""
from .exceptions import (
    XLReportsError,
    ErrorCode,
    StyleError,
    StyleKeyError,
    UnknownBorderPresetError,
    DocumentError,
    BuilderError,
    UnknownReportError,
)
from .logging import configure_logging

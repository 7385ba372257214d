"""Exception classes for xlreports.

Business-rule misses (an unknown style key passed to ``Cell.set_style_key``)
are reported as booleans, not exceptions. The classes below cover lookups the
caller asked for explicitly and misuse of the document/builder API. Errors
raised by openpyxl itself are never wrapped.

Exception Hierarchy:
    XLReportsError (base)
    ├── StyleError
    │   ├── StyleKeyError (also a KeyError)
    │   └── UnknownBorderPresetError (also a KeyError)
    ├── DocumentError
    ├── BuilderError
    └── UnknownReportError (also a KeyError)
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes, grouped by category.

    - E1xxx: Style errors
    - E2xxx: Document/builder errors
    - E3xxx: Report registry errors
    """

    STYLE_KEY_NOT_FOUND = "E1001"
    UNKNOWN_BORDER_PRESET = "E1002"

    DOCUMENT_NOT_BOUND = "E2001"
    BUILDER_NOT_READY = "E2002"

    UNKNOWN_REPORT = "E3001"


class XLReportsError(Exception):
    """Base exception for all xlreports errors.

    Attributes:
        message: Human-readable error message.
        error_code: Unique error code from ErrorCode enum.
        details: Optional dictionary with additional error details.
    """

    default_code: ErrorCode = ErrorCode.DOCUMENT_NOT_BOUND

    def __init__(
        self,
        message: str,
        error_code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary (for logs and CLI output)."""
        result: dict[str, Any] = {
            "error_code": self.error_code.value,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"


# =============================================================================
# Style Errors (E1xxx)
# =============================================================================


class StyleError(XLReportsError):
    """Base class for style-related errors."""

    default_code = ErrorCode.STYLE_KEY_NOT_FOUND


class StyleKeyError(StyleError, KeyError):
    """Raised when a style mapping is requested for a key the collection lacks."""

    def __init__(self, style_key: str, available: list[str] | None = None) -> None:
        super().__init__(
            f"Unknown style key: {style_key!r}",
            ErrorCode.STYLE_KEY_NOT_FOUND,
            {"style_key": style_key, "available": available or []},
        )
        self.style_key = style_key

    # KeyError.__str__ would repr() the message
    __str__ = XLReportsError.__str__


class UnknownBorderPresetError(StyleError, KeyError):
    """Raised when a border preset name is not in the preset table."""

    def __init__(self, preset: str, available: list[str] | None = None) -> None:
        super().__init__(
            f"Unknown border preset: {preset!r}",
            ErrorCode.UNKNOWN_BORDER_PRESET,
            {"preset": preset, "available": available or []},
        )
        self.preset = preset

    __str__ = XLReportsError.__str__


# =============================================================================
# Document / Builder Errors (E2xxx)
# =============================================================================


class DocumentError(XLReportsError):
    """Raised when an element tree is constructed without a workbook session."""

    default_code = ErrorCode.DOCUMENT_NOT_BOUND


class BuilderError(XLReportsError):
    """Raised when a builder is used before it has a cell object."""

    default_code = ErrorCode.BUILDER_NOT_READY


# =============================================================================
# Report Errors (E3xxx)
# =============================================================================


class UnknownReportError(XLReportsError, KeyError):
    """Raised when a report name is not registered."""

    default_code = ErrorCode.UNKNOWN_REPORT

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        super().__init__(
            f"Unknown report: {name!r}",
            ErrorCode.UNKNOWN_REPORT,
            {"name": name, "available": available or []},
        )
        self.name = name

    __str__ = XLReportsError.__str__

"""
StyleCollection — named style keys resolved to style-attribute mappings.
"""
from __future__ import annotations

import copy
from typing import Any, Iterator

from xlreports.config import (
    DEFAULT_STYLE_KEY,
    HEADER_STYLE_KEY,
    DATA_STYLE_KEY,
    DATA_ALTERNATE_STYLE_KEY,
)
from xlreports.excel.styles import (
    StyleMapping,
    HEADER_STYLE,
    DATA_STYLE,
    DATA_ALTERNATE_STYLE,
    TOTAL_STYLE,
)
from xlreports.utils.exceptions import StyleKeyError


class StyleCollection:
    """Mapping of style key → style-attribute mapping with a declared default key.

    The default key always exists; a bare collection maps it to an empty
    mapping, which leaves openpyxl's default cell style in place.
    """

    def __init__(
        self,
        styles: dict[str, StyleMapping] | None = None,
        default_key: str = DEFAULT_STYLE_KEY,
    ) -> None:
        self.default_key = default_key
        self._styles: dict[str, StyleMapping] = {default_key: {}}
        for key, mapping in (styles or {}).items():
            self.add_style(key, mapping)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def is_valid_style_key(self, key: str) -> bool:
        return key in self._styles

    def get_style_array(self, key: str) -> StyleMapping:
        """Return a copy of the mapping stored under ``key``.

        Raises StyleKeyError for unknown keys; ``Cell`` only ever asks for keys
        it has already validated.
        """
        try:
            return copy.deepcopy(self._styles[key])
        except KeyError:
            raise StyleKeyError(key, self.keys()) from None

    def keys(self) -> list[str]:
        return list(self._styles)

    def __contains__(self, key: object) -> bool:
        return key in self._styles

    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_style(self, key: str, mapping: StyleMapping) -> "StyleCollection":
        """Store ``mapping`` under ``key``, replacing any previous mapping."""
        self._styles[key] = copy.deepcopy(mapping)
        return self

    def add_style_element(self, key: str, group: str, values: Any) -> "StyleCollection":
        """Set one group (font, fill, borders, alignment, number_format) of a style.

        Creates the key when missing; dict groups merge into what is already
        stored, so borders can be added side by side.
        """
        style = self._styles.setdefault(key, {})
        current = style.get(group)
        if isinstance(current, dict) and isinstance(values, dict):
            current.update(copy.deepcopy(values))
        else:
            style[group] = copy.deepcopy(values)
        return self

    def remove_style(self, key: str) -> bool:
        """Drop a style. The default key cannot be removed."""
        if key == self.default_key or key not in self._styles:
            return False
        del self._styles[key]
        return True


def default_style_collection() -> StyleCollection:
    """Collection with header, data, alternate-row and total styles."""
    return StyleCollection({
        HEADER_STYLE_KEY: HEADER_STYLE,
        DATA_STYLE_KEY: DATA_STYLE,
        DATA_ALTERNATE_STYLE_KEY: DATA_ALTERNATE_STYLE,
        "total": TOTAL_STYLE,
    })

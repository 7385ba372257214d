"""
Report base class.
"""
from __future__ import annotations

from pathlib import Path

from xlreports.excel.session import WorkbookSession


class Report:
    """A named recipe that fills a WorkbookSession."""

    name: str = ""
    description: str = ""

    def get_description(self) -> str:
        return self.description

    def generate(self, session: WorkbookSession | None = None) -> WorkbookSession:
        raise NotImplementedError

    def save(self, output_path: str | Path) -> Path:
        """Generate into a fresh session and write it to ``output_path``."""
        return self.generate().save(output_path)

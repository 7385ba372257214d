"""
Document elements — a composition tree driven through three construction phases.

The root element owns the WorkbookSession. Each phase visits every leaf in
insertion order, selecting the leaf's worksheet first, and finishes across the
whole tree before the next phase starts.
"""
from __future__ import annotations

import logging
from typing import Iterator

from xlreports.builders.base import Builder
from xlreports.excel.session import WorkbookSession
from xlreports.utils.exceptions import BuilderError, DocumentError

logger = logging.getLogger(__name__)

PHASES = ("before_construct_document", "construct_document", "after_construct_document")


class Element:
    """Composite element: an ordered list of children, each with an optional sheet key."""

    is_leaf = False

    def __init__(self, session: WorkbookSession | None = None) -> None:
        self.session = session
        self._children: list[tuple[str | None, Element]] = []

    def set_session(self, session: WorkbookSession) -> "Element":
        self.session = session
        return self

    def add_element(self, element: "Element", key: str | None = None) -> "Element":
        """Append a child. ``key`` names the worksheet it is built on; None inherits."""
        self._children.append((key, element))
        return self

    def get_elements(self) -> list[tuple[str | None, "Element"]]:
        return list(self._children)

    def walk(self, sheet_key: str | None = None) -> Iterator[tuple[str | None, "Element"]]:
        """Yield ``(sheet_key, leaf)`` for every leaf, depth-first in insertion order."""
        for key, child in self._children:
            child_key = key if key is not None else sheet_key
            if child.is_leaf:
                yield child_key, child
            else:
                yield from child.walk(child_key)

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _run_phase(self, phase: str) -> None:
        if self.session is None:
            raise DocumentError(
                "Element tree has no workbook session; pass one to Element() or set_session()",
                details={"phase": phase},
            )
        count = 0
        for key, leaf in self.walk():
            self.session.select_sheet(key)
            getattr(leaf, phase)()
            count += 1
        logger.debug("Ran %s on %d element(s)", phase, count)

    def before_construct_document(self) -> None:
        self._run_phase("before_construct_document")

    def construct_document(self) -> None:
        self._run_phase("construct_document")

    def after_construct_document(self) -> None:
        self._run_phase("after_construct_document")

    def construct(self) -> WorkbookSession:
        """Run all three phases and return the session."""
        for phase in PHASES:
            self._run_phase(phase)
        return self.session


class TableElement(Element):
    """Leaf element delegating each phase to its builder."""

    is_leaf = True

    def __init__(self, builder: Builder | None = None) -> None:
        super().__init__()
        self._builder = builder

    def set_builder(self, builder: Builder) -> "TableElement":
        self._builder = builder
        return self

    def get_builder(self) -> Builder:
        if self._builder is None:
            raise BuilderError("TableElement has no builder; call set_builder() first")
        return self._builder

    def add_element(self, element: Element, key: str | None = None) -> "Element":
        raise DocumentError("Table elements cannot have children")

    def before_construct_document(self) -> None:
        self.get_builder().begin_table()

    def construct_document(self) -> None:
        self.get_builder().construct()

    def after_construct_document(self) -> None:
        self.get_builder().end_table()

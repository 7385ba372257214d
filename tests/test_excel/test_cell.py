"""Tests for the Cell builder."""

import pytest

from xlreports.excel import Cell, CellType, StyleCollection, WorkbookSession


class TestStyleKey:
    """Tests for style-key selection."""

    def test_fresh_cell_uses_default_key(self, cell: Cell) -> None:
        assert cell.get_style_key() == "default"
        assert isinstance(cell.get_style_object(), StyleCollection)

    @pytest.mark.parametrize("key", ["default", "header", "body"])
    def test_valid_key_is_selected(self, styled_cell: Cell, key: str) -> None:
        assert styled_cell.set_style_key(key) is True
        assert styled_cell.get_style_key() == key

    @pytest.mark.parametrize("key", ["missing", "", "HEADER"])
    def test_invalid_key_with_fallback_selects_default(self, styled_cell: Cell, key: str) -> None:
        styles = styled_cell.get_style_object()
        styled_cell.set_style_key("header")
        assert styled_cell.set_style_key(key, fallback_to_default=True) is False
        assert styled_cell.get_style_key() == styles.default_key
        # The collection itself is kept
        assert styled_cell.get_style_object() is styles

    @pytest.mark.parametrize("key", ["missing", "", "HEADER"])
    def test_invalid_key_without_fallback_keeps_previous(self, styled_cell: Cell, key: str) -> None:
        styled_cell.set_style_key("body")
        assert styled_cell.set_style_key(key) is False
        assert styled_cell.get_style_key() == "body"

    def test_set_style_object_resets_unknown_key(self, styled_cell: Cell) -> None:
        styled_cell.set_style_key("header")
        styled_cell.set_style_object(StyleCollection())
        assert styled_cell.get_style_key() == "default"

    def test_set_style_object_keeps_shared_key(self, styled_cell: Cell) -> None:
        styled_cell.set_style_key("header")
        styled_cell.set_style_object(StyleCollection({"header": {}}))
        assert styled_cell.get_style_key() == "header"


class TestColumns:
    """Tests for column sizing, filters and dimensions."""

    def test_fixed_size_disables_autosize(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_column_dimension_autosize(3)
        assert cell.is_column_fixed_size_set(3) is False

        cell.set_column_fixed_size(3, 25.5)

        dimension = session.active_sheet.column_dimensions["C"]
        assert cell.is_column_fixed_size_set(3) is True
        assert dimension.auto_size is False
        assert dimension.width == 25.5

    def test_fixed_size_is_tracked_per_sheet(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_column_fixed_size(1, 20)
        session.select_sheet("Other")
        assert cell.is_column_fixed_size_set(1) is False
        session.select_sheet(None)
        assert cell.is_column_fixed_size_set(1) is True

    def test_autosize_toggle(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_column_dimension_autosize(1)
        assert session.active_sheet.column_dimensions["A"].auto_size is True
        cell.set_column_dimension_autosize(1, False)
        assert session.active_sheet.column_dimensions["A"].auto_size is False

    def test_get_column_dimension_returns_letter(self, cell: Cell) -> None:
        assert cell.get_column_dimension(1) == "A"
        assert cell.get_column_dimension(28) == "AB"

    def test_auto_filter_covers_header_row(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_auto_filter(2, 4, 7)
        assert session.active_sheet.auto_filter.ref == "B7:D7"


class TestConstructCell:
    """Tests for committing staged state to the worksheet."""

    def test_writes_value_with_active_style(self, styled_cell: Cell, session: WorkbookSession) -> None:
        styled_cell.set_style_key("header")
        styled_cell.set_value("Name").construct_cell(2, 3)

        ws_cell = session.active_sheet["B3"]
        assert ws_cell.value == "Name"
        assert ws_cell.font.bold is True
        assert ws_cell.fill.start_color.rgb.endswith("1F3864")
        for side in (ws_cell.border.left, ws_cell.border.right, ws_cell.border.top, ws_cell.border.bottom):
            assert side.style == "dashDotDot"

    def test_object_is_reusable(self, styled_cell: Cell, session: WorkbookSession) -> None:
        styled_cell.set_style_key("body")
        styled_cell.set_value(1.5).construct_cell(1, 1)
        styled_cell.construct_cell(1, 2)
        styled_cell.set_value(2.5).construct_cell(1, 3)

        ws = session.active_sheet
        assert [ws["A1"].value, ws["A2"].value, ws["A3"].value] == [1.5, 1.5, 2.5]
        assert ws["A3"].font.italic is True
        assert ws["A3"].number_format == "0.00"

    def test_get_cell_value_reads_back(self, cell: Cell) -> None:
        cell.set_value("x").construct_cell(4, 4)
        assert cell.get_cell_value(4, 4) == "x"
        assert cell.get_cell_value(5, 5) is None

    def test_formula_without_type(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_value("=SUM(A1:A2)").construct_cell(1, 3)
        ws_cell = session.active_sheet["A3"]
        assert ws_cell.value == "=SUM(A1:A2)"
        assert ws_cell.data_type == "f"

    def test_string_type_keeps_leading_equals_literal(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_type(CellType.STRING).set_value("=not a formula").construct_cell(1, 1)
        ws_cell = session.active_sheet["A1"]
        assert ws_cell.value == "=not a formula"
        assert ws_cell.data_type == "s"

    def test_string_type_converts_numbers(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_type("s").set_value(42).construct_cell(1, 1)
        assert session.active_sheet["A1"].value == "42"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("1", 1), ("2.5", 2.5), (3, 3), (4.0, 4.0)],
    )
    def test_numeric_type(self, cell: Cell, session: WorkbookSession, raw, expected) -> None:
        cell.set_type(CellType.NUMERIC).set_value(raw).construct_cell(1, 1)
        value = session.active_sheet["A1"].value
        assert value == expected
        assert type(value) is type(expected)

    def test_numeric_type_rejects_text(self, cell: Cell) -> None:
        cell.set_type(CellType.NUMERIC).set_value("abc")
        with pytest.raises(ValueError):
            cell.construct_cell(1, 1)

    def test_formula_type_adds_prefix(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_type(CellType.FORMULA).set_value("SUM(A1:A2)").construct_cell(1, 3)
        assert session.active_sheet["A3"].value == "=SUM(A1:A2)"

    def test_bool_type(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_type(CellType.BOOL).set_value(1).construct_cell(1, 1)
        assert session.active_sheet["A1"].value is True

    def test_none_value_is_not_coerced(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_type(CellType.NUMERIC).set_value(None).construct_cell(1, 1)
        assert session.active_sheet["A1"].value is None

    def test_known_tag_string_becomes_cell_type(self, cell: Cell) -> None:
        assert cell.set_type("n").get_type() is CellType.NUMERIC

    def test_unknown_type_tag_is_stored_and_not_applied(self, cell: Cell, session: WorkbookSession) -> None:
        cell.set_type("d").set_value("hello").construct_cell(1, 1)
        assert cell.get_type() == "d"
        assert session.active_sheet["A1"].value == "hello"
        assert session.active_sheet["A1"].data_type == "s"

    def test_writes_to_active_sheet(self, cell: Cell, session: WorkbookSession) -> None:
        session.select_sheet("Other")
        cell.set_value("here").construct_cell(1, 1)
        assert session.workbook["Other"]["A1"].value == "here"
        assert session.workbook["Sheet"]["A1"].value is None


class TestComments:
    """Tests for cell comments."""

    def test_comment_is_attached(self, cell: Cell, session: WorkbookSession) -> None:
        cell.construct_cell_comment(1, 1, "Check this")
        comment = session.active_sheet["A1"].comment
        assert comment.text == "Check this"
        assert comment.author == "xlreports"

    def test_second_comment_is_appended(self, cell: Cell, session: WorkbookSession) -> None:
        cell.construct_cell_comment(2, 2, "first")
        cell.construct_cell_comment(2, 2, "second")
        assert session.active_sheet["B2"].comment.text == "first\nsecond"

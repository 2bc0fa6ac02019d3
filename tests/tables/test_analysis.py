"""Unit tests for table diagnostics and chunk inspection."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from report_tables.tables.analysis import analyze, analyze_text, inspect_chunk, is_header_likely
from report_tables.tables.schema import TableRegion


def make_region(*lines: str, title: str | None = None) -> TableRegion:
    """Build a TableRegion starting at line 0."""
    return TableRegion(start_line=0, end_line=len(lines) - 1, title=title, raw_lines=lines)


# ===========================================================================
# is_header_likely tests
# ===========================================================================


class TestHeaderLikely:

    def test_text_cell_present(self):
        assert is_header_likely(["Şube", "120"]) is True

    def test_all_numeric(self):
        assert is_header_likely(["1", "2"]) is False

    def test_grouped_numbers(self):
        assert is_header_likely(["1.250,75", "3,5"]) is False


# ===========================================================================
# analyze tests
# ===========================================================================


class TestAnalyze:

    def test_well_formed_table(self):
        diag = analyze(make_region("| Şube | Tutar |", "|---|---|", "| A | 100 |", title="Ciro"))
        assert diag.title == "Ciro"
        assert (diag.row_count, diag.col_count) == (3, 2)
        assert diag.has_separator_row is True
        assert diag.separator_row_index == 1
        assert diag.is_first_row_header_likely is True
        assert diag.warning is None

    def test_numeric_first_row(self):
        diag = analyze(make_region("| 1 | 2 |", "|---|---|", "| 3 | 4 |"))
        assert diag.is_first_row_header_likely is False

    def test_missing_separator_warns(self):
        diag = analyze(make_region("| A | B |", "| 1 | 2 |"))
        assert diag.has_separator_row is False
        assert diag.separator_row_index is None
        assert diag.warning == "Separator row not found! 2 rows, 2 columns."

    def test_missing_separator_skips_header_check(self):
        diag = analyze(make_region("| 1 | 2 |", "| 3 | 4 |"))
        assert diag.is_first_row_header_likely is True

    def test_single_line_has_no_warning(self):
        diag = analyze(make_region("| A | B |"))
        assert diag.has_separator_row is False
        assert diag.warning is None
        assert diag.row_count == 1

    def test_column_count_from_first_line(self):
        diag = analyze(make_region("| A | | C |", "|---|---|---|"))
        assert diag.col_count == 2


class TestAnalyzeText:

    def test_reports_unrepaired_tables(self):
        results = analyze_text("Sales | A | B |\n| 1 | 2 |\n\ntext\n\n| X |\n|---|\n")
        assert len(results) == 2
        (first, first_diag), (_, second_diag) = results
        assert first.title == "Sales"
        assert first_diag.warning is not None
        assert second_diag.warning is None

    def test_no_tables(self):
        assert not analyze_text("plain report")


# ===========================================================================
# inspect_chunk tests
# ===========================================================================


class TestInspectChunk:

    def test_inconsistent_columns(self):
        notes = inspect_chunk("| A | B |\n| 1 |\n")
        assert notes == ["Inconsistent column counts: [2, 1]"]

    def test_unterminated_row(self):
        notes = inspect_chunk("| A |\n| 1")
        assert notes == ["Possible unterminated table row"]

    def test_clean_chunk(self):
        assert not inspect_chunk("| A |\n|---|\n| 1 |\n")

    def test_plain_text(self):
        assert not inspect_chunk("Revenue grew.\nCosts fell.")

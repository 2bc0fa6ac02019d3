"""End-to-end tests for the table pipeline run() entry point."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from report_tables.tables.grid import build
from report_tables.tables.pipeline import run

REPORT = """\
# Monthly Report

Revenue summary by branch:
| Branch | Revenue |
| Kadıköy | 1.200 |
| Beşiktaş | 950 |

Notes follow.

Costs | Item | Amount |
|---|---|
| Rent | 300 |

###Trend
| Month | Change |
| Jan | +5 |
"""


class TestRunEndToEnd:

    def test_heading_then_table(self):
        carrier, tables = run("### Ciro\n| Şube | Tutar |\n| A | 100 |\n| B | 200 |\n")
        assert carrier.text == "### Ciro\n\n⟦TABLE:0⟧\n"
        assert tables[0].raw_lines == ("| Şube | Tutar |", "|---|---|", "| A | 100 |", "| B | 200 |")

        grid = build(tables[0])
        assert grid.header_labels == ("Şube", "Tutar")
        assert grid.rows == (("A", "100"), ("B", "200"))

    def test_fused_title(self):
        carrier, tables = run("Sales | A | B |\n| 1 | 2 |\n\nDone")
        assert carrier.text == "⟦TABLE:0⟧\n\nDone"
        assert tables[0].title == "Sales"
        assert tables[0].raw_lines == ("| A | B |", "|---|---|", "| 1 | 2 |")

    def test_empty(self):
        carrier, tables = run("")
        assert carrier.text == ""
        assert not tables

    def test_rejects_non_text(self):
        with pytest.raises(TypeError):
            run(None)


class TestRunReport:

    def test_markers_match_tables(self):
        carrier, tables = run(REPORT)
        assert len(tables) == 3
        assert carrier.markers() == [0, 1, 2]
        for ordinal in range(3):
            assert carrier.text.count(f"⟦TABLE:{ordinal}⟧") == 1

    def test_titles(self):
        _, tables = run(REPORT)
        assert [t.title for t in tables] == ["Revenue summary by branch:", "Costs", None]

    def test_every_table_has_separator(self):
        _, tables = run(REPORT)
        for table in tables:
            assert table.raw_lines[1].replace("|", "").replace("-", "") == ""

    def test_prose_kept(self):
        carrier, _ = run(REPORT)
        assert carrier.text.startswith("# Monthly Report\n\n⟦TABLE:0⟧\n\nNotes follow.")
        assert "### Trend\n\n⟦TABLE:2⟧" in carrier.text

    def test_grids_equal_width(self):
        _, tables = run(REPORT)
        for table in tables:
            grid = build(table)
            assert all(len(row) == len(grid.header_labels) for row in grid.rows)

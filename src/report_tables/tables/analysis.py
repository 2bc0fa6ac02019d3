"""Structural diagnostics for table regions.

Feeds the debug view: row/column counts, separator presence, whether the
first row looks like a header, and an advisory warning.  Diagnostics never
change the carrier output.
"""

import logging

from report_tables.tables.classifiers import (
    count_cells,
    find_separator,
    is_numeric_cell,
    is_table_line,
    non_empty_cells,
)
from report_tables.tables.detection import detect
from report_tables.tables.scanner import scan
from report_tables.tables.schema import TableDiagnostics, TableRegion

logger = logging.getLogger(__name__)


def is_header_likely(cells: list[str]) -> bool:
    """Return True if at least one cell is not a plain number."""
    return any(not is_numeric_cell(cell) for cell in cells)


def analyze(region: TableRegion) -> TableDiagnostics:
    """Return diagnostics for one raw (possibly unrepaired) table region.

    A multi-line region without a separator row reports the anomaly and stops
    there: the header check is skipped and the first row is assumed to be the
    header, which is what the grid builder will do with it.
    """
    lines = region.raw_lines
    row_count = len(lines)
    col_count = count_cells(lines[0])
    separator_idx = find_separator(lines)

    if row_count > 1 and separator_idx is None:
        return TableDiagnostics(
            title=region.title,
            row_count=row_count,
            col_count=col_count,
            has_separator_row=False,
            separator_row_index=None,
            is_first_row_header_likely=True,
            warning=f"Separator row not found! {row_count} rows, {col_count} columns.",
        )

    return TableDiagnostics(
        title=region.title,
        row_count=row_count,
        col_count=col_count,
        has_separator_row=separator_idx is not None,
        separator_row_index=separator_idx,
        is_first_row_header_likely=is_header_likely(non_empty_cells(lines[0])),
    )


def analyze_text(text: str) -> list[tuple[TableRegion, TableDiagnostics]]:
    """Detect tables in raw, unrepaired *text* and diagnose each one."""
    return [(region, analyze(region)) for region in detect(scan(text))]


def inspect_chunk(chunk: str) -> list[str]:
    """Return advisory notes about table fragments inside one streamed chunk.

    Flags table lines with differing cell counts, and a chunk whose last line
    contains a pipe but has not been closed with one (a row still arriving).
    """
    notes: list[str] = []
    if "|" not in chunk or "\n" not in chunk:
        return notes

    counts = [count_cells(line) for line in chunk.split("\n") if is_table_line(line)]
    if counts and any(count != counts[0] for count in counts):
        notes.append(f"Inconsistent column counts: {counts}")

    tail = chunk.strip()
    if "\n" in tail and not tail.endswith("|"):
        notes.append("Possible unterminated table row")
    return notes

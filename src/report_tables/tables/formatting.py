"""Markdown and debug-view rendering for extracted tables.

render_markdown() turns a built grid back into a clean Markdown table (used
when exporting a report).  format_diagnostics() produces the plain-text
summary shown in the debug view's table analysis tab.
"""

from report_tables.tables.schema import TableCellGrid, TableDiagnostics, TableRegion


# ─── Markdown Rendering ──────────────────────────────────────────────────────


def render_markdown(grid: TableCellGrid, title: str | None = None) -> str:
    """Convert a TableCellGrid into a well-formed Markdown table string."""
    lines: list[str] = []
    if title:
        lines.extend([f"**{title}**", ""])

    # Column header row + separator
    lines.append("| " + " | ".join(grid.header_labels) + " |")
    lines.append("| " + " | ".join(["---"] * len(grid.header_labels)) + " |")

    # Data rows
    for row in grid.rows:
        lines.append("| " + " | ".join(row) + " |")

    return "\n".join(lines)


# ─── Debug View ──────────────────────────────────────────────────────────────


def format_diagnostics(index: int, region: TableRegion, diagnostics: TableDiagnostics) -> str:
    """Render one table's diagnostics the way the debug view lists them."""
    lines = [f"Table {index + 1} ({diagnostics.row_count} rows)", region.markdown()]

    if diagnostics.has_separator_row:
        lines.append(f"Table structure valid. {diagnostics.row_count} rows, {diagnostics.col_count} columns.")
    else:
        lines.append(f"Separator row not found! {diagnostics.row_count} rows, {diagnostics.col_count} columns.")

    if diagnostics.title:
        lines.append(f"Title: {diagnostics.title}")
    if not diagnostics.is_first_row_header_likely:
        lines.append("First row not recognised as a header. Column labels will be generated.")
    if diagnostics.warning:
        lines.append(diagnostics.warning)

    return "\n".join(lines)

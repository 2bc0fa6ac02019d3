"""Build header/row grids from table regions for the table renderer."""

from collections.abc import Iterable, Mapping

from report_tables.config import column_label
from report_tables.tables.classifiers import find_separator, is_blank_label, split_row
from report_tables.tables.schema import TableCellGrid, TableRegion


def _header_labels(header: list[str], max_columns: int) -> list[str]:
    """Replace blank labels and pad to *max_columns* with 'Column <k>' names."""
    labels = [column_label(pos) if is_blank_label(label) else label for pos, label in enumerate(header, start=1)]
    while len(labels) < max_columns:
        labels.append(column_label(len(labels) + 1))
    return labels


def build(region: TableRegion) -> TableCellGrid:
    """Convert a (normally repaired) region into a header plus equal-width rows.

    With a separator row, data rows are the rows after it; without one, every
    row after the header is data (a single-line region yields no rows).
    """
    rows = [split_row(line) for line in region.raw_lines]
    header = rows[0]
    separator_idx = find_separator(region.raw_lines)
    data_rows = rows[separator_idx + 1 :] if separator_idx is not None else rows[1:]

    max_columns = max(len(row) for row in [header, *data_rows])
    return TableCellGrid(
        header_labels=tuple(_header_labels(header, max_columns)),
        rows=tuple(tuple(row + [""] * (max_columns - len(row))) for row in data_rows),
    )


def build_from_records(records: Iterable[Mapping]) -> TableCellGrid:
    """Build a grid from structured rows (e.g. raw query data sent alongside a report).

    Columns are the union of all keys in first-seen order; missing values are
    rendered as empty cells.
    """
    records = list(records)
    keys: list[str] = []
    for record in records:
        for key in record:
            if str(key) not in keys:
                keys.append(str(key))

    rows = []
    for record in records:
        as_text = {str(key): value for key, value in record.items()}
        rows.append(tuple("" if as_text.get(key) is None else str(as_text[key]) for key in keys))
    return TableCellGrid(header_labels=tuple(_header_labels(keys, len(keys))), rows=tuple(rows))

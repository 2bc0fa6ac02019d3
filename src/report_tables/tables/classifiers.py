"""Line and cell classification helpers for Markdown table handling.

Each function takes a raw line or cell string and classifies it, or splits it
into cells.  Lines are trimmed here, never by the caller, so stored lines keep
their original formatting.
"""

from report_tables.tables.patterns import (
    BLANK_LABEL_RE,
    NUMBER_PUNCTUATION_RE,
    PURE_NUMBER_RE,
    SEPARATOR_CHARS_RE,
)


def is_table_line(line: str) -> bool:
    """Return True if the trimmed line starts and ends with a pipe."""
    stripped = line.strip()
    return stripped.startswith("|") and stripped.endswith("|")


def is_fused_header(line: str) -> bool:
    """Return True for a title glued onto a header row, e.g. 'Sales | A | B |'."""
    stripped = line.strip()
    return "|" in stripped and stripped.endswith("|") and not stripped.startswith("|")


def split_fused_header(line: str) -> tuple[str, str]:
    """Split a fused line at its first pipe into (title, header_line).

    'Sales | A | B |' -> ('Sales', '| A | B |')
    """
    stripped = line.strip()
    cut = stripped.index("|")
    return stripped[:cut].strip(), stripped[cut:]


def is_separator_row(line: str) -> bool:
    """Return True if the line holds nothing but pipes, dashes, colons and whitespace."""
    return SEPARATOR_CHARS_RE.sub("", line) == ""


def find_separator(lines: list[str] | tuple[str, ...]) -> int | None:
    """Return the index of the first separator row after the header line, or None."""
    for idx in range(1, len(lines)):
        if is_separator_row(lines[idx]):
            return idx
    return None


def count_cells(line: str) -> int:
    """Count non-empty cells in a pipe-delimited line."""
    return len(non_empty_cells(line))


def non_empty_cells(line: str) -> list[str]:
    """Return the trimmed, non-empty segments of a pipe-delimited line."""
    return [cell.strip() for cell in line.split("|") if cell.strip()]


def split_row(line: str) -> list[str]:
    """Split a table line into trimmed cells, dropping the boundary-pipe segments.

    Inner empty cells are kept: '| a | | b |' -> ['a', '', 'b'].
    """
    segments = line.strip().split("|")
    # A leading/trailing pipe yields an empty segment at that end
    if segments and segments[0] == "":
        segments = segments[1:]
    if segments and segments[-1] == "":
        segments = segments[:-1]
    return [cell.strip() for cell in segments]


def is_numeric_cell(cell: str) -> bool:
    """Return True if the cell is a plain number once ',' and '.' are removed."""
    return bool(PURE_NUMBER_RE.match(NUMBER_PUNCTUATION_RE.sub("", cell.strip())))


def is_blank_label(label: str) -> bool:
    """Return True for header labels that are empty or only dashes/colons/whitespace."""
    return bool(BLANK_LABEL_RE.match(label))

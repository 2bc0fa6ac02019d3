"""Table region detection over a scanned Document.

A single forward pass finds every run of consecutive pipe-delimited lines and
attaches a title when one is available: either a title fused onto the first
header line ('Sales | A | B |') or a plain-text line directly above the run.
"""

import logging

from report_tables.tables.classifiers import is_fused_header, is_table_line, split_fused_header
from report_tables.tables.schema import Document, TableRegion

logger = logging.getLogger(__name__)


# ─── Title Heuristics ────────────────────────────────────────────────────────


def _preceding_title(lines: tuple[str, ...], idx: int) -> str | None:
    """Return the trimmed line above *idx* if it can serve as a table title."""
    if idx == 0:
        return None
    above = lines[idx - 1].strip()
    if not above or above.startswith("|"):
        return None
    return above


def _lookahead_title(lines: tuple[str, ...], idx: int) -> str | None:
    """Return line *idx* as a candidate title when the next line opens a table."""
    if idx + 1 >= len(lines) or not is_table_line(lines[idx + 1]):
        return None
    current = lines[idx].strip()
    if not current or current.startswith("|"):
        return None
    return current


# ─── Region Detection ────────────────────────────────────────────────────────


def _emit(regions: list[TableRegion], start: int, raw: list[str], title: str | None, title_line: int | None) -> None:
    """Append the accumulated run as a TableRegion (zero-line runs are skipped)."""
    if not raw:
        return
    regions.append(
        TableRegion(
            start_line=start,
            end_line=start + len(raw) - 1,
            title=title or None,
            title_line=title_line,
            raw_lines=tuple(raw),
        )
    )


def detect(document: Document) -> list[TableRegion]:
    """Return every table region in *document*, in line order.

    The fused title+header check runs before the generic table-line check, so
    'Sales | A | B |' opens a region titled 'Sales' whose first raw line is
    '| A | B |'.  A region closes at the first non-table line or at the end of
    the document; a trailing run that is still growing in a stream is simply
    re-detected with its extra lines on the next pass.
    """
    lines = document.lines
    regions: list[TableRegion] = []

    in_table = False
    start = 0
    raw: list[str] = []
    title: str | None = None
    title_line: int | None = None
    candidate: str | None = None  # lookahead title, valid for the next line only

    for i, line in enumerate(lines):
        # A non-table line closes any open region
        if in_table and not is_table_line(line):
            _emit(regions, start, raw, title, title_line)
            in_table, raw, title, title_line = False, [], None, None

        # Fused title + header row starts a new region on this very line
        if not in_table and is_fused_header(line):
            fused_title, header = split_fused_header(line)
            in_table, start, raw = True, i, [header]
            title, title_line, candidate = fused_title, None, None
            continue

        if is_table_line(line):
            if not in_table:
                in_table, start, raw = True, i, []
                title = _preceding_title(lines, i) or candidate
                title_line = i - 1 if title else None
            raw.append(line)
            candidate = None
            continue

        candidate = _lookahead_title(lines, i)

    if in_table:
        _emit(regions, start, raw, title, title_line)

    logger.debug("Detected %d table regions in %d lines", len(regions), len(lines))
    return regions

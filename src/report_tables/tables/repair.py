"""Repair common Markdown malformations in streamed report text.

Two kinds of repair are applied:

  - Prose fixes: glued heading markers ('###Title'), glued list bullets
    ('-item'), and a missing blank line between a heading and a table that
    follows it (the prose renderer would otherwise merge the two).
  - Table fixes: a title fused onto its header row is split onto its own
    line, and a multi-line table with no separator row gets a synthesized
    '|---|---|' row after the header.

All repairs are idempotent, so running normalize() on already-clean text
returns it unchanged.
"""

import logging

from report_tables.tables.classifiers import count_cells, find_separator
from report_tables.tables.detection import detect
from report_tables.tables.patterns import GLUED_BULLET_RE, GLUED_HEADING_RE, HEADING_BEFORE_TABLE_RE
from report_tables.tables.scanner import scan
from report_tables.tables.schema import TableRegion

logger = logging.getLogger(__name__)


# ─── Separator Repair ────────────────────────────────────────────────────────


def synthesize_separator(header_line: str) -> str:
    """Build a separator row with one '---' per non-empty header cell."""
    n_cells = max(count_cells(header_line), 1)
    return "|" + "|".join(["---"] * n_cells) + "|"


def ensure_separator(region: TableRegion) -> TableRegion:
    """Return *region* with a separator row as line 1 if a multi-line region lacks one.

    Single-line regions are header-only and are returned unchanged, as are
    regions that already have a separator anywhere after the header.  The
    returned region keeps ``start_line``; ``end_line`` grows with the inserted
    row, i.e. it is expressed in the coordinates of the repaired text.
    """
    lines = region.raw_lines
    if len(lines) < 2 or find_separator(lines) is not None:
        return region

    separator = synthesize_separator(lines[0])
    repaired = (lines[0], separator, *lines[1:])
    logger.debug("Synthesized separator %s for table at line %d", separator, region.start_line)
    return TableRegion(
        start_line=region.start_line,
        end_line=region.start_line + len(repaired) - 1,
        title=region.title,
        title_line=region.title_line,
        raw_lines=repaired,
    )


def repair_tables(text: str) -> str:
    """Split fused title+header lines and add missing separator rows throughout *text*."""
    document = scan(text)
    lines = list(document.lines)

    # Back-to-front so earlier line offsets stay valid while splicing
    for region in reversed(detect(document)):
        replacement = list(ensure_separator(region).raw_lines)
        if region.title and region.title_line is None:
            # Fused title: give it its own line above the header
            replacement.insert(0, region.title)
            logger.debug("Split fused title %r off header at line %d", region.title, region.start_line)
        lines[region.start_line : region.end_line + 1] = replacement

    return "\n".join(lines)


# ─── Prose Repair ────────────────────────────────────────────────────────────


def fix_heading_markers(text: str) -> str:
    """'###Title' -> '### Title' for one to three leading hashes."""
    return GLUED_HEADING_RE.sub(r"\1 ", text)


def fix_list_bullets(text: str) -> str:
    """'\\n-item' -> '\\n- item' for dashes glued to a word character."""
    return GLUED_BULLET_RE.sub("\n- ", text)


def fix_heading_table_spacing(text: str) -> str:
    """Insert a blank line between a heading and a table line directly below it."""
    return HEADING_BEFORE_TABLE_RE.sub("\\1\n\n", text)


def normalize(text: str) -> str:
    """Apply every prose and table repair to the whole report text."""
    if not isinstance(text, str):
        raise TypeError(f"normalize() expects str, got {type(text).__name__}")
    if not text:
        return ""

    cleaned = fix_heading_markers(text)
    cleaned = fix_list_bullets(cleaned)
    cleaned = repair_tables(cleaned)
    # Runs after the table pass so split-off titles that are headings get their spacing too
    cleaned = fix_heading_table_spacing(cleaned)
    return cleaned

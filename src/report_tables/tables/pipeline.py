"""Main table-extraction pipeline step.

Orchestrates one full pass over a report buffer: repair, scan, detect and
substitute.  The streaming reconciler calls run() on the whole buffer for
every publish; reprocessing from scratch keeps the result correct however the
upstream generator splits tables and headings across chunks.
"""

import logging

from report_tables.tables.analysis import analyze
from report_tables.tables.detection import detect
from report_tables.tables.repair import normalize
from report_tables.tables.scanner import scan
from report_tables.tables.schema import CarrierDocument, TableRegion
from report_tables.tables.substitution import substitute

logger = logging.getLogger(__name__)


def run(text: str) -> tuple[CarrierDocument, list[TableRegion]]:
    """Repair *text*, extract its tables, and return (carrier document, tables).

    Table ``n`` in the returned list is the one referenced by the ``⟦TABLE:n⟧``
    marker in the carrier text.  Every returned region is repaired, so
    multi-line regions always carry a separator row.
    """
    # ── 1. Prose and table repairs ───────────────────────────────────────
    repaired = normalize(text)

    # ── 2. Locate every table in the repaired text ──────────────────────
    document = scan(repaired)
    regions = detect(document)

    # ── 3. Swap tables for markers ───────────────────────────────────────
    carrier, tables = substitute(document, regions)

    logger.info("Extracted %d tables from %d lines", len(tables), len(document))
    for ordinal, table in enumerate(tables):
        diagnostics = analyze(table)
        logger.debug("Table %d: %d rows, %d columns, title=%r", ordinal, diagnostics.row_count, diagnostics.col_count, table.title)
    return carrier, tables

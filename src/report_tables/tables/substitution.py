"""Replace detected table regions with ordinal marker lines.

The result is a carrier document that a generic Markdown renderer can handle,
plus the list of extracted regions addressed by marker ordinal.
"""

import logging

from report_tables.config import marker
from report_tables.tables.schema import CarrierDocument, Document, TableRegion

logger = logging.getLogger(__name__)


def substitute(document: Document, regions: list[TableRegion]) -> tuple[CarrierDocument, list[TableRegion]]:
    """Swap each region (and its standalone title line) for a '⟦TABLE:n⟧' line.

    Ordinals follow discovery order.  Regions are substituted last-to-first by
    start line so the offsets of earlier regions are never invalidated.  Each
    marker occupies its own line, so it is separated from any text before or
    after it by exactly the line break that bounded the removed span.
    """
    numbered = list(enumerate(regions))
    lines = list(document.lines)

    for ordinal, region in sorted(numbered, key=lambda item: item[1].start_line, reverse=True):
        lines[region.first_line : region.end_line + 1] = [marker(ordinal)]

    if regions:
        logger.debug("Substituted %d tables into carrier text", len(regions))
    return CarrierDocument(text="\n".join(lines)), [region for _, region in numbered]

"""Shared configuration for the report table engine.

Timing values can be overridden through environment variables (or a ``.env``
file in the project root); everything else is a fixed constant.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Coalescing delay between the last received chunk and the next publish
DEBOUNCE_DELAY = int(os.getenv("REPORT_TABLES_DEBOUNCE_MS", "50")) / 1000

# Smooth scroll-to-bottom animation
SCROLL_DURATION = int(os.getenv("REPORT_TABLES_SCROLL_MS", "500")) / 1000
FRAME_INTERVAL = int(os.getenv("REPORT_TABLES_FRAME_MS", "16")) / 1000

# Single-line token that stands in for an extracted table in the carrier text
MARKER_TEMPLATE = "⟦TABLE:{}⟧"

# Label for header cells that are missing or blank
COLUMN_LABEL_TEMPLATE = "Column {}"


def marker(ordinal: int) -> str:
    """Return the placeholder token for the table with the given ordinal."""
    return MARKER_TEMPLATE.format(ordinal)


def column_label(position: int) -> str:
    """Return the synthetic header label for a 1-based column position."""
    return COLUMN_LABEL_TEMPLATE.format(position)

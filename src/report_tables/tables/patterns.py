"""Compiled regex patterns for Markdown table and prose repair.

Used by classifiers.py (line classification) and repair.py (prose fixes).
All patterns operate on single lines unless compiled with re.MULTILINE.
"""

import re

# ─── Table Line Patterns ─────────────────────────────────────────────────────

# Characters allowed in a separator row such as "| --- | :---: |"
SEPARATOR_CHARS_RE = re.compile(r"[|\s\-:]")

# Header label made only of dashes, colons and whitespace (or nothing at all)
BLANK_LABEL_RE = re.compile(r"^[\s\-:]*$")

# Marker token in carrier text, e.g. "⟦TABLE:3⟧"
MARKER_RE = re.compile(r"⟦TABLE:(\d+)⟧")


# ─── Cell Patterns ───────────────────────────────────────────────────────────

# Grouping and decimal punctuation stripped before the numeric check ("1.250,75")
NUMBER_PUNCTUATION_RE = re.compile(r"[,.]")

# Signed integer once punctuation is removed
PURE_NUMBER_RE = re.compile(r"^[+-]?\d+$")


# ─── Prose Repair Patterns ───────────────────────────────────────────────────

# "###Title" at line start (1-3 hashes glued to text)
GLUED_HEADING_RE = re.compile(r"^(#{1,3})(?=[^\s#])", re.MULTILINE)

# "\n-item" list bullet glued to its text
GLUED_BULLET_RE = re.compile(r"\n-(?=\w)")

# Heading line directly followed by a pipe-delimited line (no blank line between)
HEADING_BEFORE_TABLE_RE = re.compile(r"^(#{1,6}[ \t]+[^\n]+)\n(?=[ \t]*\|[^\n]*\|[ \t]*$)", re.MULTILINE)

"""Pydantic models for scanned documents, table regions, grids and diagnostics.

Every model is frozen: a scan produces fresh values each time the stream
buffer is reprocessed, and nothing downstream mutates them.  Validators
enforce the structural invariants so a broken region fails loudly at the
point it is built rather than at render time.
"""

from pydantic import BaseModel, ConfigDict, model_validator

from report_tables.config import marker
from report_tables.tables.classifiers import is_table_line
from report_tables.tables.patterns import MARKER_RE


class Document(BaseModel):
    """Immutable sequence of text lines, indexed 0..N-1."""

    model_config = ConfigDict(frozen=True)

    lines: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def text(self) -> str:
        """Join the lines back into the original text."""
        return "\n".join(self.lines)


class TableRegion(BaseModel):
    """A contiguous run of pipe-delimited lines recognised as one table.

    ``title_line`` is the index of a standalone title line directly above the
    run; a title split off a fused header line has ``title`` set but no
    ``title_line`` since it shares ``start_line`` with the header.
    """

    model_config = ConfigDict(frozen=True)

    start_line: int
    end_line: int
    title: str | None = None
    title_line: int | None = None
    raw_lines: tuple[str, ...]

    @model_validator(mode="after")
    def validate_span(self) -> "TableRegion":
        """Ensure the raw lines are table lines and match the line span."""
        if not self.raw_lines:
            raise ValueError("A table region needs at least one line")
        if self.end_line - self.start_line + 1 != len(self.raw_lines):
            raise ValueError(
                f"Span {self.start_line}..{self.end_line} does not match {len(self.raw_lines)} raw lines"
            )
        for i, line in enumerate(self.raw_lines):
            if not is_table_line(line):
                raise ValueError(f"Raw line {i} is not pipe-delimited: {line!r}")
        if self.title_line is not None and self.title_line != self.start_line - 1:
            raise ValueError(f"Title line {self.title_line} is not directly above line {self.start_line}")
        return self

    @property
    def first_line(self) -> int:
        """First document line covered by the region, including a standalone title."""
        return self.title_line if self.title_line is not None else self.start_line

    def markdown(self) -> str:
        """Return the raw table lines as one Markdown block."""
        return "\n".join(self.raw_lines)


class TableCellGrid(BaseModel):
    """Header labels plus equal-width data rows, ready for a table renderer."""

    model_config = ConfigDict(frozen=True)

    header_labels: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    @model_validator(mode="after")
    def validate_row_widths(self) -> "TableCellGrid":
        """Ensure every row has exactly len(header_labels) cells and no label is blank."""
        n_cols = len(self.header_labels)
        for i, row in enumerate(self.rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching header_labels)")
        if any(not label for label in self.header_labels):
            raise ValueError("Header labels must not be empty")
        return self

    @property
    def max_columns(self) -> int:
        return len(self.header_labels)


class TableDiagnostics(BaseModel):
    """Structural facts about one raw table region, for the debug view."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    row_count: int
    col_count: int
    has_separator_row: bool
    separator_row_index: int | None = None
    is_first_row_header_likely: bool
    warning: str | None = None


class CarrierDocument(BaseModel):
    """Report text with every extracted table replaced by a marker line."""

    model_config = ConfigDict(frozen=True)

    text: str = ""

    def markers(self) -> list[int]:
        """Return marker ordinals in order of appearance."""
        return [int(match.group(1)) for match in MARKER_RE.finditer(self.text)]

    def segments(self) -> list[tuple[str, str | int]]:
        """Split the text into ('text', prose) and ('table', ordinal) segments.

        Whitespace-only prose between markers is dropped, since the prose
        renderer would produce nothing for it.
        """
        parts = MARKER_RE.split(self.text)
        segments: list[tuple[str, str | int]] = []
        for idx, part in enumerate(parts):
            # re.split puts captured ordinals at odd indices
            if idx % 2 == 1:
                segments.append(("table", int(part)))
            elif part.strip():
                segments.append(("text", part))
        return segments

    @staticmethod
    def marker(ordinal: int) -> str:
        return marker(ordinal)

"""Unit tests for model invariants in the schema module."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from report_tables.tables.schema import Document, TableRegion


class TestTableRegion:

    def test_valid_region(self):
        region = TableRegion(start_line=2, end_line=3, title="T", title_line=1, raw_lines=("| A |", "| 1 |"))
        assert region.first_line == 1
        assert region.markdown() == "| A |\n| 1 |"

    def test_first_line_without_title(self):
        region = TableRegion(start_line=2, end_line=2, raw_lines=("| A |",))
        assert region.first_line == 2

    def test_span_mismatch(self):
        with pytest.raises(ValidationError):
            TableRegion(start_line=0, end_line=3, raw_lines=("| A |",))

    def test_non_table_line(self):
        with pytest.raises(ValidationError):
            TableRegion(start_line=0, end_line=0, raw_lines=("plain",))

    def test_empty_region(self):
        with pytest.raises(ValidationError):
            TableRegion(start_line=0, end_line=-1, raw_lines=())

    def test_title_line_must_be_adjacent(self):
        with pytest.raises(ValidationError):
            TableRegion(start_line=5, end_line=5, title="T", title_line=2, raw_lines=("| A |",))

    def test_frozen(self):
        region = TableRegion(start_line=0, end_line=0, raw_lines=("| A |",))
        with pytest.raises(ValidationError):
            region.start_line = 4


class TestDocument:

    def test_length_and_text(self):
        document = Document(lines=("a", "", "b"))
        assert len(document) == 3
        assert document.text() == "a\n\nb"

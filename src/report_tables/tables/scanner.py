"""Split raw report text into an immutable, line-indexed Document."""

from report_tables.tables.schema import Document


def scan(text: str) -> Document:
    """Split *text* on newlines.  Lines are stored untrimmed; empty text gives an empty Document."""
    if not isinstance(text, str):
        raise TypeError(f"scan() expects str, got {type(text).__name__}")
    if not text:
        return Document()
    return Document(lines=tuple(text.split("\n")))

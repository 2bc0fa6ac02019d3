"""Decode server-sent event payloads into stream events.

The analysis endpoint streams lines of the form ``data: {...json...}``.  A
payload carries either a piece of report text (``content``), an account
balance (``balance``), or the structured rows behind the report
(``rawData``).  Bad payloads are logged and skipped so one garbled frame does
not end the stream.
"""

import json
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "


class StreamEvent(BaseModel):
    """One decoded ``data:`` payload."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content: str | None = None
    balance: dict[str, Any] | None = None
    raw_data: Any = Field(default=None, alias="rawData")

    @property
    def has_content(self) -> bool:
        return bool(self.content)


def parse_event_line(line: str) -> StreamEvent | None:
    """Parse a single SSE line; returns None for non-data lines and bad payloads."""
    if not line.startswith(DATA_PREFIX):
        return None
    try:
        return StreamEvent.model_validate(json.loads(line[len(DATA_PREFIX) :]))
    except json.JSONDecodeError as exc:
        logger.error("Error parsing SSE message: %s", exc)
    except ValidationError as exc:
        logger.error("Unexpected SSE payload shape: %s", exc)
    return None


class EventDecoder:
    """Incremental decoder that tolerates data lines split across network reads.

    The text after the last newline is held back until the next feed() (or
    close()) completes it.
    """

    def __init__(self) -> None:
        self._pending = ""

    def feed(self, raw: str) -> list[StreamEvent]:
        """Decode every complete line in *raw* (plus any held-back prefix)."""
        lines = (self._pending + raw).split("\n")
        self._pending = lines.pop()
        return [event for event in map(parse_event_line, lines) if event is not None]

    def close(self) -> list[StreamEvent]:
        """Decode whatever is still held back and clear the decoder."""
        tail, self._pending = self._pending, ""
        event = parse_event_line(tail)
        return [event] if event is not None else []

    def reset(self) -> None:
        self._pending = ""


def decode_events(raw: str) -> list[StreamEvent]:
    """Decode a complete block of SSE text."""
    decoder = EventDecoder()
    return decoder.feed(raw) + decoder.close()

"""Streaming reconciler: owns the report buffer and publishes debounced snapshots.

Chunks are appended to the buffer as they arrive.  Each append cancels and
reschedules a short debounce timer; when the timer finally fires, the whole
buffer is run through the table pipeline and the resulting carrier document
and tables are handed to the UI callback.  A burst of chunks therefore yields
a single publish.

Reprocessing the full buffer (instead of diffing) is what makes partial
tables safe: a table whose last rows have not arrived yet is detected with
the rows it has, and is detected again, complete, on a later publish.

One reconciler serves one streamed document.  Its debounce timer and scroll
animation are instance state, so several documents can stream side by side
on the same event loop.
"""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

from pydantic import BaseModel, ConfigDict

from report_tables.config import DEBOUNCE_DELAY
from report_tables.streaming.events import EventDecoder, StreamEvent
from report_tables.streaming.scroll import ScrollAnimator
from report_tables.tables import pipeline
from report_tables.tables.analysis import inspect_chunk
from report_tables.tables.grid import build
from report_tables.tables.schema import CarrierDocument, TableCellGrid, TableRegion

logger = logging.getLogger(__name__)


class ReconcilerState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"
    PUBLISHED = "published"


class Publication(BaseModel):
    """One published snapshot of the stream."""

    model_config = ConfigDict(frozen=True)

    sequence: int
    buffer: str
    carrier: CarrierDocument
    tables: tuple[TableRegion, ...] = ()

    def grid(self, ordinal: int) -> TableCellGrid:
        """Build the renderable grid for the table behind marker *ordinal*."""
        return build(self.tables[ordinal])


class StreamReconciler:
    """Accumulates streamed text and publishes processed snapshots on a debounce."""

    def __init__(
        self,
        on_publish: Callable[[Publication], None],
        debounce_delay: float = DEBOUNCE_DELAY,
        scroller: ScrollAnimator | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        self.on_publish = on_publish
        self.debounce_delay = debounce_delay
        self.scroller = scroller
        self._loop = loop
        self._decoder = EventDecoder()
        self._buffer = ""
        self._timer: asyncio.TimerHandle | None = None
        self._sequence = 0
        self._published_length = 0
        self.state = ReconcilerState.IDLE
        self.last_publication: Publication | None = None

    # ─── Inspection ──────────────────────────────────────────────────────────

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def has_pending_publish(self) -> bool:
        return self._timer is not None

    @property
    def has_unpublished_text(self) -> bool:
        return len(self._buffer) != self._published_length

    # ─── Input ───────────────────────────────────────────────────────────────

    def feed(self, chunk: str) -> None:
        """Append *chunk* to the buffer and (re)start the debounce timer."""
        if not isinstance(chunk, str):
            raise TypeError(f"feed() expects str, got {type(chunk).__name__}")
        if not chunk:
            return

        self._buffer += chunk
        self.state = ReconcilerState.ACCUMULATING
        for note in inspect_chunk(chunk):
            logger.debug("Chunk note: %s", note)
        self._schedule()

    def feed_events(self, raw: str) -> list[StreamEvent]:
        """Decode SSE text, feed its report content, and return the other events."""
        others: list[StreamEvent] = []
        content = ""
        for event in self._decoder.feed(raw):
            if event.has_content:
                content += event.content
            else:
                others.append(event)
        # One feed per batch keeps the debounce to a single reschedule
        self.feed(content)
        return others

    # ─── Control ─────────────────────────────────────────────────────────────

    def flush(self) -> Publication | None:
        """Publish immediately if there is unpublished text (e.g. the stream ended)."""
        self._cancel_timer()
        if not self.has_unpublished_text:
            return None
        return self._publish()

    def reset(self) -> None:
        """Discard the buffer and any pending work before a new analysis run."""
        self._cancel_timer()
        if self.scroller is not None:
            self.scroller.cancel()
        self._decoder.reset()
        self._buffer = ""
        self._sequence = 0
        self._published_length = 0
        self.last_publication = None
        self.state = ReconcilerState.IDLE
        logger.info("Stream reset; waiting for a new run")

    # ─── Scheduling ──────────────────────────────────────────────────────────

    def _schedule(self) -> None:
        self._cancel_timer()
        loop = self._loop or asyncio.get_running_loop()
        self._timer = loop.call_later(self.debounce_delay, self._fire)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self) -> None:
        self._timer = None
        self._publish()

    def _publish(self) -> Publication:
        buffer = self._buffer
        carrier, tables = pipeline.run(buffer)
        self._sequence += 1
        publication = Publication(sequence=self._sequence, buffer=buffer, carrier=carrier, tables=tuple(tables))
        self._published_length = len(buffer)
        self.last_publication = publication
        self.state = ReconcilerState.PUBLISHED
        logger.debug("Publish #%d: %d chars, %d tables", publication.sequence, len(buffer), len(tables))

        self.on_publish(publication)
        if self.scroller is not None:
            self.scroller.trigger()

        # The callback may have fed more text; that text is already rescheduled
        if self.has_unpublished_text:
            self.state = ReconcilerState.ACCUMULATING
        return publication

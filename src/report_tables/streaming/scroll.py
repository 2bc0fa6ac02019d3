"""Smooth scroll-to-bottom animation for the report view.

The animation steps once per frame on the asyncio event loop and eases out
over a fixed duration.  Triggering it again cancels the frame in flight
before starting over from the current position.
"""

import asyncio
import logging

from report_tables.config import FRAME_INTERVAL, SCROLL_DURATION

logger = logging.getLogger(__name__)


def ease_out_cubic(progress: float) -> float:
    """Decelerating easing curve: fast start, gentle stop."""
    return 1 - (1 - progress) ** 3


class Viewport:
    """Scroll state of the container that displays the streamed report."""

    def __init__(self, content_height: float = 0.0, client_height: float = 0.0, scroll_top: float = 0.0):
        self.content_height = content_height
        self.client_height = client_height
        self.scroll_top = scroll_top

    @property
    def max_scroll(self) -> float:
        return max(self.content_height - self.client_height, 0.0)


class ScrollAnimator:
    """Cancellable per-frame animation moving a Viewport to its bottom."""

    def __init__(
        self,
        viewport: Viewport,
        duration: float = SCROLL_DURATION,
        frame_interval: float = FRAME_INTERVAL,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        self.viewport = viewport
        self.duration = duration
        self.frame_interval = frame_interval
        self._loop = loop
        self._frame: asyncio.TimerHandle | None = None
        self._start_time: float | None = None
        self._start_scroll = 0.0
        self._distance = 0.0

    @property
    def is_running(self) -> bool:
        return self._frame is not None

    def trigger(self) -> None:
        """Start animating from the current position to the current bottom."""
        self.cancel()
        self._start_scroll = self.viewport.scroll_top
        self._distance = self.viewport.max_scroll - self._start_scroll
        self._start_time = None
        self._schedule()

    def cancel(self) -> None:
        """Drop the pending frame, leaving the viewport where it is."""
        if self._frame is not None:
            self._frame.cancel()
            self._frame = None

    def _schedule(self) -> None:
        loop = self._loop or asyncio.get_running_loop()
        self._frame = loop.call_later(self.frame_interval, self._step)

    def _step(self) -> None:
        loop = self._loop or asyncio.get_running_loop()
        now = loop.time()
        if self._start_time is None:
            self._start_time = now

        elapsed = now - self._start_time
        progress = min(elapsed / self.duration, 1.0) if self.duration > 0 else 1.0
        self.viewport.scroll_top = self._start_scroll + self._distance * ease_out_cubic(progress)

        if progress < 1.0:
            self._schedule()
        else:
            self._frame = None
            logger.debug("Scroll animation finished at %.1f", self.viewport.scroll_top)

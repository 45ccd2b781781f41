"""Cooperative next-frame scheduler.

The host pumps ``run_frame`` once per display refresh. Callbacks requested
while a frame is running are deferred to the following frame, so a callback
that reschedules itself runs exactly once per frame.
"""

from __future__ import annotations

from typing import Callable

FrameCallback = Callable[[float], None]


class FrameScheduler:
    """Single-threaded "run on next frame" primitive."""

    def __init__(self) -> None:
        self._next_handle = 1
        self._queued: dict[int, FrameCallback] = {}
        self._running: dict[int, FrameCallback] = {}

    @property
    def pending(self) -> int:
        """Callbacks still waiting to run (this frame or the next)."""
        return len(self._queued) + len(self._running)

    def request(self, callback: FrameCallback) -> int:
        """Schedule ``callback`` for the next frame and return its handle."""
        handle = self._next_handle
        self._next_handle += 1
        self._queued[handle] = callback
        return handle

    def cancel(self, handle: int | None) -> None:
        """Drop a pending callback. Unknown or spent handles are ignored."""
        if handle is None:
            return
        self._queued.pop(handle, None)
        self._running.pop(handle, None)

    def run_frame(self, t: float) -> int:
        """Run every callback queued before this frame began.

        Returns the number of callbacks that actually ran.
        """
        self._running = self._queued
        self._queued = {}
        ran = 0
        # Pop one at a time so a cancel from an earlier callback still holds
        while self._running:
            handle = next(iter(self._running))
            callback = self._running.pop(handle)
            callback(t)
            ran += 1
        return ran

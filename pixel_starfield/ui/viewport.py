"""Viewport size and resize notifications."""

from __future__ import annotations

from typing import Callable

ResizeListener = Callable[[int, int], None]


class Viewport:
    """Current window size plus the listeners that follow it."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._listeners: list[ResizeListener] = []

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_resize_listener(self, listener: ResizeListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_resize_listener(self, listener: ResizeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def resize(self, width: int, height: int) -> None:
        """Record a new size and notify every listener."""
        self.width = width
        self.height = height
        for listener in list(self._listeners):
            listener(width, height)

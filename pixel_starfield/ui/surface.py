"""Transparent drawing layer that tracks the viewport size."""

from __future__ import annotations

import logging

import pygame

from ..constants import TRANSPARENT
from .viewport import Viewport

logger = logging.getLogger(__name__)


class SurfaceManager:
    """Owns the full-viewport star layer and its pixel dimensions."""

    def __init__(self, viewport: Viewport | None = None) -> None:
        self.viewport = viewport
        self.width = 0
        self.height = 0
        self.layer: pygame.Surface | None = None

    @property
    def available(self) -> bool:
        return self.viewport is not None

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def initialize(self) -> None:
        """Size the layer to the viewport as it is right now."""
        if self.viewport is None:
            return
        self._apply(*self.viewport.size)

    def on_viewport_resize(self, width: int, height: int) -> None:
        # A fresh layer is blank, so the next tick may flash empty once.
        logger.debug("Star layer resized to %dx%d", width, height)
        self._apply(width, height)

    def clear(self) -> None:
        if self.layer is not None:
            self.layer.fill(TRANSPARENT)

    def _apply(self, width: int, height: int) -> None:
        self.width = max(0, int(width))
        self.height = max(0, int(height))
        self.layer = pygame.Surface((self.width, self.height), pygame.SRCALPHA)

"""Falling, twinkling star field backdrop.

The engine paints onto its own transparent layer and reschedules itself
every frame until torn down. It never reads input and never touches
anything but the layer, so the host can composite it behind any content.
"""

from __future__ import annotations

import logging
import math
import random

import pygame

from ..constants import STAR_COLOR
from ..models.star import Star, seed_stars, twinkle
from ..scheduler import FrameScheduler
from ..settings import StarFieldSettings
from ..states import EngineState
from .surface import SurfaceManager
from .viewport import Viewport

logger = logging.getLogger(__name__)


class StarField:
    """Star field engine: surface, particle set and render loop."""

    def __init__(
        self,
        scheduler: FrameScheduler,
        settings: StarFieldSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.scheduler = scheduler
        self.settings = settings or StarFieldSettings()
        self.rng = rng or random.Random()
        self.surface = SurfaceManager()
        self.stars: list[Star] = []
        self.state = EngineState.UNINITIALIZED
        self.ticks = 0
        self.wraps = 0
        self._squares: dict[tuple[int, int], pygame.Surface] = {}
        self._frame_handle: int | None = None

    @property
    def running(self) -> bool:
        return self.state == EngineState.RUNNING

    @property
    def layer(self) -> pygame.Surface | None:
        return self.surface.layer

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def mount(self, viewport: Viewport | None) -> bool:
        """Attach to a viewport, seed the stars and start the loop.

        Returns False and stays uninitialized when there is no viewport
        yet; the caller is expected to mount again later. Stars seeded
        before any viewport was attached are reseeded against its size.
        """
        if self.state == EngineState.STOPPED:
            raise RuntimeError("star field was torn down; create a new one")
        if self.state == EngineState.RUNNING:
            return True
        if viewport is None:
            logger.debug("No viewport to mount on yet; star field stays idle")
            return False

        if self.state == EngineState.UNINITIALIZED or self.surface.viewport is not viewport:
            self.surface.viewport = viewport
            self.surface.initialize()
            self.seed()
        viewport.add_resize_listener(self.surface.on_viewport_resize)

        self.start()
        logger.info(
            "Star field mounted at %dx%d with %d stars",
            self.surface.width, self.surface.height, len(self.stars),
        )
        return True

    def seed(self) -> None:
        if self.state == EngineState.STOPPED:
            raise RuntimeError("star field was torn down; create a new one")
        s = self.settings
        self.stars = seed_stars(
            s.star_count,
            self.surface.width,
            self.surface.height,
            self.rng,
            size_thresholds=s.size_tier_thresholds,
            speed_range=s.speed_range,
        )
        self.state = EngineState.SEEDED

    def start(self) -> None:
        """Begin the per-frame loop."""
        if self.state == EngineState.STOPPED:
            raise RuntimeError("star field was torn down; create a new one")
        if self.state != EngineState.SEEDED:
            return
        self.state = EngineState.RUNNING
        self._frame_handle = self.scheduler.request(self._on_frame)

    def teardown(self) -> None:
        """Cancel the pending frame and stop following the viewport."""
        if self.state == EngineState.STOPPED:
            return
        self.scheduler.cancel(self._frame_handle)
        self._frame_handle = None
        if self.surface.viewport is not None:
            self.surface.viewport.remove_resize_listener(self.surface.on_viewport_resize)
        self.state = EngineState.STOPPED
        logger.info(
            "Star field stopped after %d ticks and %d wraps", self.ticks, self.wraps,
        )

    # ------------------------------------------------------------------
    # Render loop
    # ------------------------------------------------------------------

    def _on_frame(self, t: float) -> None:
        self._frame_handle = None
        if not self.running:
            return
        self.tick(t)
        if self.running:
            self._frame_handle = self.scheduler.request(self._on_frame)

    def tick(self, t: float) -> None:
        """Twinkle, paint and advance every star once."""
        s = self.settings
        width, height = self.surface.size
        layer = self.surface.layer
        self.surface.clear()

        for star in self.stars:
            star.opacity = twinkle(
                t, star.phase, s.twinkle_baseline, s.twinkle_amplitude, s.twinkle_rate,
            )
            if layer is not None:
                self.draw_star(layer, star)
            if star.advance(width, height, self.rng):
                self.wraps += 1

        self.ticks += 1

    def draw_star(self, layer: pygame.Surface, star: Star) -> None:
        """Blend a size x size square over whatever is already on the layer."""
        square = self._square(star.size, round(star.opacity * 255))
        layer.blit(square, (math.floor(star.x), math.floor(star.y)))

    def _square(self, size: int, alpha: int) -> pygame.Surface:
        key = (size, alpha)
        square = self._squares.get(key)
        if square is None:
            square = pygame.Surface((size, size), pygame.SRCALPHA)
            square.fill((*STAR_COLOR, alpha))
            self._squares[key] = square
        return square

    def draw(self, surface: pygame.Surface) -> None:
        """Composite the star layer onto ``surface``."""
        if self.surface.layer is not None:
            surface.blit(self.surface.layer, (0, 0))

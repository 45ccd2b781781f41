"""Pixel Starfield: window host for the star field backdrop."""

from __future__ import annotations

import logging
import os
import random

import pygame

from .constants import LOG_LEVEL_ENV, TITLE
from .scheduler import FrameScheduler
from .settings import StarFieldSettings, load_settings
from .ui.starfield import StarField
from .ui.viewport import Viewport


class Backdrop:
    """Resizable window that runs the star field behind everything else."""

    def __init__(
        self,
        settings: StarFieldSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or StarFieldSettings()
        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.settings.width, self.settings.height), pygame.RESIZABLE,
        )
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        # Shared components
        self.viewport = Viewport(*self.screen.get_size())
        self.scheduler = FrameScheduler()
        self.starfield = StarField(self.scheduler, self.settings, rng)
        self.starfield.mount(self.viewport)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        while self.running:
            self.step()
            self.clock.tick(self.settings.fps)
        self.shutdown()

    def step(self) -> None:
        """One host frame: events, then the frame callbacks, then paint."""
        self._handle_events()
        if not self.running:
            return
        self.scheduler.run_frame(pygame.time.get_ticks())
        self._draw()

    def shutdown(self) -> None:
        self.running = False
        self.starfield.teardown()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return

            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                return

            if event.type == pygame.VIDEORESIZE:
                self.viewport.resize(event.w, event.h)

            # Pointer events pass straight through; the backdrop ignores them

    def _draw(self) -> None:
        self.screen = pygame.display.get_surface() or self.screen
        self.screen.fill(self.settings.background)
        self.starfield.draw(self.screen)
        pygame.display.flip()


def main() -> None:
    """Entry point for the pixel-starfield command."""
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    backdrop = Backdrop(load_settings())
    backdrop.run()


if __name__ == "__main__":
    main()

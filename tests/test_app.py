import pygame
import pytest

from pixel_starfield.app import Backdrop
from pixel_starfield.settings import StarFieldSettings
from pixel_starfield.states import EngineState


@pytest.fixture
def backdrop(rng):
    app = Backdrop(StarFieldSettings(width=200, height=150, star_count=30), rng)
    yield app
    if app.starfield.state != EngineState.STOPPED:
        app.shutdown()


def test_backdrop_mounts_starfield(backdrop):
    assert backdrop.starfield.state == EngineState.RUNNING
    assert backdrop.starfield.surface.size == (200, 150)
    assert len(backdrop.starfield.stars) == 30


def test_step_runs_one_tick(backdrop):
    backdrop.step()
    backdrop.step()
    assert backdrop.starfield.ticks == 2


def test_resize_event_reaches_surface(backdrop):
    pygame.event.post(pygame.event.Event(pygame.VIDEORESIZE, w=400, h=300, size=(400, 300)))
    backdrop.step()
    assert backdrop.viewport.size == (400, 300)
    assert backdrop.starfield.surface.size == (400, 300)
    assert len(backdrop.starfield.stars) == 30


def test_pointer_events_leave_stars_alone(backdrop):
    for star in backdrop.starfield.stars:
        star.y = 0.0
    before = [(s.x, s.size, s.speed, s.phase) for s in backdrop.starfield.stars]
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=1))
    pygame.event.post(pygame.event.Event(pygame.MOUSEMOTION, pos=(50, 50), rel=(40, 40), buttons=(0, 0, 0)))
    backdrop.step()
    assert backdrop.running
    assert [(s.x, s.size, s.speed, s.phase) for s in backdrop.starfield.stars] == before


def test_quit_event_stops_run(backdrop):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    backdrop.run()
    assert not backdrop.running
    assert backdrop.starfield.state == EngineState.STOPPED
    assert backdrop.scheduler.pending == 0


def test_escape_stops_run(backdrop):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0, unicode="", scancode=0))
    backdrop.run()
    assert backdrop.starfield.state == EngineState.STOPPED

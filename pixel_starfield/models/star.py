"""Star particles: the fixed set of falling, twinkling points.

Stars are seeded once against the surface size and then recycled in place.
A star that falls past the bottom edge wraps to the top with a fresh
horizontal position; nothing else ever touches ``x`` after seeding.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from ..constants import (
    SIZE_TIER_THRESHOLDS,
    SPEED_RANGE,
    STAR_COUNT,
    TWINKLE_AMPLITUDE,
    TWINKLE_BASELINE,
    TWINKLE_RATE,
)


@dataclass
class Star:
    """A single background star."""

    x: float
    y: float
    size: int           # 1, 2 or 3 px square
    speed: float        # px per tick, fixed at creation
    opacity: float      # 0.0-1.0, rewritten every tick
    phase: float        # twinkle offset in radians

    def advance(self, width: int, height: int, rng: random.Random) -> bool:
        """Fall one tick. Returns True if the star wrapped to the top."""
        self.y += self.speed
        if self.y > height:
            self.y = 0.0
            self.x = rng.random() * width
            return True
        return False


def twinkle(
    t: float,
    phase: float,
    baseline: float = TWINKLE_BASELINE,
    amplitude: float = TWINKLE_AMPLITUDE,
    rate: float = TWINKLE_RATE,
) -> float:
    """Opacity at time ``t`` for a star with the given phase."""
    return baseline + amplitude * abs(math.sin(t * rate + phase))


def roll_size(
    rng: random.Random,
    thresholds: tuple[float, float] = SIZE_TIER_THRESHOLDS,
) -> int:
    """Weighted size tier draw. Large stars are rarest."""
    large, medium = thresholds
    if rng.random() > large:
        return 3
    if rng.random() > medium:
        return 2
    return 1


def make_star(
    width: int,
    height: int,
    rng: random.Random,
    size_thresholds: tuple[float, float] = SIZE_TIER_THRESHOLDS,
    speed_range: tuple[float, float] = SPEED_RANGE,
) -> Star:
    low, high = speed_range
    return Star(
        x=rng.random() * width,
        y=rng.random() * height,
        size=roll_size(rng, size_thresholds),
        speed=low + rng.random() * (high - low),
        opacity=rng.random(),
        phase=rng.random() * math.tau,
    )


def seed_stars(
    count: int = STAR_COUNT,
    width: int = 0,
    height: int = 0,
    rng: random.Random | None = None,
    size_thresholds: tuple[float, float] = SIZE_TIER_THRESHOLDS,
    speed_range: tuple[float, float] = SPEED_RANGE,
) -> list[Star]:
    """Create ``count`` stars spread uniformly over a width x height area.

    A zero-sized area puts every star at the origin; they spread out again
    as they wrap once the surface has a real size.
    """
    if count < 0:
        raise ValueError(f"star count must be non-negative, got {count}")
    rng = rng or random.Random()
    return [
        make_star(width, height, rng, size_thresholds, speed_range)
        for _ in range(count)
    ]

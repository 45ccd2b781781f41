"""User settings for the star field backdrop.

Uses platformdirs for a cross-platform settings location:
  Linux:   ~/.config/pixel_starfield/settings.json
  macOS:   ~/Library/Application Support/pixel_starfield/settings.json
  Windows: C:/Users/.../AppData/Local/pixel_starfield/settings.json

Every key is optional; anything missing falls back to the constants.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from platformdirs import user_config_dir

from .constants import (
    APP_NAME,
    BACKGROUND,
    FPS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SETTINGS_FILENAME,
    SIZE_TIER_THRESHOLDS,
    SPEED_RANGE,
    STAR_COUNT,
    TWINKLE_AMPLITUDE,
    TWINKLE_BASELINE,
    TWINKLE_RATE,
)

logger = logging.getLogger(__name__)

SETTINGS_DIR = Path(user_config_dir(APP_NAME))
SETTINGS_FILE = SETTINGS_DIR / SETTINGS_FILENAME


class SettingsError(ValueError):
    """A settings value that would break the star field."""


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require(name: str, value, check) -> None:
    if not check(value):
        raise SettingsError(f"{name} has the wrong type: {value!r}")


@dataclass
class StarFieldSettings:
    """Tunables for the engine and the window hosting it."""

    star_count: int = STAR_COUNT
    size_tier_thresholds: tuple[float, float] = SIZE_TIER_THRESHOLDS
    speed_range: tuple[float, float] = SPEED_RANGE
    twinkle_baseline: float = TWINKLE_BASELINE
    twinkle_amplitude: float = TWINKLE_AMPLITUDE
    twinkle_rate: float = TWINKLE_RATE

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    fps: int = FPS
    background: tuple[int, int, int] = BACKGROUND

    def __post_init__(self) -> None:
        # JSON hands back lists
        for name in ("size_tier_thresholds", "speed_range", "background"):
            value = getattr(self, name)
            if not isinstance(value, (list, tuple)):
                raise SettingsError(f"{name} must be a list, got {value!r}")
            setattr(self, name, tuple(value))
        self.validate()

    def validate(self) -> None:
        for name in ("star_count", "width", "height", "fps"):
            _require(name, getattr(self, name), _is_int)
        for name in ("twinkle_baseline", "twinkle_amplitude", "twinkle_rate"):
            _require(name, getattr(self, name), _is_number)
        for value in (*self.size_tier_thresholds, *self.speed_range):
            _require("size_tier_thresholds/speed_range entry", value, _is_number)
        for value in self.background:
            _require("background entry", value, _is_int)

        if self.star_count < 0:
            raise SettingsError(f"star_count must be >= 0, got {self.star_count}")

        if len(self.size_tier_thresholds) != 2:
            raise SettingsError("size_tier_thresholds needs exactly two values")
        for threshold in self.size_tier_thresholds:
            if not 0.0 <= threshold <= 1.0:
                raise SettingsError(f"size tier threshold {threshold} outside [0, 1]")

        if len(self.speed_range) != 2:
            raise SettingsError("speed_range needs exactly two values")
        low, high = self.speed_range
        if low <= 0 or high < low:
            raise SettingsError(f"speed_range must be positive and ordered, got {self.speed_range}")

        lowest = self.twinkle_baseline
        highest = self.twinkle_baseline + self.twinkle_amplitude
        if self.twinkle_amplitude < 0 or lowest < 0.0 or highest > 1.0:
            raise SettingsError(
                f"twinkle opacity range [{lowest}, {highest}] must sit inside [0, 1]"
            )

        if self.width <= 0 or self.height <= 0:
            raise SettingsError(f"window size must be positive, got {self.width}x{self.height}")
        if self.fps <= 0:
            raise SettingsError(f"fps must be positive, got {self.fps}")
        if len(self.background) != 3 or not all(0 <= c <= 255 for c in self.background):
            raise SettingsError(f"background must be an RGB triple, got {self.background}")


# ── Top-level API ─────────────────────────────────────────────────────

def settings_from_dict(data: dict) -> StarFieldSettings:
    """Build settings from a plain dict, ignoring keys we don't know."""
    known = {f.name for f in fields(StarFieldSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning("Ignoring unknown settings: %s", ", ".join(unknown))
    return StarFieldSettings(**{k: v for k, v in data.items() if k in known})


def load_settings(path: Path | None = None) -> StarFieldSettings:
    """Read settings from disk. Missing or unreadable files give defaults."""
    path = path or SETTINGS_FILE
    if not path.exists():
        return StarFieldSettings()
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, IOError) as exc:
        logger.warning("Could not read settings from %s (%s); using defaults", path, exc)
        return StarFieldSettings()
    if not isinstance(data, dict):
        logger.warning("Settings file %s is not a JSON object; using defaults", path)
        return StarFieldSettings()

    settings = settings_from_dict(data)
    logger.info("Loaded settings from %s", path)
    return settings


def save_settings(settings: StarFieldSettings, path: Path | None = None) -> Path:
    """Write settings as JSON and return the path written."""
    path = path or SETTINGS_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(settings), indent=2))
    return path

"""Backdrop-wide constants for Pixel Starfield."""

# --- Display ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Pixel Starfield"

# --- Colors (RGB) ---
BACKGROUND = (10, 10, 26)
STAR_COLOR = (255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)

# --- Star field ---
STAR_COUNT = 120

# Weighted size draw: roll > first => 3px, else roll > second => 2px, else 1px
SIZE_TIER_THRESHOLDS = (0.85, 0.5)

# Downward velocity in px per tick
SPEED_RANGE = (0.1, 0.4)

# Twinkle: baseline + amplitude * |sin(t * rate + phase)|, t in ms
TWINKLE_BASELINE = 0.3
TWINKLE_AMPLITUDE = 0.7
TWINKLE_RATE = 0.001


# --- Settings file ---
APP_NAME = "pixel_starfield"
SETTINGS_FILENAME = "settings.json"
LOG_LEVEL_ENV = "PIXEL_STARFIELD_LOG"

"""Engine lifecycle states for Pixel Starfield."""

import enum


class EngineState(enum.Enum):
    """Lifecycle of a star field engine instance.

    UNINITIALIZED -> SEEDED -> RUNNING -> STOPPED. STOPPED is terminal.
    """

    UNINITIALIZED = "uninitialized"
    SEEDED = "seeded"
    RUNNING = "running"
    STOPPED = "stopped"

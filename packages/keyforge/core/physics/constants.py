"""Physical defaults. Functions take these as overridable parameters."""

from typing import Final

GRAVITY: Final[float] = 9.8
MAX_BOUNCES: Final[int] = 10
MIN_BOUNCE_HEIGHT: Final[float] = 0.01

"""Display constants for the tesseract renderer."""

from pygame import Color

# Window defaults
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 640
WINDOW_CAPTION = "Tesseract"

# Frame timing
TICKS_PER_SECOND = 60
MAX_FRAME_DELTA_S = 0.05

# Speed multiplier range
DEFAULT_SPEED = 1.0
MIN_SPEED = 0.0
MAX_SPEED = 10.0

# Colors
BACKGROUND_COLOR = Color("#0b1020")
NEAR_COLOR = Color("#c7d2fe")
FAR_COLOR = Color(199, 210, 254, 77)  # NEAR_COLOR at 30% opacity

# Surface id used by main.py
DEFAULT_SURFACE_ID = "tesseract"

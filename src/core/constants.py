"""
RouletteSpin - Shared Constants
===============================

Centralized constants for the entire codebase.
Import from here instead of defining locally.
"""

import math
from zoneinfo import ZoneInfo


# =============================================================================
# Timezone
# =============================================================================

TIMEZONE = ZoneInfo("America/New_York")


# =============================================================================
# Font Paths (System fonts, checked in order)
# =============================================================================

FONT_PATHS = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",  # Linux (Debian/Ubuntu)
    "/System/Library/Fonts/Helvetica.ttc",  # macOS
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",  # Arch Linux
    "arial.ttf",  # Windows fallback
]


# =============================================================================
# Wheel Geometry
# =============================================================================

TAU = 2 * math.pi
POINTER_ANGLE = -math.pi / 2  # Top of the wheel (screen y grows downward)

WHEEL_MARGIN = 20            # Canvas edge to wheel rim, pixels
RIM_WIDTH = 15               # Wooden bezel width around the slots
LABEL_RADIUS_RATIO = 0.85    # Number labels sit near the slot edge
LABEL_FONT_RATIO = 0.09      # Label font size relative to wheel radius
HUB_RADIUS_RATIO = 0.35      # Center turret
TRACK_RADIUS_RATIO = 0.93    # Ball track while spinning
POCKET_RADIUS_RATIO = 0.75   # Ball resting ring once settled
BALL_SIZE_RATIO = 0.035      # Ball radius relative to wheel radius
RIM_BULB_COUNT = 24          # Decorative lights around the bezel

MIN_CANVAS_SIZE = 120        # Smallest canvas that still fits wheel + banner


# =============================================================================
# Status Text
# =============================================================================

SPINNING_TEXT = "Spinning..."
WINNING_TEXT = "Winning Number: {number}"


# =============================================================================
# GIF Encoding
# =============================================================================

MIN_PALETTE_COLORS = 16
MAX_PALETTE_COLORS = 256
GIF_LOOP_FOREVER = 0

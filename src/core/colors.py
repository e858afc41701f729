"""
RouletteSpin - Colors Module
============================

Color definitions for the wheel renderer and Discord embeds.
"""


# =============================================================================
# Embed Colors (Hex)
# =============================================================================

COLOR_ROULETTE_RED = 0xB31010
COLOR_ROULETTE_BLACK = 0x111111
COLOR_ROULETTE_GREEN = 0x008F11


# =============================================================================
# Drawing Colors (RGB tuples)
# =============================================================================

RGB_RED = (179, 16, 16)         # Deep red pocket
RGB_BLACK = (17, 17, 17)        # Almost black pocket
RGB_GREEN = (0, 143, 17)        # Casino green pocket
RGB_GOLD = (240, 196, 88)       # Separators, pointer
RGB_GOLD_DARK = (184, 134, 11)  # Turret shading
RGB_FELT = (53, 101, 77)        # Table background
RGB_FELT_DARK = (42, 84, 63)    # Felt texture dots
RGB_WOOD = (92, 58, 33)         # Outer bezel
RGB_WOOD_LIGHT = (138, 92, 50)  # Bezel highlight ring
RGB_BULB_ON = (255, 236, 140)
RGB_BULB_OFF = (110, 80, 40)
RGB_WHITE = (255, 255, 255)
RGB_SILVER = (232, 232, 232)
RGB_BALL_SHADOW = (30, 30, 30)
RGB_BANNER = (12, 12, 12)       # Status banner backdrop


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    # Hex colors
    "COLOR_ROULETTE_RED",
    "COLOR_ROULETTE_BLACK",
    "COLOR_ROULETTE_GREEN",
    # RGB colors
    "RGB_RED",
    "RGB_BLACK",
    "RGB_GREEN",
    "RGB_GOLD",
    "RGB_GOLD_DARK",
    "RGB_FELT",
    "RGB_FELT_DARK",
    "RGB_WOOD",
    "RGB_WOOD_LIGHT",
    "RGB_BULB_ON",
    "RGB_BULB_OFF",
    "RGB_WHITE",
    "RGB_SILVER",
    "RGB_BALL_SHADOW",
    "RGB_BANNER",
]

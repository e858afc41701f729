"""
RouletteSpin - Roulette Errors
==============================

Exceptions raised by the spin pipeline.
"""


class RouletteError(Exception):
    """Base class for every failure a spin can surface to its caller."""
    pass


class InvalidOutcome(RouletteError):
    """Raised when a forced winning number is outside the wheel's range."""
    pass


class InvalidConfiguration(RouletteError):
    """Raised when canvas, timing, motion or encoder settings are malformed."""
    pass


class EncodingError(RouletteError):
    """Raised when drawing or GIF encoding fails. No partial buffer is returned."""
    pass

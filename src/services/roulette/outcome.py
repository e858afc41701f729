"""
RouletteSpin - Outcome Resolver
===============================

Validates a forced winning number or draws one at random.

Fairness: an unforced draw is uniform over the 37 numbers (probability 1/37
each) using random.Random.randrange. Not cryptographically secure; this is
entertainment output, not a security boundary.
"""

import random
from typing import Optional

from .errors import InvalidOutcome
from .wheel import EUROPEAN_WHEEL, WheelLayout


class OutcomeResolver:
    """Picks or validates the winning number. Holds its own RNG."""

    def __init__(
        self,
        layout: WheelLayout = EUROPEAN_WHEEL,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.layout = layout
        self._rng = rng or random.Random()

    def resolve(self, forced: Optional[int] = None) -> int:
        """
        Return the winning number for this spin.

        Args:
            forced: Number to force, or None for a uniform random draw

        Raises:
            InvalidOutcome: If forced is not an integer in 0..36
        """
        if forced is None:
            return self.layout.number_at(self._rng.randrange(self.layout.size))

        if isinstance(forced, bool) or not isinstance(forced, int):
            raise InvalidOutcome(f"Winning number must be an integer, got {forced!r}")
        if not 0 <= forced <= self.layout.max_number:
            raise InvalidOutcome(
                f"Winning number must be between 0 and {self.layout.max_number}, got {forced}"
            )
        return forced

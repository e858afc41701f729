"""
RouletteSpin - Wheel Layout
===========================

Canonical European single-zero wheel: physical pocket order and colors.
All angle math is computed against the physical order, not numeric order.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from src.core.colors import RGB_BLACK, RGB_GREEN, RGB_RED
from src.core.constants import TAU


# =============================================================================
# Constants
# =============================================================================

# Clockwise from the zero pocket
EUROPEAN_ORDER: Tuple[int, ...] = (
    0, 32, 15, 19, 4, 21, 2, 25, 17, 34, 6, 27, 13, 36, 11, 30, 8, 23, 10,
    5, 24, 16, 33, 1, 20, 14, 31, 9, 22, 18, 29, 7, 28, 12, 35, 3, 26,
)

RED_NUMBERS = frozenset({
    1, 3, 5, 7, 9, 12, 14, 16, 18, 19, 21, 23, 25, 27, 30, 32, 34, 36,
})

MIN_NUMBER = 0
MAX_NUMBER = 36


class SlotColor(Enum):
    """Pocket color."""
    GREEN = "green"
    RED = "red"
    BLACK = "black"

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return SLOT_RGB[self]


SLOT_RGB = {
    SlotColor.GREEN: RGB_GREEN,
    SlotColor.RED: RGB_RED,
    SlotColor.BLACK: RGB_BLACK,
}


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class WheelSlot:
    """One physical pocket on the wheel."""
    number: int
    color: SlotColor


@dataclass(frozen=True)
class OutcomeDetails:
    """Table attributes of a winning number. Payouts are the caller's concern."""
    number: int
    color: SlotColor
    parity: Optional[str]     # "odd" / "even", None for zero
    high_low: Optional[str]   # "low" (1-18) / "high" (19-36), None for zero
    dozen: Optional[int]      # 1..3, None for zero
    column: Optional[int]     # 1..3, None for zero


# =============================================================================
# Wheel Layout
# =============================================================================

class WheelLayout:
    """
    Immutable pocket ordering and color lookup.

    Position i covers the arc [i * angle_per_slot, (i + 1) * angle_per_slot)
    measured clockwise from the wheel's own zero reference.
    """

    def __init__(self, order: Tuple[int, ...], red_numbers: frozenset) -> None:
        expected = set(range(MIN_NUMBER, len(order)))
        if len(set(order)) != len(order) or set(order) != expected:
            raise ValueError("Wheel order must contain every number exactly once")
        if MIN_NUMBER in red_numbers:
            raise ValueError("Zero cannot be red")

        self._order = tuple(order)
        self._red = frozenset(red_numbers)
        self._index: Dict[int, int] = {n: i for i, n in enumerate(self._order)}
        self._slots: Tuple[WheelSlot, ...] = tuple(
            WheelSlot(number=n, color=self._classify(n)) for n in self._order
        )

    def _classify(self, number: int) -> SlotColor:
        if number == MIN_NUMBER:
            return SlotColor.GREEN
        return SlotColor.RED if number in self._red else SlotColor.BLACK

    @property
    def size(self) -> int:
        return len(self._order)

    @property
    def max_number(self) -> int:
        return self.size - 1

    @property
    def angle_per_slot(self) -> float:
        return TAU / self.size

    def slots(self) -> List[WheelSlot]:
        """All pockets ordered by physical position."""
        return list(self._slots)

    def is_valid(self, number: int) -> bool:
        return number in self._index

    def index_of(self, number: int) -> int:
        """Physical position of a number."""
        try:
            return self._index[number]
        except KeyError:
            raise ValueError(f"{number!r} is not on the wheel") from None

    def color_of(self, number: int) -> SlotColor:
        return self._slots[self.index_of(number)].color

    def number_at(self, index: int) -> int:
        return self._order[index % self.size]

    def slot_at(self, wheel_angle: float) -> int:
        """
        Number whose pocket covers an angle in wheel-local space.

        This is the inverse of index_of: for a world angle a and wheel
        rotation r, the pocket under a is slot_at(a - r).
        """
        position = math.floor((wheel_angle % TAU) / self.angle_per_slot)
        return self.number_at(position)

    def describe(self, number: int) -> OutcomeDetails:
        """Color, parity, high/low, dozen and column of a number."""
        color = self.color_of(number)
        if number == MIN_NUMBER:
            return OutcomeDetails(number, color, None, None, None, None)
        return OutcomeDetails(
            number=number,
            color=color,
            parity="odd" if number % 2 else "even",
            high_low="low" if number <= 18 else "high",
            dozen=(number - 1) // 12 + 1,
            column=(number - 1) % 3 + 1,
        )


EUROPEAN_WHEEL = WheelLayout(EUROPEAN_ORDER, RED_NUMBERS)

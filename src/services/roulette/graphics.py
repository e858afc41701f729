"""
RouletteSpin - Roulette Graphics
================================

Pillow renderer for a single wheel frame.

Every call to render() starts from a fresh copy of the static background
and draws wheel, labels, lights, pointer, ball and status banner for the
given AnimationState only. Nothing carries over between frames.
"""

import math
import random
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from src.core.colors import (
    RGB_BALL_SHADOW,
    RGB_BANNER,
    RGB_BULB_OFF,
    RGB_BULB_ON,
    RGB_FELT,
    RGB_FELT_DARK,
    RGB_GOLD,
    RGB_GOLD_DARK,
    RGB_SILVER,
    RGB_WHITE,
    RGB_WOOD,
    RGB_WOOD_LIGHT,
)
from src.core.constants import (
    BALL_SIZE_RATIO,
    HUB_RADIUS_RATIO,
    LABEL_FONT_RATIO,
    LABEL_RADIUS_RATIO,
    POCKET_RADIUS_RATIO,
    POINTER_ANGLE,
    RIM_BULB_COUNT,
    RIM_WIDTH,
    SPINNING_TEXT,
    TAU,
    TRACK_RADIUS_RATIO,
    WHEEL_MARGIN,
    WINNING_TEXT,
)
from src.utils.text import Font, find_font, fit_text, get_font, text_size

from .models import AnimationState, CanvasSize, DisplayMetadata, Phase
from .wheel import EUROPEAN_WHEEL, WheelLayout


RGB = Tuple[int, int, int]

FELT_DOTS = 120
BANNER_PADDING = 6


# =============================================================================
# Geometry Helpers
# =============================================================================

def polar(cx: float, cy: float, radius: float, angle: float) -> Tuple[float, float]:
    """Screen point at angle (radians, clockwise from 3 o'clock)."""
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)


def label_rotation(mid_angle: float) -> float:
    """
    PIL rotation (degrees, counter-clockwise) for a label at mid_angle.

    Letter tops point outward along the radius. On the lower half of the
    wheel that would read upside down, so the label is flipped 180 degrees.
    The result is always within [-90, 90] so text is never inverted.
    """
    # Clockwise screen rotation that points text "up" along the radius
    turn = (mid_angle + math.pi / 2) % TAU
    if turn > math.pi:
        turn -= TAU
    if turn > math.pi / 2:
        turn -= math.pi
    elif turn < -math.pi / 2:
        turn += math.pi
    return -math.degrees(turn)


def status_for(
    state: AnimationState,
    winning_number: int,
    layout: WheelLayout = EUROPEAN_WHEEL,
) -> Tuple[str, Optional[RGB]]:
    """
    Status banner text and its color code.

    Returns (text, None) while moving, (text, slot rgb) once landed.
    """
    if not state.landed:
        return SPINNING_TEXT, None
    return WINNING_TEXT.format(number=winning_number), layout.color_of(winning_number).rgb


@dataclass(frozen=True)
class WheelGeometry:
    """Pixel layout derived from the canvas size."""
    center_x: float
    center_y: float
    radius: float

    @classmethod
    def for_canvas(cls, canvas: CanvasSize) -> "WheelGeometry":
        return cls(
            center_x=canvas.width / 2,
            center_y=canvas.height / 2,
            radius=min(canvas.width, canvas.height) / 2 - WHEEL_MARGIN,
        )

    def box(self, radius: float) -> Tuple[float, float, float, float]:
        return (
            self.center_x - radius,
            self.center_y - radius,
            self.center_x + radius,
            self.center_y + radius,
        )

    def ball_radius(self, state: AnimationState) -> float:
        """Ball orbit: outer track while spinning, drops to the pockets while slowing."""
        track = self.radius * TRACK_RADIUS_RATIO
        pocket = self.radius * POCKET_RADIUS_RATIO
        if state.landed:
            return pocket
        if state.phase is Phase.SPIN:
            return track
        if state.phase is Phase.DECELERATE:
            return track + (pocket - track) * state.phase_progress
        return pocket


# =============================================================================
# Frame Renderer
# =============================================================================

class FrameRenderer:
    """
    Draws one RGB frame per AnimationState.

    The background and number sprites are built once at construction and
    never mutated afterwards; render() only reads them.
    """

    def __init__(
        self,
        canvas: CanvasSize,
        layout: WheelLayout = EUROPEAN_WHEEL,
        display: Optional[DisplayMetadata] = None,
        pointer_angle: float = POINTER_ANGLE,
    ) -> None:
        self.canvas = canvas
        self.layout = layout
        self.display = display or DisplayMetadata()
        self.pointer_angle = pointer_angle
        self.geometry = WheelGeometry.for_canvas(canvas)

        font_path = find_font()
        radius = self.geometry.radius
        self._label_font: Font = get_font(font_path, max(8, int(radius * LABEL_FONT_RATIO)))
        self._status_font: Font = get_font(font_path, max(12, canvas.height // 17))
        self._header_font: Font = get_font(font_path, max(10, canvas.height // 28))

        self._background = self._build_background()
        self._labels: Dict[int, Image.Image] = {
            slot.number: self._build_label(str(slot.number)) for slot in layout.slots()
        }
        self._header = self._build_header_text()

    # -------------------------------------------------------------------------
    # Static layers
    # -------------------------------------------------------------------------

    def _build_background(self) -> Image.Image:
        """Felt table with a fixed speckle pattern and the wooden bezel."""
        width, height = self.canvas.as_tuple
        img = Image.new("RGB", (width, height), RGB_FELT)
        draw = ImageDraw.Draw(img)

        # Seeded from the canvas size so every frame shares the same texture
        speckle = random.Random(width * 10007 + height)
        for _ in range(FELT_DOTS):
            x = speckle.randrange(width)
            y = speckle.randrange(height)
            draw.rectangle((x, y, x + 1, y + 1), fill=RGB_FELT_DARK)

        g = self.geometry
        draw.ellipse(g.box(g.radius + RIM_WIDTH), fill=RGB_WOOD, outline=RGB_WOOD_LIGHT, width=2)
        draw.ellipse(g.box(g.radius + 2), outline=RGB_GOLD, width=3)
        return img

    def _build_label(self, text: str) -> Image.Image:
        """Transparent sprite holding one upright number label."""
        width, height = text_size(self._label_font, text)
        sprite = Image.new("RGBA", (width + 4, height + 4), (0, 0, 0, 0))
        bbox = self._label_font.getbbox(text)
        ImageDraw.Draw(sprite).text(
            (2 - bbox[0], 2 - bbox[1]), text, font=self._label_font, fill=RGB_WHITE
        )
        return sprite

    def _build_header_text(self) -> str:
        if self.display.is_empty:
            return ""
        max_width = self.canvas.width - BANNER_PADDING * 4
        return fit_text(self.display.header_text(), self._header_font, max_width)

    # -------------------------------------------------------------------------
    # Per-frame layers
    # -------------------------------------------------------------------------

    def _draw_slots(self, img: Image.Image, draw: ImageDraw.ImageDraw, state: AnimationState) -> None:
        g = self.geometry
        step = self.layout.angle_per_slot
        box = g.box(g.radius)
        label_radius = g.radius * LABEL_RADIUS_RATIO

        for index, slot in enumerate(self.layout.slots()):
            start = state.wheel_rotation + index * step
            draw.pieslice(
                box,
                math.degrees(start),
                math.degrees(start + step),
                fill=slot.color.rgb,
                outline=RGB_GOLD,
            )

        # Labels after all wedges so separators never cut through text
        for index, slot in enumerate(self.layout.slots()):
            mid = state.wheel_rotation + (index + 0.5) * step
            sprite = self._labels[slot.number].rotate(
                label_rotation(mid), resample=Image.Resampling.BICUBIC, expand=True
            )
            x, y = polar(g.center_x, g.center_y, label_radius, mid)
            img.paste(
                sprite,
                (int(round(x - sprite.width / 2)), int(round(y - sprite.height / 2))),
                sprite,
            )

    def _draw_pocket_highlight(self, draw: ImageDraw.ImageDraw, state: AnimationState) -> None:
        """Outline the pocket the ball rests in."""
        g = self.geometry
        step = self.layout.angle_per_slot
        number = self.layout.slot_at(state.relative_ball_angle)
        start = state.wheel_rotation + self.layout.index_of(number) * step
        draw.pieslice(
            g.box(g.radius),
            math.degrees(start),
            math.degrees(start + step),
            outline=RGB_WHITE,
            width=3,
        )

    def _draw_hub(self, draw: ImageDraw.ImageDraw) -> None:
        g = self.geometry
        hub = g.radius * HUB_RADIUS_RATIO
        draw.ellipse(g.box(hub), fill=RGB_GOLD, outline=RGB_GOLD_DARK, width=4)
        draw.ellipse(g.box(hub * 0.3), fill=RGB_SILVER, outline=RGB_GOLD_DARK, width=1)

    def _draw_lights(self, draw: ImageDraw.ImageDraw, state: AnimationState) -> None:
        """Rim bulbs alternate every frame, so consecutive frames always differ."""
        g = self.geometry
        ring = g.radius + RIM_WIDTH / 2 + 1
        size = max(2.0, RIM_WIDTH / 4)
        for i in range(RIM_BULB_COUNT):
            angle = self.pointer_angle + (i + 0.5) * TAU / RIM_BULB_COUNT
            x, y = polar(g.center_x, g.center_y, ring, angle)
            lit = (i + state.frame_index) % 2 == 0
            draw.ellipse(
                (x - size, y - size, x + size, y + size),
                fill=RGB_BULB_ON if lit else RGB_BULB_OFF,
            )

    def _draw_pointer(self, draw: ImageDraw.ImageDraw) -> None:
        """Fixed marker at the pointer angle, tip pointing at the wheel."""
        g = self.geometry
        a = self.pointer_angle
        tip = polar(g.center_x, g.center_y, g.radius - 6, a)
        base_x, base_y = polar(g.center_x, g.center_y, g.radius + RIM_WIDTH + 4, a)
        half = max(6.0, g.radius * 0.06)
        # Perpendicular to the radius
        px, py = -math.sin(a) * half, math.cos(a) * half
        draw.polygon(
            [tip, (base_x + px, base_y + py), (base_x - px, base_y - py)],
            fill=RGB_GOLD,
            outline=RGB_WHITE,
        )

    def _draw_ball(self, draw: ImageDraw.ImageDraw, state: AnimationState) -> None:
        g = self.geometry
        x, y = polar(g.center_x, g.center_y, g.ball_radius(state), state.ball_angle)
        size = max(3.0, g.radius * BALL_SIZE_RATIO)
        draw.ellipse((x - size + 2, y - size + 2, x + size + 2, y + size + 2), fill=RGB_BALL_SHADOW)
        draw.ellipse((x - size, y - size, x + size, y + size), fill=RGB_WHITE, outline=RGB_SILVER)

    def _draw_banner(self, draw: ImageDraw.ImageDraw, state: AnimationState, winning_number: int) -> None:
        """Status line, plus the player/bet header when one was supplied."""
        width, height = self.canvas.as_tuple
        text, color_code = status_for(state, winning_number, self.layout)

        status_w, status_h = text_size(self._status_font, text)
        header_h = text_size(self._header_font, self._header)[1] if self._header else 0
        gap = BANNER_PADDING if self._header else 0
        banner_h = status_h + header_h + gap + BANNER_PADDING * 2
        top = height - banner_h

        draw.rectangle((0, top, width, height), fill=color_code or RGB_BANNER)
        draw.line((0, top, width, top), fill=RGB_GOLD, width=2)

        bbox = self._status_font.getbbox(text)
        draw.text(
            ((width - status_w) / 2 - bbox[0], top + BANNER_PADDING - bbox[1]),
            text,
            font=self._status_font,
            fill=RGB_WHITE,
        )

        if self._header:
            header_w = text_size(self._header_font, self._header)[0]
            hbox = self._header_font.getbbox(self._header)
            draw.text(
                ((width - header_w) / 2 - hbox[0], top + BANNER_PADDING + status_h + gap - hbox[1]),
                self._header,
                font=self._header_font,
                fill=RGB_GOLD,
            )

    # -------------------------------------------------------------------------
    # Public
    # -------------------------------------------------------------------------

    def render(self, state: AnimationState, winning_number: int) -> Image.Image:
        """Draw one frame. Depends only on state, winning_number and construction inputs."""
        img = self._background.copy()
        draw = ImageDraw.Draw(img)

        self._draw_slots(img, draw, state)
        if state.landed:
            self._draw_pocket_highlight(draw, state)
        self._draw_hub(draw)
        self._draw_lights(draw, state)
        self._draw_pointer(draw)
        self._draw_ball(draw, state)
        self._draw_banner(draw, state, winning_number)
        return img

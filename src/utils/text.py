"""
RouletteSpin - Text Utilities
=============================

Shared font loading and text measuring functions.
"""

from typing import Optional, Union

from PIL import ImageFont

from src.core.constants import FONT_PATHS


Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def find_font() -> Optional[str]:
    """Find first available system font from predefined paths."""
    for font_path in FONT_PATHS:
        try:
            ImageFont.truetype(font_path, 20)
            return font_path
        except (OSError, IOError):
            continue
    return None


def get_font(font_path: Optional[str], size: int) -> Font:
    """Load font from path or fall back to default."""
    if font_path:
        try:
            return ImageFont.truetype(font_path, size)
        except (OSError, IOError):
            pass
    return ImageFont.load_default()


def text_size(font: Font, text: str) -> tuple[int, int]:
    """Measure rendered text as (width, height)."""
    bbox = font.getbbox(text)
    return bbox[2] - bbox[0], bbox[3] - bbox[1]


def fit_text(text: str, font: Font, max_width: int) -> str:
    """
    Shorten text with a trailing ellipsis until it fits max_width.

    Args:
        text: The text to fit
        font: PIL font to use for measuring
        max_width: Maximum width in pixels

    Returns:
        The original text if it fits, otherwise a truncated copy
    """
    if text_size(font, text)[0] <= max_width:
        return text

    trimmed = text
    while trimmed:
        trimmed = trimmed[:-1]
        candidate = trimmed.rstrip() + "..."
        if text_size(font, candidate)[0] <= max_width:
            return candidate
    return ""

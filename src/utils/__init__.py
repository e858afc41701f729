"""RouletteSpin - Utils Package."""

from src.utils.text import Font, find_font, fit_text, get_font, text_size

__all__ = [
    "Font",
    "find_font",
    "fit_text",
    "get_font",
    "text_size",
]

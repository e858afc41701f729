"""
RouletteSpin - Roulette Views
=============================

Discord delivery helpers for a finished spin: the GIF attachment and a
color-coded result embed. Payouts are computed by the calling command.
"""

import io
from typing import Optional

import discord

from src.core.colors import COLOR_ROULETTE_BLACK, COLOR_ROULETTE_GREEN, COLOR_ROULETTE_RED

from .models import DisplayMetadata, SpinResult
from .wheel import EUROPEAN_WHEEL, SlotColor, WheelLayout


SPIN_FILENAME = "roulette.gif"

EMBED_COLORS = {
    SlotColor.GREEN: COLOR_ROULETTE_GREEN,
    SlotColor.RED: COLOR_ROULETTE_RED,
    SlotColor.BLACK: COLOR_ROULETTE_BLACK,
}

COLOR_EMOJIS = {
    SlotColor.GREEN: "🟢",
    SlotColor.RED: "🔴",
    SlotColor.BLACK: "⚫",
}


def create_spin_file(result: SpinResult, filename: str = SPIN_FILENAME) -> discord.File:
    """Wrap the GIF bytes as a message attachment."""
    return discord.File(io.BytesIO(result.image_bytes), filename=filename)


def create_spin_embed(
    result: SpinResult,
    display: Optional[DisplayMetadata] = None,
    layout: WheelLayout = EUROPEAN_WHEEL,
    filename: str = SPIN_FILENAME,
) -> discord.Embed:
    """Create the result embed that shows the attached spin animation."""
    details = layout.describe(result.winning_number)
    emoji = COLOR_EMOJIS[details.color]

    embed = discord.Embed(
        title="🎡 ROULETTE",
        description=f"{emoji} The ball landed on **{result.winning_number}**",
        color=EMBED_COLORS[details.color],
    )

    embed.add_field(name="Color", value=details.color.value.title(), inline=True)
    if details.parity:
        embed.add_field(name="Odd/Even", value=details.parity.title(), inline=True)
        embed.add_field(name="High/Low", value=details.high_low.title(), inline=True)
        embed.add_field(name="Dozen", value=f"{details.dozen}", inline=True)
        embed.add_field(name="Column", value=f"{details.column}", inline=True)

    if display and not display.is_empty:
        embed.add_field(name="Bet", value=display.header_text(), inline=False)

    embed.set_image(url=f"attachment://{filename}")
    return embed

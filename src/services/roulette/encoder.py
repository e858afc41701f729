"""
RouletteSpin - Animation Encoder
================================

Collects rendered frames in order and seals them into one looping GIF.
"""

import io
from typing import List, Optional

from PIL import Image

from src.core.config import config
from src.core.constants import GIF_LOOP_FOREVER, MAX_PALETTE_COLORS, MIN_PALETTE_COLORS

from .errors import EncodingError, InvalidConfiguration


class AnimationEncoder:
    """
    Ordered frame sink producing a single animated GIF.

    Frames are quantized to a palette as they arrive. finalize() writes the
    GIF and seals the encoder; add_frame() afterwards raises EncodingError.
    Consecutive frames must differ: GIF writers fold identical neighbours
    into one longer frame.
    """

    def __init__(
        self,
        frame_delay_ms: int,
        palette_colors: int = config.PALETTE_COLORS,
        optimize: bool = config.OPTIMIZE_GIF,
        loop: int = GIF_LOOP_FOREVER,
    ) -> None:
        if isinstance(frame_delay_ms, bool) or not isinstance(frame_delay_ms, int) or frame_delay_ms <= 0:
            raise InvalidConfiguration(f"Frame delay must be a positive integer, got {frame_delay_ms!r}")
        if not MIN_PALETTE_COLORS <= palette_colors <= MAX_PALETTE_COLORS:
            raise InvalidConfiguration(
                f"Palette colors must be {MIN_PALETTE_COLORS}-{MAX_PALETTE_COLORS}, got {palette_colors}"
            )

        self.frame_delay_ms = frame_delay_ms
        self.palette_colors = palette_colors
        self.optimize = optimize
        self.loop = loop

        self._frames: List[Image.Image] = []
        self._count = 0
        self._size: Optional[tuple[int, int]] = None
        self._data: Optional[bytes] = None
        self._sealed = False

    @property
    def frame_count(self) -> int:
        return self._count

    @property
    def is_finalized(self) -> bool:
        return self._sealed

    def add_frame(self, frame: Image.Image) -> None:
        """
        Append one frame.

        Raises:
            EncodingError: If the encoder is sealed, or the frame size changes
        """
        if self._sealed:
            raise EncodingError("Encoder already finalized; no more frames can be added")
        if self._size is None:
            self._size = frame.size
        elif frame.size != self._size:
            raise EncodingError(f"Frame size {frame.size} does not match {self._size}")

        try:
            rgb = frame if frame.mode == "RGB" else frame.convert("RGB")
            quantized = rgb.quantize(colors=self.palette_colors, dither=Image.Dither.NONE)
        except (OSError, ValueError) as e:
            raise EncodingError(f"Failed to quantize frame {self._count}: {e}") from e
        self._frames.append(quantized)
        self._count += 1

    def finalize(self) -> bytes:
        """
        Write the GIF and seal the encoder.

        Returns:
            The complete GIF bytes

        Raises:
            EncodingError: If there are no frames or the write fails
        """
        if self._sealed:
            if self._data is None:
                raise EncodingError("Encoder was closed without producing output")
            return self._data
        if not self._frames:
            raise EncodingError("Cannot encode an animation with no frames")

        self._sealed = True
        output = io.BytesIO()
        try:
            self._frames[0].save(
                output,
                format="GIF",
                save_all=True,
                append_images=self._frames[1:],
                duration=self.frame_delay_ms,
                loop=self.loop,
                optimize=self.optimize,
            )
        except (OSError, ValueError) as e:
            raise EncodingError(f"GIF encoding failed: {e}") from e
        finally:
            self._frames.clear()

        self._data = output.getvalue()
        return self._data

    def close(self) -> None:
        """Drop buffered frames and seal without producing output."""
        self._frames.clear()
        self._sealed = True

    def __enter__(self) -> "AnimationEncoder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

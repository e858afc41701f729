"""
RouletteSpin - Entry Point
==========================

Render one roulette spin to a GIF file.

Run: python3 main.py                    (random number -> roulette.gif)
     python3 main.py 17                 (forced number)
     python3 main.py 17 out/spin.gif    (forced number, custom path)
"""

import asyncio
import os
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

load_dotenv()

from src.core.logger import log
from src.services.roulette import RouletteError, get_roulette_service


async def main() -> int:
    """Main entry point."""
    forced = None
    output = Path("roulette.gif")

    if len(sys.argv) >= 2 and sys.argv[1] not in ("random", "-"):
        try:
            forced = int(sys.argv[1])
        except ValueError:
            log.error(f"Winning number must be an integer, got {sys.argv[1]!r}")
            return 2
    if len(sys.argv) >= 3:
        output = Path(sys.argv[2])

    service = get_roulette_service()

    try:
        result = await service.spin(service.build_request(forced))
    except RouletteError as e:
        log.error(f"Spin failed: {e}")
        return 1

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(result.image_bytes)
    log.success(f"Wrote {output} (winning number {result.winning_number})")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))

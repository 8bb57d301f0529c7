"""Remove the background from a single image file via remove.bg.

Usage: python scripts/remove_background.py INPUT OUTPUT.png
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from cutout.monitoring.logging import configure_logging
from cutout.removebg import RemoveBgClient


async def run(source: Path, target: Path) -> int:
    async with RemoveBgClient.from_settings() as client:
        outcome = await client.remove_background(source)

    if not outcome.ok:
        print(f"❌ {type(outcome.error).__name__}: {outcome.error}")
        return 1

    await asyncio.to_thread(target.write_bytes, outcome.data)
    width, height = outcome.image.size
    print(f"✅ Saved {width}x{height} cutout to {target}")
    return 0


def main() -> None:
    if len(sys.argv) != 3:
        print(__doc__.strip().splitlines()[-1])
        raise SystemExit(2)
    configure_logging()
    raise SystemExit(asyncio.run(run(Path(sys.argv[1]), Path(sys.argv[2]))))


if __name__ == "__main__":
    main()

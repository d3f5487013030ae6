# main.py
"""
Bare-bones entry point: render the demo melody to a raw PCM file.
No CLI flags, just edit the constants below.

Flow:
  composer.plan_song -> composer.make_song -> <OUTPUT_FILENAME>

Play the result with e.g. `aplay -f S16_LE -r 44100 -c 1 indiana_jones.pcm`.
"""

import logging
import os

from pcm_melody.composer import write_pcm
from pcm_melody.config import RenderConfig
from pcm_melody.errors import PcmMelodyError

# ===== EDIT HERE (hard-coded constants) =====
OUTPUT_FILENAME = "indiana_jones.pcm"
SAMPLE_RATE = 44_100
SPEED = 7.3            # song units per second
WAVEFORM = "saw"       # sine | square | saw
FADE_S = 0.04

INDIANA_JONES = (
    "4x- 3xe4 1xf4 2xg4 10xc5 3xd4 1xe4 12xf4 3xg4 1xa4 2xb4 10xf5 3xa4 1xb4 "
    "4xc5 4xd5 4xe5 3xe4 1xf4 2xg4 10xc5 3xd5 1xe5 12xf5 3xg4 1xg4 4xe5 3xd5 "
    "1xg4 4xe5 3xd5 1xg4 4xf5 3xe5 1xd5 2xc5 6x-"
)


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format="[%(asctime)s] %(levelname)s:%(name)s: %(message)s",
    )


def main() -> None:
    configure_logging()
    config = RenderConfig(waveform=WAVEFORM, speed=SPEED, sample_rate=SAMPLE_RATE, fade_s=FADE_S)
    try:
        out_path = write_pcm(OUTPUT_FILENAME, INDIANA_JONES, config)
    except PcmMelodyError as e:
        # a failed write may leave a truncated file behind
        logging.getLogger("pcm_melody").error("Render failed: %s", e)
        raise SystemExit(1) from e
    print(f"Done. Wrote {out_path}")


if __name__ == "__main__":
    main()

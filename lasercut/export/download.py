"""
Emit generated laser-cut files.

download_all_laser_cut_files is serial: one file, then a
fixed pause, then the next.  There is no cancellation hook; cancelling
the awaiting task stops after the file currently being written.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from lasercut.config import defaults
from lasercut.pipeline.layers import LaserCutFile

log = logging.getLogger(__name__)

SVG_MEDIA_TYPE = "image/svg+xml"

DOWNLOAD_DELAY_S = defaults.download_delay_s    # pause after each file


def download_laser_cut_file(file: LaserCutFile, output_dir: Path) -> Path:
    """Write one file's SVG under its own filename.  Returns the written path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / file.filename
    path.write_text(file.svg, encoding="utf-8")
    log.info("Wrote %s (%d bytes)", path, len(file.svg))
    return path


async def download_all_laser_cut_files(
    files: list[LaserCutFile],
    output_dir: Path,
    *,
    delay_s: float = DOWNLOAD_DELAY_S,
) -> list[Path]:
    """Write every file in order, awaiting delay_s after each one."""
    written: list[Path] = []
    for file in files:
        written.append(download_laser_cut_file(file, output_dir))
        await asyncio.sleep(delay_s)
    log.info("Wrote %d files to %s", len(written), output_dir)
    return written

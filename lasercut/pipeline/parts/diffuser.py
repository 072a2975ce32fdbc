"""LED diffuser: acrylic plate between the LEDs and the tiles."""

from __future__ import annotations

import logging

from lasercut.pipeline.geometry import PlateGeometry, plan_plate
from lasercut.pipeline.geometry.paths import circle_path
from lasercut.pipeline.layers import LaserCutFile, make_layer
from lasercut.pipeline.options import LaserCutOptions
from lasercut.pipeline.svg import create_svg

log = logging.getLogger(__name__)


def generate_led_diffuser(
    options: LaserCutOptions,
    plate: PlateGeometry | None = None,
) -> LaserCutFile:
    """Frame silhouette plus one LED hole at every tile-cell centre.  Cut layer only."""
    plate = plate or plan_plate(options)

    cut_paths = [plate.outline_path()]
    for row, col in plate.cells():
        cx, cy = plate.cell_center(row, col)
        cut_paths.append(circle_path(cx, cy, plate.rules.diffuser_led_hole_radius_mm))

    log.debug("Diffuser: %d LED holes", plate.tile_count)

    return LaserCutFile(
        filename=f"led-diffuser-{options.size}inch.svg",
        svg=create_svg(plate.width, plate.height, [make_layer("cut", cut_paths)]),
        description="Acrylic diffuser layer with LED holes (use 3mm clear/frosted acrylic)",
    )
